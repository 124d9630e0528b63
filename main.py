import logging

from flask import Flask, jsonify
from flask_cors import CORS

from instafood.core.config import settings
from instafood.api.routes import register_api

logger = logging.getLogger("instafood")

GREETING = {"test": "hello instafood lovers !!! "}


def create_app(config=None):
    config = config or settings

    logging.basicConfig(level=config.LOG_LEVEL)

    app = Flask(__name__)
    app.config["INSTAFOOD_SETTINGS"] = config

    # every origin, every route
    CORS(app)

    register_api(app)

    @app.route("/", methods=["GET"])
    def root():
        return jsonify(GREETING), 200

    return app


def run():
    app = create_app()
    logger.info("Server is listening on port %s", settings.PORT)
    app.run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG, threaded=True)


if __name__ == "__main__":
    run()
