# instafood/api/routes.py

from instafood.api.endpoints.restaurants import restaurants_bp
from instafood.api.endpoints.menu import menu_bp

def register_api(app):
    # restaurant and menu proxies live under /api
    app.register_blueprint(restaurants_bp, url_prefix="/api")
    app.register_blueprint(menu_bp, url_prefix="/api")
