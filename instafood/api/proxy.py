# instafood/api/proxy.py

import logging

from flask import Response, current_app

from instafood.services.upstream_service import UpstreamError, fetch_json

logger = logging.getLogger(__name__)

ERROR_TEXT = "An error occurred"


def upstream_settings():
    return current_app.config["INSTAFOOD_SETTINGS"]


def relay_json(build_url):
    """
    Shared handler body: build the upstream URL from the configured base,
    fetch it, and hand the upstream bytes back untouched. Any upstream problem is
    logged and turned into a bare 500.
    """
    cfg = upstream_settings()
    url = build_url(cfg.UPSTREAM_BASE_URL)

    try:
        body = fetch_json(url, user_agent=cfg.UPSTREAM_USER_AGENT, timeout=cfg.UPSTREAM_TIMEOUT)
    except UpstreamError:
        logger.exception("Upstream call failed for %s", url)
        return ERROR_TEXT, 500, {"Content-Type": "text/plain; charset=utf-8"}

    # raw bytes, so key order and formatting survive
    return Response(body, status=200, mimetype="application/json")
