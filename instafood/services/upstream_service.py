# instafood/services/upstream_service.py
"""
Client for the third-party restaurant/menu API.

The upstream rejects non-browser clients, so every call carries a desktop
Chrome user-agent. Query values are interpolated verbatim: no escaping and
no validation. A missing value becomes the literal token ``undefined``.
"""

import logging
from typing import Dict, Optional

import requests

from instafood.core.config import settings

logger = logging.getLogger(__name__)

MISSING_VALUE = "undefined"


class UpstreamError(Exception):
    """Upstream answered non-2xx, was unreachable, or sent a body that isn't JSON."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def _raw(value) -> str:
    return MISSING_VALUE if value is None else str(value)


def upstream_headers(user_agent: Optional[str] = None) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
        "User-Agent": user_agent or settings.UPSTREAM_USER_AGENT,
    }


def restaurant_list_url(base_url: str, lat, lng) -> str:
    return (
        f"{base_url.rstrip('/')}/restaurants/list/v5"
        f"?lat={_raw(lat)}&lng={_raw(lng)}&page_type=DESKTOP_WEB_LISTING"
    )


def menu_url(base_url: str, lat, lng, restaurant_id) -> str:
    return (
        f"{base_url.rstrip('/')}/menu/pl?page-type=REGULAR_MENU&complete-menu=true"
        f"&lat={_raw(lat)}&lng={_raw(lng)}&submitAction=ENTER"
        f"&restaurantId={_raw(restaurant_id)}"
    )


def fetch_json(url: str, user_agent: Optional[str] = None, timeout: Optional[float] = None) -> bytes:
    """
    GET `url` once and return the raw body bytes, after checking they parse as JSON.
    Raises UpstreamError for any non-2xx status, transport failure or bad JSON.
    """
    logger.debug("GET %s", url)
    try:
        resp = requests.get(url, headers=upstream_headers(user_agent), timeout=timeout)
    except requests.RequestException as e:
        raise UpstreamError(f"Upstream request failed: {e}", url) from e

    if not 200 <= resp.status_code < 300:
        raise UpstreamError(
            f"Network response was not ok ({resp.status_code})", url, resp.status_code
        )

    try:
        resp.json()
    except ValueError as e:
        raise UpstreamError(f"Upstream body is not JSON: {e}", url, resp.status_code) from e

    return resp.content
