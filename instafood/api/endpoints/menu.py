import logging

from flask import Blueprint, request

from instafood.api.proxy import relay_json
from instafood.models.request_models import MenuQuery
from instafood.services.upstream_service import menu_url

logger = logging.getLogger(__name__)

menu_bp = Blueprint("menu", __name__)


@menu_bp.route("/menu", methods=["GET"])
def get_menu():
    query = MenuQuery(**request.args.to_dict())
    logger.info("menu query: %s", query.model_dump())

    return relay_json(
        lambda base: menu_url(base, query.lat, query.lng, query.restaurantId)
    )
