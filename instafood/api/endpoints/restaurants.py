import logging

from flask import Blueprint, request

from instafood.api.proxy import relay_json
from instafood.models.request_models import RestaurantListQuery
from instafood.services.upstream_service import restaurant_list_url

logger = logging.getLogger(__name__)

restaurants_bp = Blueprint("restaurants", __name__)


@restaurants_bp.route("/restaurants", methods=["GET"])
def list_restaurants():
    query = RestaurantListQuery(**request.args.to_dict())
    logger.info("restaurants query: %s", query.model_dump())

    return relay_json(lambda base: restaurant_list_url(base, query.lat, query.lng))
