# instafood/models/request_models.py
from pydantic import BaseModel
from typing import Optional

# Query values are forwarded as-is; nothing here is validated beyond "string or absent".


class RestaurantListQuery(BaseModel):
    lat: Optional[str] = None
    lng: Optional[str] = None


class MenuQuery(BaseModel):
    lat: Optional[str] = None
    lng: Optional[str] = None
    restaurantId: Optional[str] = None
