from typing import Optional, Union
from pydantic import BaseModel

from app.models.response import RouteResultResponse

# Numbers arrive from the form as strings; parsing and range checks are left
# to RouteRequestValidator so every failure maps to a specific error.
RawNumber = Optional[Union[str, float]]


class GenerateRouteRequest(BaseModel):
    location: Optional[str] = None
    distance: RawNumber = None
    preference: Optional[str] = None
    pace: RawNumber = None


class SaveRouteRequest(BaseModel):
    route: RouteResultResponse
    name: Optional[str] = None


class FavoriteRequest(BaseModel):
    is_favorite: bool


class ShareRequest(BaseModel):
    is_public: bool = True
