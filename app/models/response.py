"""
Response models for the route API
Wire field names follow the web client: distance is in km, time is the estimated duration string
"""
from pydantic import BaseModel


class RouteResultResponse(BaseModel):
    """Generated route as returned to the client"""
    name: str
    start: str
    summary: str
    distance: float  # Distance in km
    time: str  # Estimated duration (e.g., "1 hr 10 min")
    tip: str


class ErrorResponse(BaseModel):
    error: str


class StatusResponse(BaseModel):
    status: str = "success"
    message: str = ""
