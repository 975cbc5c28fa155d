"""
Response builder service - converts synthesized routes and stored records to API response format
"""
from typing import Any, Dict

from app.models.response import RouteResultResponse

from .synthesizer import RouteResult


class ResponseBuilderService:
    """Response builder service - converts internal data to API response format"""

    def build_response(self, result: RouteResult) -> RouteResultResponse:
        """
        Build API response from a synthesized route

        Args:
            result: Route produced by the synthesizer

        Returns:
            RouteResultResponse using the client's field names
        """
        return RouteResultResponse(
            name=result.name,
            start=result.start,
            summary=result.summary,
            distance=result.distance_km,
            time=result.estimated_duration,
            tip=result.tip,
        )

    def build_record_fields(self, route: RouteResultResponse) -> Dict[str, Any]:
        """Map a client route onto the stored record's column names"""
        return {
            "start_location": route.start,
            "summary": route.summary,
            "distance": route.distance,
            "estimated_time": route.time,
            "route_tip": route.tip,
        }
