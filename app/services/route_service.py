"""
Main route generation service
Wraps the synthesizer for the HTTP layer and shapes its output for the client
"""
import asyncio
import random
from typing import Optional

from app.config import settings
from app.models.request import GenerateRouteRequest
from app.models.response import RouteResultResponse
from app.services.route.response_builder import ResponseBuilderService
from app.services.route.synthesizer import RouteSynthesizer


class RouteService:
    """
    Main route generation service

    Flow: validation → template draw → adaptation (all in the synthesizer) → response building
    """

    def __init__(
        self,
        synthesizer: Optional[RouteSynthesizer] = None,
        simulated_latency_ms: Optional[int] = None,
    ):
        if synthesizer:
            self.synthesizer = synthesizer
        else:
            self.synthesizer = RouteSynthesizer(rng=random.Random(settings.random_seed))
        self.response_builder = ResponseBuilderService()
        if simulated_latency_ms is None:
            simulated_latency_ms = settings.simulated_latency_ms
        self.simulated_latency_ms = max(simulated_latency_ms, 0)

    async def generate_route(self, request: GenerateRouteRequest) -> RouteResultResponse:
        """
        Generate a route from the client's raw form values

        Raises:
            ValidationError: a field is missing or out of range
        """
        result = self.synthesizer.synthesize_raw(request.model_dump())

        # Simulated round trip for UI loading states; validation errors above stay immediate
        if self.simulated_latency_ms:
            await asyncio.sleep(self.simulated_latency_ms / 1000)

        return self.response_builder.build_response(result)
