"""
Route synthesizer - turns a runner's constraints into a concrete route
Pipeline: validate -> pick template -> override start/distance -> adapt text -> estimate duration
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Mapping, Optional

from .adaptation import adapt_route_text
from .catalog import RouteCatalog
from .duration import format_duration
from .validator import RouteRequest, RouteRequestValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteResult:
    name: str
    start: str
    summary: str
    distance_km: float
    estimated_duration: str
    tip: str


class RouteSynthesizer:
    """
    Route synthesizer - adapts a randomly drawn catalog template to a request

    Holds no mutable state besides the random source, so one instance can
    serve concurrent callers.
    """

    def __init__(
        self,
        catalog: Optional[RouteCatalog] = None,
        rng: Optional[random.Random] = None,
        validator: Optional[RouteRequestValidator] = None,
    ):
        self.catalog = catalog or RouteCatalog.default()
        self.rng = rng or random.Random()
        self.validator = validator or RouteRequestValidator()

    def synthesize(self, request: RouteRequest) -> RouteResult:
        """
        Build a route for an already validated request.

        Args:
            request: Validated route request

        Returns:
            RouteResult whose start and distance echo the request exactly
        """
        template = self.catalog.pick_template(self.rng)
        summary, tip = adapt_route_text(template.summary, template.tip, request.preference)

        logger.debug(
            "Synthesized '%s' for %s (%.2fkm, preference=%s)",
            template.name,
            request.location,
            request.distance_km,
            request.preference,
        )

        return RouteResult(
            name=template.name,
            start=request.location,
            summary=summary,
            distance_km=request.distance_km,
            estimated_duration=format_duration(request.distance_km, request.pace_min_per_km),
            tip=tip,
        )

    def synthesize_raw(self, payload: Mapping[str, object]) -> RouteResult:
        """Validate raw form values, then synthesize. Validation runs before any catalog access."""
        request = self.validator.validate(payload)
        return self.synthesize(request)
