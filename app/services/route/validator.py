"""Validation of raw route form input into a RouteRequest."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional

from app.config.route_catalog import is_valid_preference

from .errors import InvalidDistance, InvalidPace, MissingLocation


@dataclass(frozen=True)
class RouteRequest:
    location: str
    distance_km: float
    pace_min_per_km: float
    preference: Optional[str] = None


class RouteRequestValidator:
    """Turn raw form/body values into a RouteRequest or raise a typed error.

    Checks run in a fixed order (location, distance, pace) so a request
    with several problems always reports the same one.
    """

    def validate(self, payload: Mapping[str, object]) -> RouteRequest:
        location = self._location(payload.get("location"))
        distance = self._positive_number(payload.get("distance"))
        if distance is None:
            raise InvalidDistance()
        pace = self._positive_number(payload.get("pace"))
        if pace is None:
            raise InvalidPace()
        # Duration is distance x pace; it must stay representable
        if not math.isfinite(distance * pace):
            raise InvalidPace("Invalid pace: distance x pace is too large")
        return RouteRequest(
            location=location,
            distance_km=distance,
            pace_min_per_km=pace,
            preference=self._normalize_preference(payload.get("preference")),
        )

    @staticmethod
    def _location(value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            raise MissingLocation()
        return value.strip()

    @staticmethod
    def _positive_number(value: object) -> Optional[float]:
        if value is None or isinstance(value, bool):
            return None
        try:
            num = float(value.strip()) if isinstance(value, str) else float(value)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(num) or num <= 0:
            return None
        return num

    @staticmethod
    def _normalize_preference(value: object) -> Optional[str]:
        if isinstance(value, str):
            lower = value.strip().lower()
            if is_valid_preference(lower):
                return lower
        return None
