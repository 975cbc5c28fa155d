"""Estimated running time formatting."""
from __future__ import annotations

import math
from typing import Tuple


def split_duration(distance_km: float, pace_min_per_km: float) -> Tuple[int, int]:
    """
    Split distance x pace into whole hours and rounded minutes.

    Minutes round half up. A remainder that rounds to 60 carries into the
    hour count, so minutes is always within [0, 60).
    """
    total_minutes = distance_km * pace_min_per_km
    hours = math.floor(total_minutes / 60)
    minutes = math.floor(total_minutes % 60 + 0.5)
    if minutes >= 60:
        hours += minutes // 60
        minutes %= 60
    return int(hours), int(minutes)


def format_duration(distance_km: float, pace_min_per_km: float) -> str:
    hours, minutes = split_duration(distance_km, pace_min_per_km)
    if hours > 0:
        return f"{hours} hr {minutes} min"
    return f"{minutes} min"
