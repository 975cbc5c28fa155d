"""
Route catalog - the fixed set of template routes generated routes are based on
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

from app.config.route_catalog import TEMPLATE_ROUTES

from .errors import CatalogConfigurationError


@dataclass(frozen=True)
class RouteTemplate:
    """Pre-authored example route used as a narrative basis"""

    name: str
    start: str
    summary: str
    base_distance_km: float
    tip: str

    @classmethod
    def from_dict(cls, data: Dict) -> "RouteTemplate":
        return cls(
            name=data["name"],
            start=data["start"],
            summary=data["summary"],
            base_distance_km=float(data["base_distance_km"]),
            tip=data["tip"],
        )


class RouteCatalog:
    """
    Immutable catalog of template routes.

    Selection is a uniform draw that ignores the request entirely; adapting
    the chosen template to the runner happens afterwards in the synthesizer.
    """

    def __init__(self, templates: Iterable[RouteTemplate]):
        self._templates: Tuple[RouteTemplate, ...] = tuple(templates)
        if not self._templates:
            raise CatalogConfigurationError()

    @classmethod
    def default(cls) -> "RouteCatalog":
        return cls(RouteTemplate.from_dict(entry) for entry in TEMPLATE_ROUTES)

    @property
    def templates(self) -> Tuple[RouteTemplate, ...]:
        return self._templates

    def pick_template(self, rng: Optional[random.Random] = None) -> RouteTemplate:
        """
        Pick one template uniformly at random.

        Args:
            rng: Random source; pass a seeded instance for reproducible picks

        Returns:
            The selected template
        """
        rng = rng or random.Random()
        return rng.choice(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[RouteTemplate]:
        return iter(self._templates)
