# Route service package
from .catalog import RouteCatalog, RouteTemplate
from .errors import (
    InvalidDistance,
    InvalidPace,
    MissingLocation,
    RouteError,
    ValidationError,
)
from .response_builder import ResponseBuilderService
from .synthesizer import RouteResult, RouteSynthesizer
from .validator import RouteRequest, RouteRequestValidator


__all__ = [
    "RouteCatalog",
    "RouteTemplate",
    "RouteRequest",
    "RouteRequestValidator",
    "RouteResult",
    "RouteSynthesizer",
    "ResponseBuilderService",
    "RouteError",
    "ValidationError",
    "MissingLocation",
    "InvalidDistance",
    "InvalidPace",
]
