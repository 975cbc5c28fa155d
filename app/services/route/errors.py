from __future__ import annotations


class RouteError(Exception):
    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(RouteError):
    """Caller input that cannot produce a route. Never worth retrying."""

    field: str = ""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=400)


class MissingLocation(ValidationError):
    field = "location"

    def __init__(self, message: str = "Missing required field: location") -> None:
        super().__init__(message)


class InvalidDistance(ValidationError):
    field = "distance"

    def __init__(self, message: str = "Invalid distance") -> None:
        super().__init__(message)


class InvalidPace(ValidationError):
    field = "pace"

    def __init__(self, message: str = "Invalid pace") -> None:
        super().__init__(message)


class CatalogConfigurationError(RouteError):
    def __init__(self, message: str = "Route catalog is empty") -> None:
        super().__init__(message, status_code=500)


class AuthenticationError(RouteError):
    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message, status_code=401)


class RouteNotFoundError(RouteError):
    def __init__(self, route_id: str) -> None:
        super().__init__(f"Saved route not found: {route_id}", status_code=404)
        self.route_id = route_id


class PersistenceError(RouteError):
    def __init__(self, message: str = "Saved routes storage unavailable") -> None:
        super().__init__(message, status_code=503)
