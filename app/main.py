import logging
import time
from typing import List, Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.logging_config import configure_logging
from app.models.request import (
    FavoriteRequest,
    GenerateRouteRequest,
    SaveRouteRequest,
    ShareRequest,
)
from app.models.response import ErrorResponse, RouteResultResponse, StatusResponse
from app.models.saved_route import SavedRoute
from app.services.auth import get_current_user_id
from app.services.route.errors import RouteError
from app.services.route_service import RouteService
from app.services.saved_route_service import SavedRouteService

logger = configure_logging("pacetrail", settings.log_level.upper())

app = FastAPI(
    title="PaceTrail API",
    description="Personalized running route generation API",
    version=settings.api_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        "%s %s - status=%s duration=%.3fs",
        request.method,
        request.url.path,
        response.status_code,
        duration,
    )
    return response


@app.exception_handler(RouteError)
async def route_error_handler(request: Request, exc: RouteError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"Invalid request: {location} {errors[0].get('msg', '')}".strip()
    else:
        message = "Invalid request"
    return JSONResponse({"error": message}, status_code=status.HTTP_400_BAD_REQUEST)


route_service = RouteService()
_saved_route_service: Optional[SavedRouteService] = None


def get_saved_route_service() -> SavedRouteService:
    """Connect to MongoDB on first use so the generator works without it.

    An unreachable MongoDB is not cached, so the next request reconnects.
    """
    global _saved_route_service
    if _saved_route_service is not None:
        return _saved_route_service
    service = SavedRouteService()
    if service.is_available():
        _saved_route_service = service
    return service


@app.get("/api")
async def welcome():
    return {"message": "Welcome to the PaceTrail route API"}


# main api
@app.post(
    "/api/routes/generate",
    response_model=RouteResultResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_route(request: GenerateRouteRequest):
    """Generate a personalized route from location, distance, pace and preference"""
    try:
        return await route_service.generate_route(request)
    except RouteError:
        raise
    except Exception:
        logger.exception("Error generating route")
        raise RouteError("Failed to generate route")


@app.post(
    "/api/routes/saved",
    response_model=SavedRoute,
    status_code=status.HTTP_201_CREATED,
)
async def save_route(
    request: SaveRouteRequest,
    user_id: str = Depends(get_current_user_id),
    saved_routes: SavedRouteService = Depends(get_saved_route_service),
):
    """Save a generated route to the signed-in user's dashboard"""
    return saved_routes.save_route(request.route, user_id, request.name)


@app.get("/api/routes/saved", response_model=List[SavedRoute])
async def list_saved_routes(
    user_id: str = Depends(get_current_user_id),
    saved_routes: SavedRouteService = Depends(get_saved_route_service),
):
    """List the signed-in user's saved routes, newest first"""
    return saved_routes.get_saved_routes(user_id)


@app.patch("/api/routes/saved/{route_id}/favorite", response_model=StatusResponse)
async def toggle_favorite(
    route_id: str,
    request: FavoriteRequest,
    user_id: str = Depends(get_current_user_id),
    saved_routes: SavedRouteService = Depends(get_saved_route_service),
):
    saved_routes.toggle_favorite(route_id, request.is_favorite, user_id)
    message = "Added to favorites" if request.is_favorite else "Removed from favorites"
    return StatusResponse(message=message)


@app.post("/api/routes/saved/{route_id}/share", response_model=StatusResponse)
async def share_route(
    route_id: str,
    request: Optional[ShareRequest] = None,
    user_id: str = Depends(get_current_user_id),
    saved_routes: SavedRouteService = Depends(get_saved_route_service),
):
    is_public = request.is_public if request else True
    saved_routes.share_route(route_id, user_id, is_public)
    return StatusResponse(message="Route shared successfully!" if is_public else "Route unshared")


@app.get("/health")
async def health_check():
    """Health check"""
    return {"status": "healthy", "version": settings.api_version}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
