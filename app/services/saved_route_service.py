"""
Saved route service for storing and retrieving users' routes
using MongoDB as the persistence layer. Runs in unavailable mode if MongoDB cannot be reached.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List, Optional

from pymongo import DESCENDING, MongoClient
from pymongo.errors import PyMongoError

from app.config import settings
from app.models.response import RouteResultResponse
from app.models.saved_route import SavedRoute
from app.services.route.errors import PersistenceError, RouteNotFoundError
from app.services.route.response_builder import ResponseBuilderService

logger = logging.getLogger(__name__)


class SavedRouteService:
    """Service for managing saved routes in MongoDB"""

    def __init__(
        self,
        mongo_uri: Optional[str] = None,
        database_name: Optional[str] = None,
        collection_name: Optional[str] = None,
        collection: Any = None,
    ):
        self.mongo_uri = mongo_uri or settings.mongo_uri
        self.database_name = database_name or settings.mongo_db_name
        self.collection_name = collection_name or settings.mongo_routes_collection
        self.response_builder = ResponseBuilderService()

        self.mongodb_available = False
        self.client = None
        self.collection = collection

        if self.collection is not None:
            self.mongodb_available = True
            return

        try:
            self.client = MongoClient(
                self.mongo_uri, serverSelectionTimeoutMS=settings.mongo_timeout_ms
            )
            # Test connection
            self.client.server_info()
            self.collection = self.client[self.database_name][self.collection_name]
            self.mongodb_available = True
            self._init_collection()
            logger.info("✅ MongoDB connection established for saved routes")
        except PyMongoError as exc:
            logger.warning("⚠️ MongoDB not available: %s", exc)
            logger.warning("💡 Saving routes will be disabled")
            self.mongodb_available = False

    def _init_collection(self) -> None:
        """Create indexes that support frequent query patterns."""
        try:
            self.collection.create_index("id", unique=True)
            self.collection.create_index([("user_id", 1), ("created_at", DESCENDING)])
        except PyMongoError as exc:
            logger.error("Error initializing saved routes collection: %s", exc)

    def is_available(self) -> bool:
        """Check if saved route storage is available."""
        return self.mongodb_available

    def _require_collection(self):
        if not self.mongodb_available:
            raise PersistenceError()
        return self.collection

    def save_route(
        self, route: RouteResultResponse, user_id: str, name: Optional[str] = None
    ) -> SavedRoute:
        """Store a generated route under a user with an optional display name."""
        collection = self._require_collection()

        record = SavedRoute(
            id=uuid.uuid4().hex,
            user_id=user_id,
            name=(name or "").strip() or route.name,
            created_at=datetime.now(timezone.utc),
            **self.response_builder.build_record_fields(route),
        )

        try:
            collection.insert_one(record.model_dump())
        except PyMongoError as exc:
            logger.error("Error saving route for user %s: %s", user_id, exc)
            raise PersistenceError("Failed to save route") from exc

        logger.info("Saved route %s for user %s", record.id, user_id)
        return record

    def get_saved_routes(self, user_id: str) -> List[SavedRoute]:
        """List a user's saved routes, newest first."""
        collection = self._require_collection()
        try:
            documents = collection.find({"user_id": user_id}, {"_id": 0}).sort(
                "created_at", DESCENDING
            )
            return [SavedRoute.model_validate(doc) for doc in documents]
        except PyMongoError as exc:
            logger.error("Error loading saved routes for user %s: %s", user_id, exc)
            raise PersistenceError("Failed to load saved routes") from exc

    def toggle_favorite(self, route_id: str, is_favorite: bool, user_id: str) -> None:
        self._update(route_id, user_id, {"is_favorite": is_favorite})

    def share_route(self, route_id: str, user_id: str, is_public: bool = True) -> None:
        self._update(route_id, user_id, {"is_public": is_public})

    def _update(self, route_id: str, user_id: str, fields: dict) -> None:
        collection = self._require_collection()
        try:
            result = collection.update_one(
                {"id": route_id, "user_id": user_id}, {"$set": fields}
            )
        except PyMongoError as exc:
            logger.error("Error updating saved route %s: %s", route_id, exc)
            raise PersistenceError("Failed to update saved route") from exc

        if result.matched_count == 0:
            raise RouteNotFoundError(route_id)
