"""
Saved route models for routes users keep in their dashboard
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class SavedRoute(BaseModel):
    """Saved route record"""
    id: str
    user_id: str
    name: str
    start_location: str
    summary: str
    distance: float  # Distance in km
    estimated_time: str
    route_tip: Optional[str] = None
    is_favorite: bool = False
    is_public: bool = False
    created_at: datetime
