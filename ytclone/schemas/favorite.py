# ============================================================================
# FILE: ytclone/schemas/favorite.py
# ============================================================================
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

class FavoriteCreate(BaseModel):
    """Schema for saving a video to favorites"""
    video_id: Optional[str] = None
    video_title: Optional[str] = None
    thumbnail_url: Optional[str] = None

class FavoriteEntry(BaseModel):
    id: int
    user_id: int
    video_id: str
    video_title: Optional[str] = None
    thumbnail_url: Optional[str] = None
    added_at: datetime

    class Config:
        from_attributes = True

class FavoriteListResponse(BaseModel):
    success: bool = True
    favorites: List[FavoriteEntry]
