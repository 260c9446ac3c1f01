# ============================================================================
# FILE: ytclone/schemas/history.py
# ============================================================================
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from ytclone.db.models.history import ActionType

class HistoryCreate(BaseModel):
    """Schema for reporting a watch or search action"""
    video_id: Optional[str] = None
    video_title: Optional[str] = None
    thumbnail_url: Optional[str] = None
    search_query: Optional[str] = None
    action_type: Optional[ActionType] = None

class HistoryEntry(BaseModel):
    id: int
    user_id: int
    video_id: str
    video_title: str
    thumbnail_url: str
    search_query: str
    action_type: str
    watched_at: datetime

    class Config:
        from_attributes = True

class HistoryListResponse(BaseModel):
    success: bool = True
    history: List[HistoryEntry]

class MessageResponse(BaseModel):
    success: bool = True
    message: str
