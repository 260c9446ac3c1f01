# ============================================================================
# FILE: ytclone/schemas/video.py
# Normalized projections of YouTube Data API resources
# ============================================================================
from pydantic import BaseModel
from typing import List, Optional

class VideoSummary(BaseModel):
    """Search result or popular-chart entry"""
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    channelTitle: Optional[str] = None
    publishedAt: Optional[str] = None
    # Popular chart only
    viewCount: Optional[str] = None
    duration: Optional[str] = None

class VideoDetail(BaseModel):
    """Single video with statistics; counts stay provider strings"""
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    channelTitle: Optional[str] = None
    publishedAt: Optional[str] = None
    duration: Optional[str] = None  # ISO-8601, e.g. PT4M13S
    viewCount: Optional[str] = None
    likeCount: Optional[str] = None
    commentCount: Optional[str] = None

class VideoListResponse(BaseModel):
    success: bool = True
    videos: List[VideoSummary]

class VideoDetailResponse(BaseModel):
    success: bool = True
    video: VideoDetail
