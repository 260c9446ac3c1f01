# ============================================================================
# FILE: ytclone/api/endpoints/videos.py
# Public video catalog endpoints backed by the YouTube Data API
# ============================================================================
from fastapi import APIRouter, Depends, Query
from typing import Optional
from ytclone.api.dependencies import get_video_service
from ytclone.schemas.video import VideoDetailResponse, VideoListResponse
from ytclone.services.video_service import VideoService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/search", response_model=VideoListResponse, response_model_exclude_none=True)
def search_videos(
    q: Optional[str] = Query(None, description="Search query"),
    max_results: int = Query(20, alias="maxResults", ge=1, le=50, description="Number of results"),
    video_service: VideoService = Depends(get_video_service)
):
    """
    Search YouTube videos
    Available to all users (authenticated and anonymous)
    """
    videos = video_service.search(q, max_results)
    return {"success": True, "videos": videos}

@router.get("/video/{video_id}", response_model=VideoDetailResponse)
def get_video(
    video_id: str,
    video_service: VideoService = Depends(get_video_service)
):
    """
    Get video details including duration and statistics
    Returns 404 when YouTube does not know the id
    """
    logger.info(f"Fetching video details for: {video_id}")
    video = video_service.get_video(video_id)
    return {"success": True, "video": video}

@router.get("/popular", response_model=VideoListResponse, response_model_exclude_none=True)
def popular_videos(
    max_results: int = Query(20, alias="maxResults", ge=1, le=50, description="Number of results"),
    video_service: VideoService = Depends(get_video_service)
):
    """Most popular videos for the configured region"""
    videos = video_service.popular(max_results)
    return {"success": True, "videos": videos}
