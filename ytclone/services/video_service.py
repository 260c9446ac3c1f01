# ============================================================================
# FILE: ytclone/services/video_service.py
# Maps YouTube Data API resources to VideoSummary / VideoDetail
# ============================================================================
from typing import Dict, List, Optional, Sequence
from ytclone.core.youtube_client import YouTubeClient
from ytclone.core.exceptions import BadRequest, NotFound
import logging

logger = logging.getLogger(__name__)

# Thumbnail resolutions tried in order
LIST_THUMBNAILS = ("medium", "default")
DETAIL_THUMBNAILS = ("standard", "high")


def pick_thumbnail(thumbnails: Optional[Dict], order: Sequence[str]) -> Optional[str]:
    """URL of the first resolution in `order` the provider returned"""
    thumbnails = thumbnails or {}
    for size in order:
        url = (thumbnails.get(size) or {}).get("url")
        if url:
            return url
    return None


class VideoService:
    """Service layer for the video catalog (search, details, popular chart)"""

    def __init__(self, client: YouTubeClient):
        self.client = client

    def search(self, query: Optional[str], max_results: int = 20) -> List[Dict]:
        """
        Search YouTube for videos

        Args:
            query: search terms, required
            max_results: number of results to request from the provider

        Returns:
            List of VideoSummary dicts
        """
        if not query or not query.strip():
            raise BadRequest("Search query is required")

        items = self.client.search(query, max_results)
        logger.info(f"Search '{query}' returned {len(items)} videos")

        videos = []
        for item in items:
            snippet = item.get("snippet", {})
            videos.append({
                "id": (item.get("id") or {}).get("videoId"),
                "title": snippet.get("title"),
                "description": snippet.get("description"),
                "thumbnail": pick_thumbnail(snippet.get("thumbnails"), LIST_THUMBNAILS),
                "channelTitle": snippet.get("channelTitle"),
                "publishedAt": snippet.get("publishedAt"),
            })
        return videos

    def get_video(self, video_id: str) -> Dict:
        """Details of one video; NotFound when the provider returns no items"""
        video = self.client.get_video(video_id)
        if not video:
            raise NotFound("Video not found")

        snippet = video.get("snippet", {})
        statistics = video.get("statistics", {})
        content_details = video.get("contentDetails", {})

        return {
            "id": video.get("id"),
            "title": snippet.get("title"),
            "description": snippet.get("description"),
            "thumbnail": pick_thumbnail(snippet.get("thumbnails"), DETAIL_THUMBNAILS),
            "channelTitle": snippet.get("channelTitle"),
            "publishedAt": snippet.get("publishedAt"),
            "duration": content_details.get("duration"),
            "viewCount": statistics.get("viewCount"),
            "likeCount": statistics.get("likeCount"),
            "commentCount": statistics.get("commentCount"),
        }

    def popular(self, max_results: int = 20) -> List[Dict]:
        """Most popular videos for the configured region"""
        items = self.client.most_popular(max_results)

        videos = []
        for video in items:
            snippet = video.get("snippet", {})
            videos.append({
                "id": video.get("id"),
                "title": snippet.get("title"),
                "description": snippet.get("description"),
                "thumbnail": pick_thumbnail(snippet.get("thumbnails"), LIST_THUMBNAILS),
                "channelTitle": snippet.get("channelTitle"),
                "publishedAt": snippet.get("publishedAt"),
                "viewCount": video.get("statistics", {}).get("viewCount"),
                "duration": video.get("contentDetails", {}).get("duration"),
            })
        return videos
