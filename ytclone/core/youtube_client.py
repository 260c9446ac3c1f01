# ============================================================================
# FILE: ytclone/core/youtube_client.py
# YouTube Data API v3 client for search, video details and the popular chart
# ============================================================================
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from typing import Dict, List, Optional
from ytclone.config import Settings, settings
from ytclone.core.exceptions import Misconfigured, UpstreamError
import logging

logger = logging.getLogger(__name__)


class YouTubeClient:
    """
    Thin wrapper around the YouTube Data API v3 resource

    Every call is a single attempt: no caching, no retries. Provider
    failures surface as UpstreamError, a missing API key as Misconfigured.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        service=None,
        app_settings: Optional[Settings] = None,
    ):
        """
        Args:
            api_key: YouTube Data API key, defaults to YOUTUBE_API_KEY
            service: pre-built API resource (used instead of building one)
            app_settings: source of the key, API version and region, defaults to the process settings
        """
        if app_settings is None:
            app_settings = settings
        self.api_key = api_key if api_key is not None else app_settings.YOUTUBE_API_KEY
        self.service_name = app_settings.YOUTUBE_API_SERVICE_NAME
        self.api_version = app_settings.YOUTUBE_API_VERSION
        self.region_code = app_settings.YOUTUBE_REGION_CODE
        self.youtube = service

        if not self.api_key and service is None:
            logger.warning("YouTube API key not configured")

    def _get_service(self):
        if self.youtube is not None:
            return self.youtube
        if not self.api_key:
            raise Misconfigured("YouTube API key not configured")

        self.youtube = build(
            self.service_name,
            self.api_version,
            developerKey=self.api_key,
            cache_discovery=False,
        )
        logger.info("YouTube API client initialized successfully")
        return self.youtube

    def _execute(self, request, failure_message: str) -> Dict:
        try:
            return request.execute()
        except HttpError as e:
            reason = getattr(e, "reason", None) or str(e)
            logger.error(f"YouTube API error ({failure_message}): {reason}")
            raise UpstreamError(failure_message, details=reason)
        except Exception as e:
            logger.error(f"YouTube request failed ({failure_message}): {e}")
            raise UpstreamError(failure_message, details=str(e))

    def search(self, query: str, max_results: int = 20) -> List[Dict]:
        """Raw search.list items restricted to videos"""
        youtube = self._get_service()
        request = youtube.search().list(
            part="snippet",
            q=query,
            maxResults=max_results,
            type="video",
        )
        response = self._execute(request, "Search failed")
        return response.get("items", [])

    def get_video(self, video_id: str) -> Optional[Dict]:
        """Raw videos.list item for one id, or None when the provider has no such video"""
        youtube = self._get_service()
        request = youtube.videos().list(
            part="snippet,contentDetails,statistics",
            id=video_id,
        )
        response = self._execute(request, "Failed to fetch video")

        items = response.get("items") or []
        if not items:
            logger.warning(f"No video found for ID: {video_id}")
            return None
        return items[0]

    def most_popular(self, max_results: int = 20) -> List[Dict]:
        """Raw items of the regional most-popular chart"""
        youtube = self._get_service()
        request = youtube.videos().list(
            part="snippet,contentDetails,statistics",
            chart="mostPopular",
            regionCode=self.region_code,
            maxResults=max_results,
        )
        response = self._execute(request, "Failed to fetch popular videos")
        return response.get("items", [])
