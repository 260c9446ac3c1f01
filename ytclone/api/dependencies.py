# ============================================================================
# FILE: ytclone/api/dependencies.py
# ============================================================================
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.orm import Session
from typing import Iterator, Optional
from ytclone.config import Settings
from ytclone.core.exceptions import Forbidden, Unauthorized
from ytclone.core.security import verify_access_token
from ytclone.schemas.user import CurrentUser
from ytclone.services.video_service import VideoService
import logging

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

def get_db(request: Request) -> Iterator[Session]:
    """Request-scoped session from the process-wide Database"""
    yield from request.app.state.database.get_session()

def get_settings(request: Request) -> Settings:
    """Settings the running app was created with"""
    return request.app.state.settings

def get_video_service(request: Request) -> VideoService:
    return VideoService(request.app.state.youtube_client)

def require_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings)
) -> CurrentUser:
    """
    Require a valid bearer token
    Missing token -> 401, invalid or expired token -> 403
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Access token required")

    result = verify_access_token(credentials.credentials, settings)
    if not result.valid:
        logger.info(f"Token rejected: {result.reason}")
        raise Forbidden("Invalid token")

    try:
        return CurrentUser(**result.claims)
    except ValidationError:
        raise Forbidden("Invalid token")
