# ============================================================================
# FILE: ytclone/api/endpoints/favorites.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ytclone.api.dependencies import get_db, require_current_user
from ytclone.schemas.favorite import FavoriteCreate, FavoriteListResponse
from ytclone.schemas.history import MessageResponse
from ytclone.schemas.user import CurrentUser
from ytclone.services.favorite_service import favorite_service
from ytclone.core.exceptions import InternalError
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/favorites", response_model=MessageResponse)
def add_favorite(
    favorite: FavoriteCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_current_user)
):
    """
    Save a video to favorites
    Requires authentication
    """
    try:
        favorite_service.add_favorite(
            db,
            current_user.id,
            favorite.video_id,
            favorite.video_title,
            favorite.thumbnail_url
        )
    except SQLAlchemyError as e:
        logger.error(f"Add to favorites error: {e}")
        raise InternalError("Failed to add to favorites", details=str(e))
    return {"success": True, "message": "Added to favorites"}

@router.get("/favorites", response_model=FavoriteListResponse)
def get_favorites(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_current_user)
):
    """
    Get the user's favorites, newest first
    Requires authentication
    """
    try:
        favorites = favorite_service.list_favorites(db, current_user.id)
    except SQLAlchemyError as e:
        logger.error(f"Favorites fetch error: {e}")
        raise InternalError("Failed to fetch favorites", details=str(e))
    return {"success": True, "favorites": favorites}
