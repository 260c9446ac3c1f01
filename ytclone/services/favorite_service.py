# ============================================================================
# FILE: ytclone/services/favorite_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ytclone.db.models.favorite import Favorite
from ytclone.core.exceptions import BadRequest, Conflict
import logging

logger = logging.getLogger(__name__)

class FavoriteService:
    """Service layer for saved videos"""

    def add_favorite(
        self,
        db: Session,
        user_id: int,
        video_id: Optional[str],
        video_title: Optional[str] = None,
        thumbnail_url: Optional[str] = None
    ) -> Favorite:
        """Save a video for the user; saving the same video twice is a Conflict"""
        if not video_id:
            raise BadRequest("Video ID is required")

        # Check if already in favorites
        existing = db.query(Favorite).filter(
            Favorite.user_id == user_id,
            Favorite.video_id == video_id
        ).first()
        if existing:
            raise Conflict("Already in favorites")

        favorite = Favorite(
            user_id=user_id,
            video_id=video_id,
            video_title=video_title,
            thumbnail_url=thumbnail_url,
        )
        try:
            db.add(favorite)
            db.commit()
            db.refresh(favorite)
        except IntegrityError:
            # The unique constraint caught a concurrent insert
            db.rollback()
            raise Conflict("Already in favorites")
        except Exception:
            db.rollback()
            raise

        logger.info(f"Favorite added for user {user_id}: {video_id}")
        return favorite

    def list_favorites(self, db: Session, user_id: int) -> List[Favorite]:
        """Newest favorites first"""
        return db.query(Favorite).filter(
            Favorite.user_id == user_id
        ).order_by(Favorite.added_at.desc(), Favorite.id.desc()).all()

# Create singleton instance
favorite_service = FavoriteService()
