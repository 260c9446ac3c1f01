# ============================================================================
# FILE: ytclone/api/endpoints/history.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ytclone.api.dependencies import get_db, get_settings, require_current_user
from ytclone.config import Settings
from ytclone.schemas.history import HistoryCreate, HistoryListResponse, MessageResponse
from ytclone.schemas.user import CurrentUser
from ytclone.services.history_service import history_service
from ytclone.core.exceptions import InternalError
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/history", response_model=MessageResponse)
def add_history(
    entry: HistoryCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_current_user)
):
    """
    Record a watched video or a search
    Requires authentication
    """
    try:
        history_service.add_entry(db, current_user.id, entry)
    except SQLAlchemyError as e:
        logger.error(f"History save error: {e}")
        raise InternalError("Failed to save history", details=str(e))
    return {"success": True, "message": "History saved"}

@router.get("/history", response_model=HistoryListResponse)
def get_history(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: CurrentUser = Depends(require_current_user)
):
    """
    Get the user's 50 most recent history entries
    Requires authentication
    """
    try:
        history = history_service.list_entries(db, current_user.id, settings.HISTORY_LIMIT)
    except SQLAlchemyError as e:
        logger.error(f"History fetch error: {e}")
        raise InternalError("Failed to fetch history", details=str(e))
    return {"success": True, "history": history}

@router.delete("/history/{entry_id}", response_model=MessageResponse)
def delete_history_item(
    entry_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_current_user)
):
    """
    Delete one history entry
    Requires authentication and ownership
    """
    try:
        history_service.delete_entry(db, current_user.id, entry_id)
    except SQLAlchemyError as e:
        logger.error(f"History delete error: {e}")
        raise InternalError("Failed to delete history", details=str(e))
    return {"success": True, "message": "History item deleted"}

@router.delete("/history", response_model=MessageResponse)
def clear_history(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_current_user)
):
    """
    Delete all history entries of the user
    Requires authentication
    """
    try:
        history_service.clear(db, current_user.id)
    except SQLAlchemyError as e:
        logger.error(f"Clear history error: {e}")
        raise InternalError("Failed to clear history", details=str(e))
    return {"success": True, "message": "All history cleared"}
