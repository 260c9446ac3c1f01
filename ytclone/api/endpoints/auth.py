# ============================================================================
# FILE: ytclone/api/endpoints/auth.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ytclone.api.dependencies import get_db, get_settings, require_current_user
from ytclone.config import Settings
from ytclone.schemas.user import AuthResponse, CurrentUser, MeResponse, UserCreate, UserLogin
from ytclone.services.user_service import user_service
from ytclone.core.exceptions import InternalError, NotFound
from ytclone.core.security import create_access_token
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def _auth_payload(user, settings: Settings) -> dict:
    user_data = user.to_dict()
    token = create_access_token(user_data, app_settings=settings)
    return {"success": True, "token": token, "user": user_data}

@router.post("/register", response_model=AuthResponse)
def register(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Register a new user account
    Returns a session token so the client is logged in right away
    """
    try:
        user = user_service.create_user(db, user_data)
    except SQLAlchemyError as e:
        logger.error(f"Registration error: {e}")
        raise InternalError("Registration failed", details=str(e))
    return _auth_payload(user, settings)

@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Login with email and password
    Returns a session token valid for 24 hours
    """
    try:
        user = user_service.authenticate_user(db, credentials.email, credentials.password)
    except SQLAlchemyError as e:
        logger.error(f"Login error: {e}")
        raise InternalError("Login failed", details=str(e))

    logger.info(f"User logged in: {user.username}")
    return _auth_payload(user, settings)

@router.get("/me", response_model=MeResponse)
def get_current_user_info(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_current_user)
):
    """
    Get current user information
    Requires authentication
    """
    try:
        user = user_service.get_user(db, current_user.id)
    except SQLAlchemyError as e:
        logger.error(f"User fetch error: {e}")
        raise InternalError("Failed to fetch user", details=str(e))

    if not user:
        raise NotFound("User not found")
    return {"success": True, "user": user.to_dict()}
