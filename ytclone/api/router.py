# ============================================================================
# FILE: ytclone/api/router.py
# ============================================================================
from fastapi import APIRouter
from ytclone.api.endpoints import auth, videos, history, favorites

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(videos.router, prefix="/videos", tags=["videos"])
api_router.include_router(history.router, prefix="/videos", tags=["history"])
api_router.include_router(favorites.router, prefix="/videos", tags=["favorites"])
