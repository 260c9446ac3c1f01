# ============================================================================
# FILE: ytclone/main.py
# ============================================================================
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ytclone.api.router import api_router
from ytclone.config import Settings, settings as default_settings
from ytclone.core.exceptions import register_exception_handlers
from ytclone.core.logging import setup_logging
from ytclone.core.security import check_signing_key
from ytclone.core.youtube_client import YouTubeClient
from ytclone.db.session import Database, create_database
import logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    youtube_client: Optional[YouTubeClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application

    The database and YouTube client are created in the lifespan unless
    provided by the caller.
    """
    if settings is None:
        settings = default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})")
        check_signing_key(settings)

        app.state.database = database or create_database(settings)
        app.state.database.create_all()
        app.state.youtube_client = youtube_client or YouTubeClient(
            api_key=settings.YOUTUBE_API_KEY or "",
            app_settings=settings,
        )

        yield

        logger.info(f"Shutting down {settings.APP_NAME}")
        app.state.database.close()

    app = FastAPI(
        title=settings.APP_NAME,
        description="YouTube Data API proxy with accounts, history and favorites",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, production=settings.is_production)

    # Include API router
    app.include_router(api_router, prefix="/api")

    @app.get("/api/health")
    async def health_check():
        return {
            "status": "OK",
            "message": "YouTube Clone API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/")
    async def root():
        return {
            "message": "Welcome to YouTube Clone API",
            "endpoints": {
                "auth": "/api/auth",
                "videos": "/api/videos",
                "health": "/api/health",
            },
        }

    return app


app = create_app()
