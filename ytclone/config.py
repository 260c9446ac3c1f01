# ============================================================================
# FILE: ytclone/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List, Optional
from urllib.parse import quote_plus

DEFAULT_JWT_SECRET = "your-secret-key-change-in-production"


class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "YouTube Clone API"
    ENVIRONMENT: str = "development"  # development | production
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    PORT: int = 3000

    # Database
    DATABASE_URL: Optional[str] = None  # Overrides the MYSQL_* settings when set
    MYSQL_HOSTNAME: str = "localhost"
    MYSQL_PORT: int = 3306
    MYSQL_USERNAME: Optional[str] = None
    MYSQL_PASSWORD: Optional[str] = None
    MYSQL_DATABASE: str = "yt_db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: int = 30

    # Security
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    # YouTube Data API v3
    YOUTUBE_API_KEY: Optional[str] = None
    YOUTUBE_API_SERVICE_NAME: str = "youtube"
    YOUTUBE_API_VERSION: str = "v3"
    YOUTUBE_REGION_CODE: str = "US"

    # Activity
    HISTORY_LIMIT: int = 50

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def sqlalchemy_database_url(self) -> str:
        """Explicit DATABASE_URL, else MySQL when credentials are present, else local SQLite"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.MYSQL_USERNAME:
            return (
                f"mysql+pymysql://{self.MYSQL_USERNAME}:{quote_plus(self.MYSQL_PASSWORD or '')}"
                f"@{self.MYSQL_HOSTNAME}:{self.MYSQL_PORT}/{self.MYSQL_DATABASE}"
            )
        return "sqlite:///./ytclone.db"


settings = Settings()
