# ============================================================================
# FILE: ytclone/core/logging.py
# ============================================================================
import logging
import sys
from typing import Optional
from ytclone.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None):
    """Configure root logging once for the API process"""
    level_name = (level or settings.LOG_LEVEL).upper()
    if settings.DEBUG:
        level_name = "DEBUG"

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )

    # Access logs are handled by uvicorn; keep library chatter down
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
