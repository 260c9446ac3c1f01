# ============================================================================
# FILE: ytclone/db/session.py
# Process-wide database handle: one engine, one bounded connection pool
# ============================================================================
from typing import Iterator, Optional
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from ytclone.db.base import Base
import logging

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the SQLAlchemy engine and session factory

    Created once in the application lifespan and closed at shutdown.
    Server databases get a QueuePool of `pool_size` connections; when every
    connection is checked out new requests wait up to `pool_timeout` seconds.
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_timeout: int = 30,
        echo: bool = False,
    ):
        self.url = url
        engine_kwargs = {"echo": echo, "pool_pre_ping": True}

        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in url or url == "sqlite://":
                # A single shared connection keeps the in-memory schema alive
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_recycle=3600,
            )

        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

    def create_all(self):
        """Create the users, history and favorites tables if missing"""
        import ytclone.db.models  # noqa: F401  (registers the models on Base)
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def get_session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def close(self):
        self.engine.dispose()
        logger.info("Database connection pool closed")


def create_database(settings, url: Optional[str] = None) -> Database:
    """Build the Database from application settings"""
    return Database(
        url or settings.sqlalchemy_database_url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        echo=settings.DEBUG,
    )
