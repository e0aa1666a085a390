"""
Database configuration and session management.
"""

import logging
from datetime import datetime, timezone
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings

logger = logging.getLogger("recipes.database")

# Create SQLAlchemy Base
Base = declarative_base()

_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def utcnow() -> datetime:
    """Naive UTC timestamp with microseconds, portable across SQLite/MySQL/PostgreSQL."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def build_engine(url: str, echo: bool = False):
    """Create an engine with driver-specific options.

    SQLite connections are shared across threads (FastAPI runs sync routes in a
    threadpool), and an in-memory database is pinned to a single connection so
    every session sees the same schema.
    """
    kwargs = {"echo": echo, "future": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in _IN_MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(url, **kwargs)


# Create engine
engine = build_engine(settings.database_url, echo=settings.db_echo)

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True, expire_on_commit=False)


def init_database():
    """Initialize database schema"""
    # Import models so they register on Base.metadata
    from domain.models import user, recipe  # noqa: F401

    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Database tables created successfully (%s)", engine.url.get_backend_name())


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
