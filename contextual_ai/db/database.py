"""
Database connection bootstrap.

The connection is opened at startup and disposed on shutdown. Nothing in the
adaptation pipeline reads from or writes to it; it only backs the health
check.
"""
from __future__ import annotations

from typing import Optional

from loguru import logger
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from config import get_settings

_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the engine (lazy initialization)."""
    global _engine
    if _engine is None:
        settings = get_settings()
        connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
        _engine = create_engine(
            settings.database_url,
            echo=settings.log_level == "DEBUG",
            pool_pre_ping=True,
            connect_args=connect_args,
        )
    return _engine


def check_database_health() -> tuple[str, str | None]:
    """
    Check database connectivity.

    Returns:
        Tuple of (status, error_message). Status is "ok" or "error".
    """
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return "ok", None
    except SQLAlchemyError as e:
        return "error", str(e)


def connect_db() -> bool:
    """Open the connection at startup. Failures are logged, not raised."""
    status, error = check_database_health()
    if status == "ok":
        logger.info("Database connection established")
        return True
    logger.warning(f"Database unavailable: {error}")
    return False


def close_db() -> None:
    """Dispose of the engine and its pooled connections."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None
        logger.info("Database connection closed")
