"""Database connection lifecycle."""
from contextual_ai.db.database import check_database_health, close_db, connect_db, get_engine

__all__ = ["get_engine", "check_database_health", "connect_db", "close_db"]
