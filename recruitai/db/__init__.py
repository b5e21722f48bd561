"""
Database module - SQLAlchemy engine, sessions and table definitions.
"""
from recruitai.db.database import get_db_session, init_db, check_db_connection

__all__ = [
    "get_db_session",
    "init_db",
    "check_db_connection"
]
