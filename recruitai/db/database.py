import logging
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from recruitai.core.config import get_settings
from recruitai.db.tables import metadata

logger = logging.getLogger(__name__)


@lru_cache()
def _build_engine(database_url: str, echo: bool) -> Engine:
    if database_url.startswith("sqlite"):
        # TestClient and uvicorn workers touch the connection from other threads
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=echo
        )
    # pool_size=5: maintain 5 connections ready
    # max_overflow=10: allow 10 extra connections under load
    return create_engine(
        database_url,
        pool_size=5,
        max_overflow=10,
        echo=echo  # Log SQL queries in debug mode
    )


def get_engine() -> Engine:
    settings = get_settings()
    return _build_engine(settings.database_url, settings.debug)


@lru_cache()
def _session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_session():
    """
    Context manager for database sessions.
    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM users"))
    """
    session = _session_factory(get_engine())()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db() -> None:
    """Create missing tables. Safe to call on every startup."""
    metadata.create_all(bind=get_engine())
    logger.info("Database tables ready")


def check_db_connection() -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            result = db.execute(text("SELECT 1 as test"))
            row = result.fetchone()
            return row[0] == 1
    except Exception as e:
        logger.error("Database connection failed: %s", e)
        return False
