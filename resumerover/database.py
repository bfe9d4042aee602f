"""
ResumeRover - Database connection, session management, and retry layer.

Stores completed analyses. The matching engine never touches the database;
routers persist results after analyze() returns.

Analyses are written to a local SQLite file by default. Any other SQLAlchemy
URL is handed to create_engine unchanged.
"""
import logging
import random
import time
from functools import wraps

from sqlalchemy import create_engine, event
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger("resumerover.database")

Base = declarative_base()


def create_app_engine(database_url: str = None):
    """
    Create a SQLAlchemy engine for the analyses store.

    SQLite connections get WAL mode and a busy timeout so the upload handler
    and history reads don't trip over each other's locks.
    """
    url = database_url or settings.database_url

    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)

    engine = create_engine(url, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA busy_timeout=5000")
        cursor.close()

    logger.info("Created SQLite engine for %s", url)
    return engine


engine = create_app_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def _is_transient_error(exc: Exception) -> bool:
    """Lock timeouts and dropped connections are worth retrying; constraint violations are not."""
    if isinstance(exc, IntegrityError):
        return False
    return isinstance(exc, (OperationalError, DBAPIError))


def with_retry(func):
    """
    Retry a database write on transient errors ("database is locked") with
    exponential backoff and jitter.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        attempts = settings.db_retry_max_attempts
        base_delay = settings.db_retry_base_delay

        for attempt in range(attempts):
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                if not _is_transient_error(exc) or attempt == attempts - 1:
                    raise
                delay = min(base_delay * (2 ** attempt), 2.0)
                delay += random.uniform(0, delay * 0.5)
                logger.warning(
                    "Transient DB error saving analysis (attempt %d/%d), retrying in %.2fs: %s",
                    attempt + 1, attempts, delay, exc
                )
                time.sleep(delay)

    return wrapper


def get_db():
    """FastAPI dependency that yields a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Create the analyses table from model metadata.

    Used on startup unless RESUMEROVER_RUN_MIGRATIONS is set, in which case
    `alembic upgrade head` manages the schema instead.
    """
    from . import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")
