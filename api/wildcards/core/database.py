from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session
from typing import Iterator
import logging

from wildcards.core.config import Settings

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"  # PostgreSQL unique_violation
MYSQL_DUPLICATE_ENTRY = 1062  # MySQL ER_DUP_ENTRY


def _normalize_url(db_url: str) -> str:
    # Bare PostgreSQL URLs are pinned to psycopg2, the installed driver
    for scheme in ("postgres://", "postgresql://"):
        if db_url.startswith(scheme):
            return "postgresql+psycopg2://" + db_url[len(scheme):]
    return db_url


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def receive_connect(dbapi_conn, connection_record):
        """SQLite only enforces foreign keys when asked to, per connection."""
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys = ON;")
        cursor.close()


def create_db_engine(settings: Settings) -> Engine:
    """
    Build the connection pool shared by every request.

    The engine is created once by the composition root and handed to the
    application; nothing in the package creates one at import time.

    Raises:
        ValueError: If no database URL is configured
    """
    if not settings.database_url:
        raise ValueError("DATABASE_URL environment variable is required")

    db_url = _normalize_url(settings.database_url)
    logger.info(f"Connecting to database: {db_url[:20]}...")  # Log partial URL for debugging

    if db_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
        engine = create_engine(db_url, echo=settings.db_echo, **kwargs)
        _enable_sqlite_foreign_keys(engine)
        return engine

    return create_engine(
        db_url,
        echo=settings.db_echo,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
    )


def init_db(engine: Engine) -> None:
    """Initialize database tables."""
    # Import models so they are registered with SQLModel metadata
    from wildcards import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Iterator[Session]:
    """Dependency for getting database sessions.

    The session (and the pooled connection behind it) is released when the
    request finishes, whether the handler returned or raised.
    """
    with Session(request.app.state.engine) as session:
        yield session


def is_duplicate_key_error(exc: IntegrityError) -> bool:
    """Tell a uniqueness violation apart from other integrity failures."""
    orig = exc.orig
    if getattr(orig, "pgcode", None) == UNIQUE_VIOLATION_SQLSTATE:
        return True
    if getattr(orig, "sqlstate", None) == UNIQUE_VIOLATION_SQLSTATE:
        return True
    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True
    message = str(orig).lower()
    return (
        "unique constraint" in message
        or "duplicate entry" in message
        or "duplicate key" in message
    )
