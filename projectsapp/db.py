"""SQLAlchemy database setup for Projects Manager."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

if TYPE_CHECKING:
    import sqlite3

#: The default database name.
DEFAULT_DB_NAME: Final[str] = "projects.db"

#: The application directory name used under the per-platform data directory.
APP_DIR_NAME: Final[str] = "Projects Manager"


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""


def get_project_db_path() -> Path:
    """
    Get the path to the default projects database.

    - On Windows, the database is created in the user's
        ``AppData/Local/Projects Manager`` directory.
    - On macOS, the database is created in the user's
        ``~/Library/Application Support/Projects Manager`` directory.
    - On Linux, the database is created in the user's
        ``~/.config/Projects Manager`` directory.
    - If the platform is not supported, raise a ValueError.

    Returns:
        Path to the database file

    """
    if sys.platform not in ["win32", "darwin", "linux"]:
        msg = f"Unsupported platform: {sys.platform}"
        raise ValueError(msg)
    if sys.platform == "win32":
        db_path = Path.home() / "AppData" / "Local" / APP_DIR_NAME
    elif sys.platform == "darwin":
        db_path = Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    elif sys.platform == "linux":
        db_path = Path.home() / ".config" / APP_DIR_NAME
    db_path.mkdir(parents=True, exist_ok=True)
    return db_path / DEFAULT_DB_NAME


def default_database_url() -> str:
    """
    Get the SQLAlchemy URL of the default SQLite database.
    """
    return f"sqlite:///{get_project_db_path()}"


def create_engine_from_url(url: str, echo: bool = False) -> Engine:  # noqa: FBT001, FBT002
    """
    Create a SQLAlchemy engine for ``url``.

    SQLite connections get foreign key enforcement switched on; other backends
    are used as configured.

    Args:
        url: SQLAlchemy database URL

    Keyword Args:
        echo: Log every SQL statement

    Returns:
        SQLAlchemy engine

    """
    engine = create_engine(url, echo=echo)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(
            dbapi_conn: sqlite3.Connection | Any, _connection_record: Any
        ) -> None:
            """Set SQLite pragmas on connection."""
            cursor = cast("sqlite3.Cursor", dbapi_conn.cursor())
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_db(engine: Engine) -> None:
    """
    Create any missing tables.

    Args:
        engine: SQLAlchemy engine

    """
    # Import so the model registers itself on Base.metadata
    from projectsapp.models.project import Project  # noqa: F401, PLC0415

    Base.metadata.create_all(engine)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Create the session factory used by the data access layer.

    Objects stay readable after their session is closed, since every call
    works in its own short-lived session.

    Args:
        engine: SQLAlchemy engine

    Returns:
        Session factory

    """
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def session_scope(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """
    Provide a transactional scope around a series of operations.

    The transaction is committed when the block exits normally, rolled back
    when it raises, and the session is closed either way.

    Args:
        session_factory: Session factory

    Yields:
        SQLAlchemy session

    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except BaseException:
        session.rollback()
        raise
    finally:
        session.close()
