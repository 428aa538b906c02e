"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
``settings.DATABASE_URL`` and provides small helpers used by the
application and tests. By default the database is a SQLite file located
next to the package as `tpfoyer.db`; an in-memory URL keeps a single
shared connection so every session sees the same store.
"""

import logging

from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from . import models  # noqa: F401  registers table metadata
from .config import IN_MEMORY_URLS, settings

logger = logging.getLogger("tpfoyer.db")


def make_engine(url: str, echo: bool = False):
    """Build an engine for `url` with SQLite foreign keys switched on."""
    kwargs = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in IN_MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
    eng = create_engine(url, **kwargs)
    if eng.dialect.name == "sqlite":
        event.listen(eng, "connect", _enable_sqlite_foreign_keys)
    return eng


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless enabled per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = make_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)


def create_db_and_tables():
    """Create database tables using SQLModel metadata.

    Schema evolution is out of scope; tables are created if missing and
    left untouched otherwise.
    """
    SQLModel.metadata.create_all(engine)
    logger.info("tables ready on %s", engine.url.render_as_string(hide_password=True))


def drop_db_and_tables():
    """Drop every table known to the metadata. Used by the test harness."""
    SQLModel.metadata.drop_all(engine)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes.
    """
    with Session(engine) as session:
        yield session
