# File: swatches/db/session.py

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from swatches.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url


def build_engine(url: str, **kwargs):
    """
    Create an engine for ``url``.

    SQLite needs check_same_thread off (requests run in the threadpool) and
    foreign keys switched on per connection, otherwise palettes could point
    at projects that don't exist.
    """
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True, **kwargs)

    engine = create_engine(url, connect_args={"check_same_thread": False}, **kwargs)

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


engine = build_engine(SQLALCHEMY_DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
