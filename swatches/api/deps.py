# File: swatches/api/deps.py

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from swatches.db.session import SessionLocal
from swatches.db.store import Store


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> Store:
    return Store(db)
