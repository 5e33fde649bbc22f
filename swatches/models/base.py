# File: swatches/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Project and Palette inherit from this; init_db() creates their tables
    from Base.metadata.
    """
    pass
