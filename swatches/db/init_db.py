"""
Database initialization helpers.

Tables come straight from the ORM metadata; there are no migrations.
The seed is the small development fixture the API tests also run against.
"""

from sqlalchemy import Engine, select
from sqlalchemy.orm import Session

from swatches.db.session import engine as default_engine
from swatches.models.base import Base
from swatches.models.palette import Palette
from swatches.models.project import Project
from swatches.services.palette_mapper import palette_row

SEED_PROJECT = "Dream Palettes"

SEED_PALETTES = [
    ("Unicorns", ["#F7C6D9", "#E3B5F5", "#B5D8F5", "#C9F5E8", "#FFF4B8"]),
    ("Sunset", ["#FF5E5B", "#FF9E5E", "#FFD166", "#7A4069", "#2E1F3D"]),
]


def init_db(engine: Engine | None = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine or default_engine)


def seed_initial_data(db: Session) -> bool:
    """
    Insert one project with two palettes if the projects table is empty.

    Returns True when rows were inserted.
    """
    if db.execute(select(Project.id).limit(1)).first() is not None:
        return False

    project = Project(name=SEED_PROJECT)
    db.add(project)
    db.flush()

    for name, colors in SEED_PALETTES:
        db.add(Palette(**palette_row(name, project.id, colors)))

    db.commit()
    return True
