# File: swatches/models/project.py

"""
Project model.

A project groups any number of palettes. Projects are only ever created
and listed; there is no update or delete route for them.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from swatches.models.base import Base


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
