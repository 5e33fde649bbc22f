# File: swatches/models/palette.py

"""
Palette model.

Clients send a flat ``colors`` array; it is stored as five discrete columns
(color1..color5), filled positionally. Unused slots stay NULL.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from swatches.models.base import Base

COLOR_COLUMNS = ("color1", "color2", "color3", "color4", "color5")


class Palette(Base):
    __tablename__ = "palettes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id"), nullable=False, index=True
    )

    color1: Mapped[str | None] = mapped_column(String(32), nullable=True)
    color2: Mapped[str | None] = mapped_column(String(32), nullable=True)
    color3: Mapped[str | None] = mapped_column(String(32), nullable=True)
    color4: Mapped[str | None] = mapped_column(String(32), nullable=True)
    color5: Mapped[str | None] = mapped_column(String(32), nullable=True)
