# File: swatches/schemas/project.py

from typing import Any

from pydantic import BaseModel


class ProjectRead(BaseModel):
    id: int
    name: str


class ProjectCreated(BaseModel):
    # echoes whatever the client sent as name
    name: Any
    id: int
