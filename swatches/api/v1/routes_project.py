# File: swatches/api/v1/routes_project.py

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status

from swatches.api.deps import get_store
from swatches.core.errors import NotFoundError
from swatches.db.store import Store
from swatches.schemas.palette import PaletteRead
from swatches.schemas.project import ProjectCreated, ProjectRead
from swatches.services.palette_mapper import parse_id
from swatches.services.validation import validate_project

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
)
def list_projects(store: Store = Depends(get_store)):
    return store.select_all("projects")


@router.get(
    "/{project_id}/palettes",
    response_model=list[PaletteRead],
    summary="List the palettes of one project",
)
def list_project_palettes(project_id: str, store: Store = Depends(get_store)):
    palettes = store.select_where("palettes", "project_id", parse_id(project_id))
    if not palettes:
        raise NotFoundError(f"Could not find palettes for a project_id {project_id}")
    return palettes


@router.post(
    "",
    response_model=ProjectCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
)
def create_project(
    payload: Optional[dict[str, Any]] = Body(None),
    store: Store = Depends(get_store),
):
    """
    Create a project from the request body.

    Only ``name`` is checked. The whole body is inserted as given, so extra
    keys reach the database untouched and it decides whether they are
    acceptable. The response echoes just name and the new id.
    """
    project = payload or {}
    validate_project(project)

    new_id = store.insert_returning_id("projects", project)
    logger.info("Created project %s", new_id)
    return {"name": project["name"], "id": new_id}
