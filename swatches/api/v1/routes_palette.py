# File: swatches/api/v1/routes_palette.py

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status

from swatches.api.deps import get_store
from swatches.core.errors import NotFoundError
from swatches.db.store import Store
from swatches.schemas.palette import PaletteCreated, PaletteDeleted, PaletteRead
from swatches.services.palette_mapper import palette_row, parse_id
from swatches.services.validation import validate_palette

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[PaletteRead],
    summary="List palettes",
)
def list_palettes(store: Store = Depends(get_store)):
    return store.select_all("palettes")


@router.get(
    "/{palette_id}",
    response_model=list[PaletteRead],
    summary="Get palette by id",
)
def get_palette(palette_id: str, store: Store = Depends(get_store)):
    """
    Returns a one-element list rather than a bare object; existing
    clients index into the array.
    """
    palette = store.select_where("palettes", "id", parse_id(palette_id))
    if not palette:
        raise NotFoundError(f"Could not find palette with id {palette_id}")
    return palette


@router.post(
    "",
    response_model=PaletteCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create palette",
)
def create_palette(
    payload: Optional[dict[str, Any]] = Body(None),
    store: Store = Depends(get_store),
):
    body = payload or {}
    validate_palette(body)

    name, colors, project_id = body["name"], body["colors"], body["project_id"]
    new_id = store.insert_returning_id("palettes", palette_row(name, project_id, colors))
    logger.info("Created palette %s in project %s", new_id, project_id)

    return {"name": name, "project_id": project_id, "colors": colors, "id": new_id}


@router.delete(
    "/{palette_id}",
    response_model=PaletteDeleted,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Delete palette by id",
)
def delete_palette(palette_id: str, store: Store = Depends(get_store)):
    key = parse_id(palette_id)
    deleted = store.delete_where("palettes", "id", key)
    if not deleted:
        raise NotFoundError(f"Could not find palette with id {palette_id}")
    logger.info("Deleted palette %s", key)
    return {"id": key}
