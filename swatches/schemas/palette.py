# File: swatches/schemas/palette.py

from typing import Any, List, Optional, Union

from pydantic import BaseModel


class PaletteRead(BaseModel):
    id: int
    name: str
    project_id: int
    color1: Optional[str] = None
    color2: Optional[str] = None
    color3: Optional[str] = None
    color4: Optional[str] = None
    color5: Optional[str] = None


class PaletteCreated(BaseModel):
    """
    Create response. Carries the client's flat colors array, not the
    color1..color5 columns it was stored as.
    """

    name: Any
    project_id: Any
    colors: List[Any]
    id: int


class PaletteDeleted(BaseModel):
    id: Union[int, str]
