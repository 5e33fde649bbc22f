# File: swatches/services/palette_mapper.py

"""
Shape palettes between the API's flat ``colors`` array and the five
color columns of the palettes table.
"""

import re
from typing import Any, Sequence

from swatches.models.palette import COLOR_COLUMNS

INT_TOKEN = re.compile(r"[+-]?[0-9]+")
DECIMAL_TOKEN = re.compile(r"[+-]?[0-9]+\.[0-9]+")

# BIGINT bounds; no primary key can lie outside them
ID_MIN, ID_MAX = -(2**63), 2**63 - 1


def colors_to_columns(colors: Sequence[Any]) -> dict[str, Any]:
    """
    Map colors[0..4] onto color1..color5.

    Short arrays leave the trailing columns unset; anything past the fifth
    entry is not stored.
    """
    return {column: color for column, color in zip(COLOR_COLUMNS, colors)}


def palette_row(name: Any, project_id: Any, colors: Sequence[Any]) -> dict[str, Any]:
    return {"name": name, "project_id": project_id, **colors_to_columns(colors)}


def parse_id(token: str) -> int | str:
    """
    Path ids are opaque tokens. Ones that spell a whole number ("7", "-1",
    "+2", "1.0") are compared and echoed as ints; anything else, including
    numbers past the 64-bit range, is handed to the store as text (on SQLite
    that matches nothing).
    """
    if INT_TOKEN.fullmatch(token):
        value = int(token)
    elif DECIMAL_TOKEN.fullmatch(token) and float(token).is_integer():
        value = int(float(token))
    else:
        return token
    return value if ID_MIN <= value <= ID_MAX else token
