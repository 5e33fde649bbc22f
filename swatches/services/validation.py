# File: swatches/services/validation.py

"""
Presence checks for JSON request bodies.

A field counts as missing when it is absent *or* falsy: "", 0, None,
False, [] and {} are all rejected. Fields are checked in the given order
and the first missing one wins.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from swatches.core.errors import ValidationError

PALETTE_FIELDS = ("name", "colors", "project_id")
PROJECT_FIELDS = ("name",)

PALETTE_FORMAT = "{ name: <String>, colors: <Array>, project_id: <Number> }"
PROJECT_FORMAT = "{ name: <String> }"


@dataclass(frozen=True)
class FieldCheck:
    missing: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.missing is None


def check_required(payload: Mapping[str, Any], fields: Sequence[str]) -> FieldCheck:
    for field in fields:
        if not payload.get(field):
            return FieldCheck(missing=field)
    return FieldCheck()


def validate_palette(payload: Mapping[str, Any]) -> None:
    result = check_required(payload, PALETTE_FIELDS)
    if result.ok and not isinstance(payload["colors"], list):
        # a string or number can't be spread over the color columns
        result = FieldCheck(missing="colors")
    if not result.ok:
        raise ValidationError(
            f"Expected format: {PALETTE_FORMAT}. "
            f'You\'re missing a "{result.missing}" property.'
        )


def validate_project(payload: Mapping[str, Any]) -> None:
    if not check_required(payload, PROJECT_FIELDS).ok:
        raise ValidationError(
            f"Expected format: {PROJECT_FORMAT}. You're missing a name."
        )
