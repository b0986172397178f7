"""Lookup table from stored grid type names to grid classes."""

from __future__ import annotations

from typing import Any, Dict

from ..core.exceptions import PuzzleFileError
from .base import Grid
from .rect import RectGrid


GRID_TYPES: Dict[str, Any] = {}


def register_grid(grid_class: Any) -> Any:
    """Make ``grid_class`` loadable from stored documents.

    The class needs a ``type_name`` attribute plus ``to_jsonable`` and a
    ``from_jsonable`` classmethod.
    """

    GRID_TYPES[grid_class.type_name] = grid_class
    return grid_class


register_grid(RectGrid)


def grid_to_jsonable(grid: Grid) -> Dict[str, Any]:
    to_jsonable = getattr(grid, "to_jsonable", None)
    if to_jsonable is None or getattr(grid, "type_name", None) not in GRID_TYPES:
        raise PuzzleFileError(f"Grid type is not registered: {type(grid).__name__}")
    return to_jsonable()


def grid_from_jsonable(data: Dict[str, Any]) -> Grid:
    if not isinstance(data, dict):
        raise PuzzleFileError("Grid entry must be an object")
    type_name = data.get("type")
    grid_class = GRID_TYPES.get(type_name)
    if grid_class is None:
        known = ", ".join(sorted(GRID_TYPES))
        raise PuzzleFileError(f"Unknown grid type: {type_name} (known: {known})")
    return grid_class.from_jsonable(data)
