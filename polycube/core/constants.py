"""Shared constants and type aliases for the placement engine."""

from __future__ import annotations

from enum import Enum
from typing import Any, Tuple


Coordinate = Tuple[int, ...]
# Grid-defined values the engine carries around without interpreting.
Bounds = Any
Translation = Any


DEFAULT_PIECE_COLOR = "#00ff00"
UNLABELED_PIECE = "unlabeled-piece"

PIECE_ID_PREFIX = "piece"
PROBLEM_ID_PREFIX = "problem"


class Collection(str, Enum):
    """Keyed collections held by a puzzle."""

    PIECES = "pieces"
    PROBLEMS = "problems"


# Colors handed out to new pieces, in order.
PIECE_COLORS: Tuple[str, ...] = (
    "#0000ff",
    "#ff0000",
    "#00ff00",
    "#ffff00",
    "#ff00ff",
    "#00ffff",
    "#ff8000",
    "#8000ff",
    "#0080ff",
    "#ff0080",
    "#80ff00",
    "#00ff80",
    "#800000",
    "#008000",
    "#000080",
    "#808000",
)
