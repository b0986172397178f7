"""Data models for pieces, placements and problems."""

from __future__ import annotations

import copy
import operator
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .constants import DEFAULT_PIECE_COLOR, UNLABELED_PIECE, Bounds, Coordinate, Translation


def as_coordinate(values: Iterable[int]) -> Coordinate:
    """Normalise an integer sequence into a hashable coordinate tuple.

    Non-integral components raise ``TypeError`` rather than being truncated.
    """

    return tuple(operator.index(v) for v in values)


def as_coordinates(values: Iterable[Iterable[int]]) -> List[Coordinate]:
    return [as_coordinate(v) for v in values]


@dataclass
class Piece:
    """An ordered list of grid cells plus display metadata.

    The first coordinate is the anchor used when computing translations, so
    the order of ``coordinates`` is significant.
    """

    id: Optional[str]
    bounds: Bounds
    coordinates: List[Coordinate] = field(default_factory=list)
    label: Optional[str] = None
    color: str = DEFAULT_PIECE_COLOR

    def __post_init__(self) -> None:
        self.coordinates = as_coordinates(self.coordinates)
        if self.label is None:
            self.label = self.id or UNLABELED_PIECE

    def copy(self) -> "Piece":
        """Return a deep copy that has no ID."""

        copied = copy.deepcopy(self)
        copied.id = None
        return copied


@dataclass
class PiecePlacement:
    """A piece transformed by an orientation and/or a translation.

    Compared by value and not hashable; use ``placement_key`` to collect
    placements in a set.
    """

    original_piece: Piece
    transformed_piece: Piece
    translation: Optional[Translation] = None

    @property
    def coordinates(self) -> List[Coordinate]:
        return self.transformed_piece.coordinates


@dataclass
class Problem:
    """A named sub-puzzle: which pieces are used, and how many of each."""

    id: str
    label: Optional[str] = None
    used_pieces: Dict[str, int] = field(default_factory=dict)
    goal_piece_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.label is None:
            self.label = self.id

    def piece_count(self) -> int:
        return sum(self.used_pieces.values())

    def forget_piece(self, piece_id: str) -> None:
        self.used_pieces.pop(piece_id, None)
        if self.goal_piece_id == piece_id:
            self.goal_piece_id = None
