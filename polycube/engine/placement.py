"""Placement enumeration: orientations, translations and their deduplicated product.

All three enumerators are generators. Nothing is computed until the caller
pulls the next record, so a solver that only needs to know whether a piece
fits anywhere can stop after the first one.

Geometric dead ends (an orientation that does not apply, an anchor the grid
cannot reach, a cell that leaves the grid or the region) are skipped silently
and never raised.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator, List, Set

from ..core.constants import Coordinate
from ..core.models import Piece, PiecePlacement, as_coordinate
from ..grids.base import Grid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


PlacementKey = FrozenSet[Coordinate]


def placement_key(piece: Piece) -> PlacementKey:
    """Order-independent identity of the cells a piece occupies."""

    return frozenset(piece.coordinates)


def enumerate_orientations(grid: Grid, piece: Piece) -> Iterator[PiecePlacement]:
    """Yield one placement per grid orientation that applies to ``piece``."""

    yielded = 0
    for orientation in grid.get_orientations():
        new_coordinates = orientation.apply(piece.coordinates)
        if new_coordinates is None:
            continue
        transformed = piece.copy()
        transformed.coordinates = [as_coordinate(c) for c in new_coordinates]
        yielded += 1
        yield PiecePlacement(piece, transformed)
    LOGGER.debug("Piece %s: %d orientations", piece.label, yielded)


def enumerate_translations(
    grid: Grid,
    piece: Piece,
    available_coordinates: Iterable[Iterable[int]],
) -> Iterator[PiecePlacement]:
    """Yield every translation of ``piece`` that lies inside the available cells.

    Each available coordinate is tried, in the given order, as the target of
    the piece's first coordinate.
    """

    targets: List[Coordinate] = [as_coordinate(c) for c in available_coordinates]
    available: Set[Coordinate] = set(targets)
    if not piece.coordinates:
        return

    anchor = piece.coordinates[0]
    yielded = 0
    for target in targets:
        translation = grid.get_translation(anchor, target)
        if translation is None:
            continue

        new_coordinates: List[Coordinate] = []
        for old_coordinate in piece.coordinates:
            new_coordinate = grid.translate(old_coordinate, translation)
            if new_coordinate is None:
                break
            new_coordinate = as_coordinate(new_coordinate)
            if new_coordinate not in available:
                break
            new_coordinates.append(new_coordinate)
        if len(new_coordinates) != len(piece.coordinates):
            continue

        transformed = piece.copy()
        transformed.coordinates = new_coordinates
        yielded += 1
        yield PiecePlacement(piece, transformed, translation)
    LOGGER.debug(
        "Piece %s: %d translations over %d cells", piece.label, yielded, len(targets)
    )


def enumerate_placements(
    grid: Grid,
    piece: Piece,
    available_coordinates: Iterable[Iterable[int]],
) -> Iterator[PiecePlacement]:
    """Yield every distinct way ``piece`` can occupy the available cells.

    Orientations are tried in grid order and translations in region order.
    A placement covering the same cells as an earlier one is dropped, which
    is what collapses the symmetric orientations of a symmetric piece.
    """

    region: List[Coordinate] = [as_coordinate(c) for c in available_coordinates]
    seen: Set[PlacementKey] = set()
    candidates = 0
    for variation in enumerate_orientations(grid, piece):
        for moved in enumerate_translations(grid, variation.transformed_piece, region):
            candidates += 1
            key = placement_key(moved.transformed_piece)
            if key in seen:
                continue
            seen.add(key)
            yield PiecePlacement(piece, moved.transformed_piece, moved.translation)
    LOGGER.debug(
        "Piece %s: %d distinct placements from %d candidates",
        piece.label,
        len(seen),
        candidates,
    )
