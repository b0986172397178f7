"""Text rendering for pieces on a rectangular lattice."""

from __future__ import annotations

import sys
from typing import List, Sequence

from ..core.constants import Coordinate
from ..core.models import Piece


FILLED = "#"
EMPTY = "."


def format_coordinates(coordinates: Sequence[Coordinate]) -> str:
    """Render 3-D cells as one block per z layer, x across and y down."""

    if not coordinates:
        return "(empty)"
    if any(len(c) != 3 for c in coordinates):
        return " ".join(str(tuple(c)) for c in coordinates)

    cells = set(tuple(c) for c in coordinates)
    mins = [min(c[axis] for c in cells) for axis in range(3)]
    maxs = [max(c[axis] for c in cells) for axis in range(3)]
    blocks: List[str] = []
    for z in range(mins[2], maxs[2] + 1):
        lines = [f"z={z}"]
        for y in range(mins[1], maxs[1] + 1):
            row = "".join(
                FILLED if (x, y, z) in cells else EMPTY
                for x in range(mins[0], maxs[0] + 1)
            )
            lines.append(f"  {row}")
        blocks.append("\n".join(lines))
    return "\n".join(blocks)


def format_piece(piece: Piece) -> str:
    header = f"{piece.label} [{piece.color}] {len(piece.coordinates)} cells"
    return header + "\n" + format_coordinates(piece.coordinates)


def pretty_print_piece(piece: Piece, *, stream=None) -> None:
    stream = stream or sys.stdout
    print(format_piece(piece), file=stream)
