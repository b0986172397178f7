"""Color assignment for new pieces."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..core.constants import PIECE_COLORS


def get_next_color(existing_colors: Iterable[str], palette: Sequence[str] = PIECE_COLORS) -> str:
    """Return the first palette color not already in use.

    Once every palette color is taken, colors are reused in palette order,
    starting with the least used one.
    """

    counts = {color: 0 for color in palette}
    for color in existing_colors:
        if not isinstance(color, str):
            continue
        key = color.lower()
        if key in counts:
            counts[key] += 1
    fewest = min(counts.values())
    for color in palette:
        if counts[color] == fewest:
            return color
