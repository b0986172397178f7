"""Placement engine for polycube-style assembly puzzles.

This package exposes the public API surface via:

- ``polycube.engine.puzzle.Puzzle``: owns pieces and problems, enumerates placements.
- ``polycube.engine.placement``: the orientation, translation and placement generators.
- ``polycube.grids.rect.RectGrid``: the rectangular lattice grid.
- ``polycube.io.puzzle_file.PuzzleFile``: JSON persistence.
"""

from .core.models import Piece, PiecePlacement, Problem
from .engine.placement import enumerate_orientations, enumerate_placements, enumerate_translations
from .engine.puzzle import Puzzle
from .grids.rect import RectGrid, RectGridConfig
from .io.puzzle_file import PuzzleFile

__all__ = [
    "Piece",
    "PiecePlacement",
    "Problem",
    "Puzzle",
    "PuzzleFile",
    "RectGrid",
    "RectGridConfig",
    "enumerate_orientations",
    "enumerate_placements",
    "enumerate_translations",
]

__version__ = "0.1.0"
