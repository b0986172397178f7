"""Puzzle container: owns pieces and problems, exposes piece placement."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Union

from ..core.constants import PIECE_ID_PREFIX, PROBLEM_ID_PREFIX, Collection
from ..core.exceptions import DuplicateIdError, MissingIdError, NotFoundError
from ..core.models import Piece, PiecePlacement, Problem
from ..grids.base import Grid
from ..utils.colors import get_next_color
from ..utils.logger import get_logger
from .placement import enumerate_orientations, enumerate_placements, enumerate_translations


LOGGER = get_logger(__name__)

PieceOrId = Union[Piece, str]
ProblemOrId = Union[Problem, str]


class Puzzle:
    """A grid plus the pieces and problems defined on it.

    Both collections keep insertion order. The container does no locking;
    callers sharing a puzzle between threads must serialise add/remove
    against reads.
    """

    def __init__(self, id: str, grid: Grid) -> None:
        self.id = id
        self.grid = grid
        self.pieces: Dict[str, Piece] = {}
        self.problems: Dict[str, Problem] = {}

    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------
    def generate_id(self, prefix: str, collection: Union[Collection, str]) -> str:
        """Return the first ``prefix-N`` not used in the given collection."""

        # TODO: keep a per-prefix counter once puzzles hold hundreds of pieces.
        existing = getattr(self, Collection(collection).value)
        index = 0
        while f"{prefix}-{index}" in existing:
            index += 1
        return f"{prefix}-{index}"

    def get_new_piece_color(self) -> str:
        return get_next_color(piece.color for piece in self.pieces.values())

    # ------------------------------------------------------------------
    # Pieces
    # ------------------------------------------------------------------
    def add_piece(self, piece: Piece) -> Piece:
        if piece.id is None:
            raise MissingIdError("Cannot add piece without ID")
        if piece.id in self.pieces:
            raise DuplicateIdError(f"Duplicate piece ID: {piece.id}")
        self.pieces[piece.id] = piece
        LOGGER.debug("Added piece %s", piece.id)
        return piece

    def new_piece(self, coordinates: Iterable[Iterable[int]] = ()) -> Piece:
        """Create a piece with a fresh ID and color, and add it."""

        piece = Piece(
            id=self.generate_id(PIECE_ID_PREFIX, Collection.PIECES),
            bounds=self.grid.get_default_piece_bounds(),
            coordinates=list(coordinates),
            color=self.get_new_piece_color(),
        )
        return self.add_piece(piece)

    def has_piece(self, piece_or_id: PieceOrId) -> bool:
        piece_id = piece_or_id if isinstance(piece_or_id, str) else piece_or_id.id
        if piece_id is None:
            return False
        return piece_id in self.pieces

    def remove_piece(self, piece_or_id: PieceOrId, raise_errors: bool = True) -> None:
        """Remove a piece; with ``raise_errors=False`` a missing piece is ignored."""

        piece_id = piece_or_id if isinstance(piece_or_id, str) else piece_or_id.id
        if piece_id is None:
            if raise_errors:
                raise MissingIdError("Cannot remove piece without ID")
            return
        if piece_id not in self.pieces:
            if raise_errors:
                raise NotFoundError(f"Piece ID not found: {piece_id}")
            return
        del self.pieces[piece_id]
        for problem in self.problems.values():
            problem.forget_piece(piece_id)
        LOGGER.debug("Removed piece %s", piece_id)

    def get_piece(self, piece_or_id: PieceOrId) -> Piece:
        """Resolve an ID to the stored piece; piece values pass through."""

        if isinstance(piece_or_id, str):
            piece = self.pieces.get(piece_or_id)
            if piece is None:
                raise NotFoundError(f"Piece ID not found: {piece_or_id}")
            return piece
        return piece_or_id

    # ------------------------------------------------------------------
    # Problems
    # ------------------------------------------------------------------
    def add_problem(self, problem: Problem) -> Problem:
        if problem.id is None:
            raise MissingIdError("Cannot add problem without ID")
        if problem.id in self.problems:
            raise DuplicateIdError(f"Duplicate problem ID: {problem.id}")
        self.problems[problem.id] = problem
        LOGGER.debug("Added problem %s", problem.id)
        return problem

    def new_problem(self, used_pieces: Optional[Dict[str, int]] = None) -> Problem:
        problem = Problem(
            id=self.generate_id(PROBLEM_ID_PREFIX, Collection.PROBLEMS),
            used_pieces=dict(used_pieces or {}),
        )
        return self.add_problem(problem)

    def has_problem(self, problem_or_id: ProblemOrId) -> bool:
        problem_id = problem_or_id if isinstance(problem_or_id, str) else problem_or_id.id
        if problem_id is None:
            return False
        return problem_id in self.problems

    def remove_problem(self, problem_or_id: ProblemOrId, raise_errors: bool = True) -> None:
        problem_id = problem_or_id if isinstance(problem_or_id, str) else problem_or_id.id
        if problem_id is None:
            if raise_errors:
                raise MissingIdError("Cannot remove problem without ID")
            return
        if problem_id not in self.problems:
            if raise_errors:
                raise NotFoundError(f"Problem ID not found: {problem_id}")
            return
        del self.problems[problem_id]
        LOGGER.debug("Removed problem %s", problem_id)

    def get_problem(self, problem_or_id: ProblemOrId) -> Problem:
        if isinstance(problem_or_id, str):
            problem = self.problems.get(problem_or_id)
            if problem is None:
                raise NotFoundError(f"Problem ID not found: {problem_or_id}")
            return problem
        return problem_or_id

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    # The piece is resolved before the generator is created, so an unknown
    # ID raises here rather than on the first next().
    def get_piece_variations(self, piece_or_id: PieceOrId) -> Iterator[PiecePlacement]:
        return enumerate_orientations(self.grid, self.get_piece(piece_or_id))

    def get_piece_translations(
        self,
        piece_or_id: PieceOrId,
        available_coordinates: Iterable[Iterable[int]],
    ) -> Iterator[PiecePlacement]:
        return enumerate_translations(self.grid, self.get_piece(piece_or_id), available_coordinates)

    def get_piece_placements(
        self,
        piece_or_id: PieceOrId,
        available_coordinates: Iterable[Iterable[int]],
    ) -> Iterator[PiecePlacement]:
        return enumerate_placements(self.grid, self.get_piece(piece_or_id), available_coordinates)
