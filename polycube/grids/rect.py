"""Rectangular lattice grid: unit cubes addressed by integer (x, y, z)."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from functools import partial
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..core.constants import Coordinate
from ..utils.logger import get_logger
from .base import Orientation


LOGGER = get_logger(__name__)


# Quarter turns about each axis.
RX90 = np.array([[1, 0, 0], [0, 0, -1], [0, 1, 0]], dtype=int)
RY90 = np.array([[0, 0, 1], [0, 1, 0], [-1, 0, 0]], dtype=int)
RZ90 = np.array([[0, -1, 0], [1, 0, 0], [0, 0, 1]], dtype=int)
MIRROR_X = np.diag([-1, 1, 1]).astype(int)


def generate_rotations() -> List[np.ndarray]:
    """Return the 24 proper rotations of the cube, identity first.

    Each of the six face directions is brought to +Z, then turned 0/90/180/270
    degrees about Z.
    """

    identity = np.eye(3, dtype=int)
    face_rotations = [
        identity,
        RX90,
        RX90 @ RX90,
        RX90 @ RX90 @ RX90,
        RY90,
        RY90 @ RY90 @ RY90,
    ]
    rotations: List[np.ndarray] = []
    for face_rot in face_rotations:
        for turns in range(4):
            rotations.append(face_rot @ np.linalg.matrix_power(RZ90, turns))
    return rotations


ROTATION_MATRICES: Tuple[np.ndarray, ...] = tuple(generate_rotations())
REFLECTION_MATRICES: Tuple[np.ndarray, ...] = tuple(r @ MIRROR_X for r in ROTATION_MATRICES)


def apply_matrix(matrix: np.ndarray, coordinates: Sequence[Coordinate]) -> Optional[List[Coordinate]]:
    """Multiply every coordinate by ``matrix``; ``None`` unless all are 3-D."""

    if not coordinates:
        return []
    if any(len(c) != 3 for c in coordinates):
        return None
    points = np.asarray(coordinates, dtype=int)
    return [tuple(row) for row in (points @ matrix.T).tolist()]


@dataclass
class RectGridConfig:
    """Configuration values for a rectangular lattice."""

    include_reflections: bool = False
    size: Optional[Tuple[int, int, int]] = None
    default_piece_bounds: Tuple[int, int, int] = (3, 3, 3)


class RectGrid:
    """Cubic lattice with the 24 rotations (or 48 with mirror images)."""

    type_name = "RectGrid"

    def __init__(self, config: Optional[RectGridConfig] = None) -> None:
        self.config = config or RectGridConfig()
        matrices = list(ROTATION_MATRICES)
        if self.config.include_reflections:
            matrices.extend(REFLECTION_MATRICES)
        self._orientations = [
            Orientation(id=f"{'rot' if i < len(ROTATION_MATRICES) else 'mirror'}-{i}",
                        func=partial(apply_matrix, matrix))
            for i, matrix in enumerate(matrices)
        ]
        LOGGER.debug("RectGrid ready with %d orientations", len(self._orientations))

    # ------------------------------------------------------------------
    # Grid protocol
    # ------------------------------------------------------------------
    def get_orientations(self) -> List[Orientation]:
        return list(self._orientations)

    def get_translation(
        self, from_coordinate: Coordinate, to_coordinate: Coordinate
    ) -> Optional[Tuple[int, ...]]:
        if len(from_coordinate) != len(to_coordinate):
            return None
        return tuple(b - a for a, b in zip(from_coordinate, to_coordinate))

    def translate(self, coordinate: Coordinate, translation: Tuple[int, ...]) -> Optional[Coordinate]:
        if len(coordinate) != len(translation):
            return None
        moved = tuple(c + t for c, t in zip(coordinate, translation))
        if not self.contains(moved):
            return None
        return moved

    def get_coordinates(self, size: Sequence[int]) -> List[Coordinate]:
        return [tuple(c) for c in itertools.product(*(range(n) for n in size))]

    def get_default_piece_bounds(self) -> Tuple[int, int, int]:
        return tuple(self.config.default_piece_bounds)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def contains(self, coordinate: Coordinate) -> bool:
        size = self.config.size
        if size is None:
            return True
        if len(coordinate) != len(size):
            return False
        return all(0 <= c < n for c, n in zip(coordinate, size))

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "type": self.type_name,
            "include_reflections": self.config.include_reflections,
            "size": list(self.config.size) if self.config.size is not None else None,
            "default_piece_bounds": list(self.config.default_piece_bounds),
        }

    @classmethod
    def from_jsonable(cls, data: Dict[str, Any]) -> "RectGrid":
        size = data.get("size")
        bounds = data.get("default_piece_bounds") or (3, 3, 3)
        return cls(
            RectGridConfig(
                include_reflections=bool(data.get("include_reflections", False)),
                size=tuple(size) if size is not None else None,
                default_piece_bounds=tuple(bounds),
            )
        )
