"""Grid capability interface consumed by the placement engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Sequence

from ..core.constants import Bounds, Coordinate, Translation


OrientationFunc = Callable[[Sequence[Coordinate]], Optional[List[Coordinate]]]


@dataclass(frozen=True)
class Orientation:
    """One symmetry transform of a grid.

    ``func`` returns ``None`` when the transform does not apply to the given
    coordinates.
    """

    id: str
    func: OrientationFunc

    def apply(self, coordinates: Sequence[Coordinate]) -> Optional[List[Coordinate]]:
        return self.func(coordinates)


class Grid(Protocol):
    """Protocol implemented by every grid topology."""

    def get_orientations(self) -> List[Orientation]:
        """Return every orientation, always in the same order."""

    def get_translation(
        self, from_coordinate: Coordinate, to_coordinate: Coordinate
    ) -> Optional[Translation]:
        """Return the translation taking one cell to another, if any."""

    def translate(self, coordinate: Coordinate, translation: Translation) -> Optional[Coordinate]:
        """Apply a translation to one cell; ``None`` means off grid."""

    def get_coordinates(self, size: Sequence[int]) -> List[Coordinate]:
        """Return every coordinate of a region of the given size."""

    def get_default_piece_bounds(self) -> Bounds:
        """Return the bounds given to newly created pieces."""
