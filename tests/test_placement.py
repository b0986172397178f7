import unittest
from typing import List, Optional, Sequence, Set

from polycube.core.models import Piece
from polycube.engine.placement import (
    enumerate_orientations,
    enumerate_placements,
    enumerate_translations,
    placement_key,
)
from polycube.grids.base import Orientation
from polycube.grids.rect import RectGrid, RectGridConfig


# Spans all three axes, so no two distinct rotations map it to the same list.
ASYMMETRIC_SHAPE = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (1, 1, 1)]


def placement_set(coordinate_lists) -> Set[frozenset]:
    return {frozenset(tuple(c) for c in coords) for coords in coordinate_lists}


class LineGrid:
    """One-dimensional grid with a deliberately inapplicable orientation.

    Only even offsets are reachable, and the line ends at ``length``.
    """

    def __init__(self, length: int) -> None:
        self.length = length

    def get_orientations(self) -> List[Orientation]:
        return [
            Orientation("identity", lambda coords: [tuple(c) for c in coords]),
            Orientation("never", lambda coords: None),
            Orientation("mirror", lambda coords: [(-c[0],) for c in coords]),
        ]

    def get_translation(self, from_coordinate, to_coordinate) -> Optional[tuple]:
        delta = to_coordinate[0] - from_coordinate[0]
        if delta % 2:
            return None
        return (delta,)

    def translate(self, coordinate, translation) -> Optional[tuple]:
        moved = coordinate[0] + translation[0]
        if not 0 <= moved < self.length:
            return None
        return (moved,)

    def get_coordinates(self, size: Sequence[int]) -> List[tuple]:
        return [(i,) for i in range(size[0])]

    def get_default_piece_bounds(self):
        return (self.length,)


class CountingGrid(RectGrid):
    """RectGrid that records how many orientations were applied."""

    def __init__(self) -> None:
        super().__init__()
        self.applied = 0

    def get_orientations(self) -> List[Orientation]:
        def counted(orientation: Orientation) -> Orientation:
            def func(coords):
                self.applied += 1
                return orientation.apply(coords)
            return Orientation(orientation.id, func)

        return [counted(o) for o in super().get_orientations()]


class OrientationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = RectGrid()
        self.piece = Piece("piece-0", self.grid.get_default_piece_bounds(), ASYMMETRIC_SHAPE)

    def test_one_record_per_orientation(self) -> None:
        variations = list(enumerate_orientations(self.grid, self.piece))
        self.assertEqual(len(variations), 24)
        shapes = {tuple(v.transformed_piece.coordinates) for v in variations}
        self.assertEqual(len(shapes), 24)
        for variation in variations:
            self.assertIsNone(variation.translation)
            self.assertIs(variation.original_piece, self.piece)

    def test_reflections_double_the_count(self) -> None:
        grid = RectGrid(RectGridConfig(include_reflections=True))
        variations = list(enumerate_orientations(grid, self.piece))
        self.assertEqual(len(variations), 48)
        self.assertEqual(len({tuple(v.coordinates) for v in variations}), 48)

    def test_first_orientation_is_identity(self) -> None:
        first = next(enumerate_orientations(self.grid, self.piece))
        self.assertEqual(first.transformed_piece.coordinates, ASYMMETRIC_SHAPE)
        self.assertNotEqual(first.transformed_piece, self.piece)
        self.assertIsNone(first.transformed_piece.id)
        self.assertEqual(first.transformed_piece.label, "piece-0")

    def test_order_is_deterministic(self) -> None:
        first = [v.coordinates for v in enumerate_orientations(self.grid, self.piece)]
        second = [v.coordinates for v in enumerate_orientations(RectGrid(), self.piece)]
        self.assertEqual(first, second)

    def test_inapplicable_orientation_is_skipped(self) -> None:
        grid = LineGrid(length=6)
        piece = Piece("bar", grid.get_default_piece_bounds(), [(0,), (2,)])
        variations = list(enumerate_orientations(grid, piece))
        self.assertEqual(
            [v.coordinates for v in variations],
            [[(0,), (2,)], [(0,), (-2,)]],
        )

    def test_rect_orientations_skip_flat_pieces(self) -> None:
        piece = Piece("flat", None, [(0, 0), (1, 0)])
        self.assertEqual(list(enumerate_orientations(self.grid, piece)), [])


class TranslationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = RectGrid()
        self.box = self.grid.get_coordinates([3, 2, 2])

    def test_piece_along_x(self) -> None:
        piece = Piece("piece-0", self.grid.get_default_piece_bounds(), [[0, 0, 0], [1, 0, 0]])
        placements = list(enumerate_translations(self.grid, piece, self.box))
        self.assertEqual(len(placements), 8)
        self.assertEqual(
            [p.translation for p in placements],
            [
                (0, 0, 0), (0, 0, 1), (0, 1, 0), (0, 1, 1),
                (1, 0, 0), (1, 0, 1), (1, 1, 0), (1, 1, 1),
            ],
        )
        self.assertEqual(
            [p.transformed_piece.coordinates for p in placements],
            [
                [(0, 0, 0), (1, 0, 0)],
                [(0, 0, 1), (1, 0, 1)],
                [(0, 1, 0), (1, 1, 0)],
                [(0, 1, 1), (1, 1, 1)],
                [(1, 0, 0), (2, 0, 0)],
                [(1, 0, 1), (2, 0, 1)],
                [(1, 1, 0), (2, 1, 0)],
                [(1, 1, 1), (2, 1, 1)],
            ],
        )

    def test_piece_along_z(self) -> None:
        piece = Piece("piece-0", self.grid.get_default_piece_bounds(), [[0, 0, 0], [0, 0, 1]])
        placements = list(enumerate_translations(self.grid, piece, self.box))
        self.assertEqual(
            [p.transformed_piece.coordinates for p in placements],
            [
                [(0, 0, 0), (0, 0, 1)],
                [(0, 1, 0), (0, 1, 1)],
                [(1, 0, 0), (1, 0, 1)],
                [(1, 1, 0), (1, 1, 1)],
                [(2, 0, 0), (2, 0, 1)],
                [(2, 1, 0), (2, 1, 1)],
            ],
        )

    def test_off_grid_cells_are_skipped(self) -> None:
        grid = RectGrid(RectGridConfig(size=(2, 1, 1)))
        piece = Piece("piece-0", None, [(0, 0, 0), (1, 0, 0)])
        region = [(0, 0, 0), (1, 0, 0), (2, 0, 0)]
        placements = list(enumerate_translations(grid, piece, region))
        self.assertEqual([p.coordinates for p in placements], [[(0, 0, 0), (1, 0, 0)]])

    def test_unreachable_anchor_is_skipped(self) -> None:
        grid = LineGrid(length=10)
        piece = Piece("bar", None, [(0,), (1,)])
        placements = list(enumerate_translations(grid, piece, grid.get_coordinates([5])))
        self.assertEqual([p.translation for p in placements], [(0,), (2,)])

    def test_region_outside_piece_reach_yields_nothing(self) -> None:
        piece = Piece("piece-0", None, [(0, 0, 0), (1, 0, 0), (2, 0, 0), (3, 0, 0)])
        self.assertEqual(list(enumerate_translations(self.grid, piece, self.box)), [])

    def test_empty_piece_yields_nothing(self) -> None:
        piece = Piece("empty", None, [])
        self.assertEqual(list(enumerate_translations(self.grid, piece, self.box)), [])

    def test_region_can_be_a_generator(self) -> None:
        piece = Piece("piece-0", None, [(0, 0, 0), (1, 0, 0)])
        region = (c for c in self.box)
        self.assertEqual(len(list(enumerate_translations(self.grid, piece, region))), 8)


class PlacementTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = RectGrid()
        self.box = self.grid.get_coordinates([3, 2, 2])

    def test_domino_fills_box_twenty_ways(self) -> None:
        piece = Piece("piece-0", self.grid.get_default_piece_bounds(), [[0, 0, 0], [0, 0, 1]])
        placements = list(enumerate_placements(self.grid, piece, self.box))
        self.assertEqual(len(placements), 20)
        expected = placement_set([
            [[0, 0, 0], [1, 0, 0]],
            [[0, 1, 0], [1, 1, 0]],
            [[0, 0, 1], [1, 0, 1]],
            [[0, 1, 1], [1, 1, 1]],
            [[1, 0, 0], [2, 0, 0]],
            [[1, 1, 0], [2, 1, 0]],
            [[1, 0, 1], [2, 0, 1]],
            [[1, 1, 1], [2, 1, 1]],

            [[0, 0, 0], [0, 0, 1]],
            [[0, 1, 0], [0, 1, 1]],
            [[1, 0, 0], [1, 0, 1]],
            [[1, 1, 0], [1, 1, 1]],
            [[2, 0, 0], [2, 0, 1]],
            [[2, 1, 0], [2, 1, 1]],

            [[0, 0, 0], [0, 1, 0]],
            [[1, 0, 0], [1, 1, 0]],
            [[2, 0, 0], [2, 1, 0]],
            [[0, 0, 1], [0, 1, 1]],
            [[1, 0, 1], [1, 1, 1]],
            [[2, 0, 1], [2, 1, 1]],
        ])
        self.assertEqual(placement_set(p.coordinates for p in placements), expected)
        for placement in placements:
            self.assertIs(placement.original_piece, piece)
            self.assertIsNotNone(placement.translation)

    def test_l_piece_in_its_own_cells_has_one_placement(self) -> None:
        shape = [[0, 0, 0], [0, 1, 0], [1, 1, 0]]
        piece = Piece("piece-0", self.grid.get_default_piece_bounds(), shape)
        placements = list(enumerate_placements(self.grid, piece, shape))
        self.assertEqual(
            [p.transformed_piece.coordinates for p in placements],
            [[(0, 0, 0), (0, 1, 0), (1, 1, 0)]],
        )

    def test_placements_are_distinct_and_same_size(self) -> None:
        piece = Piece("piece-0", None, [(0, 0, 0), (1, 0, 0), (1, 1, 0)])
        region = self.grid.get_coordinates([3, 3, 2])
        placements = list(enumerate_placements(self.grid, piece, region))
        keys = [placement_key(p.transformed_piece) for p in placements]
        self.assertEqual(len(keys), len(set(keys)))
        region_set = set(region)
        for placement in placements:
            self.assertEqual(len(placement.coordinates), 3)
            self.assertTrue(set(placement.coordinates) <= region_set)

    def test_placement_key_ignores_order(self) -> None:
        a = Piece(None, None, [(0, 0, 0), (1, 0, 0)])
        b = Piece(None, None, [(1, 0, 0), (0, 0, 0)])
        self.assertEqual(placement_key(a), placement_key(b))

    def test_placements_compare_by_value_and_collect_by_key(self) -> None:
        piece = Piece("piece-0", None, [(0, 0, 0), (1, 0, 0)])
        first = list(enumerate_placements(self.grid, piece, self.box))
        second = list(enumerate_placements(self.grid, piece, self.box))
        self.assertEqual(first, second)
        with self.assertRaises(TypeError):
            hash(first[0])
        keys = {placement_key(p.transformed_piece) for p in first + second}
        self.assertEqual(len(keys), len(first))

    def test_enumeration_is_lazy(self) -> None:
        grid = CountingGrid()
        piece = Piece("piece-0", None, [(0, 0, 0), (1, 0, 0)])
        placements = enumerate_placements(grid, piece, self.box)
        self.assertEqual(grid.applied, 0)
        next(placements)
        self.assertEqual(grid.applied, 1)

    def test_transformed_piece_is_an_independent_copy(self) -> None:
        piece = Piece("piece-0", None, [(0, 0, 0), (1, 0, 0)])
        placement = next(enumerate_placements(self.grid, piece, self.box))
        self.assertIsNot(placement.transformed_piece, piece)
        placement.transformed_piece.coordinates.append((5, 5, 5))
        self.assertEqual(piece.coordinates, [(0, 0, 0), (1, 0, 0)])
        self.assertEqual(piece.id, "piece-0")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
