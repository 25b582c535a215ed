import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'src'))
from frbasis import InvalidModeError
from frbasis.indexing import n_modes, mode_to_indices, mode_indices


class TestModeIndexing(unittest.TestCase):
    def test_dimensions(self):
        for order in range(8):
            self.assertEqual(len(mode_indices(order, "tri")), (order + 1) * (order + 2) // 2)
            self.assertEqual(len(mode_indices(order, "quad")), (order + 1) ** 2)
            self.assertEqual(n_modes(order, "tri"), (order + 1) * (order + 2) // 2)
            self.assertEqual(n_modes(order, "quad"), (order + 1) ** 2)

    def test_pairs_are_unique_and_in_range(self):
        for order in range(6):
            tri = mode_indices(order, "tri")
            quad = mode_indices(order, "quad")
            self.assertEqual(len(set(tri)), len(tri))
            self.assertEqual(len(set(quad)), len(quad))
            self.assertTrue(all(i + j <= order for i, j in tri))
            self.assertTrue(all(i <= order and j <= order for i, j in quad))

    def test_diagonal_ordering(self):
        self.assertEqual(
            mode_indices(2, "quad"),
            [(0, 0), (1, 0), (0, 1), (2, 0), (1, 1), (0, 2), (2, 1), (1, 2), (2, 2)],
        )
        self.assertEqual(
            mode_indices(2, "tri"),
            [(0, 0), (1, 0), (0, 1), (2, 0), (1, 1), (0, 2)],
        )
        self.assertEqual(mode_indices(1, "quad"), [(0, 0), (1, 0), (0, 1), (1, 1)])

    def test_total_degree_non_decreasing(self):
        for shape in ("tri", "quad"):
            degrees = [i + j for i, j in mode_indices(5, shape)]
            self.assertEqual(degrees, sorted(degrees))

    def test_lookup_agrees_with_enumeration(self):
        for shape in ("tri", "quad"):
            for order in range(5):
                pairs = mode_indices(order, shape)
                for mode, ij in enumerate(pairs):
                    self.assertEqual(mode_to_indices(mode, order, shape), ij)

    def test_triangle_is_prefix_of_square_sweep(self):
        order = 4
        quad = [ij for ij in mode_indices(order, "quad") if sum(ij) <= order]
        self.assertEqual(quad, mode_indices(order, "tri"))

    def test_invalid_mode(self):
        with self.assertRaises(InvalidModeError):
            mode_to_indices(6, 2, "tri")
        with self.assertRaises(InvalidModeError):
            mode_to_indices(9, 2, "quad")
        with self.assertRaises(InvalidModeError):
            mode_to_indices(-1, 2, "quad")

    def test_unknown_shape(self):
        with self.assertRaises(ValueError):
            n_modes(2, "hex")


if __name__ == '__main__':
    unittest.main()
