import unittest
from itertools import product

from gridview import grid2, grid3, UNBOUNDED
from gridview.grid import FixedSize, ValueRead, ValueWrite, RefRead, RefWrite
from utils import dims, encode, alloc_gen, box, all_coords

class TestWrapping(unittest.TestCase):

    def setUp(self) -> None:
        self.lens = {2: [(1, 1), (4, 3), (5, 1)], 3: [(1, 1, 1), (2, 3, 2)]}

    def test_idempotence(self):
        for ndims in dims:
            for ls in self.lens[ndims]:
                grid = alloc_gen(ls, encode)
                wrapped = grid.wrapping()
                self.assertEqual(wrapped.bounds, (UNBOUNDED,) * ndims)
                for c, k in product(all_coords(ls), [-3, -1, 0, 1, 2]):
                    for axis in range(ndims):
                        moved = tuple(v + k * ls[i] if i == axis else v for i, v in enumerate(c))
                        self.assertEqual(wrapped.get(moved), grid.get(c))
                    everywhere = tuple(v + k * n for v, n in zip(c, ls))
                    self.assertEqual(wrapped.wrap_coord(everywhere), c)

    def test_shifted(self):
        # wrapping respects a lower bound other than zero
        grid = grid2.alloc_gen(3, 2, encode).new_origin((-5, 4))
        wrapped = grid.wrapping()
        for c in box((-20, -20), (20, 20)):
            folded = wrapped.wrap_coord(c)
            self.assertTrue(grid.in_bounds(folded))
            self.assertEqual((folded[0] - c[0]) % 3, 0)
            self.assertEqual((folded[1] - c[1]) % 2, 0)
        self.assertEqual(wrapped.get((-6, 4)), encode((2, 0)))
        self.assertEqual(wrapped.get((-2, 7)), encode((0, 1)))

    def test_write(self):
        grid = grid2.alloc(3, 3, 0)
        wrapped = grid.wrapping()
        wrapped.set((-1, -1), 1)
        wrapped[3, 4] = 2
        wrapped.mutable_index((4, -4)).value = 3
        self.assertEqual(grid.get((2, 2)), 1)
        self.assertEqual(grid.get((0, 1)), 2)
        self.assertEqual(grid.get((1, 2)), 3)
        self.assertEqual(wrapped.get((-1, -1)), wrapped.get((2, 2)))
        self.assertEqual(wrapped.index((-2, 5)), 3)
        self.assertTrue(wrapped.try_set((10**6, -10**6), 4))

    def test_capabilities(self):
        wrapped = grid3.array3x3x3(0).wrapping()
        self.assertTrue(all(isinstance(wrapped, cap) for cap in [ValueRead, ValueWrite, RefRead, RefWrite]))
        self.assertFalse(isinstance(wrapped, FixedSize))
        by_value = grid2.alloc(2, 2, 1).map(lambda v: -v).wrapping()
        self.assertTrue(isinstance(by_value, ValueRead))
        self.assertFalse(hasattr(by_value, "set"))
        self.assertEqual(by_value.get((7, 7)), -1)

    def test_rejected(self):
        self.assertRaises(TypeError, grid2.value_fn(encode).wrapping)
        self.assertRaises(TypeError, grid2.alloc(2, 2, 0).wrapping().wrapping)
        self.assertRaises(TypeError, grid2.alloc(2, 2, 0).oob_handler(lambda c: 0).wrapping)
        self.assertRaises(ValueError, grid2.alloc(0, 2, 0).wrapping)

if __name__ == '__main__':
    unittest.main()
