import unittest
from itertools import product
import numpy as np

from gridview import grid2, grid3, DenseGrid, OutOfBoundsError
from gridview.grid import FixedSize, RefRead, RefWrite
from utils import backends, dims, lens, encode, alloc_gen, all_coords

class TestDenseGrid(unittest.TestCase):

    def test_construction(self):
        grid = grid2.alloc(4, 3, 0)
        self.assertEqual(grid.lens(), (4, 3))
        self.assertEqual((grid.x_len(), grid.y_len()), (4, 3))
        self.assertEqual(grid.ndims, 2)
        self.assertTrue(isinstance(grid, FixedSize) and isinstance(grid, RefRead) and isinstance(grid, RefWrite))
        grid = grid3.alloc(2, 3, 4, 0.0, dtype=np.float64)
        self.assertEqual(grid.lens(), (2, 3, 4))
        self.assertEqual(grid.z_len(), 4)
        self.assertEqual(grid.dtype, np.float64)

        self.assertRaises(ValueError, grid2.alloc, -1, 3, 0)
        self.assertRaises(ValueError, grid2.alloc, 3, -1, 0, np.int64)
        self.assertRaises(ValueError, grid3.alloc_gen, 1, 1, -2, encode)
        self.assertRaises(ValueError, DenseGrid, (), encode)

    def test_generator(self):
        for ndims in dims:
            for ls in lens[ndims]:
                calls = []
                grid = alloc_gen(ls, lambda c: calls.append(c) or encode(c))
                self.assertEqual(calls, all_coords(ls))
                for c in all_coords(ls):
                    self.assertEqual(grid.get(c), encode(c))

    def test_broadcast_copies(self):
        grid = grid2.alloc(2, 2, [0])
        grid.index((0, 0)).append(1)
        self.assertEqual(grid.get((0, 0)), [0, 1])
        self.assertEqual(grid.get((1, 0)), [0])
        self.assertEqual(grid.get((1, 1)), [0])

    def test_round_trip(self):
        for ndims in dims:
            for ls in lens[ndims]:
                grid = alloc_gen(ls, lambda _: None)
                for c in all_coords(ls):
                    grid.set(c, encode(c))
                for c in all_coords(ls):
                    self.assertEqual(grid[c], encode(c))
                    self.assertEqual(grid.index(c), encode(c))
                for c in all_coords(ls):
                    grid[c] = -encode(c)
                    self.assertEqual(grid.get(c), -encode(c))
                    grid.mutable_index(c).value = encode(c)
                    self.assertEqual(grid.get(c), encode(c))

    def test_out_of_bounds(self):
        for ndims in dims:
            for ls in lens[ndims]:
                grid = alloc_gen(ls, encode)
                before = grid.collect()
                outside = [tuple(-1 if i == axis else 0 for i in range(ndims)) for axis in range(ndims)]\
                        + [tuple(ls[i] if i == axis else 0 for i in range(ndims)) for axis in range(ndims)]
                for c in outside:
                    self.assertFalse(grid.in_bounds(c))
                    self.assertRaises(OutOfBoundsError, grid.get, c)
                    self.assertRaises(IndexError, grid.index, c)
                    self.assertRaises(OutOfBoundsError, grid.set, c, 1)
                    self.assertRaises(OutOfBoundsError, grid.mutable_index, c)
                    self.assertIsNone(grid.try_get(c))
                    self.assertEqual(grid.try_get(c, -1), -1)
                    self.assertIsNone(grid.try_index(c))
                    self.assertIsNone(grid.try_mutable_index(c))
                    self.assertFalse(grid.try_set(c, 1))
                self.assertEqual(grid, before)

    def test_error_message(self):
        grid = grid2.alloc(4, 3, 0)
        with self.assertRaises(OutOfBoundsError) as ctx:
            grid.get((4, 0))
        self.assertEqual(ctx.exception.coord, (4, 0))
        self.assertEqual(ctx.exception.bounds, grid.bounds)
        self.assertIn("(4, 0)", str(ctx.exception))

    def test_array(self):
        for xp, ndims in product(backends, dims):
            for ls in lens[ndims]:
                grid = alloc_gen(ls, encode)
                array = grid.to_array()
                self.assertEqual(array.shape, tuple(reversed(ls)))
                for c in all_coords(ls):
                    self.assertEqual(array[tuple(reversed(c))], encode(c))

                data = xp.reshape(xp.arange(int(np.prod(ls))), tuple(reversed(ls)))
                grid = DenseGrid.from_array(data)
                self.assertEqual(grid.lens(), tuple(ls))
                for i, c in enumerate(all_coords(ls)):
                    self.assertEqual(int(grid.get(c)), i)
                back = grid.to_array(xp)
                self.assertTrue(bool(xp.all(back == data)))

        self.assertRaises(TypeError, grid2.alloc(2, 2, "a").to_array, np)

    def test_collect(self):
        grid = grid2.alloc_gen(3, 2, encode)
        collected = grid.map(lambda v: 2 * v).collect()
        self.assertIsInstance(collected, DenseGrid)
        for c in all_coords((3, 2)):
            self.assertEqual(collected.get(c), 2 * encode(c))
        self.assertRaises(TypeError, grid.new_origin((1, 1)).collect)
        self.assertRaises(TypeError, grid2.value_fn(encode).collect)
        self.assertRaises(TypeError, grid2.mut_fn(lambda c: None).collect)

    def test_eq(self):
        self.assertEqual(grid2.alloc_gen(3, 2, encode), grid2.alloc_gen(3, 2, encode))
        self.assertNotEqual(grid2.alloc_gen(3, 2, encode), grid2.alloc_gen(2, 3, encode))
        self.assertNotEqual(grid2.alloc(3, 2, 0), grid2.alloc(3, 2, 1))
        self.assertEqual(grid2.alloc(2, 1, np.zeros(3)), grid2.alloc(2, 1, np.zeros(3)))
        self.assertNotEqual(grid2.alloc(2, 1, np.zeros(3)), grid2.alloc(2, 1, np.ones(3)))
        self.assertNotEqual(grid2.alloc(2, 1, np.zeros(3)), grid2.alloc(2, 1, np.zeros(2)))

if __name__ == '__main__':
    unittest.main()
