import unittest

from gridview import grid2, grid3, UNBOUNDED
from gridview.grid import FixedSize, ValueRead, ValueWrite, RefRead
from utils import encode, box

class TestOobHandler(unittest.TestCase):

    def test_fallback(self):
        grid = grid2.alloc_gen(3, 2, encode).oob_handler(lambda c: -1)
        self.assertEqual(grid.bounds, (UNBOUNDED, UNBOUNDED))
        for c in box((-3, -3), (6, 5)):
            expected = encode(c) if 0 <= c[0] < 3 and 0 <= c[1] < 2 else -1
            self.assertEqual(grid.get(c), expected)

    def test_coord(self):
        seen = []
        grid = grid3.alloc(1, 1, 1, 0).oob_handler(lambda c: seen.append(c) or c.z)
        self.assertEqual(grid.get((0, 0, 5)), 5)
        self.assertEqual(grid.get((0, 0, 0)), 0)
        self.assertEqual(seen, [(0, 0, 5)])

    def test_capabilities(self):
        grid = grid2.alloc(2, 2, 0).oob_handler(lambda c: 0)
        self.assertTrue(isinstance(grid, ValueRead))
        self.assertFalse(isinstance(grid, (ValueWrite, RefRead, FixedSize)))
        self.assertFalse(hasattr(grid, "set"))

    def test_slice(self):
        # an unbounded view can be sliced anywhere
        grid = grid2.alloc_gen(2, 2, encode).oob_handler(lambda c: None).subview(range(-1, 3), range(-1, 3))
        self.assertIsNone(grid.get((-1, 2)))
        self.assertEqual(grid.get((1, 1)), encode((1, 1)))

if __name__ == '__main__':
    unittest.main()
