import unittest
import threading

from gridview import grid2, AccessOptions, CopyMode, get_options, set_options

class TestOptions(unittest.TestCase):

    def setUp(self) -> None:
        self.previous = get_options()

    def tearDown(self) -> None:
        set_options(self.previous)

    def test_context(self):
        self.assertIs(get_options().copy, CopyMode.DEEP)
        with AccessOptions(copy=CopyMode.SHALLOW) as opts1:
            with AccessOptions(copy=CopyMode.NONE) as opts2:
                self.assertEqual(opts2, get_options())
            self.assertEqual(opts1, get_options())

        opts = AccessOptions(copy=CopyMode.NONE)
        set_options(opts)
        self.assertEqual(opts, get_options())

    def test_copy_modes(self):
        grid = grid2.alloc(2, 2, [[0]])
        stored = grid.index((0, 0))

        deep = grid.get((0, 0))
        self.assertEqual(deep, stored)
        self.assertIsNot(deep, stored)
        self.assertIsNot(deep[0], stored[0])

        with AccessOptions(copy=CopyMode.SHALLOW):
            shallow = grid.get((0, 0))
        self.assertIsNot(shallow, stored)
        self.assertIs(shallow[0], stored[0])

        with AccessOptions(copy=CopyMode.NONE):
            self.assertIs(grid.get((0, 0)), stored)
            self.assertIs(grid.new_origin((1, 1)).get((1, 1)), stored)

    def test_thread(self):
        seen = []
        with AccessOptions(copy=CopyMode.NONE):
            thread = threading.Thread(target=lambda: seen.append(get_options().copy))
            thread.start()
            thread.join()
        self.assertEqual(seen, [CopyMode.DEEP])

if __name__ == '__main__':
    unittest.main()
