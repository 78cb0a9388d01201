import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from treemaze.core.frontier import Frontier, typecode_for_width
from array import array

class TestFrontier(unittest.TestCase):
    def test_entry_width_follows_grid_size(self):
        self.assertEqual(Frontier(10, 10).byte_width, 1)
        self.assertEqual(Frontier(15, 17).byte_width, 2)
        self.assertEqual(Frontier(300, 300).byte_width, 4)

        for width in (1, 2, 4, 8):
            self.assertEqual(array(typecode_for_width(width)).itemsize, width)

    def test_entries_are_packed(self):
        frontier = Frontier(15, 17)
        frontier.append(254)
        frontier.append(3)
        self.assertEqual(frontier.entries.itemsize, 2)
        self.assertEqual(frontier.nbytes(), 4)
        self.assertEqual(list(frontier), [254, 3])

    def test_remove_preserves_order(self):
        frontier = Frontier(4, 4)
        for cell in (5, 9, 2, 14, 7):
            frontier.append(cell)

        frontier.remove_at(1)
        self.assertEqual(list(frontier), [5, 2, 14, 7])
        frontier.remove_at(3)
        self.assertEqual(list(frontier), [5, 2, 14])
        frontier.remove_at(0)
        self.assertEqual(list(frontier), [2, 14])
        self.assertEqual(len(frontier), 2)
        self.assertEqual(frontier[1], 14)

    def test_capacity(self):
        frontier = Frontier(2, 2)
        for cell in range(4):
            frontier.append(cell)
        with self.assertRaises(OverflowError):
            frontier.append(0)

        frontier.clear()
        self.assertEqual(len(frontier), 0)

if __name__ == '__main__':
    unittest.main()
