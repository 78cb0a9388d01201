import unittest
import sys
import os

# Add project root to path so we can import treemaze
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from treemaze.core.grid import Grid

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        w, h = 10, 7
        grid = Grid(w, h)
        self.assertEqual(len(grid.cells), w * h, f"Grid initialization size mismatch. Expected {w*h}, got {len(grid.cells)}")
        # No passages anywhere
        for val in grid.cells:
            self.assertEqual(val, 0)

    def test_direction_constants(self):
        self.assertEqual((Grid.WEST, Grid.EAST, Grid.NORTH, Grid.SOUTH), (1, 2, 4, 8))
        for d, opposite in Grid.OPPOSITE.items():
            self.assertEqual(Grid.OPPOSITE[opposite], d)
            self.assertEqual(Grid.DX[d], -Grid.DX[opposite])
            self.assertEqual(Grid.DY[d], -Grid.DY[opposite])

    def test_coordinates(self):
        grid = Grid(5, 4)
        idx = grid.get_index(2, 3)
        self.assertEqual(idx, 11) # 2 * 4 + 3
        self.assertEqual(grid.get_coords(idx), (2, 3))

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 4)
        with self.assertRaises(IndexError):
            grid.get_index(5, 0)

    def test_carve_path(self):
        grid = Grid(2, 2)
        # 0,0  1,0
        # 0,1  1,1

        # Carve from (0,0) EAST to (1,0)
        grid.carve_path(0, 0, Grid.EAST)

        self.assertEqual(grid.cells[grid.get_index(0, 0)], Grid.EAST)
        self.assertEqual(grid.cells[grid.get_index(1, 0)], Grid.WEST)
        self.assertTrue(grid.has_passage(0, 0, Grid.EAST))
        self.assertFalse(grid.has_passage(0, 0, Grid.SOUTH))

        grid.carve_path(1, 0, Grid.SOUTH)
        self.assertEqual(grid.cells[grid.get_index(1, 0)], Grid.WEST | Grid.SOUTH)
        self.assertEqual(grid.cells[grid.get_index(1, 1)], Grid.NORTH)

    def test_carve_into_void_is_ignored(self):
        grid = Grid(2, 2)
        grid.carve_path(0, 0, Grid.NORTH)
        grid.carve_path(0, 0, Grid.WEST)
        self.assertEqual(grid.tobytes(), bytes(4))

    def test_visited(self):
        grid = Grid(3, 3)
        self.assertFalse(grid.is_visited(1, 1))
        grid.carve_path(1, 1, Grid.NORTH)
        self.assertTrue(grid.is_visited(1, 1))
        self.assertTrue(grid.is_visited(1, 0))
        grid.clear()
        self.assertFalse(grid.is_visited(1, 1))

    def test_neighbors(self):
        grid = Grid(3, 3)
        # Center cell (1,1) should have 4 neighbors
        neighbors = list(grid.get_neighbors(1, 1))
        self.assertEqual(len(neighbors), 4)

        # Corner cell (0,0) should have 2 neighbors (East, South)
        corner_neighbors = list(grid.get_neighbors(0, 0))
        self.assertEqual(len(corner_neighbors), 2)
        self.assertIn((1, 0, Grid.EAST), corner_neighbors)
        self.assertIn((0, 1, Grid.SOUTH), corner_neighbors)

        self.assertIsNone(grid.neighbor(2, 2, Grid.EAST))
        self.assertEqual(grid.neighbor(2, 2, Grid.NORTH), (2, 1))

    def test_open_neighbors(self):
        grid = Grid(3, 3)
        grid.carve_path(1, 1, Grid.WEST)
        grid.carve_path(1, 1, Grid.SOUTH)
        self.assertEqual(sorted(grid.get_open_neighbors(1, 1)), [(0, 1), (1, 2)])
        self.assertEqual(list(grid.get_open_neighbors(2, 2)), [])

if __name__ == '__main__':
    unittest.main()
