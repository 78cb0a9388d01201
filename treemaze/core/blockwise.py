import numpy as np

from treemaze.core.grid import Grid
from treemaze.core.sizing import blockwise_dimensions

OPEN = 0
WALL = 1


def expand_blockwise(grid: Grid) -> np.ndarray:
    """
    Converts a compact passage grid into a blockwise grid where walls take up
    their own cells.

    Result shape is (2*width+1, 2*height+1), dtype uint8, 0 = open, 1 = wall.
    Flattened in C order it matches cell_index(x, y, 2*height+1).
    Cell (x,y) lands on (2x+1, 2y+1). Only SOUTH and EAST passages are
    emitted; NORTH/WEST are the same openings seen from the neighbor.
    """
    new_width, new_height = blockwise_dimensions(grid.width, grid.height)
    walls = np.full((new_width, new_height), WALL, dtype=np.uint8)

    masks = np.frombuffer(grid.tobytes(), dtype=np.uint8).reshape(grid.width, grid.height)

    # Cell centers
    walls[1::2, 1::2] = OPEN

    # Gap below each cell (x rows 1,3,..; y cols 2,4,..,2h)
    south = walls[1::2, 2::2]
    south[(masks & Grid.SOUTH) != 0] = OPEN

    # Gap to the right of each cell (x rows 2,4,..,2w; y cols 1,3,..)
    east = walls[2::2, 1::2]
    east[(masks & Grid.EAST) != 0] = OPEN

    return walls
