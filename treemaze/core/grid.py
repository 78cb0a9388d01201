from array import array
from typing import Iterator, Optional, Tuple

from treemaze.core.sizing import cell_index

class Grid:
    # Bitmask Constants (set bit = passage in that direction)
    WEST  = 0b00000001
    EAST  = 0b00000010
    NORTH = 0b00000100
    SOUTH = 0b00001000

    # Direction Helpers
    DX = {WEST: -1, EAST: 1, NORTH: 0, SOUTH: 0}
    DY = {WEST: 0, EAST: 0, NORTH: -1, SOUTH: 1}
    OPPOSITE = {WEST: EAST, EAST: WEST, NORTH: SOUTH, SOUTH: NORTH}

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        # No passages anywhere; a zero mask doubles as "not visited yet"
        # using 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', bytes(width * height))

    def clear(self):
        self.cells = array('B', bytes(self.width * self.height))

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return cell_index(x, y, self.height)
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get_coords(self, index: int) -> Tuple[int, int]:
        return index // self.height, index % self.height

    def neighbor(self, x: int, y: int, dir_bit: int) -> Optional[Tuple[int, int]]:
        """Coordinates one step in 'dir_bit', or None when that leaves the grid."""
        nx = x + self.DX[dir_bit]
        ny = y + self.DY[dir_bit]
        if 0 <= nx < self.width and 0 <= ny < self.height:
            return nx, ny
        return None

    def carve_path(self, x1: int, y1: int, dir_bit: int):
        """
        Opens a passage from (x1,y1) towards 'dir_bit'.
        The neighbor gets the OPPOSITE bit so connectivity stays symmetric.
        """
        target = self.neighbor(x1, y1, dir_bit)
        if target is None:
            return # Cannot carve into void

        x2, y2 = target
        self.cells[x1 * self.height + y1] |= dir_bit
        self.cells[x2 * self.height + y2] |= self.OPPOSITE[dir_bit]

    def has_passage(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[x * self.height + y] & dir_bit) != 0

    def is_visited(self, x: int, y: int) -> bool:
        return self.cells[x * self.height + y] != 0

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check passages.
        """
        if x > 0:
            yield (x - 1, y, self.WEST)
        if x < self.width - 1:
            yield (x + 1, y, self.EAST)
        if y > 0:
            yield (x, y - 1, self.NORTH)
        if y < self.height - 1:
            yield (x, y + 1, self.SOUTH)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors reachable through a passage.
        """
        for nx, ny, dir_bit in self.get_neighbors(x, y):
            if self.has_passage(x, y, dir_bit):
                yield (nx, ny)

    def tobytes(self) -> bytes:
        return self.cells.tobytes()
