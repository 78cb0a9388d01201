import logging
import operator
from typing import Iterator

from treemaze.core.grid import Grid
from treemaze.core.frontier import Frontier
from treemaze.core.prng import Xoshiro256PlusPlus
from treemaze.algo.base import Generator
from treemaze.algo.selection import CellSelectionStrategy, SelectionContractError

logger = logging.getLogger(__name__)

class GrowingTree(Generator):
    """
    Growing tree maze carver.

    Keeps a frontier of visited cells that may still have unvisited
    neighbors. Each step picks a frontier entry through the selection
    strategy and carves into one random unvisited neighbor, or drops the
    entry when it has none left. The grid is a spanning tree once the
    frontier is empty.
    """

    def __init__(self, grid: Grid, prng: Xoshiro256PlusPlus, selection: CellSelectionStrategy):
        super().__init__(grid)
        self.prng = prng
        self.selection = selection
        self.frontier = Frontier(grid.width, grid.height)
        self.max_frontier = 0

    def run(self) -> Iterator[str]:
        grid = self.grid
        prng = self.prng
        frontier = self.frontier
        width, height = grid.width, grid.height

        grid.clear()
        frontier.clear()

        # x is drawn before y
        start_x = prng.next_in_range(width)
        start_y = prng.next_in_range(height)
        frontier.append(grid.get_index(start_x, start_y))
        logger.debug(f"Growing tree {width}x{height} from ({start_x}, {start_y})")

        # Shuffled in place every step; the order carries over between steps
        directions = [Grid.WEST, Grid.EAST, Grid.NORTH, Grid.SOUTH]

        while len(frontier):
            count = len(frontier)
            i = 0
            if count > 1:
                choice = self.selection.select(count, prng)
                try:
                    i = operator.index(choice)
                except TypeError:
                    raise SelectionContractError(f"Selected index {choice!r} is not an integer") from None
                if not 0 <= i < count:
                    raise SelectionContractError(f"Selected index {i} outside frontier of {count}")

            current = frontier[i]
            cx, cy = current // height, current % height

            # Fisher-Yates
            for j in range(3, 0, -1):
                k = prng.next_in_range(j + 1)
                directions[j], directions[k] = directions[k], directions[j]

            carved = False
            for dir_bit in directions:
                target = grid.neighbor(cx, cy, dir_bit)
                if target is None:
                    continue
                nx, ny = target
                if grid.is_visited(nx, ny):
                    continue

                grid.carve_path(cx, cy, dir_bit)
                frontier.append(nx * height + ny)
                carved = True
                break

            if not carved:
                # Backtrack
                frontier.remove_at(i)

            self.step_count += 1
            if len(frontier) > self.max_frontier:
                self.max_frontier = len(frontier)

            # Yield every N steps to keep callers responsive without spamming
            if self.step_count % 100 == 0:
                yield f"Carving... Frontier: {len(frontier)}"

        logger.debug(f"Growing tree finished after {self.step_count} steps (peak frontier {self.max_frontier})")
        yield "Done"
