from treemaze.core.grid import Grid

class MazePostProcessor:
    @staticmethod
    def popcount_passages(val: int) -> int:
        c = 0
        if val & Grid.WEST: c += 1
        if val & Grid.EAST: c += 1
        if val & Grid.NORTH: c += 1
        if val & Grid.SOUTH: c += 1
        return c

    @staticmethod
    def count_passages(grid: Grid) -> int:
        """
        Number of undirected passages.
        Every passage is stored twice (once per side), so the bit total is halved.
        A perfect maze has exactly width*height - 1.
        """
        total = 0
        for val in grid.cells:
            total += MazePostProcessor.popcount_passages(val)
        return total // 2

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0 # 1 passage
        corridors = 0 # 2 passages
        intersections = 0 # 3+ passages

        for val in grid.cells:
            passages = MazePostProcessor.popcount_passages(val)
            if passages == 1: dead_ends += 1
            elif passages == 2: corridors += 1
            elif passages >= 3: intersections += 1

        total = grid.width * grid.height
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "passages": MazePostProcessor.count_passages(grid),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
