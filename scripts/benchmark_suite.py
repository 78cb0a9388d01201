import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from treemaze.api import generate, required_buffer_size
from treemaze.core.grid import Grid
from treemaze.core.prng import Xoshiro256PlusPlus
from treemaze.algo.growing_tree import GrowingTree
from treemaze.algo.selection import ThresholdSelection
from treemaze.core.complexity import MazePostProcessor

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height/1e6:.2f}M cells) ---")

    # 1. Memory
    for blockwise in (False, True):
        size = required_buffer_size(width, height, blockwise)
        print(f"Buffer ({'blockwise' if blockwise else 'compact'}): ~{size / (1024 * 1024):.2f} MB")

    # 2. Generation per threshold
    for threshold in (0, 50, 100):
        grid = Grid(width, height)
        algo = GrowingTree(grid, Xoshiro256PlusPlus(42), ThresholdSelection(threshold))

        gen_start = time.time()
        algo.run_all()
        gen_time = time.time() - gen_start

        stats = MazePostProcessor.calculate_stats(grid)
        print(f"Threshold {threshold:>3}: {gen_time:.4f}s "
              f"({(width*height)/gen_time:,.0f} cells/sec, "
              f"dead ends {stats['dead_end_percent']:.1f}%, peak frontier {algo.max_frontier})")

    # 3. Full pipeline incl. blockwise expansion
    buffer = bytearray(required_buffer_size(width, height, True))
    start = time.time()
    generate(width, height, 42, 25, True, buffer)
    print(f"Blockwise pipeline: {time.time() - start:.4f}s")

def run_suite():
    sizes = [
        (100, 100),
        (15, 17),      # 255 cells: first size with 2-byte frontier entries
        (500, 500),
        (1000, 1000),
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
