import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'treemaze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from treemaze.api import generate, required_buffer_size, cell_index

DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 10
DEFAULT_THRESHOLD = 25

WALL_CHAR = "#"
OPEN_CHAR = "_"

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def format_blockwise(buffer, width: int, height: int) -> str:
    """Text dump of a blockwise maze; width/height are the expanded dimensions."""
    rows = []
    for row in range(height):
        line = "".join(
            WALL_CHAR if buffer[cell_index(column, row, height)] else OPEN_CHAR
            for column in range(width)
        )
        rows.append(line)
    return "\n".join(rows)

def format_compact(buffer, width: int, height: int) -> str:
    """One hex digit per cell holding its passage mask."""
    rows = []
    for row in range(height):
        rows.append(" ".join(f"{buffer[cell_index(column, row, height)]:x}" for column in range(width)))
    return "\n".join(rows)

def run_generate(args, logger) -> int:
    seed = args.seed
    if seed is None:
        # Clock seed; logged so the run can be replayed
        seed = time.time_ns() & 0xFFFFFFFFFFFFFFFF
    logger.info(f"Generating {args.width}x{args.height} maze (seed={seed}, threshold={args.threshold})...")

    blockwise = not args.compact
    # Stats need the compact grid, so generate compact and expand locally
    generate_blockwise = blockwise and not args.stats
    size = required_buffer_size(args.width, args.height, generate_blockwise)
    if size == 0:
        logger.error(f"Invalid dimensions {args.width}x{args.height}")
        return 1

    buffer = bytearray(size)
    result = generate(args.width, args.height, seed, args.threshold, generate_blockwise, buffer)
    if result == 0:
        logger.error("Generation failed.")
        return 1

    if args.stats:
        from array import array
        from treemaze.core.grid import Grid
        from treemaze.core.blockwise import expand_blockwise
        from treemaze.core.complexity import MazePostProcessor

        grid = Grid(args.width, args.height)
        grid.cells = array('B', bytes(buffer[:result]))
        stats = MazePostProcessor.calculate_stats(grid)
        logger.info(f"Stats: {stats}")
        if blockwise:
            buffer = expand_blockwise(grid).tobytes()

    if blockwise:
        print(format_blockwise(buffer, 2 * args.width + 1, 2 * args.height + 1))
    else:
        print(format_compact(buffer, args.width, args.height))
    return 0

def run_benchmark(args, logger) -> int:
    from treemaze.core.grid import Grid
    from treemaze.core.prng import Xoshiro256PlusPlus
    from treemaze.algo.growing_tree import GrowingTree
    from treemaze.algo.selection import ThresholdSelection
    from treemaze.core.complexity import MazePostProcessor

    logger.info(f"Running Growing Tree Benchmark (Size: {args.size}x{args.size})...")

    print(f"\n{'THRESHOLD':<10} | {'TIME (s)':<10} | {'DEAD ENDS %':<12} | {'PEAK FRONTIER':<13}")
    print("-" * 55)

    for threshold in (0, 25, 100):
        grid = Grid(args.size, args.size)
        gen = GrowingTree(grid, Xoshiro256PlusPlus(123), ThresholdSelection(threshold))

        t_start = time.time()
        gen.run_all()
        duration = time.time() - t_start

        stats = MazePostProcessor.calculate_stats(grid)
        print(f"{threshold:<10} | {duration:<10.4f} | {stats['dead_end_percent']:<12.2f} | {gen.max_frontier:<13}")
    return 0

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="treemaze: deterministic growing tree maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it")
    gen_parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Maze Height")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed (default: clock)")
    gen_parser.add_argument("--threshold", type=int, default=DEFAULT_THRESHOLD,
                            help="Percent chance of expanding a random cell (0-100, negative = random)")
    gen_parser.add_argument("--compact", action="store_true", help="Print passage masks instead of a blockwise maze")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor statistics")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation at several thresholds")
    bench_parser.add_argument("--size", type=int, default=500, help="Benchmark size")

    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("treemaze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    if args.command == "generate":
        return run_generate(args, logger)
    elif args.command == "benchmark":
        return run_benchmark(args, logger)
    return 0

if __name__ == "__main__":
    sys.exit(main())
