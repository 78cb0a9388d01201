import logging
from typing import Any, Optional

from treemaze.core.grid import Grid
from treemaze.core.prng import Xoshiro256PlusPlus
from treemaze.core.sizing import cell_index, required_buffer_size, UINT32_MAX
from treemaze.core.blockwise import expand_blockwise
from treemaze.algo.growing_tree import GrowingTree
from treemaze.algo.selection import (
    CallbackSelection,
    CellSelectionStrategy,
    SelectionContractError,
    ThresholdSelection,
)

__all__ = [
    "WEST", "EAST", "NORTH", "SOUTH",
    "cell_index", "required_buffer_size", "generate", "generate_extended",
]

logger = logging.getLogger(__name__)

WEST = Grid.WEST
EAST = Grid.EAST
NORTH = Grid.NORTH
SOUTH = Grid.SOUTH


def _writable_view(output) -> Optional[memoryview]:
    if output is None:
        return None
    try:
        view = memoryview(output).cast('B')
    except TypeError:
        # No buffer protocol, or not C-contiguous
        return None
    if view.readonly:
        return None
    return view


def generate(width: int, height: int, seed: int, threshold_percent: int,
             blockwise: bool, output, output_size: Optional[int] = None) -> int:
    """
    High level generation with the built-in selection strategy.

    threshold_percent is the chance (0-100) of expanding a random frontier
    cell instead of the newest one. Values above 100 are clamped; a negative
    value picks a threshold at random from the seed.

    The maze is written to the start of output; the return value is the
    number of result bytes, or 0 on any failure.
    Compact output:   byte cell_index(x, y, height) is the passage mask of
                      (x, y), a union of WEST/EAST/NORTH/SOUTH (1/2/4/8).
    Blockwise output: dimensions become (2*width+1, 2*height+1) and byte
                      cell_index(x, y, 2*height+1) is 0 (open) or 1 (wall).
    """
    prng = Xoshiro256PlusPlus(seed)

    if threshold_percent < 0:
        threshold_percent = prng.next_in_range(101)
        logger.debug(f"Randomized threshold: {threshold_percent}")
    elif threshold_percent > 100:
        threshold_percent = 100

    return generate_extended(width, height, prng, ThresholdSelection(threshold_percent),
                             None, blockwise, output, output_size)


def generate_extended(width: int, height: int, prng: Optional[Xoshiro256PlusPlus],
                      selection, context: Any, blockwise: bool,
                      output, output_size: Optional[int] = None) -> int:
    """
    Low level generation with a caller-owned, pre-seeded prng.

    selection is a CellSelectionStrategy, or a function
    callback(count, prng, context) returning an index in [0, count).
    context is handed to such a function untouched. A CellSelectionStrategy
    object carries its own state, so context is ignored for it.

    Output layout and return value are the same as generate().
    """
    if prng is None:
        logger.warning("Generation rejected: no prng supplied")
        return 0
    if selection is None:
        logger.warning("Generation rejected: no cell selection strategy supplied")
        return 0
    if not isinstance(selection, CellSelectionStrategy):
        if not callable(selection):
            logger.warning(f"Generation rejected: {selection!r} is not a selection strategy")
            return 0
        selection = CallbackSelection(selection, context)
    elif context is not None:
        logger.debug(f"Context ignored: {type(selection).__name__} is a strategy object")

    if width <= 0 or height <= 0 or width > UINT32_MAX or height > UINT32_MAX:
        logger.warning(f"Generation rejected: invalid geometry {width}x{height}")
        return 0

    view = _writable_view(output)
    if view is None:
        logger.warning("Generation rejected: output is not a writable buffer")
        return 0

    capacity = len(view)
    if output_size is not None:
        capacity = min(capacity, output_size)

    required = required_buffer_size(width, height, blockwise)
    if capacity < required:
        logger.warning(f"Generation rejected: buffer holds {capacity} bytes, {required} required")
        return 0

    grid = Grid(width, height)
    generator = GrowingTree(grid, prng, selection)
    try:
        generator.run_all()
    except SelectionContractError as e:
        logger.warning(f"Generation aborted: {e}")
        return 0

    if blockwise:
        data = expand_blockwise(grid).tobytes()
    else:
        data = grid.tobytes()

    view[:len(data)] = data
    logger.debug(f"Generated {width}x{height} maze ({'blockwise' if blockwise else 'compact'}, {len(data)} bytes)")
    return len(data)
