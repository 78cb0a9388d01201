from typing import Tuple

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF


def cell_index_width(width: int, height: int) -> int:
    """
    Bytes needed per frontier entry for a width x height grid.
    The comparisons are strict, so a grid of exactly 255 cells already needs
    2 bytes. Buffer sizes reported to callers depend on this boundary.
    """
    count = width * height
    if count < UINT8_MAX:
        return 1
    if count < UINT16_MAX:
        return 2
    if count < UINT32_MAX:
        return 4
    return 8


def blockwise_dimensions(width: int, height: int) -> Tuple[int, int]:
    return 2 * width + 1, 2 * height + 1


def required_buffer_size(width: int, height: int, blockwise: bool) -> int:
    """
    Exact number of bytes a caller must provide to generate a maze.
    Returns 0 for an invalid (empty) geometry.
    """
    if width <= 0 or height <= 0:
        return 0

    count = width * height
    frontier_bytes = count * cell_index_width(width, height)
    if blockwise:
        new_width, new_height = blockwise_dimensions(width, height)
        return frontier_bytes + new_width * new_height
    return frontier_bytes + count


def cell_index(x: int, y: int, height: int) -> int:
    # Column major: height is the stride
    return x * height + y
