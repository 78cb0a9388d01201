from array import array

from treemaze.core.sizing import cell_index_width

# Candidate typecodes per entry width. Item sizes of 'I'/'L' vary between
# platforms, so the code is resolved against array(...).itemsize.
_TYPECODES = ('B', 'H', 'I', 'L', 'Q')


def typecode_for_width(byte_width: int) -> str:
    for code in _TYPECODES:
        if array(code).itemsize == byte_width:
            return code
    raise ValueError(f"No unsigned array typecode is {byte_width} bytes wide")


class Frontier:
    """
    Active cell list of the growing tree.
    Entries are packed cell indices using the narrowest integer width that
    addresses every cell of the grid.
    """

    __slots__ = ('capacity', 'byte_width', 'entries')

    def __init__(self, width: int, height: int):
        self.capacity = width * height
        self.byte_width = cell_index_width(width, height)
        self.entries = array(typecode_for_width(self.byte_width))

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, i: int) -> int:
        return self.entries[i]

    def __iter__(self):
        return iter(self.entries)

    def append(self, cell: int):
        if len(self.entries) >= self.capacity:
            raise OverflowError(f"Frontier is full ({self.capacity} cells)")
        self.entries.append(cell)

    def remove_at(self, i: int):
        # Later entries shift down by one; relative order is kept
        del self.entries[i]

    def clear(self):
        del self.entries[:]

    def nbytes(self) -> int:
        return len(self.entries) * self.byte_width
