"""
This module contains the UnitReader utility class.
"""
from ..enums import Encoding

# Longest lookahead any grammar needs (the rest of a 4-byte UTF-8 sequence)
MAX_LOOKAHEAD = 3


class UnitReader:
    """
    Forward-only cursor over a null-terminated sequence of code units.

    Any indexable sequence of integers works (``bytes``, ``array``,
    ``list``...). The first zero unit terminates the data, and so
    does the end of the sequence, so reads never go out of bounds.
    """

    def __init__(self, data, encoding=Encoding.UTF8):
        if data is None:
            raise ValueError('A sequence of code units must be provided')

        try:
            self._view = memoryview(data)
        except TypeError:
            self._view = None

        if self._view is not None and self._view.itemsize * 8 != encoding.value:
            itemsize = self._view.itemsize
            self._view.release()
            raise ValueError(
                'Buffer items are {} bits wide but {} units are {} bits'
                .format(itemsize * 8, encoding.name, encoding.value)
            )

        self._data = self._view if self._view is not None else data
        self._length = len(self._data)
        self._mask = encoding.unit_mask
        self._encoding = encoding
        self._position = 0

    @property
    def encoding(self):
        return self._encoding

    # region Reading

    def peek(self, offset=0):
        """
        Returns the unit ``offset`` positions ahead without consuming it.
        Anything past the terminator reads as the terminator.
        """
        if not 0 <= offset <= MAX_LOOKAHEAD:
            raise ValueError('Cannot look {} units ahead'.format(offset))

        for index in range(self._position, self._position + offset + 1):
            value = self._unit_at(index)
            if value == 0:
                return 0

        return value

    def read_unit(self):
        """Reads a single unit, which must not be the terminator."""
        value = self.peek()
        if value == 0:
            raise BufferError(
                'No more units left to read at position {}'
                .format(self._position)
            )

        self._position += 1
        return value

    def skip(self, count=1):
        """Advances ``count`` units, none of which may be the terminator."""
        for _ in range(count):
            self.read_unit()

    def at_end(self):
        """`True` once the current unit is the terminator."""
        return self.peek() == 0

    def _unit_at(self, index):
        if index >= self._length:
            return 0

        value = self._data[index]
        if not 0 <= value <= self._mask:
            raise ValueError(
                'Unit {!r} at position {} does not fit in {} bits'
                .format(value, index, self._encoding.value)
            )
        return value

    # endregion

    def close(self):
        """Closes the reader, releasing the view over the input."""
        if self._view is not None:
            self._view.release()
            self._view = None
        self._data = None
        self._length = 0

    # region Position related

    def tell_position(self):
        """Tells the current position on the sequence."""
        return self._position

    # endregion

    # region with block

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # endregion
