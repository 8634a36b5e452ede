"""A typed matrix stored column-major in a Buffer."""

from __future__ import annotations

from .buffer import Buffer
from .errors import ErrorCode, PlasmaError
from .vector import _item_size


class Matrix:
    """``row`` x ``column`` elements of type ``typecode``, column-major."""

    def __init__(self, typecode: str, row: int, column: int) -> None:
        if row < 0 or column < 0:
            raise PlasmaError(ErrorCode.INVALID_PARAMETER, "acquire matrix")
        self.typecode = typecode
        self.itemsize = _item_size(typecode)
        self.row = row
        self.column = column
        self.buffer = Buffer(row * column * self.itemsize, 0)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.row, self.column)

    def fetch_element(self, row: int, column: int) -> memoryview:
        """Return a one-element writable view of the element at (``row``, ``column``)."""
        if not (0 <= row < self.row and 0 <= column < self.column):
            raise PlasmaError(ErrorCode.OUT_OF_RANGE, "fetch matrix element")
        offset = (row + self.row * column) * self.itemsize
        return self.buffer.fetch_element(offset)[: self.itemsize].cast(self.typecode)

    def as_memoryview(self) -> memoryview:
        """Return a flat writable typed view of all elements in column-major order."""
        return self.buffer.fetch_element(0).cast(self.typecode)

    def release(self) -> None:
        """Free the matrix's storage."""
        self.buffer.release()

    def __enter__(self) -> Matrix:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self.buffer.released:
            self.release()