"""A typed, fixed-length vector stored in a Buffer."""

from __future__ import annotations

import struct

from .buffer import Buffer
from .errors import ErrorCode, PlasmaError

_FORMATS = frozenset("bBhHiIlLqQfd")


def _item_size(typecode: str) -> int:
    if typecode not in _FORMATS:
        raise PlasmaError(ErrorCode.INVALID_PARAMETER, f"element type {typecode!r}")
    return struct.calcsize(typecode)


class Vector:
    """``length`` elements of the native type ``typecode`` laid out contiguously."""

    def __init__(self, typecode: str, length: int) -> None:
        if length < 0:
            raise PlasmaError(ErrorCode.INVALID_PARAMETER, "acquire vector")
        self.typecode = typecode
        self.itemsize = _item_size(typecode)
        self.length = length
        self.buffer = Buffer(length * self.itemsize, 0)

    def __len__(self) -> int:
        return self.length

    def fetch_element(self, index: int) -> memoryview:
        """Return a one-element writable view of the element at ``index``."""
        if not 0 <= index < self.length:
            raise PlasmaError(ErrorCode.OUT_OF_RANGE, "fetch vector element")
        raw = self.buffer.fetch_element(index * self.itemsize)
        return raw[: self.itemsize].cast(self.typecode)

    def as_memoryview(self) -> memoryview:
        """Return a writable typed view over all elements."""
        return self.buffer.fetch_element(0).cast(self.typecode)

    def release(self) -> None:
        """Free the vector's storage."""
        self.buffer.release()

    def __enter__(self) -> Vector:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self.buffer.released:
            self.release()