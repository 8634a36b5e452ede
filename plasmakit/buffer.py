"""A byte buffer with a recorded size and alignment."""

from __future__ import annotations

from .errors import ErrorCode, PlasmaError
from .tags import MemoryType


class Buffer:
    """A block of ``size`` bytes in host memory.

    ``alignment`` is recorded as requested; zero means no particular alignment.
    """

    def __init__(self, size: int, alignment: int = 0) -> None:
        if size < 0 or alignment < 0:
            raise PlasmaError(ErrorCode.INVALID_PARAMETER, "acquire buffer")
        self.memory_type = MemoryType.CPU
        self.size = size
        self.alignment = alignment
        self.content: bytearray | None = bytearray(size)

    @property
    def released(self) -> bool:
        return self.content is None

    def _require_content(self, operation: str) -> bytearray:
        if self.content is None:
            raise PlasmaError(ErrorCode.NULL_POINTER, operation)
        return self.content

    def fetch_element(self, offset: int) -> memoryview:
        """Return a writable view of the buffer starting ``offset`` bytes in."""
        content = self._require_content("fetch buffer element")
        if not 0 <= offset <= self.size:
            raise PlasmaError(ErrorCode.OUT_OF_RANGE, "fetch buffer element")
        return memoryview(content)[offset:]

    def release(self) -> None:
        """Free the buffer's content; it cannot be used afterwards."""
        if self.content is None:
            raise PlasmaError(ErrorCode.INVALID_OPERATION, "release buffer")
        self.content = None

    def __len__(self) -> int:
        return self.size

    def __enter__(self) -> Buffer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self.released:
            self.release()