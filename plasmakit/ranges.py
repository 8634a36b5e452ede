"""Multi-dimensional index ranges and iterators that walk them by linear offset."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .errors import ErrorCode, PlasmaError
from .tags import Tag


def _digits(offset: int, strides, moduli) -> Iterator[int]:
    for stride, modulus in zip(strides, moduli):
        digit = (offset % modulus if modulus is not None else offset) // stride
        offset -= digit * stride
        yield digit


def find_index(offset: int, stride: Sequence[int]) -> tuple[int, ...]:
    """Split a linear ``offset`` into per-dimension indices for the given strides.

    Strides increasing from the first dimension are treated as left (first
    index fastest); otherwise as right (last index fastest).
    """
    strides = list(stride)
    if not strides:
        raise PlasmaError(ErrorCode.INVALID_PARAMETER, "find index")
    if strides[0] < strides[-1]:
        return tuple(_digits(offset, strides, strides[1:] + [None]))
    moduli = [None] + strides[:-1]
    return tuple(reversed(list(_digits(offset, reversed(strides), reversed(moduli)))))


class Range:
    """A box of integer indices ``lower <= index < upper`` with a memory layout."""

    def __init__(self, style: Tag, lower: Sequence[int], upper: Sequence[int]) -> None:
        lower = tuple(lower)
        upper = tuple(upper)
        if len(lower) != len(upper):
            raise PlasmaError(ErrorCode.INVALID_PARAMETER, "acquire range")
        if any(u < l for l, u in zip(lower, upper)):
            raise PlasmaError(ErrorCode.INVALID_PARAMETER, "acquire range")
        extent = tuple(u - l for l, u in zip(lower, upper))

        if style is Tag.LEFT:
            order = extent
        elif style is Tag.RIGHT:
            order = extent[::-1]
        else:
            raise PlasmaError(ErrorCode.INVALID_PARAMETER, "acquire range")

        strides = []
        volume = 1
        for size in order:
            strides.append(volume)
            volume *= size
        if style is Tag.RIGHT:
            strides.reverse()

        self.style = style
        self.dimension = len(lower)
        self.lower = lower
        self.upper = upper
        self.extent = extent
        self.stride = tuple(strides)
        self.volume = volume

    def __len__(self) -> int:
        return self.volume

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        """Yield every index in layout order."""
        for offset in range(self.volume):
            local = find_index(offset, self.stride)
            yield tuple(l + i for l, i in zip(self.lower, local))

    def iterator(self) -> RangeIterator:
        """Return a new iterator over this range."""
        return RangeIterator(self)


class RangeIterator:
    """A cursor over a Range holding a linear offset and the matching index."""

    def __init__(self, range_: Range) -> None:
        self.range = range_
        self.offset = 0
        self.index: tuple[int, ...] = (0,) * range_.dimension

    def reset(self) -> None:
        """Return to offset zero, positioned at the range's lower corner."""
        self.offset = 0
        self.index = self.range.lower

    def advance(self, step: int) -> None:
        """Move forward by ``step`` positions in layout order."""
        if step < 0:
            raise PlasmaError(ErrorCode.INVALID_PARAMETER, "advance range iterator")
        if not step:
            return
        self.offset += step
        local = find_index(self.offset, self.range.stride)
        self.index = tuple(l + i for l, i in zip(self.range.lower, local))