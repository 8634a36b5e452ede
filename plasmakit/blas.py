"""Level-1 BLAS operations on mutable sequences of floats."""

from __future__ import annotations

from collections.abc import MutableSequence

from .errors import ErrorCode, PlasmaError


def scal(n: int, a: float, x: MutableSequence[float], inc_x: int) -> None:
    """Scale ``n`` elements of ``x``, ``inc_x`` apart from the first, by ``a`` in place."""
    if n < 0 or inc_x <= 0:
        raise PlasmaError(ErrorCode.INVALID_PARAMETER, "scal")
    if not n:
        return
    if (n - 1) * inc_x >= len(x):
        raise PlasmaError(ErrorCode.OUT_OF_RANGE, "scal")
    for position in range(0, n * inc_x, inc_x):
        x[position] = a * x[position]