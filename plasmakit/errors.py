"""Error codes, their messages, and the exception raised for a failed call."""

from __future__ import annotations

from enum import IntEnum

from .log import log_error


class ErrorCode(IntEnum):
    """Result codes; zero means success."""

    SUCCESS = 0
    INVALID_PARAMETER = 1
    INVALID_OPERATION = 2
    NULL_POINTER = 3
    OUT_OF_MEMORY = 4
    OUT_OF_RANGE = 5
    UNREACHABLE = 6

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.SUCCESS: "Success",
    ErrorCode.INVALID_PARAMETER: "Invalid parameter",
    ErrorCode.INVALID_OPERATION: "Invalid operation",
    ErrorCode.NULL_POINTER: "Null pointer",
    ErrorCode.OUT_OF_MEMORY: "Out of memory",
    ErrorCode.OUT_OF_RANGE: "Out of range",
    ErrorCode.UNREACHABLE: "Unreachable branch",
}


def get_error_message(code: ErrorCode | int) -> str:
    """Return the message for an error code, or "Unknown error"."""
    try:
        return ErrorCode(code).message
    except ValueError:
        return "Unknown error"


class PlasmaError(Exception):
    """Raised when an operation fails with a non-success error code."""

    def __init__(self, code: ErrorCode | int, expression: str = "") -> None:
        self.code = code
        self.expression = expression
        message = get_error_message(code)
        super().__init__(f"{message}: {expression}" if expression else message)


def invoke(result: ErrorCode | int, expression: str = "") -> ErrorCode | int:
    """Return ``result`` if it is success; otherwise log it and raise PlasmaError."""
    if result:
        log_error("Line: %s\nMessage: %s.\n", expression, get_error_message(result))
        raise PlasmaError(result, expression)
    return result