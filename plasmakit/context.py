"""Execution contexts identifying a process within a (possibly single-member) group."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .errors import ErrorCode, PlasmaError
from .tags import Tag


class Context(ABC):
    """An execution context with a kind, an identifier and a group size."""

    def __init__(self, kind: Tag, id: int = 0) -> None:
        self.kind = kind
        self.id = id
        self.released = False

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of members in the context's group."""

    def release(self) -> None:
        """Release the context; only local contexts can be released."""
        if self.kind is not Tag.LOCAL:
            raise PlasmaError(ErrorCode.INVALID_PARAMETER, "release context")
        self.released = True

    def __enter__(self) -> Context:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


class LocalContext(Context):
    """A single-process context."""

    def __init__(self) -> None:
        super().__init__(Tag.LOCAL, 0)

    @property
    def size(self) -> int:
        return 1


def acquire_context(kind: Tag | int) -> Context:
    """Create a context of the given kind; only ``Tag.LOCAL`` is supported."""
    try:
        tag = Tag(kind)
    except ValueError:
        raise PlasmaError(ErrorCode.INVALID_PARAMETER, "acquire context") from None
    if tag is Tag.LOCAL:
        return LocalContext()
    raise PlasmaError(ErrorCode.INVALID_PARAMETER, "acquire context")