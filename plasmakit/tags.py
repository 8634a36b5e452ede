"""Enumerations shared across the toolkit: layout, context kinds, verbosity, memory and PDE types."""

from __future__ import annotations

from enum import Enum, IntEnum


class Tag(Enum):
    """Layout styles and execution-context kinds."""

    LEFT = 0
    RIGHT = 1
    LOCAL = 2
    MPI = 3
    NCCL = 4


class Verbosity(IntEnum):
    """Logging levels; a message is shown when its level does not exceed the current one."""

    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4

    @property
    def label(self) -> str:
        return _VERBOSITY_NAMES[self]


_VERBOSITY_NAMES = {
    Verbosity.NONE: "None",
    Verbosity.ERROR: "Error",
    Verbosity.WARNING: "Warning",
    Verbosity.INFO: "Info",
    Verbosity.DEBUG: "Debug",
}


class MemoryType(Enum):
    """Where a block of memory lives."""

    CPU = 0
    GPU_NVIDIA = 1
    GPU_AMD = 2

    @property
    def label(self) -> str:
        return _MEMORY_TYPE_NAMES[self]


_MEMORY_TYPE_NAMES = {
    MemoryType.CPU: "CPU",
    MemoryType.GPU_NVIDIA: "GPU/NVIDIA",
    MemoryType.GPU_AMD: "GPU/AMD",
}


class PdeType(Enum):
    """Kinds of partial differential equation."""

    ADVECTION = 0
    EULER = 1

    @property
    def label(self) -> str:
        return _PDE_TYPE_NAMES[self]


_PDE_TYPE_NAMES = {
    PdeType.ADVECTION: "Advection equation",
    PdeType.EULER: "Euler equation",
}


def get_verbosity_name(verbosity: Verbosity | int) -> str:
    """Return the display name of a verbosity level."""
    return Verbosity(verbosity).label


def get_memory_type_name(memory_type: MemoryType | int) -> str:
    """Return the display name of a memory type."""
    return MemoryType(memory_type).label