import pytest

from plasmakit.tags import (
    MemoryType,
    Verbosity,
    get_memory_type_name,
    get_verbosity_name,
)


@pytest.mark.parametrize(
    "level, name",
    [
        (Verbosity.NONE, "None"),
        (Verbosity.ERROR, "Error"),
        (Verbosity.WARNING, "Warning"),
        (Verbosity.INFO, "Info"),
        (Verbosity.DEBUG, "Debug"),
    ],
)
def test_verbosity_names(level, name):
    assert get_verbosity_name(level) == name
    assert get_verbosity_name(int(level)) == name


def test_verbosity_values_follow_level_order():
    names = [get_verbosity_name(value) for value in range(5)]
    assert names == ["None", "Error", "Warning", "Info", "Debug"]


@pytest.mark.parametrize(
    "memory_type, name",
    [
        (MemoryType.CPU, "CPU"),
        (MemoryType.GPU_NVIDIA, "GPU/NVIDIA"),
        (MemoryType.GPU_AMD, "GPU/AMD"),
    ],
)
def test_memory_type_names(memory_type, name):
    assert get_memory_type_name(memory_type) == name


def test_memory_type_names_by_value():
    names = [get_memory_type_name(value) for value in range(3)]
    assert names == ["CPU", "GPU/NVIDIA", "GPU/AMD"]


def test_unknown_verbosity_raises():
    with pytest.raises(ValueError):
        get_verbosity_name(99)


def test_unknown_memory_type_raises():
    with pytest.raises(ValueError):
        get_memory_type_name(42)