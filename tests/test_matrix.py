import pytest

from plasmakit.errors import ErrorCode, PlasmaError
from plasmakit.matrix import Matrix


def test_shape_and_storage():
    matrix = Matrix("d", 2, 3)
    assert matrix.shape == (2, 3)
    assert len(matrix.as_memoryview()) == 2 * 3
    assert matrix.buffer.size == 2 * 3 * matrix.itemsize


def test_elements_are_column_major():
    matrix = Matrix("i", 2, 3)
    matrix.fetch_element(1, 0)[0] = 11
    matrix.fetch_element(0, 1)[0] = 22
    flat = matrix.as_memoryview()
    assert flat[1] == 11
    assert flat[2] == 22


def test_every_cell_is_distinct_and_reads_back():
    matrix = Matrix("q", 3, 4)
    cells = [(r, c) for c in range(4) for r in range(3)]
    for value, (r, c) in enumerate(cells):
        matrix.fetch_element(r, c)[0] = value
    assert sorted(matrix.as_memoryview()) == list(range(len(cells)))
    for value, (r, c) in enumerate(cells):
        assert matrix.fetch_element(r, c)[0] == value


@pytest.mark.parametrize("row, column", [(2, 0), (0, 3), (-1, 0)])
def test_fetch_out_of_range(row, column):
    matrix = Matrix("d", 2, 3)
    with pytest.raises(PlasmaError) as info:
        matrix.fetch_element(row, column)
    assert info.value.code == ErrorCode.OUT_OF_RANGE


def test_negative_dimension():
    with pytest.raises(PlasmaError) as info:
        Matrix("d", -1, 2)
    assert info.value.code == ErrorCode.INVALID_PARAMETER


def test_release_then_fetch_fails():
    matrix = Matrix("d", 1, 1)
    matrix.release()
    with pytest.raises(PlasmaError) as info:
        matrix.fetch_element(0, 0)
    assert info.value.code == ErrorCode.NULL_POINTER


def test_context_manager_releases():
    with Matrix("f", 2, 2) as matrix:
        matrix.fetch_element(1, 1)[0] = 2.5
        assert matrix.as_memoryview()[3] == 2.5
    assert matrix.buffer.released