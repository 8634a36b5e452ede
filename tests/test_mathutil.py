import pytest

from plasmakit.mathutil import max3, min3, sign


@pytest.mark.parametrize("x", [0.0, -0.0, 2.5, 1e-300])
def test_sign_non_negative(x):
    assert sign(x) == 1.0


@pytest.mark.parametrize("x", [-2.5, -1e-300])
def test_sign_negative(x):
    assert sign(x) == -1.0


@pytest.mark.parametrize("values", [(1, 2, 3), (3, 1, 2), (2, 3, 1), (5, 5, 5), (-1.5, 0.0, 7)])
def test_min3_matches_builtin(values):
    assert min3(*values) == min(values)


@pytest.mark.parametrize("values", [(1, 2, 3), (3, 1, 2), (2, 3, 1), (5, 5, 5), (-1.5, 0.0, 7)])
def test_max3_matches_builtin(values):
    assert max3(*values) == max(values)


def test_min_not_greater_than_max():
    for values in [(4, -2, 9), (0.5, 0.25, 0.75)]:
        assert min3(*values) <= max3(*values)