import pytest

from algokit.fast_power import power


@pytest.mark.parametrize(
    "a, n",
    [(2, 1), (3, 5), (5, 13), (-2, 7), (-3, 8), (10, 18), (7, 31), (1, 1000)],
)
def test_matches_builtin_power(a, n):
    assert power(a, n) == a**n


@pytest.mark.parametrize("a", [0, 1, -1, 42])
def test_zero_exponent_is_one(a):
    assert power(a, 0) == 1


def test_known_value():
    assert power(2, 10) == 1024


@pytest.mark.parametrize("a, n", [(3, 4), (6, 9), (-5, 11)])
def test_doubling_exponent_squares_result(a, n):
    assert power(a, 2 * n) == power(a, n) ** 2


def test_zero_base_positive_exponent():
    assert power(0, 5) == 0


def test_negative_exponent_rejected():
    with pytest.raises(ValueError):
        power(2, -1)