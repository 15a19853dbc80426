import pytest

from algokit.power import power


@pytest.mark.parametrize(
    "x, n",
    [(2.0, 10), (2.1, 3), (3.0, 0), (0.5, 7), (-2.0, 5), (-2.0, 6), (1.5, 13)],
)
def test_positive_and_zero_exponents_match_builtin(x, n):
    assert power(x, n) == pytest.approx(x**n)


@pytest.mark.parametrize("x, n", [(2.0, -2), (4.0, -1), (-3.0, -3), (1.1, -20)])
def test_negative_exponents_match_builtin(x, n):
    assert power(x, n) == pytest.approx(x**n)


def test_zero_exponent_is_one():
    assert power(123.456, 0) == 7.0**0


def test_reciprocal_relation():
    assert power(3.0, -4) * power(3.0, 4) == pytest.approx(1.0)


def test_large_exponent_of_unit_base():
    assert power(1.0, 2**31 - 1) == 1.0
    assert power(-1.0, 2**31 - 1) == -1.0
    assert power(-1.0, -(2**31)) == 1.0


def test_zero_base_negative_exponent_raises():
    with pytest.raises(ZeroDivisionError):
        power(0.0, -1)


def test_integer_base_accepted():
    assert power(3, 4) == pytest.approx(3.0**4)