import pytest

from bikerent.pricing import get_price, MILLISECONDS_PER_HOUR


@pytest.mark.parametrize("elapsed,rate,expected", [
    (3_600_000, 120, 120.00),
    (1_800_000, 120, 60.00),
    (0, 120, 0.00),
    (-1000, 120, 0.00),
    (90 * 60 * 1000, 220, 330.00),
])
def test_price(elapsed, rate, expected):
    assert get_price(elapsed, rate) == expected


def test_rounds_half_up():
    """A cent and a half rounds up to two cents."""
    assert get_price(MILLISECONDS_PER_HOUR, 0.015) == 0.02


def test_rounded_to_cents():
    price = get_price(1234567, 160)
    assert price == round(price, 2)
    assert price == 54.87


def test_never_negative():
    assert get_price(-MILLISECONDS_PER_HOUR, 220) >= 0
