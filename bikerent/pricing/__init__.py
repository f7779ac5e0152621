"""
The pricing module determines the price of a rental from the time the
bike was held and the hourly rate of the bike. Prices are rounded to two
decimal places, half up, and are never negative.
"""

from decimal import Decimal, ROUND_HALF_UP

MILLISECONDS_PER_HOUR = 3_600_000

CENTS = Decimal("0.01")


def get_price(elapsed_ms: float, hourly_rate: float) -> float:
    """
    Given the length of a rental and the hourly rate, returns the price for the ride.

    A negative duration (clock skew) is treated as zero.

    :param elapsed_ms: The length of the rental in milliseconds.
    :param hourly_rate: The price of the bike per hour.
    :return: The price, rounded to two decimal places.
    """
    elapsed = max(Decimal(0), Decimal(str(elapsed_ms)))
    price = elapsed / MILLISECONDS_PER_HOUR * Decimal(str(hourly_rate))
    return float(price.quantize(CENTS, rounding=ROUND_HALF_UP))
