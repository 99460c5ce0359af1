"""Rating scale conversion.

Hostaway scores review categories out of 10; listing pages and dashboards
show everything out of 5.
"""

from decimal import ROUND_HALF_UP, Decimal

UPSTREAM_SCALE = 10
DISPLAY_SCALE = 5


def round_rating(value: float, places: int = 1) -> float:
    """Round half up, so 4.25 becomes 4.3 rather than banker's 4.2."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def to_display_scale(value: float) -> float:
    return value / UPSTREAM_SCALE * DISPLAY_SCALE


def mean(values) -> float:
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)
