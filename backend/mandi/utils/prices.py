"""
Price rounding and formatting utilities.

WHAT: Round counterpart prices to whole currency units
WHY: Emitted prices must be whole rupees with halves rounded up
HOW: Decimal arithmetic instead of round(), which rounds half to even
"""

import math
from decimal import Decimal, ROUND_FLOOR

from ..core.config import settings


def round_price(value: float) -> int:
    """
    Round a price to the nearest whole currency unit.

    Halves go towards positive infinity: 84.5 -> 85, -2.5 -> -2.

    Args:
        value: Raw price

    Returns:
        Rounded price

    Raises:
        ValueError: If value is infinite or NaN
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite price: {value}")
    shifted = Decimal(str(value)) + Decimal("0.5")
    return int(shifted.to_integral_value(rounding=ROUND_FLOOR))


def format_price(value: float) -> str:
    """Format a price with the configured currency symbol, e.g. ₹85."""
    if float(value).is_integer():
        return f"{settings.CURRENCY_SYMBOL}{int(value)}"
    return f"{settings.CURRENCY_SYMBOL}{value:.2f}"
