"""
Numeric text formatting for DIMS export fields.

Measurements render with at most 4 decimals, half-away-from-zero rounding,
trailing zeros trimmed and "." as the decimal separator regardless of locale.
Invalid values (negative, NaN, infinite) render as an empty string.
"""
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional

MEASUREMENT_PLACES = Decimal("0.0001")
INTEGER_PLACES = Decimal("1")

# Enough digits to quantize any finite double without InvalidOperation
_DECIMAL_PRECISION = 400


def _to_decimal(value: Optional[float]) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    # repr() gives the shortest round-tripping text, so 2.25065 stays 2.25065
    return Decimal(repr(number))


def _round_half_away(number: Decimal, places: Decimal) -> str:
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        rounded = number.quantize(places, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        return "0"
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_measurement(value: Optional[float]) -> str:
    """
    Format a measurement for a NET_* column.

    Examples:
        format_measurement(2.5) → "2.5"
        format_measurement(2) → "2"
        format_measurement(2.25065) → "2.2507"
        format_measurement(-1) → ""
        format_measurement(float("nan")) → ""
    """
    number = _to_decimal(value)
    if number is None or number < 0:
        return ""
    return _round_half_away(number, MEASUREMENT_PLACES)


def format_integer(value: Optional[float]) -> str:
    """
    Format a value as an integer string with no decimals (FACTOR column).

    Rounds half away from zero; NaN/infinite render as an empty string.
    """
    number = _to_decimal(value)
    if number is None:
        return ""
    return _round_half_away(number, INTEGER_PLACES)
