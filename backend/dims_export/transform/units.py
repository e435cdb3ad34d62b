"""
Length and weight unit conversion for DIMS measurements.

Conversions pivot through the capture base units (inches, pounds).
Unit tokens are permissive: anything other than "cm" is treated as inches
and anything other than "kg" as pounds.
"""
from typing import Optional

CM_PER_INCH = 2.54
KG_PER_POUND = 0.45359237

LENGTH_UNITS = ("in", "cm")
WEIGHT_UNITS = ("lb", "kg")

METRIC_UNITS = frozenset({"cm", "kg"})


def _normalize_unit(unit: Optional[str]) -> str:
    return (unit or "").strip().lower()


def is_metric(unit: Optional[str]) -> bool:
    """Return True for the metric tokens "cm" and "kg" (case-insensitive)."""
    return _normalize_unit(unit) in METRIC_UNITS


def convert_length(value: float, from_unit: Optional[str], to_unit: Optional[str]) -> float:
    """
    Convert a length between inches and centimeters.

    Non-positive values are "not measured" placeholders and always yield 0.
    NaN passes through so it still renders blank downstream.

    Examples:
        convert_length(10, "in", "cm") → 25.4
        convert_length(25.4, "cm", "in") → 10.0
        convert_length(-5, "in", "cm") → 0.0
    """
    if value <= 0:
        return 0.0

    src = _normalize_unit(from_unit)
    dst = _normalize_unit(to_unit)
    if src == dst:
        return value

    inches = value / CM_PER_INCH if src == "cm" else value
    return inches * CM_PER_INCH if dst == "cm" else inches


def convert_weight(value: float, from_unit: Optional[str], to_unit: Optional[str]) -> float:
    """
    Convert a weight between pounds and kilograms.

    Non-positive values always yield 0, same as convert_length.
    """
    if value <= 0:
        return 0.0

    src = _normalize_unit(from_unit)
    dst = _normalize_unit(to_unit)
    if src == dst:
        return value

    pounds = value / KG_PER_POUND if src == "kg" else value
    return pounds * KG_PER_POUND if dst == "kg" else pounds
