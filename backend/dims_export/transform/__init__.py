"""
Transform module: unit conversion, numeric formatting, and timestamp parsing.
"""
from dims_export.transform.units import convert_length, convert_weight, is_metric
from dims_export.transform.numbers import format_measurement, format_integer
from dims_export.transform.timestamps import (
    TIMESTAMP_FORMATS,
    parse_capture_timestamp,
    format_export_date,
)

__all__ = [
    "convert_length",
    "convert_weight",
    "is_metric",
    "format_measurement",
    "format_integer",
    "TIMESTAMP_FORMATS",
    "parse_capture_timestamp",
    "format_export_date",
]
