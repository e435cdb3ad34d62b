"""
Row assembly - builds the 25-field DIMS row for one part.

Measurements arrive in inches/pounds and are converted to the configured
units before formatting. Volume and dimensional weight are computed from
the converted (unformatted) values so rounding never compounds.
"""
from datetime import datetime
from typing import Dict, Optional

from dims_export.export.columns import DIMS_HEADERS
from dims_export.models.capture import CaptureRecord
from dims_export.models.settings import ExportSettings
from dims_export.transform.numbers import format_integer, format_measurement
from dims_export.transform.timestamps import format_export_date
from dims_export.transform.units import convert_length, convert_weight

BASE_LENGTH_UNIT = "in"
BASE_WEIGHT_UNIT = "lb"

OPT_INFO_8 = "0"
UPDATED = "N"


def _measured(value: Optional[float]) -> float:
    return 0.0 if value is None else float(value)


def compute_volume(length: float, width: float, height: float) -> float:
    """Product of the three dimensions, or 0 unless all are strictly positive."""
    if length > 0 and width > 0 and height > 0:
        return length * width * height
    return 0.0


def compute_dim_weight(volume: float, factor: float) -> float:
    """Dimensional weight = volume / factor, or 0 unless both are positive."""
    if volume > 0 and factor > 0:
        return volume / factor
    return 0.0


def assemble_row(
    part_key: str,
    representative: Optional[CaptureRecord],
    settings: ExportSettings,
    now: Optional[datetime] = None,
) -> Dict[str, str]:
    """
    Build the DIMS field map for one part.

    Args:
        part_key: Group key (trimmed part number, first-seen casing)
        representative: Record supplying measurements (None → blank measurements)
        settings: Export settings for this run
        now: Fallback TIME_STAMP when the capture time is missing/unparseable

    Returns:
        Dict with exactly the DIMS_HEADERS keys, in header order
    """
    row = {header: "" for header in DIMS_HEADERS}

    row["ITEM_ID"] = (part_key or "").replace(",", "")

    # ITEM_TYPE / DESCRIPTION are reserved by the target schema

    if representative is not None:
        length = convert_length(_measured(representative.length_in), BASE_LENGTH_UNIT, settings.dim_unit)
        width = convert_length(_measured(representative.depth_in), BASE_LENGTH_UNIT, settings.dim_unit)
        height = convert_length(_measured(representative.height_in), BASE_LENGTH_UNIT, settings.dim_unit)
        weight = convert_weight(_measured(representative.weight_lb), BASE_WEIGHT_UNIT, settings.wgt_unit)

        row["NET_LENGTH"] = format_measurement(length)
        row["NET_WIDTH"] = format_measurement(width)
        row["NET_HEIGHT"] = format_measurement(height)
        row["NET_WEIGHT"] = format_measurement(weight)

        volume = compute_volume(length, width, height)
        row["NET_VOLUME"] = format_measurement(volume)
        row["NET_DIM_WGT"] = format_measurement(compute_dim_weight(volume, settings.factor))

    row["DIM_UNIT"] = settings.dim_unit
    row["WGT_UNIT"] = settings.wgt_unit
    row["VOL_UNIT"] = settings.vol_unit
    row["FACTOR"] = format_integer(settings.factor)
    row["SITE_ID"] = settings.site_id

    raw_time = representative.time_stamp if representative is not None else None
    row["TIME_STAMP"] = format_export_date(raw_time, now=now)

    row["OPT_INFO_2"] = settings.opt_info_2
    row["OPT_INFO_3"] = settings.opt_info_3
    row["OPT_INFO_8"] = OPT_INFO_8

    row["UPDATED"] = UPDATED

    return row
