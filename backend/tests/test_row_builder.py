"""
Tests for DIMS row assembly.
"""
from datetime import datetime
import pytest
from dims_export.export.columns import DIMS_HEADERS
from dims_export.export.row_builder import assemble_row, compute_dim_weight, compute_volume
from dims_export.models.capture import CaptureRecord
from dims_export.models.settings import ExportSettings

NOW = datetime(2025, 6, 1, 12, 0, 0)


@pytest.fixture
def inch_settings():
    return ExportSettings(dim_unit="in", wgt_unit="lb", vol_unit="in", factor=166)


@pytest.fixture
def record():
    return CaptureRecord(
        part_number="P-100",
        sequence=1,
        length_in=10,
        depth_in=5,
        height_in=2,
        weight_lb=3,
        time_stamp="20240115_103045",
    )


def test_all_fields_present_in_order(record, inch_settings):
    row = assemble_row("P-100", record, inch_settings, now=NOW)
    assert tuple(row.keys()) == DIMS_HEADERS


def test_measurements_and_derived_fields(record, inch_settings):
    row = assemble_row("P-100", record, inch_settings, now=NOW)

    assert row["ITEM_ID"] == "P-100"
    assert row["NET_LENGTH"] == "10"
    assert row["NET_WIDTH"] == "5"
    assert row["NET_HEIGHT"] == "2"
    assert row["NET_WEIGHT"] == "3"
    assert row["NET_VOLUME"] == "100"
    assert row["NET_DIM_WGT"] == "0.6024"


def test_settings_and_fixed_fields(record, inch_settings):
    row = assemble_row("P-100", record, inch_settings, now=NOW)

    assert row["DIM_UNIT"] == "in"
    assert row["WGT_UNIT"] == "lb"
    assert row["VOL_UNIT"] == "in"
    assert row["FACTOR"] == "166"
    assert row["SITE_ID"] == "733"
    assert row["TIME_STAMP"] == "01/15/2024"
    assert row["OPT_INFO_2"] == "Y"
    assert row["OPT_INFO_3"] == "Y"
    assert row["OPT_INFO_8"] == "0"
    assert row["UPDATED"] == "N"


def test_reserved_fields_blank(record, inch_settings):
    row = assemble_row("P-100", record, inch_settings, now=NOW)

    for header in ("ITEM_TYPE", "DESCRIPTION", "OPT_INFO_1", "OPT_INFO_4",
                   "OPT_INFO_5", "OPT_INFO_6", "OPT_INFO_7", "IMAGE_FILE_NAME"):
        assert row[header] == "", header


def test_item_id_commas_stripped(inch_settings):
    row = assemble_row("A,B,C", None, inch_settings, now=NOW)
    assert row["ITEM_ID"] == "ABC"


def test_metric_conversion(record):
    settings = ExportSettings(dim_unit="cm", wgt_unit="kg", vol_unit="cm", factor=6000)

    row = assemble_row("P-100", record, settings, now=NOW)

    assert row["NET_LENGTH"] == "25.4"
    assert row["NET_WIDTH"] == "12.7"
    assert row["NET_HEIGHT"] == "5.08"
    assert row["NET_WEIGHT"] == "1.3608"
    # 25.4 * 12.7 * 5.08 from unformatted values
    assert row["NET_VOLUME"] == "1638.7064"
    assert row["NET_DIM_WGT"] == "0.2731"
    assert row["FACTOR"] == "6000"


def test_missing_measurements(inch_settings):
    record = CaptureRecord(part_number="P-200", sequence=1, length_in=10, weight_lb=None)

    row = assemble_row("P-200", record, inch_settings, now=NOW)

    assert row["NET_LENGTH"] == "10"
    assert row["NET_WIDTH"] == "0"
    assert row["NET_HEIGHT"] == "0"
    assert row["NET_WEIGHT"] == "0"
    assert row["NET_VOLUME"] == "0"
    assert row["NET_DIM_WGT"] == "0"


def test_nan_measurement_renders_blank(inch_settings):
    record = CaptureRecord(part_number="P-300", length_in=float("nan"), depth_in=5, height_in=2)

    row = assemble_row("P-300", record, inch_settings, now=NOW)

    assert row["NET_LENGTH"] == ""
    assert row["NET_VOLUME"] == "0"


def test_zero_factor_gives_zero_dim_weight(record):
    settings = ExportSettings(factor=0)

    row = assemble_row("P-100", record, settings, now=NOW)

    assert row["NET_VOLUME"] == "100"
    assert row["NET_DIM_WGT"] == "0"
    assert row["FACTOR"] == "0"


def test_no_representative_leaves_measurements_blank(inch_settings):
    row = assemble_row("P-400", None, inch_settings, now=NOW)

    assert row["NET_LENGTH"] == ""
    assert row["NET_VOLUME"] == ""
    assert row["TIME_STAMP"] == "06/01/2025"
    assert row["FACTOR"] == "166"


def test_unparseable_timestamp_falls_back_to_now(inch_settings):
    record = CaptureRecord(part_number="P-500", time_stamp="last tuesday")
    row = assemble_row("P-500", record, inch_settings, now=NOW)
    assert row["TIME_STAMP"] == "06/01/2025"


def test_compute_helpers():
    assert compute_volume(1, 2, 3) == 6
    assert compute_volume(1, 0, 3) == 0
    assert compute_dim_weight(166, 166) == 1
    assert compute_dim_weight(0, 166) == 0
    assert compute_dim_weight(100, -1) == 0
