"""
DIMS CSV column schema.

Exact header order, case-sensitive. Downstream imports match columns by
position, so this tuple is the single source of truth for row layout.
"""

DIMS_HEADERS = (
    "ITEM_ID",
    "ITEM_TYPE",
    "DESCRIPTION",
    "NET_LENGTH",
    "NET_WIDTH",
    "NET_HEIGHT",
    "NET_WEIGHT",
    "NET_VOLUME",
    "NET_DIM_WGT",
    "DIM_UNIT",
    "WGT_UNIT",
    "VOL_UNIT",
    "FACTOR",
    "SITE_ID",
    "TIME_STAMP",
    "OPT_INFO_1",
    "OPT_INFO_2",
    "OPT_INFO_3",
    "OPT_INFO_4",
    "OPT_INFO_5",
    "OPT_INFO_6",
    "OPT_INFO_7",
    "OPT_INFO_8",
    "IMAGE_FILE_NAME",
    "UPDATED",
)

COLUMN_COUNT = 25
