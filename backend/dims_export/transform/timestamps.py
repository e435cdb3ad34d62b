"""
Capture timestamp parsing for the DIMS TIME_STAMP column.

Capture layers have written timestamps in several layouts over time; the
export tries each known layout in order and falls back to the export time.
"""
import re
from datetime import datetime
from typing import Optional

# Tried in order, first match wins. strptime alone is lenient (it reads
# "20240115_1030" as 10:03:00 under the seconds layout), so each layout is
# gated by an anchored pattern first.
TIMESTAMP_LAYOUTS = (
    (r"^\d{8}_\d{6}$", "%Y%m%d_%H%M%S"),  # 20240115_103045 (capture file stamp)
    (r"^\d{8}_\d{4}$", "%Y%m%d_%H%M"),  # 20240115_1030
    (r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$", "%Y-%m-%d %H:%M:%S"),  # 2024-01-15 10:30:45
    (r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$", "%Y-%m-%dT%H:%M:%S"),  # 2024-01-15T10:30:45
    (r"^\d{4}-\d{2}-\d{2}$", "%Y-%m-%d"),  # 2024-01-15
    (r"^\d{2}/\d{2}/\d{4} \d{2}:\d{2}:\d{2}$", "%m/%d/%Y %H:%M:%S"),  # 01/15/2024 10:30:45
    (r"^\d{2}/\d{2}/\d{4}$", "%m/%d/%Y"),  # 01/15/2024
)

TIMESTAMP_FORMATS = tuple(fmt for _, fmt in TIMESTAMP_LAYOUTS)

EXPORT_DATE_FORMAT = "%m/%d/%Y"


def parse_capture_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a raw capture timestamp against TIMESTAMP_LAYOUTS.

    Args:
        value: Raw timestamp text (may be None or blank)

    Returns:
        Parsed datetime, or None if no known layout matches
    """
    if not value:
        return None

    text = str(value).strip()
    for pattern, fmt in TIMESTAMP_LAYOUTS:
        if not re.match(pattern, text):
            continue
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue  # Right shape, impossible date (e.g. month 13)

    return None


def format_export_date(value: Optional[str], now: Optional[datetime] = None) -> str:
    """
    Render a capture timestamp as MM/dd/yyyy, falling back to `now` (or the
    current local time) when it is missing or unparseable.
    """
    parsed = parse_capture_timestamp(value)
    if parsed is None:
        parsed = now or datetime.now()
    return parsed.strftime(EXPORT_DATE_FORMAT)
