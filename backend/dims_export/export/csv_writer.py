"""
CSV serialization for DIMS rows.

Format:
- Comma delimiter, CRLF after every line (including the last)
- Quote a field only if it contains a comma, double quote, CR or LF
- Embedded double quotes are doubled
- UTF-8 without BOM (enforced by whoever opens the sink)
"""
from typing import Iterable, Mapping, Optional

from dims_export.export.columns import DIMS_HEADERS

DELIMITER = ","
QUOTE = '"'
LINE_TERMINATOR = "\r\n"

_QUOTE_TRIGGERS = (DELIMITER, QUOTE, "\r", "\n")


def escape_field(value: Optional[str]) -> str:
    """
    Escape a single field value.

    Examples:
        escape_field("ABC-1") → 'ABC-1'
        escape_field('12" bolt') → '"12"" bolt"'
        escape_field(None) → ''
    """
    if value is None:
        return ""

    text = str(value)
    if not any(trigger in text for trigger in _QUOTE_TRIGGERS):
        return text

    return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE


def serialize_row(values: Iterable[Optional[str]]) -> str:
    """Join already-ordered field values into one line (without terminator)."""
    return DELIMITER.join(escape_field(value) for value in values)


def row_values(row: Mapping[str, str]) -> list:
    """Pull field values out of an assembled row in exact header order."""
    return [row.get(header, "") for header in DIMS_HEADERS]


def header_line() -> str:
    """The fixed DIMS header line (without terminator)."""
    return DELIMITER.join(DIMS_HEADERS)
