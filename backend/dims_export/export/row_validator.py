"""
Structural validation of serialized DIMS rows.

A row must carry exactly COLUMN_COUNT fields, i.e. COLUMN_COUNT - 1
delimiters outside quoted sections. Checked on the final escaped text so a
schema edit that breaks column alignment is caught before anything is written.
"""
from dims_export.export.columns import COLUMN_COUNT
from dims_export.export.csv_writer import DELIMITER, QUOTE


class RowStructureError(ValueError):
    """Raised when a serialized row has the wrong number of fields."""

    def __init__(self, expected: int, actual: int, part_key: str = ""):
        self.expected = expected
        self.actual = actual
        self.part_key = part_key
        target = f" for part '{part_key}'" if part_key else ""
        super().__init__(f"Row{target} has {actual} fields, expected {expected}")


def count_fields(line: str) -> int:
    """
    Count fields in one serialized line, honoring quoted sections.

    Doubled quotes inside a quoted field toggle the quote state twice, so
    they never affect the count.
    """
    delimiters = 0
    in_quotes = False
    for ch in line:
        if ch == QUOTE:
            in_quotes = not in_quotes
        elif ch == DELIMITER and not in_quotes:
            delimiters += 1
    return delimiters + 1


def validate_row_line(line: str, part_key: str = "", expected: int = COLUMN_COUNT) -> None:
    """
    Check that a serialized row has exactly `expected` fields.

    Raises:
        RowStructureError: If the field count is wrong
    """
    actual = count_fields(line)
    if actual != expected:
        raise RowStructureError(expected, actual, part_key)
