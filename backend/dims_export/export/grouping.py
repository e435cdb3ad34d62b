"""
Part grouping - one export row per physical part.

Rules:
- Records with a null/blank part number are dropped, not grouped
- Part numbers group on their trimmed, case-insensitive value
- Group key keeps the casing of the first record seen in input order
- Groups sort by key, case-insensitive ordinal, ascending
- Representative = lowest sequence; ties go to the earlier record
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

import polars as pl

from dims_export.models.capture import CaptureRecord
from dims_export.transform.timestamps import parse_capture_timestamp

_SCHEMA = {
    "row_nr": pl.Int64,
    "trimmed": pl.Utf8,
    "sequence": pl.Int64,
    "group_key": pl.Utf8,
}


@dataclass(frozen=True)
class PartGroup:
    """All captures of one part plus the record chosen to represent it."""

    key: str
    representative: CaptureRecord
    members: List[CaptureRecord] = field(default_factory=list)


@dataclass(frozen=True)
class PartSummary:
    """Selection summary for one part (image count and capture date range)."""

    part_number: str
    image_count: int
    first_capture: Optional[datetime]
    last_capture: Optional[datetime]

    @property
    def date_range(self) -> str:
        if self.first_capture is None or self.last_capture is None:
            return ""
        return f"{self.first_capture:%m/%d} - {self.last_capture:%m/%d}"


def normalize_part_key(part_number: Optional[str]) -> str:
    """
    Comparison key for a part number: trimmed and upper-cased.

    Upper-casing is one character to one character. Characters whose upper
    case expands (ß -> SS, ﬁ -> FI) are kept as they are, so "straße" and
    "STRASSE" stay different parts.
    """
    return "".join(_simple_upper(c) for c in (part_number or "").strip())


def _simple_upper(char: str) -> str:
    upper = char.upper()
    return upper if len(upper) == 1 else char


def _records_frame(records: Sequence[CaptureRecord]) -> pl.DataFrame:
    return pl.DataFrame(
        {
            "row_nr": list(range(len(records))),
            "trimmed": [(r.part_number or "").strip() for r in records],
            "sequence": [r.sequence for r in records],
            "group_key": [normalize_part_key(r.part_number) for r in records],
        },
        schema=_SCHEMA,
    )


def group_parts(records: Iterable[CaptureRecord]) -> List[PartGroup]:
    """
    Group capture records by part number.

    Args:
        records: Capture records in original (input) order

    Returns:
        PartGroups in export order

    Raises:
        ValueError: If records is None
    """
    if records is None:
        raise ValueError("records must not be None")

    records = list(records)
    df = _records_frame(records)

    grouped = (
        df.filter(pl.col("group_key") != "")
        .group_by("group_key", maintain_order=True)
        .agg(
            pl.col("trimmed").first().alias("key"),
            pl.col("row_nr").sort_by(["sequence", "row_nr"]).first().alias("representative"),
            pl.col("row_nr").alias("members"),
        )
        .sort("group_key")
    )

    groups: List[PartGroup] = []
    for row in grouped.iter_rows(named=True):
        groups.append(
            PartGroup(
                key=row["key"],
                representative=records[row["representative"]],
                members=[records[i] for i in row["members"]],
            )
        )

    return groups


def summarize_parts(records: Iterable[CaptureRecord]) -> List[PartSummary]:
    """
    Per-part image counts and capture date ranges, in export order.

    Unparseable timestamps are ignored for the date range.
    """
    summaries: List[PartSummary] = []
    for group in group_parts(records):
        captured = [
            ts for ts in (parse_capture_timestamp(m.time_stamp) for m in group.members)
            if ts is not None
        ]
        summaries.append(
            PartSummary(
                part_number=group.key,
                image_count=len(group.members),
                first_capture=min(captured) if captured else None,
                last_capture=max(captured) if captured else None,
            )
        )

    return summaries
