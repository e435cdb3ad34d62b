"""
DIMS exporter - orchestrates the records → CSV transform.

Pipeline:
1. Warn once if metric units are paired with the inch/pound default factor
2. Write the header line
3. For each part group (PartGrouper order):
   a. Assemble the 25-field row from the representative record
   b. Serialize → validate field count
   c. Valid → write line, count exported; invalid → drop, count error, report
4. Report the final summary

Diagnostics go to the injected on_message callback and are mirrored to the
module logger. The exporter holds no state between runs.
"""
import io
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TextIO, Tuple, Union

from dims_export.core.config import settings as app_settings
from dims_export.export.csv_writer import (
    LINE_TERMINATOR,
    header_line,
    row_values,
    serialize_row,
)
from dims_export.export.grouping import group_parts, normalize_part_key
from dims_export.export.row_builder import assemble_row
from dims_export.export.row_validator import RowStructureError, validate_row_line
from dims_export.models.capture import CaptureRecord
from dims_export.models.settings import ExportSettings

logger = logging.getLogger(__name__)

INFO = "info"
WARNING = "warning"
ERROR = "error"

_LOG_LEVELS = {
    INFO: logging.INFO,
    WARNING: logging.WARNING,
    ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class ExportMessage:
    """One diagnostic emitted during an export run."""

    level: str  # info, warning, error
    text: str
    part_key: Optional[str] = None


@dataclass
class ExportSummary:
    """Result of one export run."""

    exported_count: int = 0
    error_count: int = 0
    messages: List[ExportMessage] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "exported_count": self.exported_count,
            "error_count": self.error_count,
            "messages": [
                {"level": m.level, "text": m.text, "part_key": m.part_key}
                for m in self.messages
            ],
        }


MessageCallback = Callable[[ExportMessage], None]


def dims_export_filename(site_id: str, now: Optional[datetime] = None) -> str:
    """
    File name for a DIMS export: {SITE_ID}_{yyyyMMdd}_{HHmmss}.csv

    Path separators in the site id are replaced so the name stays a single
    path component.
    """
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    safe_site = str(site_id).replace("/", "_").replace("\\", "_")
    return f"{safe_site}_{stamp}.csv"


class DimsExporter:
    """
    Writes one DIMS CSV row per part for a settings snapshot.

    Safe to use from several threads as long as each run gets its own sink.
    """

    def __init__(
        self,
        settings: ExportSettings,
        on_message: Optional[MessageCallback] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize exporter.

        Args:
            settings: Export settings used for every run of this exporter
            on_message: Optional diagnostics callback
            clock: Source of "now" for TIME_STAMP fallback (defaults to datetime.now)
        """
        if settings is None:
            raise ValueError("settings must not be None")
        self.settings = settings
        self.on_message = on_message
        self.clock = clock or datetime.now

    def export(
        self,
        records: Iterable[CaptureRecord],
        sink: TextIO,
        part_numbers: Optional[Iterable[str]] = None,
    ) -> ExportSummary:
        """
        Export records to a text sink.

        Args:
            records: Capture records (input order matters for tie-breaks)
            sink: Anything with write(str); opened by the caller
            part_numbers: Optional selection; only matching parts are exported

        Returns:
            ExportSummary with exported/error counts and diagnostics

        Raises:
            ValueError: If records or sink is None
            OSError: Propagated unchanged from the sink
        """
        if records is None:
            raise ValueError("records must not be None")
        if sink is None:
            raise ValueError("sink must not be None")

        summary = ExportSummary()
        groups = group_parts(records)

        if part_numbers is not None:
            selected = {normalize_part_key(p) for p in part_numbers}
            groups = [g for g in groups if normalize_part_key(g.key) in selected]

        if self.settings.uses_metric_units and self.settings.has_default_factor:
            self._report(
                summary,
                WARNING,
                f"Metric units (dim={self.settings.dim_unit}, wgt={self.settings.wgt_unit}, "
                f"vol={self.settings.vol_unit}) are configured but FACTOR is still the "
                f"inch/pound default {int(ExportSettings.DEFAULT_FACTOR)}; "
                f"NET_DIM_WGT may be wrong",
            )

        now = self.clock()
        sink.write(header_line() + LINE_TERMINATOR)

        for group in groups:
            row = assemble_row(group.key, group.representative, self.settings, now=now)
            line = serialize_row(row_values(row))

            try:
                validate_row_line(line, part_key=group.key)
            except RowStructureError as e:
                summary.error_count += 1
                self._report(summary, ERROR, f"Skipped row: {e}", part_key=group.key)
                continue

            sink.write(line + LINE_TERMINATOR)
            summary.exported_count += 1

        self._report(
            summary,
            INFO,
            f"DIMS export finished: {summary.exported_count} exported, "
            f"{summary.error_count} errors",
        )

        return summary

    def export_to_directory(
        self,
        records: Iterable[CaptureRecord],
        output_dir: Optional[Union[str, Path]] = None,
        now: Optional[datetime] = None,
        part_numbers: Optional[Iterable[str]] = None,
    ) -> Tuple[Path, ExportSummary]:
        """
        Export records into a new timestamped CSV file.

        Args:
            records: Capture records
            output_dir: Target directory (defaults to ARTIFACT_ROOT)
            now: Time used for the file name (defaults to the exporter clock)
            part_numbers: Optional part selection

        Returns:
            Tuple of (csv_path, summary)
        """
        if records is None:
            raise ValueError("records must not be None")

        target_dir = Path(output_dir) if output_dir is not None else Path(app_settings.ARTIFACT_ROOT)
        target_dir.mkdir(parents=True, exist_ok=True)

        csv_path = target_dir / dims_export_filename(self.settings.site_id, now or self.clock())

        # newline="" keeps CRLF exactly as written; utf-8 (not utf-8-sig) means no BOM
        with open(csv_path, "w", encoding="utf-8", newline="") as f:
            summary = self.export(records, f, part_numbers=part_numbers)

        logger.info(f"Wrote DIMS export to {csv_path}")
        return csv_path, summary

    def render(
        self,
        records: Iterable[CaptureRecord],
        part_numbers: Optional[Iterable[str]] = None,
    ) -> Tuple[str, ExportSummary]:
        """Export records into an in-memory string."""
        buffer = io.StringIO(newline="")
        summary = self.export(records, buffer, part_numbers=part_numbers)
        return buffer.getvalue(), summary

    def _report(
        self,
        summary: ExportSummary,
        level: str,
        text: str,
        part_key: Optional[str] = None,
    ) -> None:
        message = ExportMessage(level=level, text=text, part_key=part_key)
        summary.messages.append(message)
        logger.log(_LOG_LEVELS[level], text)
        if self.on_message is not None:
            self.on_message(message)


def export_dims(
    records: Iterable[CaptureRecord],
    settings: ExportSettings,
    sink: TextIO,
    on_message: Optional[MessageCallback] = None,
    part_numbers: Optional[Iterable[str]] = None,
) -> ExportSummary:
    """Export records to sink with the given settings (one-shot helper)."""
    return DimsExporter(settings, on_message=on_message).export(
        records, sink, part_numbers=part_numbers
    )


def render_dims_csv(
    records: Iterable[CaptureRecord],
    settings: ExportSettings,
    on_message: Optional[MessageCallback] = None,
    part_numbers: Optional[Iterable[str]] = None,
) -> Tuple[str, ExportSummary]:
    """Render the full DIMS CSV text for records (one-shot helper)."""
    return DimsExporter(settings, on_message=on_message).render(
        records, part_numbers=part_numbers
    )
