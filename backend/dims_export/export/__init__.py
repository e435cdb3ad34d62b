"""
Export module for deterministic DIMS CSV generation.
"""
from dims_export.export.columns import DIMS_HEADERS, COLUMN_COUNT
from dims_export.export.csv_writer import escape_field, serialize_row, header_line, LINE_TERMINATOR
from dims_export.export.grouping import PartGroup, PartSummary, group_parts, summarize_parts
from dims_export.export.row_builder import assemble_row
from dims_export.export.row_validator import RowStructureError, count_fields, validate_row_line
from dims_export.export.dims_exporter import (
    DimsExporter,
    ExportMessage,
    ExportSummary,
    dims_export_filename,
    export_dims,
    render_dims_csv,
)

__all__ = [
    "DIMS_HEADERS",
    "COLUMN_COUNT",
    "escape_field",
    "serialize_row",
    "header_line",
    "LINE_TERMINATOR",
    "PartGroup",
    "PartSummary",
    "group_parts",
    "summarize_parts",
    "assemble_row",
    "RowStructureError",
    "count_fields",
    "validate_row_line",
    "DimsExporter",
    "ExportMessage",
    "ExportSummary",
    "dims_export_filename",
    "export_dims",
    "render_dims_csv",
]
