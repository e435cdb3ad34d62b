"""
DIMS export - one normalized CSV row per captured part.

Turns per-image capture records (weight, dimensions, capture time) into the
fixed 25-column DIMS feed consumed by downstream logistics/ERP imports.
"""
from dims_export.models import CaptureRecord, ExportSettings
from dims_export.export import (
    DimsExporter,
    ExportMessage,
    ExportSummary,
    export_dims,
    render_dims_csv,
)

__version__ = "0.1.0"

__all__ = [
    "CaptureRecord",
    "ExportSettings",
    "DimsExporter",
    "ExportMessage",
    "ExportSummary",
    "export_dims",
    "render_dims_csv",
]
