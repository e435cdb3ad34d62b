from dims_export.models.capture import CaptureRecord
from dims_export.models.settings import ExportSettings

__all__ = [
    "CaptureRecord",
    "ExportSettings",
]
