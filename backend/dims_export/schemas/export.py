"""
Pydantic schemas for the DIMS export API.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from dims_export.models.capture import CaptureRecord
from dims_export.models.settings import ExportSettings


class CaptureRecordIn(BaseModel):
    """One capture record as posted by the acquisition layer."""

    part_number: Optional[str] = None
    sequence: int = 0
    length_in: Optional[float] = None
    depth_in: Optional[float] = None
    height_in: Optional[float] = None
    weight_lb: Optional[float] = None
    time_stamp: Optional[str] = None
    image_file_name: Optional[str] = None

    def to_record(self) -> CaptureRecord:
        return CaptureRecord(**self.model_dump())


class DimsExportRequest(BaseModel):
    """Request body for DIMS export and preview."""

    records: List[CaptureRecordIn]
    settings: Optional[ExportSettings] = None  # None → stored settings
    part_numbers: Optional[List[str]] = None  # None → all parts

    def to_records(self) -> List[CaptureRecord]:
        return [r.to_record() for r in self.records]


class ExportMessageOut(BaseModel):
    level: str
    text: str
    part_key: Optional[str] = None


class PartSummaryOut(BaseModel):
    part_number: str
    image_count: int
    first_capture: Optional[datetime] = None
    last_capture: Optional[datetime] = None
    date_range: str = ""


class DimsPreviewResponse(BaseModel):
    """Dry-run result: what an export would produce."""

    filename: str
    parts: List[PartSummaryOut]
    exported_count: int
    error_count: int
    messages: List[ExportMessageOut]
