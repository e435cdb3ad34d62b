"""
DIMS export API endpoints.
"""
from datetime import datetime
from urllib.parse import quote

from fastapi import APIRouter
from fastapi.responses import Response

from dims_export.core.settings_store import load_export_settings, save_export_settings
from dims_export.export.dims_exporter import DimsExporter, dims_export_filename
from dims_export.export.grouping import normalize_part_key, summarize_parts
from dims_export.models.settings import ExportSettings
from dims_export.schemas.export import (
    DimsExportRequest,
    DimsPreviewResponse,
    ExportMessageOut,
    PartSummaryOut,
)

router = APIRouter()


def _content_disposition(filename: str) -> str:
    # Headers go out as latin-1; non-ASCII names travel in filename* (RFC 6266)
    fallback = "".join(
        c if " " <= c <= "~" and c not in '"\\;' else "_" for c in filename
    )
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def _resolve_settings(request: DimsExportRequest) -> ExportSettings:
    return request.settings if request.settings is not None else load_export_settings()


@router.post("/exports/dims")
async def export_dims_csv(request: DimsExportRequest):
    """
    Export capture records as a DIMS CSV file.

    One row per part number; the body is the exact file bytes
    (UTF-8, no BOM, CRLF line endings). Row-level errors are counted in
    the X-Error-Count header rather than failing the request.
    """
    export_settings = _resolve_settings(request)
    now = datetime.now()

    exporter = DimsExporter(export_settings, clock=lambda: now)
    csv_text, summary = exporter.render(request.to_records(), part_numbers=request.part_numbers)

    filename = dims_export_filename(export_settings.site_id, now)
    return Response(
        content=csv_text.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": _content_disposition(filename),
            "X-Exported-Count": str(summary.exported_count),
            "X-Error-Count": str(summary.error_count),
        },
    )


@router.post("/exports/dims/preview", response_model=DimsPreviewResponse)
async def preview_dims_export(request: DimsExportRequest):
    """
    Dry-run a DIMS export.

    Returns the per-part selection summary (image count, capture date range)
    and the counters/diagnostics the export would produce. Nothing is written.
    """
    export_settings = _resolve_settings(request)
    records = request.to_records()

    parts = summarize_parts(records)
    if request.part_numbers is not None:
        selected = {normalize_part_key(p) for p in request.part_numbers}
        parts = [p for p in parts if normalize_part_key(p.part_number) in selected]

    _, summary = DimsExporter(export_settings).render(records, part_numbers=request.part_numbers)

    return DimsPreviewResponse(
        filename=dims_export_filename(export_settings.site_id),
        parts=[
            PartSummaryOut(
                part_number=p.part_number,
                image_count=p.image_count,
                first_capture=p.first_capture,
                last_capture=p.last_capture,
                date_range=p.date_range,
            )
            for p in parts
        ],
        exported_count=summary.exported_count,
        error_count=summary.error_count,
        messages=[
            ExportMessageOut(level=m.level, text=m.text, part_key=m.part_key)
            for m in summary.messages
        ],
    )


@router.get("/exports/dims/settings", response_model=ExportSettings)
async def get_dims_settings():
    """Current stored DIMS export settings (defaults if none saved)."""
    return load_export_settings()


@router.put("/exports/dims/settings", response_model=ExportSettings)
async def update_dims_settings(export_settings: ExportSettings):
    """Persist DIMS export settings."""
    save_export_settings(export_settings)
    return export_settings
