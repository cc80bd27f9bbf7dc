from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import APIRouter, File, HTTPException, UploadFile
from pydantic import BaseModel, Field

from brakeman_scan.core.config import settings
from brakeman_scan.normalizers.registry import list_formats
from brakeman_scan.services.scan_service import ScanService

router = APIRouter(prefix="/api", tags=["scan"])

# Build once at module level
_scan_service = ScanService()


# ── Request / Response schemas ────────────────────────────────────
class ScanRequest(BaseModel):
    """Request body for scanning a report passed inline."""

    content: str = Field(..., description="Raw Brakeman report, JSON or tab-separated.")
    workspace: str | None = Field(
        None,
        description="Workspace the report paths are relative to. Defaults to `WORKSPACE_DIR`.",
    )


class WorkspaceScanRequest(BaseModel):
    """Request body for scanning a report file that lives in a workspace."""

    workspace: str = Field(..., description="Directory containing the Brakeman output.")
    output_file: str | None = Field(
        None,
        description="Report path relative to the workspace. Defaults to `DEFAULT_OUTPUT_FILE`.",
        json_schema_extra={"examples": ["brakeman-output.json"]},
    )


class ScanSummary(BaseModel):
    """Aggregate counts by priority and category."""

    total: int
    by_priority: dict[str, int]
    by_category: dict[str, int]


class ScanResponse(BaseModel):
    """Result of one scan."""

    success: bool = Field(..., description="False when the report was only partly parsed.")
    format: str | None = Field(..., description="Detected report format (`json` or `tabs`).")
    summary: ScanSummary
    warnings: list[dict[str, Any]] = Field(..., description="Normalized warnings in report order.")
    log: list[str] = Field(..., description="Scan-level error messages.")


# ── Endpoints ─────────────────────────────────────────────────────
@router.get(
    "/formats",
    summary="List supported report formats",
    response_description="Format tags the detector can return",
)
def formats() -> list[str]:
    """Return the report formats understood by the scanner: **json** and **tabs**."""
    return list_formats()


@router.post(
    "/scan",
    response_model=ScanResponse,
    summary="Scan an inline report",
    response_description="Normalized warnings with summary counts",
)
def scan(req: ScanRequest) -> dict[str, Any]:
    """Detect the format of `content`, parse it and return the warnings.

    A malformed JSON finding stops parsing: the response then has
    `success: false` and still carries the warnings read before it.
    """
    workspace = Path(req.workspace) if req.workspace else None
    report = _scan_service.scan_content(req.content, workspace=workspace)
    return report.to_dict()


@router.post(
    "/scan/file",
    response_model=ScanResponse,
    summary="Scan an uploaded report",
    response_description="Normalized warnings with summary counts",
)
def scan_file(report: UploadFile = File(...)) -> dict[str, Any]:
    """Upload a Brakeman output file (`-f json` or `-f tabs`) and scan it."""
    limit = settings.MAX_REPORT_BYTES
    data = report.file.read(limit + 1) if limit else report.file.read()
    if limit and len(data) > limit:
        raise HTTPException(status_code=413, detail=f"Report exceeds {limit} bytes")

    return _scan_service.scan_content(data).to_dict()


@router.post(
    "/scan/workspace",
    response_model=ScanResponse,
    summary="Scan a report inside a workspace",
    response_description="Normalized warnings with summary counts",
)
def scan_workspace(req: WorkspaceScanRequest) -> dict[str, Any]:
    """Read the Brakeman output file from the workspace and scan it."""
    try:
        report = _scan_service.publish_report(Path(req.workspace), req.output_file)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Report file not found")
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Could not read report: {e}")
    return report.to_dict()
