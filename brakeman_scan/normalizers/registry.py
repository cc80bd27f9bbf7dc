from __future__ import annotations

from brakeman_scan.domain.models import ReportFormat

from .base import ReportScanner
from .json_normalizer import scan_json
from .tabs_normalizer import scan_tabs

SCANNERS: dict[ReportFormat, ReportScanner] = {
    ReportFormat.JSON: scan_json,
    ReportFormat.TABS: scan_tabs,
}


def list_formats() -> list[str]:
    return [f.value for f in SCANNERS]
