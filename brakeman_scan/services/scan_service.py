from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from brakeman_scan.core.config import settings
from brakeman_scan.domain.models import ReportFormat, ResultSet, ScanReport
from brakeman_scan.normalizers.base import ReportScanner
from brakeman_scan.normalizers.detect import detect_format
from brakeman_scan.normalizers.registry import SCANNERS
from brakeman_scan.services.report_loader import ReportLoader

logger = logging.getLogger(__name__)

LogSink = Callable[[str], None]


class ScanService:
    """
    Orchestrates: detect report format → run the matching scanner → collect warnings.
    """

    def __init__(self, scanners: dict[ReportFormat, ReportScanner] | None = None):
        self.scanners = scanners or SCANNERS

    def scan(self, content: str | bytes, result_set: ResultSet, log: LogSink | None = None) -> bool:
        """Append the warnings found in ``content`` to ``result_set``.

        Returns False when the report could not be fully parsed. Warnings read
        before the failure stay in ``result_set``. Never raises.
        """
        _, ok = self._scan(content, result_set, log or _log_to_logger)
        return ok

    def publish_report(
        self,
        workspace: Path,
        output_file: str | None = None,
        log: LogSink | None = None,
    ) -> ScanReport:
        """Read ``output_file`` from ``workspace`` and scan it.

        I/O errors while reading the report propagate to the caller.
        """
        content = ReportLoader.read(workspace, output_file)
        return self.scan_content(content, workspace=workspace, log=log)

    def scan_content(
        self,
        content: str | bytes,
        workspace: Path | None = None,
        log: LogSink | None = None,
    ) -> ScanReport:
        result_set = ResultSet(workspace=workspace or Path(settings.WORKSPACE_DIR))
        lines: list[str] = []

        def sink(msg: str) -> None:
            lines.append(msg)
            if log:
                log(msg)
            else:
                _log_to_logger(msg)

        fmt, ok = self._scan(content, result_set, sink)
        logger.info(
            "Scan complete: %d warnings (format=%s, success=%s)",
            len(result_set),
            fmt.value if fmt else None,
            ok,
        )
        return ScanReport(result_set=result_set, success=ok, format=fmt, log_lines=lines)

    def _scan(
        self, content: str | bytes, result_set: ResultSet, log: LogSink
    ) -> tuple[ReportFormat | None, bool]:
        if isinstance(content, bytes):
            size = len(content)
            text = content.decode(settings.REPORT_ENCODING, errors="replace")
        else:
            size = len(content.encode("utf-8", errors="replace"))
            text = content

        limit = settings.MAX_REPORT_BYTES
        if limit and size > limit:
            log(f"Report is {size} bytes, larger than the {limit} byte limit; not parsed")
            return None, False

        fmt = detect_format(text)
        logger.debug("Detected %s report", fmt.value)

        outcome = self.scanners[fmt](text)
        result_set.extend(outcome.warnings)

        if not outcome.ok:
            log(outcome.error or "Report could not be parsed")
            return fmt, False
        return fmt, True


def _log_to_logger(msg: str) -> None:
    logger.warning(msg)
