from __future__ import annotations

from pathlib import Path

from brakeman_scan.core.config import settings


class ReportLoader:
    """
    Reads a Brakeman output file from a workspace.
    """

    @staticmethod
    def resolve(workspace: Path, output_file: str | None = None) -> Path:
        ws = workspace.resolve()
        target = (ws / (output_file or settings.DEFAULT_OUTPUT_FILE)).resolve()
        try:
            target.relative_to(ws)
        except ValueError:
            raise ValueError(f"Report path escapes the workspace: {output_file}")
        return target

    @staticmethod
    def read(workspace: Path, output_file: str | None = None) -> str:
        """
        Return the report text. Missing or unreadable files raise OSError.
        """
        p = ReportLoader.resolve(workspace, output_file)
        return p.read_text(encoding=settings.REPORT_ENCODING, errors="replace")
