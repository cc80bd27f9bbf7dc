"""Scanner for Brakeman's legacy tab-separated output (``-f tabs``)."""

from __future__ import annotations

import re

from brakeman_scan.domain.models import Category, WarningRecord

from .base import ScanOutcome
from .severity import priority_from_confidence
from .util import escape_html

# file, line, warning type, check name, message, confidence
TABS_PATTERN = re.compile(
    r"^([^\t]+?)\t(\d+)\t([\w\s]+?)\t(\w+)\t([^\t]+?)\t(High|Medium|Weak)",
    re.MULTILINE | re.ASCII,
)


def scan_tabs(content: str) -> ScanOutcome:
    out: list[WarningRecord] = []

    # Lines that do not match (headers, blanks, noise) are skipped
    for m in TABS_PATTERN.finditer(content):
        file_name, line, warning_type, _check, message, confidence = m.groups()
        line_no = int(line)
        out.append(
            WarningRecord(
                file=escape_html(file_name),
                start_line=line_no,
                end_line=line_no,
                type=escape_html(warning_type),
                category=Category.GENERAL,
                message=escape_html(message),
                priority=priority_from_confidence(confidence),
            )
        )

    return ScanOutcome(warnings=out)
