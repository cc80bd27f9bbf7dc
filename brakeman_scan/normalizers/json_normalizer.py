"""Scanner for Brakeman's JSON output (``-f json``).

Brakeman JSON format (only the fields read here):
{
    "warnings": [
        {
            "warning_type": "SQL Injection",
            "file": "app/models/user.rb",
            "line": 42,
            "message": "Possible SQL injection",
            "code": "User.where(\"name = #{params[:name]}\")",
            "confidence": "High",
            "description": "..."            # Brakeman Pro only
        }
    ],
    "ignored_warnings": [ ... same shape ... ]
}
"""

from __future__ import annotations

from typing import Any

from brakeman_scan.domain.models import WarningRecord

from .base import ReportFieldError, ReportParseError, ScanOutcome
from .severity import RESULT_SETS, category_for_result_set, priority_from_confidence
from .util import escape_html, load_json_object


def scan_json(content: str) -> ScanOutcome:
    """Parse both result sets of a Brakeman JSON report.

    The first malformed finding stops the scan. Warnings parsed before it are
    returned alongside the error message.
    """
    try:
        report = load_json_object(content)
    except (ValueError, TypeError) as e:
        return ScanOutcome(error=f"Report is not a JSON object: {e}")

    out: list[WarningRecord] = []
    try:
        for result_set in RESULT_SETS:
            _scan_result_set(report, result_set, out)
    except ReportParseError as e:
        return ScanOutcome(warnings=out, error=str(e))

    return ScanOutcome(warnings=out)


def _scan_result_set(report: dict[str, Any], result_set: str, out: list[WarningRecord]) -> None:
    rows = report.get(result_set)
    if rows is None:
        return
    if not isinstance(rows, list):
        raise ReportParseError(f'"{result_set}" is not an array')

    category = category_for_result_set(result_set)

    for i, row in enumerate(rows):
        where = f"{result_set}[{i}]"
        if not isinstance(row, dict):
            raise ReportFieldError(f"{where} is not an object")

        file_name = _required(row, "file", where)
        warning_type = _required(row, "warning_type", where)
        message = _required(row, "message", where)
        confidence = _required(row, "confidence", where)

        code = row.get("code")
        if code is not None and str(code).strip():
            message = f"{message}: {code}"

        line = _line_number(row.get("line"))

        description = row.get("description")
        if description is not None and not isinstance(description, str):
            raise ReportFieldError(f'{where}: "description" is not a string')

        out.append(
            WarningRecord(
                file=escape_html(file_name),
                start_line=line,
                end_line=line,
                type=escape_html(warning_type),
                category=category,
                message=escape_html(message),
                priority=priority_from_confidence(confidence),
                description=escape_html(description) if description is not None else None,
            )
        )


def _required(row: dict[str, Any], key: str, where: str) -> str:
    if key not in row:
        raise ReportFieldError(f'{where}: missing required field "{key}"')
    value = row[key]
    if not isinstance(value, str):
        raise ReportFieldError(f'{where}: field "{key}" is not a string')
    return value


def _line_number(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        return 1
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return 1
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
        # "3.5" truncates like a float line number
        try:
            return int(float(value))
        except (ValueError, OverflowError):
            return 1
    return 1
