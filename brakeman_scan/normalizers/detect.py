from brakeman_scan.domain.models import ReportFormat

from .util import load_json_object


def detect_format(content: str) -> ReportFormat:
    """Return JSON if ``content`` parses as a JSON object, TABS otherwise."""
    try:
        load_json_object(content)
    except (ValueError, TypeError):
        return ReportFormat.TABS
    return ReportFormat.JSON
