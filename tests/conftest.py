import json
import logging

import pytest
from fastapi.testclient import TestClient

from brakeman_scan.core.config import settings
from brakeman_scan.core.logging import JSONFormatter
from brakeman_scan.main import app


@pytest.fixture(autouse=True)
def _isolate_settings(tmp_path, monkeypatch):
    """Point the default workspace at a temp dir so tests never read real reports."""
    monkeypatch.setattr(settings, "WORKSPACE_DIR", str(tmp_path))
    monkeypatch.setattr(settings, "MAX_REPORT_BYTES", 50 * 1024 * 1024)


@pytest.fixture(autouse=True)
def _reset_json_logging():
    """Drop handlers installed by setup_logging() so later tests never write to a closed capture stream."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h.formatter, JSONFormatter):
            root.removeHandler(h)
    root.setLevel(level)


@pytest.fixture
def client():
    return TestClient(app)


def make_warning(**overrides) -> dict:
    row = {
        "warning_type": "XSS",
        "file": "a.rb",
        "line": 10,
        "message": "m",
        "confidence": "High",
    }
    row.update(overrides)
    return row


@pytest.fixture
def brakeman_json() -> str:
    """A small Brakeman JSON report with one general and one ignored warning."""
    return json.dumps(
        {
            "scan_info": {"brakeman_version": "6.1.2"},
            "warnings": [
                make_warning(
                    warning_type="SQL Injection",
                    file="app/models/user.rb",
                    line=42,
                    message="Possible SQL injection",
                    code='User.where("name = #{params[:name]}")',
                    confidence="High",
                ),
                make_warning(
                    warning_type="Cross-Site Scripting",
                    file="app/views/users/show.html.erb",
                    line=7,
                    message="Unescaped parameter value",
                    confidence="Medium",
                ),
            ],
            "ignored_warnings": [
                make_warning(
                    warning_type="Redirect",
                    file="app/controllers/sessions_controller.rb",
                    line=3,
                    message="Possible unprotected redirect",
                    confidence="Weak",
                ),
            ],
            "errors": [],
        }
    )


@pytest.fixture
def brakeman_tabs() -> str:
    return (
        "app/models/user.rb\t42\tSQL Injection\tCheckSQL\tPossible SQL injection\tHigh\n"
        "app/views/users/show.html.erb\t7\tCross Site Scripting\tCheckCrossSiteScripting\tUnescaped parameter value\tMedium\n"
        "app/controllers/sessions_controller.rb\t3\tRedirect\tCheckRedirect\tPossible unprotected redirect\tWeak\n"
    )
