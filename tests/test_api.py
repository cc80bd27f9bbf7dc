"""Tests for the HTTP surface."""

import io
import json

from conftest import make_warning

from brakeman_scan.core.config import settings


def test_health_reports_healthy(client):
    res = client.get("/health")
    assert res.status_code == 200
    data = res.json()
    assert data["status"] == "healthy"
    assert "version" in data


def test_formats(client):
    assert client.get("/api/formats").json() == ["json", "tabs"]


def test_scan_inline_json(client, brakeman_json):
    res = client.post("/api/scan", json={"content": brakeman_json})

    assert res.status_code == 200
    data = res.json()
    assert data["success"] is True
    assert data["format"] == "json"
    assert data["summary"]["total"] == 3
    assert data["summary"]["by_category"] == {"General": 2, "Ignored": 1}
    assert data["warnings"][0]["file"] == "app/models/user.rb"
    assert data["warnings"][0]["start_line"] == 42
    assert data["log"] == []


def test_scan_inline_tabs(client, brakeman_tabs):
    data = client.post("/api/scan", json={"content": brakeman_tabs}).json()

    assert data["format"] == "tabs"
    assert data["summary"]["by_priority"] == {"High": 1, "Normal": 1, "Low": 1}


def test_failed_scan_is_reported_not_raised(client):
    broken = make_warning()
    del broken["confidence"]
    content = json.dumps({"warnings": [make_warning(), broken]})

    res = client.post("/api/scan", json={"content": content})

    assert res.status_code == 200
    data = res.json()
    assert data["success"] is False
    assert data["summary"]["total"] == 1
    assert "confidence" in data["log"][0]


def test_scan_missing_content_returns_422(client):
    assert client.post("/api/scan", json={}).status_code == 422


def test_scan_uploaded_file(client, brakeman_tabs):
    res = client.post(
        "/api/scan/file",
        files={"report": ("brakeman.tabs", io.BytesIO(brakeman_tabs.encode("utf-8")), "text/plain")},
    )

    assert res.status_code == 200
    assert res.json()["summary"]["total"] == 3


def test_oversized_upload_returns_413(client, brakeman_tabs, monkeypatch):
    monkeypatch.setattr(settings, "MAX_REPORT_BYTES", 16)
    res = client.post(
        "/api/scan/file",
        files={"report": ("brakeman.tabs", io.BytesIO(brakeman_tabs.encode("utf-8")), "text/plain")},
    )
    assert res.status_code == 413


def test_scan_workspace_report(client, tmp_path, brakeman_json):
    (tmp_path / "brakeman-output.json").write_text(brakeman_json, encoding="utf-8")

    res = client.post("/api/scan/workspace", json={"workspace": str(tmp_path)})

    assert res.status_code == 200
    assert res.json()["summary"]["total"] == 3


def test_scan_workspace_missing_report_returns_404(client, tmp_path):
    res = client.post("/api/scan/workspace", json={"workspace": str(tmp_path), "output_file": "nope.json"})
    assert res.status_code == 404


def test_scan_workspace_escape_returns_400(client, tmp_path):
    res = client.post("/api/scan/workspace", json={"workspace": str(tmp_path), "output_file": "../x.json"})
    assert res.status_code == 400


def test_all_endpoints_have_summaries(client):
    schema = client.get("/openapi.json").json()
    assert schema["info"]["title"] == "Brakeman Report Scanner"
    for path, methods in schema.get("paths", {}).items():
        for method, details in methods.items():
            assert "summary" in details, f"{method.upper()} {path} missing summary"


def test_deeply_nested_report_is_not_a_server_error(client):
    res = client.post("/api/scan", json={"content": "[" * 100000})

    assert res.status_code == 200
    assert res.json()["format"] == "tabs"
