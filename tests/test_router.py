"""Tests API /spark — TestClient FastAPI."""
import pytest
from fastapi.testclient import TestClient

from spark_blocks.app import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def _import(client, html):
    r = client.post("/spark/import", json={"html": html})
    assert r.status_code == 200
    return r.json()


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_import_returns_camel_case(client):
    data = _import(client, "<h1>Hi</h1><p>World</p>")
    assert data["layout"] == "generic"
    assert data["isEditorGenerated"] is False
    heading = data["sections"][0]["blocks"][0][0]
    assert heading["type"] == "heading"
    assert heading["fontSize"] == 32
    assert data["warnings"] == []


def test_import_malformed_reports_warnings(client):
    data = _import(client, "<h1>Hello<p>World</h2>")
    assert data["warnings"]


def test_export_full_document(client):
    sections = _import(client, "<h1>Hi</h1><p>World</p>")["sections"]
    r = client.post("/spark/export", json={"sections": sections, "title": "Contract"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert r.text.startswith("<!DOCTYPE html>")
    assert "<title>Contract</title>" in r.text
    assert "spark-metadata" in r.text


def test_export_body_only(client):
    sections = _import(client, "<p>x</p>")["sections"]
    r = client.post("/spark/export", json={"sections": sections, "body_only": True})
    assert "<!DOCTYPE" not in r.text
    assert "data-editor-section" in r.text


def test_export_then_import_through_api(client):
    sections = _import(client, "<h2>Round</h2><ul><li>trip</li></ul>")["sections"]
    html = client.post("/spark/export", json={"sections": sections}).text
    again = _import(client, html)
    assert again["layout"] == "metadata"
    assert again["sections"] == sections


def test_export_rejects_invalid_sections(client):
    bad = [{"columns": 2, "blocks": [[]]}]
    r = client.post("/spark/export", json={"sections": bad})
    assert r.status_code == 422


def test_validate(client):
    ok = client.post("/spark/validate", json={"sections": [{"columns": 1, "blocks": [[]]}]}).json()
    assert ok == {"valid": True, "error": None}
    bad = client.post("/spark/validate", json={"sections": [{"columns": 1, "blocks": [[{"type": "nope"}]]}]}).json()
    assert bad["valid"] is False
    assert bad["error"]


def test_catalog(client):
    blocks = client.get("/spark/catalog").json()["blocks"]
    assert len(blocks) == 14
    by_type = {b["type"]: b["schema"] for b in blocks}
    assert "fontSize" in by_type["heading"]["properties"]
    assert "raw-html" in by_type
