"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from template_selector.api import app
from template_selector.config import settings

client = TestClient(app)

SCENARIO_MANIFEST = {
    "version": "1",
    "templates": [
        {"id": "hero.a", "name": "A", "kind": "hero", "scoreHints": {"requiresImage": True, "idealItems": 1}},
        {"id": "hero.b", "name": "B", "kind": "hero", "scoreHints": {"bestForBreaking": True}},
    ],
}

BREAKING_ITEM = {"id": "1", "image": "/quake.jpg", "newsType": "breaking", "publishedAt": "2025-03-02T06:00:00Z"}


def test_status():
    resp = client.get("/api/status")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_list_templates_grouped_by_kind():
    resp = client.get("/api/templates")
    assert resp.status_code == 200
    kinds = resp.json()["kinds"]
    assert list(kinds) == ["hero", "list", "grid", "ticker", "spotlight"]
    assert kinds["hero"][0]["scoreHints"]["requiresImage"] is True


def test_analyze():
    resp = client.post("/api/templates/analyze", json={"items": [BREAKING_ITEM]})
    assert resp.status_code == 200
    body = resp.json()
    assert body["item_count"] == 1
    assert body["has_breaking"] is True
    assert body["is_time_sensitive"] is True


def test_analyze_empty_items():
    resp = client.post("/api/templates/analyze", json={"items": []})
    assert resp.status_code == 422
    assert "empty" in resp.json()["detail"]


def test_recommend_with_inline_manifest():
    resp = client.post(
        "/api/templates/recommend",
        json={"items": [BREAKING_ITEM], "manifest": SCENARIO_MANIFEST, "category": "hero", "limit": 1},
    )
    assert resp.status_code == 200
    recs = resp.json()["recommendations"]
    assert len(recs) == 1
    assert recs[0]["template"]["id"] == "hero.b"
    assert recs[0]["score"] == 75
    assert recs[0]["reasoning"]


def test_recommend_user_preferences():
    resp = client.post(
        "/api/templates/recommend",
        json={
            "items": [BREAKING_ITEM],
            "manifest": SCENARIO_MANIFEST,
            "minScore": 70,
            "userPreferences": {"prefersVisual": True},
        },
    )
    assert [r["template"]["id"] for r in resp.json()["recommendations"]] == ["hero.a", "hero.b"]


def test_recommend_rejects_negative_limit():
    resp = client.post("/api/templates/recommend", json={"items": [BREAKING_ITEM], "limit": -1})
    assert resp.status_code == 422


def test_select_none():
    resp = client.post(
        "/api/templates/select",
        json={"items": [BREAKING_ITEM], "manifest": SCENARIO_MANIFEST, "category": "grid"},
    )
    assert resp.status_code == 200
    assert resp.json()["recommendation"] is None


def test_auto_select_uses_configured_manifest():
    items = [dict(BREAKING_ITEM, id=str(i)) for i in range(3)]
    resp = client.post("/api/templates/auto-select", json={"items": items, "blockType": "section"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["category"] == "list"
    assert body["templateId"] in {"list.compact", "list.thumbnails"}


def test_auto_select_unknown_block():
    resp = client.post("/api/templates/auto-select", json={"items": [BREAKING_ITEM], "blockType": "footer"})
    assert resp.status_code == 400
    assert "footer" in resp.json()["detail"]


def test_missing_manifest_file(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "MANIFEST_PATH", tmp_path / "gone.json")
    resp = client.post("/api/templates/recommend", json={"items": [BREAKING_ITEM]})
    assert resp.status_code == 500
