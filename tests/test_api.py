"""Tests for the FastAPI routes."""

from __future__ import annotations

# Ensure auth is disabled for tests (no INTERNAL_TOKEN set)
import os
os.environ.pop("INTERNAL_TOKEN", None)

from fastapi.testclient import TestClient

from main import app


client = TestClient(app)


class TestHealthEndpoint:
    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["engine"] == "newscheck"
        assert data["version"] == "0.1.0"


class TestPage:
    def test_page_renders_form(self):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert 'name="text"' in resp.text
        assert 'id="resultBox"' not in resp.text

    def test_submit_suspicious(self):
        resp = client.post("/", data={"text": "This is shocking — you won't believe the secret truth!"})
        assert resp.status_code == 200
        assert 'class="result fake"' in resp.text
        assert "❌ HIGHLY SUSPICIOUS" in resp.text
        assert "(Faux-ML Score: 3)" in resp.text

    def test_submit_reliable(self):
        resp = client.post(
            "/",
            data={"text": "According to CDC and the Federal Reserve, official statement confirms data."},
        )
        assert resp.status_code == 200
        assert 'class="result real"' in resp.text
        assert "✅ MODERATE RELIABILITY" in resp.text

    def test_submit_inconclusive(self):
        resp = client.post("/", data={"text": "This is exposed."})
        assert 'class="result neutral"' in resp.text
        assert "(Faux-ML Score: Low)" in resp.text

    def test_submit_clears_input(self):
        resp = client.post("/", data={"text": "unique-marker-text"})
        assert "unique-marker-text" not in resp.text
        assert "></textarea>" in resp.text

    def test_submit_empty_shows_prompt(self):
        resp = client.post("/", data={"text": "   "})
        assert resp.status_code == 200
        assert 'class="result neutral"' in resp.text
        assert "Please Enter Text" in resp.text
        assert "The input field cannot be empty." in resp.text

    def test_submit_missing_field_shows_prompt(self):
        resp = client.post("/", data={"unrelated": "value"})
        assert resp.status_code == 200
        assert "Please Enter Text" in resp.text

    def test_submitted_text_is_escaped(self):
        resp = client.post("/", data={"text": "<script>alert(1)</script> shocking secret truth"})
        assert "<script>" not in resp.text


class TestCheckEndpoint:
    def test_suspicious(self):
        resp = client.post("/check", json={"text": "This is shocking — you won't believe the secret truth!"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["category"] == "suspicious"
        assert data["result_class"] == "fake"
        assert data["title"] == "❌ HIGHLY SUSPICIOUS"
        assert data["score"] == 3
        assert data["fake_score"] == 3
        assert data["real_score"] == 0
        assert data["suspicion_matches"] == ["shocking", "you won't believe", "secret truth"]

    def test_reliable_on_length(self):
        resp = client.post("/check", json={"text": "a" * 150})
        assert resp.status_code == 200
        data = resp.json()
        assert data["category"] == "reliable"
        assert data["score"] == 0

    def test_inconclusive(self):
        resp = client.post("/check", json={"text": "shocking official statement"})
        data = resp.json()
        assert data["category"] == "inconclusive"
        assert data["result_class"] == "neutral"
        assert data["score"] is None

    def test_request_id_alias(self):
        resp = client.post("/check", json={"text": "Article text.", "requestId": "req-abc-123"})
        assert resp.status_code == 200
        assert resp.json()["request_id"] == "req-abc-123"

    def test_empty_text_rejected(self):
        resp = client.post("/check", json={"text": ""})
        assert resp.status_code == 422

    def test_whitespace_text_rejected(self):
        resp = client.post("/check", json={"text": "   \n "})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["error"] == "Please Enter Text"
        assert detail["detail"] == "The input field cannot be empty."

    def test_too_long_text_rejected(self):
        resp = client.post("/check", json={"text": "a" * 50_001})
        assert resp.status_code == 422


class TestInternalAuth:
    def test_no_auth_when_token_not_configured(self):
        resp = client.post("/check", json={"text": "Test content."})
        assert resp.status_code == 200

    def test_auth_rejects_bad_token_when_configured(self):
        from config import settings
        original = settings.internal_token
        try:
            settings.internal_token = "super-secret-token"
            resp = client.post(
                "/check",
                json={"text": "Test content."},
                headers={"X-Internal-Token": "wrong-token"},
            )
            assert resp.status_code == 401
        finally:
            settings.internal_token = original

    def test_auth_accepts_correct_token_when_configured(self):
        from config import settings
        original = settings.internal_token
        try:
            settings.internal_token = "super-secret-token"
            resp = client.post(
                "/check",
                json={"text": "Test content."},
                headers={"X-Internal-Token": "super-secret-token"},
            )
            assert resp.status_code == 200
        finally:
            settings.internal_token = original

    def test_page_is_not_token_protected(self):
        from config import settings
        original = settings.internal_token
        try:
            settings.internal_token = "super-secret-token"
            resp = client.post("/", data={"text": "Test content."})
            assert resp.status_code == 200
        finally:
            settings.internal_token = original
