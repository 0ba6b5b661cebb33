import pytest
import requests

from frontend import api_client


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def test_call_generate_posts_image_and_prompt(monkeypatch) -> None:
    captured = {}

    def fake_post(url, json, timeout):
        captured.update(url=url, json=json, timeout=timeout)
        return FakeResponse(200, {"success": True, "data": {"generatedCode": "x"}})

    monkeypatch.setattr(requests, "post", fake_post)

    result = api_client.call_generate("aGVsbG8=", "  dark mode ")

    assert result["success"] is True
    assert captured["url"].endswith("/api/generate")
    assert captured["json"] == {"image": "aGVsbG8=", "prompt": "dark mode"}


def test_call_generate_omits_blank_prompt(monkeypatch) -> None:
    captured = {}

    def fake_post(url, json, timeout):
        captured["json"] = json
        return FakeResponse(200, {"success": True, "data": {"generatedCode": "x"}})

    monkeypatch.setattr(requests, "post", fake_post)
    api_client.call_generate("aGVsbG8=", "")

    assert captured["json"] == {"image": "aGVsbG8="}


def test_call_generate_returns_error_envelope(monkeypatch) -> None:
    envelope = {"success": False, "error": {"code": 500, "message": "Failed to generate code"}}
    monkeypatch.setattr(requests, "post", lambda url, json, timeout: FakeResponse(500, envelope))

    assert api_client.call_generate("aGVsbG8=") == envelope


def test_call_generate_rejects_non_envelope(monkeypatch) -> None:
    monkeypatch.setattr(requests, "post", lambda url, json, timeout: FakeResponse(502, {"detail": "bad gateway"}))

    with pytest.raises(ValueError):
        api_client.call_generate("aGVsbG8=")


def test_call_generate_propagates_invalid_json(monkeypatch) -> None:
    monkeypatch.setattr(requests, "post", lambda url, json, timeout: FakeResponse(502, ValueError("no json")))

    with pytest.raises(ValueError):
        api_client.call_generate("aGVsbG8=")
