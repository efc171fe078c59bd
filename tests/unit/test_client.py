from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any

import pytest

from hikaku.export.client import build_request, fetch_json


class _Response:
    def __init__(self, body: bytes) -> None:
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> _Response:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        _ = exc_type
        _ = exc
        _ = tb


def test_build_request_sets_bearer_header() -> None:
    request = build_request("http://localhost:8081/university/tokyo", "secret")
    assert request.get_method() == "GET"
    assert request.headers.get("Authorization") == "Bearer secret"
    assert request.headers.get("Accept") == "application/json"


def test_fetch_json_decodes_body(monkeypatch) -> None:
    captured: dict[str, Any] = {}

    def _fake_urlopen(request: urllib.request.Request, timeout: float):
        captured["url"] = request.full_url
        captured["auth"] = request.headers.get("Authorization")
        captured["timeout"] = timeout
        return _Response(json.dumps({"id": 1, "name": "東京大学"}).encode("utf-8"))

    monkeypatch.setattr(urllib.request, "urlopen", _fake_urlopen)

    value = fetch_json("http://localhost:8081/university/tokyo", "secret", timeout_seconds=3.0)

    assert value == {"id": 1, "name": "東京大学"}
    assert captured == {
        "url": "http://localhost:8081/university/tokyo",
        "auth": "Bearer secret",
        "timeout": 3.0,
    }


def test_fetch_json_propagates_decode_errors(monkeypatch) -> None:
    monkeypatch.setattr(urllib.request, "urlopen", lambda request, timeout: _Response(b"<html>"))
    with pytest.raises(json.JSONDecodeError):
        fetch_json("http://h/university/x", "t")


def test_fetch_json_propagates_transport_errors(monkeypatch) -> None:
    def _unreachable(request: urllib.request.Request, timeout: float):
        _ = request
        _ = timeout
        raise urllib.error.URLError("connection refused")

    monkeypatch.setattr(urllib.request, "urlopen", _unreachable)
    with pytest.raises(urllib.error.URLError):
        fetch_json("http://h/university/x", "t")
