"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_reports_service() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "lead-intake"


@pytest.mark.asyncio
async def test_readiness_with_memory_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEAD_STORE_BACKEND", "memory")
    request = _build_request_with_state(SimpleNamespace())

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["checks"]["lead_store"]["backend"] == "memory"


@pytest.mark.asyncio
async def test_readiness_not_ready_without_redis_client(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEAD_STORE_BACKEND", "redis")
    request = _build_request_with_state(SimpleNamespace(redis_client=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["lead_store"]["error"] == "not_configured"


@pytest.mark.asyncio
async def test_readiness_ready_when_redis_pings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEAD_STORE_BACKEND", "redis")
    redis_client = MagicMock()
    redis_client.ping = AsyncMock(return_value=True)
    request = _build_request_with_state(SimpleNamespace(redis_client=redis_client))

    response = await readiness_check(request)

    assert response.status_code == 200
    redis_client.ping.assert_awaited_once()


@pytest.mark.asyncio
async def test_readiness_firestore_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEAD_STORE_BACKEND", "firestore")
    firestore_client = MagicMock()
    firestore_client.collection.return_value.document.return_value.get.side_effect = (
        RuntimeError("unavailable")
    )
    request = _build_request_with_state(SimpleNamespace(firestore_client=firestore_client))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["lead_store"]["error"] == "RuntimeError"
