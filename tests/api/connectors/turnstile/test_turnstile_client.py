"""Testes do TurnstileClient com httpx.MockTransport."""

from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from api.connectors.turnstile import TurnstileClient
from app.protocols.bot_verifier import BotFailureReason
from config.settings import TURNSTILE_VERIFY_URL


def _client(handler) -> TurnstileClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return TurnstileClient(http_client, timeout_seconds=1.0)


class TestTurnstileClient:
    """Testes do verificador Turnstile."""

    @pytest.mark.asyncio
    async def test_posts_form_encoded_fields(self) -> None:
        """Envia secret, response e remoteip como form."""
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"success": True, "hostname": "example.com"})

        result = await _client(handler).verify("tok", "shh", "203.0.113.7")

        assert result.success is True
        request = captured[0]
        assert str(request.url) == TURNSTILE_VERIFY_URL
        assert request.method == "POST"
        form = parse_qs(request.content.decode("utf-8"))
        assert form == {"secret": ["shh"], "response": ["tok"], "remoteip": ["203.0.113.7"]}

    @pytest.mark.asyncio
    async def test_omits_remoteip_when_unknown(self) -> None:
        """Sem IP do cliente, remoteip não é enviado."""
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"success": True})

        await _client(handler).verify("tok", "shh")

        form = parse_qs(captured[0].content.decode("utf-8"))
        assert "remoteip" not in form

    @pytest.mark.asyncio
    async def test_rejection_surfaces_error_codes(self) -> None:
        """success=false vira REJECTED com os error-codes remotos."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"success": False, "error-codes": ["invalid-input-response"]},
            )

        result = await _client(handler).verify("tok", "shh")

        assert result.success is False
        assert result.reason == BotFailureReason.REJECTED
        assert result.error_codes == ("invalid-input-response",)

    @pytest.mark.asyncio
    async def test_http_error_status(self) -> None:
        """Status não-2xx vira HTTP_ERROR."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        result = await _client(handler).verify("tok", "shh")

        assert result.success is False
        assert result.reason == BotFailureReason.HTTP_ERROR
        assert result.status_code == 503

    @pytest.mark.asyncio
    async def test_network_error(self) -> None:
        """Falha de rede vira NETWORK_ERROR sem levantar."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = await _client(handler).verify("tok", "shh")

        assert result.success is False
        assert result.reason == BotFailureReason.NETWORK_ERROR

    @pytest.mark.asyncio
    async def test_non_json_response(self) -> None:
        """Corpo não-JSON vira INVALID_RESPONSE."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        result = await _client(handler).verify("tok", "shh")

        assert result.success is False
        assert result.reason == BotFailureReason.INVALID_RESPONSE
