"""Cliente HTTP do endpoint siteverify do Cloudflare Turnstile.

Erros de rede e rejeições remotas viram o mesmo resultado de falha para
o chamador; o motivo (network_error, http_error, rejected) fica nos logs.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.protocols.bot_verifier import BotFailureReason, BotVerificationResult
from config.settings.turnstile import TURNSTILE_VERIFY_URL

logger = logging.getLogger(__name__)


class TurnstileClient:
    """Verificador de tokens Turnstile.

    Args:
        http_client: Cliente HTTP async compartilhado
        verify_url: Endpoint siteverify
        timeout_seconds: Timeout da chamada
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        verify_url: str = TURNSTILE_VERIFY_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._http = http_client
        self._verify_url = verify_url
        self._timeout_seconds = timeout_seconds

    @staticmethod
    def _form(token: str, secret: str, client_ip: str | None) -> dict[str, str]:
        form = {"secret": secret, "response": token}
        if client_ip:
            form["remoteip"] = client_ip
        return form

    async def verify(
        self,
        token: str,
        secret: str,
        client_ip: str | None = None,
    ) -> BotVerificationResult:
        """Valida token contra o Turnstile.

        Args:
            token: Token do widget (header x-turnstile-token)
            secret: Secret key do Turnstile
            client_ip: IP do cliente (opcional)

        Returns:
            BotVerificationResult (nunca levanta por falha remota)
        """
        try:
            response = await self._http.post(
                self._verify_url,
                data=self._form(token, secret, client_ip),
                timeout=self._timeout_seconds,
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "turnstile_network_error",
                extra={"error_type": type(exc).__name__},
            )
            return BotVerificationResult.failed(BotFailureReason.NETWORK_ERROR)

        if not response.is_success:
            logger.warning(
                "turnstile_http_error",
                extra={"status_code": response.status_code},
            )
            return BotVerificationResult.failed(
                BotFailureReason.HTTP_ERROR,
                status_code=response.status_code,
            )

        try:
            data: Any = response.json()
        except ValueError:
            logger.warning("turnstile_invalid_response", extra={"status_code": response.status_code})
            return BotVerificationResult.failed(
                BotFailureReason.INVALID_RESPONSE,
                status_code=response.status_code,
            )

        if not isinstance(data, dict) or data.get("success") is not True:
            error_codes = ()
            if isinstance(data, dict):
                error_codes = tuple(str(code) for code in data.get("error-codes") or ())
            logger.warning(
                "turnstile_rejected",
                extra={"error_codes": list(error_codes) or ["unknown error"]},
            )
            return BotVerificationResult.failed(
                BotFailureReason.REJECTED,
                error_codes=error_codes,
                status_code=response.status_code,
            )

        logger.debug("turnstile_verified", extra={"hostname": data.get("hostname")})
        return BotVerificationResult.ok()
