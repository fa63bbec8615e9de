"""Protocolo de verificação anti-bot (Cloudflare Turnstile).

Evita dependência direta da camada api.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class BotFailureReason(StrEnum):
    """Motivo interno da falha (apenas para logs do servidor)."""

    NETWORK_ERROR = "network_error"
    HTTP_ERROR = "http_error"
    INVALID_RESPONSE = "invalid_response"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class BotVerificationResult:
    """Resultado da verificação do desafio anti-bot.

    Para o requisitante toda falha é BotVerificationFailed; `reason`,
    `error_codes` e `status_code` existem só para diagnóstico.
    """

    success: bool
    reason: BotFailureReason | None = None
    error_codes: tuple[str, ...] = ()
    status_code: int | None = None

    @classmethod
    def ok(cls) -> BotVerificationResult:
        return cls(success=True)

    @classmethod
    def failed(
        cls,
        reason: BotFailureReason,
        *,
        error_codes: tuple[str, ...] = (),
        status_code: int | None = None,
    ) -> BotVerificationResult:
        return cls(
            success=False,
            reason=reason,
            error_codes=error_codes,
            status_code=status_code,
        )


class BotVerifierProtocol(Protocol):
    """Contrato do verificador de desafio anti-bot."""

    async def verify(
        self,
        token: str,
        secret: str,
        client_ip: str | None = None,
    ) -> BotVerificationResult: ...
