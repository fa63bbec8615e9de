"""Correlation id por request do endpoint de leads.

A rota de leads lê `x-correlation-id` do cliente (formulário público, logo
não confiável), define o ID no contexto e o devolve no header da resposta.
O CorrelationIdFilter de config.logging injeta o valor em todos os logs.

Valores inbound fora do formato aceito (vazios, longos demais ou com
caracteres que poluiriam o log) são descartados e um UUID é gerado.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "x-correlation-id"
MAX_CORRELATION_ID_LENGTH = 128

_CORRELATION_ID_RE = re.compile(r"^[A-Za-z0-9._:-]+$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do request atual ("" fora de request)."""
    return _correlation_id.get()


def accept_correlation_id(raw: str | None) -> str:
    """Aceita o ID enviado pelo cliente ou gera um UUID v4.

    >>> accept_correlation_id("req-123")
    'req-123'
    """
    value = (raw or "").strip()
    if (
        not value
        or len(value) > MAX_CORRELATION_ID_LENGTH
        or not _CORRELATION_ID_RE.match(value)
    ):
        return str(uuid.uuid4())
    return value


def set_correlation_id(raw: str | None = None) -> Token[str]:
    """Define o correlation_id do request a partir do header inbound.

    Returns:
        Token para reset_correlation_id() ao fim do request.
    """
    return _correlation_id.set(accept_correlation_id(raw))


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o valor anterior ao request."""
    _correlation_id.reset(token)
