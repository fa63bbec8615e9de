"""Assinatura HMAC-SHA256 de submissões com janela anti-replay.

Mensagem assinada: f"{timestamp}:{payload}", onde `timestamp` é o valor
bruto do header x-timestamp (ISO-8601) e `payload` o corpo bruto.
A assinatura é o hex digest, enviada no header x-signature.
"""

from __future__ import annotations

import hashlib
import hmac
import re
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum

# 5 minutos para cada lado de `now`
MAX_TIMESTAMP_SKEW_SECONDS = 300
_HEX_DIGEST_RE = re.compile(r"[0-9a-f]+")


class SignatureFailure(StrEnum):
    """Motivo da rejeição (logado no servidor, nunca devolvido ao cliente)."""

    INVALID_TIMESTAMP = "invalid_timestamp"
    STALE_OR_FUTURE_TIMESTAMP = "stale_or_future_timestamp"
    SIGNATURE_MISMATCH = "signature_mismatch"


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da verificação de assinatura.

    Atributos:
        valid: True somente se timestamp e HMAC passaram
        failure: Motivo da rejeição quando valid=False
        skew_seconds: now - timestamp (positivo = passado), quando parseável
    """

    valid: bool
    failure: SignatureFailure | None = None
    skew_seconds: float | None = None


def _to_bytes(value: bytes | str) -> bytes:
    return value if isinstance(value, bytes) else value.encode("utf-8")


def parse_timestamp(timestamp: str) -> datetime | None:
    """Converte timestamp ISO-8601 em datetime aware (UTC se sem offset)."""
    if not timestamp or not timestamp.strip():
        return None
    try:
        parsed = datetime.fromisoformat(timestamp.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def sign_payload(secret: bytes | str, payload: bytes | str, timestamp: str) -> str:
    """Calcula a assinatura hex esperada para (timestamp, payload)."""
    message = timestamp.encode("utf-8") + b":" + _to_bytes(payload)
    return hmac.new(_to_bytes(secret), message, hashlib.sha256).hexdigest()


def _signatures_match(expected_hex: str, supplied: str) -> bool:
    # Comprimento pode vazar; conteúdo não.
    if len(supplied) != len(expected_hex):
        return False
    # Só a forma canônica do hexdigest (minúsculo, sem separadores).
    if _HEX_DIGEST_RE.fullmatch(supplied) is None:
        return False
    return hmac.compare_digest(supplied, expected_hex)


def verify_signature(
    secret: bytes | str,
    payload: bytes | str,
    signature: str,
    timestamp: str,
    *,
    now: datetime | None = None,
    max_skew_seconds: int = MAX_TIMESTAMP_SKEW_SECONDS,
) -> SignatureResult:
    """Valida assinatura HMAC e janela de replay do timestamp.

    A janela é verificada independentemente da assinatura: um timestamp
    fora de |now - timestamp| <= max_skew_seconds rejeita mesmo com HMAC
    correto.

    Args:
        secret: Secret HMAC compartilhado
        payload: Corpo bruto da requisição
        signature: Header x-signature (hex)
        timestamp: Header x-timestamp (ISO-8601)
        now: Instante de referência (default: agora, UTC)
        max_skew_seconds: Tolerância para passado e futuro

    Returns:
        SignatureResult
    """
    parsed = parse_timestamp(timestamp)
    if parsed is None:
        return SignatureResult(valid=False, failure=SignatureFailure.INVALID_TIMESTAMP)

    reference = now or datetime.now(UTC)
    skew = (reference - parsed).total_seconds()
    if abs(skew) > max_skew_seconds:
        return SignatureResult(
            valid=False,
            failure=SignatureFailure.STALE_OR_FUTURE_TIMESTAMP,
            skew_seconds=skew,
        )

    expected = sign_payload(secret, payload, timestamp)
    if not _signatures_match(expected, signature or ""):
        return SignatureResult(
            valid=False,
            failure=SignatureFailure.SIGNATURE_MISMATCH,
            skew_seconds=skew,
        )

    return SignatureResult(valid=True, skew_seconds=skew)
