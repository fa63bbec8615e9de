"""Validação dos headers obrigatórios de submissão de lead.

Nomes de header são comparados em lower-case.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from app.domain.validation import (
    FieldViolation,
    HeaderValidationResult,
    ValidatedHeaders,
    ValidationCode,
    ValidationFailure,
)

IDEMPOTENCY_KEY_HEADER = "x-idempotency-key"
TURNSTILE_TOKEN_HEADER = "x-turnstile-token"
SIGNATURE_HEADER = "x-signature"
TIMESTAMP_HEADER = "x-timestamp"

_UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def normalize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Retorna cópia dos headers com nomes em lower-case."""
    return {str(key).lower(): value for key, value in headers.items()}


def _required(
    normalized: dict[str, str],
    name: str,
    violations: list[FieldViolation],
) -> str:
    value = (normalized.get(name) or "").strip()
    if not value:
        violations.append(FieldViolation(field=name, message=f"{name} is required", code="missing"))
    return value


def validate_lead_headers(
    headers: Mapping[str, str],
    *,
    require_signature: bool = False,
) -> HeaderValidationResult:
    """Valida idempotency key (UUID), token anti-bot e, opcionalmente,
    os headers de assinatura.

    Returns:
        ValidatedHeaders ou ValidationFailure(INVALID_HEADERS) com todas
        as violações.
    """
    normalized = normalize_headers(headers)
    violations: list[FieldViolation] = []

    idempotency_key = _required(normalized, IDEMPOTENCY_KEY_HEADER, violations)
    if idempotency_key and not _UUID_PATTERN.match(idempotency_key):
        violations.append(
            FieldViolation(
                field=IDEMPOTENCY_KEY_HEADER,
                message=f"{IDEMPOTENCY_KEY_HEADER} must be a valid UUID",
                code="invalid_uuid",
            )
        )

    turnstile_token = _required(normalized, TURNSTILE_TOKEN_HEADER, violations)

    signature: str | None = None
    timestamp: str | None = None
    if require_signature:
        signature = _required(normalized, SIGNATURE_HEADER, violations)
        timestamp = _required(normalized, TIMESTAMP_HEADER, violations)

    if violations:
        return ValidationFailure(
            code=ValidationCode.INVALID_HEADERS,
            message="Missing or invalid headers",
            violations=tuple(violations),
        )

    return ValidatedHeaders(
        idempotency_key=idempotency_key,
        turnstile_token=turnstile_token,
        signature=signature,
        timestamp=timestamp,
    )
