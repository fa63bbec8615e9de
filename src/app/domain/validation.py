"""Resultado tipado da validação de requisições de lead.

A validação retorna um union explícito em vez de levantar exceções:

    LeadValidationResult = ValidatedLeadRequest | ValidationFailure

O orquestrador decide o fluxo via isinstance(), sem try/except aninhado.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from app.domain.lead import Submission


class ValidationCode(StrEnum):
    """Códigos de falha de validação expostos ao cliente."""

    MISSING_BODY = "MISSING_BODY"
    INVALID_JSON = "INVALID_JSON"
    INVALID_HEADERS = "INVALID_HEADERS"
    VALIDATION_ERROR = "VALIDATION_ERROR"


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """Violação de uma restrição de campo (header ou body)."""

    field: str
    message: str
    code: str = "invalid"

    def as_dict(self) -> dict[str, Any]:
        return {"field": self.field, "message": self.message, "code": self.code}


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """Falha de validação com todas as violações coletadas."""

    code: ValidationCode
    message: str
    violations: tuple[FieldViolation, ...] = ()

    @property
    def fields(self) -> list[str]:
        """Campos violados, na ordem reportada."""
        return [violation.field for violation in self.violations]


@dataclass(frozen=True, slots=True)
class ValidatedHeaders:
    """Headers obrigatórios já validados (nomes normalizados em lower-case)."""

    idempotency_key: str
    turnstile_token: str
    signature: str | None = None
    timestamp: str | None = None


@dataclass(frozen=True, slots=True)
class ValidatedLeadRequest:
    """Requisição validada: idempotency key + submissão normalizada."""

    headers: ValidatedHeaders
    submission: Submission
    raw_body: str = field(default="", repr=False)

    @classmethod
    def from_parts(
        cls,
        headers: ValidatedHeaders,
        submission: Submission,
        raw_body: bytes | str | None,
    ) -> ValidatedLeadRequest:
        """Monta a requisição validada guardando o corpo bruto como texto."""
        if isinstance(raw_body, bytes):
            text = raw_body.decode("utf-8", errors="replace")
        else:
            text = raw_body or ""
        return cls(headers=headers, submission=submission, raw_body=text)

    @property
    def idempotency_key(self) -> str:
        return self.headers.idempotency_key


HeaderValidationResult = ValidatedHeaders | ValidationFailure
BodyValidationResult = Submission | ValidationFailure
LeadValidationResult = ValidatedLeadRequest | ValidationFailure
