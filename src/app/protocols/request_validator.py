"""Protocolo de validação de headers/body de submissões de lead."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.validation import (
        BodyValidationResult,
        HeaderValidationResult,
        LeadValidationResult,
    )


class LeadRequestValidatorProtocol(Protocol):
    """Contrato do validador de requisições (implementado em api/validators)."""

    def validate_headers(
        self,
        headers: Mapping[str, str],
        *,
        require_signature: bool = False,
    ) -> HeaderValidationResult: ...

    def validate_body(self, raw_body: bytes | str | None) -> BodyValidationResult: ...

    def validate(
        self,
        headers: Mapping[str, str],
        raw_body: bytes | str | None,
        *,
        require_signature: bool = False,
    ) -> LeadValidationResult: ...
