"""Validador de requisições de lead (headers + body)."""

from __future__ import annotations

from collections.abc import Mapping

from api.validators.leads.headers import validate_lead_headers
from api.validators.leads.submission import validate_lead_body
from app.domain.validation import (
    BodyValidationResult,
    HeaderValidationResult,
    LeadValidationResult,
    ValidatedLeadRequest,
    ValidationFailure,
)


class LeadRequestValidator:
    """Implementação de LeadRequestValidatorProtocol.

    Headers são validados antes do body; a primeira etapa que falhar
    determina o código retornado.
    """

    def validate_headers(
        self,
        headers: Mapping[str, str],
        *,
        require_signature: bool = False,
    ) -> HeaderValidationResult:
        return validate_lead_headers(headers, require_signature=require_signature)

    def validate_body(self, raw_body: bytes | str | None) -> BodyValidationResult:
        return validate_lead_body(raw_body)

    def validate(
        self,
        headers: Mapping[str, str],
        raw_body: bytes | str | None,
        *,
        require_signature: bool = False,
    ) -> LeadValidationResult:
        validated_headers = self.validate_headers(headers, require_signature=require_signature)
        if isinstance(validated_headers, ValidationFailure):
            return validated_headers

        submission = self.validate_body(raw_body)
        if isinstance(submission, ValidationFailure):
            return submission

        return ValidatedLeadRequest.from_parts(validated_headers, submission, raw_body)
