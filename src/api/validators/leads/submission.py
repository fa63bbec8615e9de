"""Schema e validação do body de submissão de lead.

O modelo pydantic concentra as restrições de campo; o ValidationError é
convertido em lista de FieldViolation (todas as violações de uma vez).
"""

from __future__ import annotations

import json
import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.domain.lead import Submission
from app.domain.validation import (
    BodyValidationResult,
    FieldViolation,
    ValidationCode,
    ValidationFailure,
)

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100
COMPANY_MAX_LENGTH = 100
MESSAGE_MIN_LENGTH = 10
MESSAGE_MAX_LENGTH = 1000

_EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)[a-z0-9_'+\-.]*[a-z0-9_+\-]@([a-z0-9][a-z0-9\-]*\.)+[a-z]{2,}$"
)

# Mensagens devolvidas ao cliente por (campo, tipo de erro pydantic)
_MESSAGES: dict[tuple[str, str], str] = {
    ("name", "string_too_short"): f"Name must be at least {NAME_MIN_LENGTH} characters",
    ("name", "string_too_long"): f"Name must not exceed {NAME_MAX_LENGTH} characters",
    ("email", "string_too_short"): "Email is required",
    ("email", "string_too_long"): f"Email must not exceed {EMAIL_MAX_LENGTH} characters",
    ("email", "value_error"): "Invalid email address",
    ("company", "string_too_long"): f"Company name must not exceed {COMPANY_MAX_LENGTH} characters",
    ("message", "string_too_short"): f"Message must be at least {MESSAGE_MIN_LENGTH} characters",
    ("message", "string_too_long"): f"Message must not exceed {MESSAGE_MAX_LENGTH} characters",
    ("turnstileToken", "string_too_short"): "Turnstile token is required",
}


class LeadSubmissionPayload(BaseModel):
    """Body JSON da submissão (campos extras são ignorados)."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True, strict=True)

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: str = Field(min_length=1, max_length=EMAIL_MAX_LENGTH)
    company: str | None = Field(default=None, max_length=COMPANY_MAX_LENGTH)
    message: str = Field(min_length=MESSAGE_MIN_LENGTH, max_length=MESSAGE_MAX_LENGTH)
    turnstile_token: str = Field(alias="turnstileToken", min_length=1)

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        normalized = value.lower()
        if not _EMAIL_PATTERN.match(normalized):
            raise ValueError("Invalid email address")
        return normalized

    @field_validator("company")
    @classmethod
    def _empty_company_as_none(cls, value: str | None) -> str | None:
        return value or None

    def to_submission(self) -> Submission:
        return Submission(
            name=self.name,
            email=self.email,
            company=self.company,
            message=self.message,
            turnstile_token=self.turnstile_token,
        )


def _violations_from(exc: ValidationError) -> tuple[FieldViolation, ...]:
    violations: list[FieldViolation] = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "body"
        error_type = str(error.get("type", "invalid"))
        message = _MESSAGES.get((field, error_type))
        if message is None:
            if error_type == "missing":
                message = f"{field} is required"
            elif error_type == "string_type":
                message = f"{field} must be a string"
            else:
                message = str(error.get("msg", "Invalid value"))
        violations.append(FieldViolation(field=field, message=message, code=error_type))
    return tuple(violations)


def validate_lead_body(raw_body: bytes | str | None) -> BodyValidationResult:
    """Parseia e valida o body JSON da submissão.

    Returns:
        Submission normalizada ou ValidationFailure
        (MISSING_BODY | INVALID_JSON | VALIDATION_ERROR).
    """
    if raw_body is None:
        return ValidationFailure(ValidationCode.MISSING_BODY, "Request body is required")

    text = raw_body.decode("utf-8", errors="replace") if isinstance(raw_body, bytes) else raw_body
    if not text.strip():
        return ValidationFailure(ValidationCode.MISSING_BODY, "Request body is required")

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return ValidationFailure(ValidationCode.INVALID_JSON, "Invalid JSON in request body")

    if not isinstance(data, dict):
        return ValidationFailure(ValidationCode.INVALID_JSON, "Request body must be a JSON object")

    try:
        payload = LeadSubmissionPayload.model_validate(data)
    except ValidationError as exc:
        return ValidationFailure(
            code=ValidationCode.VALIDATION_ERROR,
            message="Invalid request payload",
            violations=_violations_from(exc),
        )

    return payload.to_submission()
