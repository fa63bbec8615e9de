"""Validadores de submissão de lead."""

from api.validators.leads.headers import (
    IDEMPOTENCY_KEY_HEADER,
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    TURNSTILE_TOKEN_HEADER,
    normalize_headers,
    validate_lead_headers,
)
from api.validators.leads.submission import LeadSubmissionPayload, validate_lead_body
from api.validators.leads.validator import LeadRequestValidator

__all__ = [
    "IDEMPOTENCY_KEY_HEADER",
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
    "TURNSTILE_TOKEN_HEADER",
    "LeadRequestValidator",
    "LeadSubmissionPayload",
    "normalize_headers",
    "validate_lead_body",
    "validate_lead_headers",
]
