"""Modelos de domínio do Lead Intake."""

from app.domain.lead import LEAD_RECORD_TYPE, LeadSubmittedEvent, StoredLead, Submission
from app.domain.validation import (
    FieldViolation,
    LeadValidationResult,
    ValidatedHeaders,
    ValidatedLeadRequest,
    ValidationCode,
    ValidationFailure,
)

__all__ = [
    "LEAD_RECORD_TYPE",
    "FieldViolation",
    "LeadSubmittedEvent",
    "LeadValidationResult",
    "StoredLead",
    "Submission",
    "ValidatedHeaders",
    "ValidatedLeadRequest",
    "ValidationCode",
    "ValidationFailure",
]
