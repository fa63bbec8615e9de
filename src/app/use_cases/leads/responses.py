"""Construção dos desfechos HTTP do pipeline de leads."""

from __future__ import annotations

from typing import Any

from app.domain.validation import ValidationFailure
from app.use_cases.leads.models import PipelineOutcome, PipelineStage

SUCCESS_MESSAGE = "Lead submission received successfully"
DUPLICATE_MESSAGE = "Lead submission received (duplicate request ignored)"
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"
SIGNATURE_FAILED_MESSAGE = "Request signature verification failed"
TURNSTILE_FAILED_MESSAGE = "Bot protection verification failed"
INTERNAL_ERROR_MESSAGE = "Internal server error. Please try again later."

CODE_CREATED = "CREATED"
CODE_DUPLICATE = "DUPLICATE"
CODE_METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
CODE_SIGNATURE_INVALID = "SIGNATURE_INVALID"
CODE_TURNSTILE_FAILED = "TURNSTILE_FAILED"
CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


def success_outcome(lead_id: str) -> PipelineOutcome:
    return PipelineOutcome(
        status_code=200,
        body={"success": True, "leadId": lead_id, "message": SUCCESS_MESSAGE},
        stage=PipelineStage.RESPOND_SUCCESS,
        code=CODE_CREATED,
        lead_id=lead_id,
        is_new=True,
    )


def duplicate_outcome(lead_id: str) -> PipelineOutcome:
    """Chave já usada: sucesso com o leadId do registro original."""
    return PipelineOutcome(
        status_code=200,
        body={"success": True, "leadId": lead_id, "message": DUPLICATE_MESSAGE},
        stage=PipelineStage.RESPOND_SUCCESS,
        code=CODE_DUPLICATE,
        lead_id=lead_id,
        is_new=False,
    )


def error_outcome(
    status_code: int,
    message: str,
    code: str,
    stage: PipelineStage,
    details: dict[str, Any] | None = None,
) -> PipelineOutcome:
    body: dict[str, Any] = {"success": False, "error": message, "code": code}
    if details:
        body["details"] = details
    return PipelineOutcome(status_code=status_code, body=body, stage=stage, code=code)


def validation_outcome(failure: ValidationFailure, stage: PipelineStage) -> PipelineOutcome:
    """400 com todas as violações em details.errors."""
    details = None
    if failure.violations:
        details = {"errors": [violation.as_dict() for violation in failure.violations]}
    return error_outcome(400, failure.message, str(failure.code), stage, details)


def method_not_allowed_outcome() -> PipelineOutcome:
    return error_outcome(
        405,
        METHOD_NOT_ALLOWED_MESSAGE,
        CODE_METHOD_NOT_ALLOWED,
        PipelineStage.VALIDATE_METHOD_AND_HEADERS,
    )


def internal_error_outcome(stage: PipelineStage) -> PipelineOutcome:
    """500 genérico; o detalhe fica apenas nos logs."""
    return error_outcome(500, INTERNAL_ERROR_MESSAGE, CODE_INTERNAL_ERROR, stage)
