"""Casos de uso de leads."""

from app.use_cases.leads.models import (
    LeadRequest,
    PipelineOutcome,
    PipelineStage,
    SubmitLeadConfig,
)
from app.use_cases.leads.submit_lead import SubmitLeadUseCase

__all__ = [
    "LeadRequest",
    "PipelineOutcome",
    "PipelineStage",
    "SubmitLeadConfig",
    "SubmitLeadUseCase",
]
