"""Endpoint de submissão de leads.

Endpoints:
- POST /leads: recebe o formulário de contato

Qualquer outro método chega ao mesmo handler e recebe 405 do pipeline,
com o corpo padrão `{success: false, error, code}`.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.use_cases.leads import LeadRequest, PipelineStage, SubmitLeadUseCase
from app.use_cases.leads.responses import internal_error_outcome

logger = logging.getLogger(__name__)

router = APIRouter()

ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_submit_lead_use_case() -> SubmitLeadUseCase:
    """Dependency FastAPI: use case singleton do bootstrap."""
    from app.bootstrap import get_submit_lead_use_case as _get_use_case

    return _get_use_case()


def extract_client_ip(request: Request) -> str | None:
    """Primeiro hop de x-forwarded-for ou o peer do socket."""
    forwarded_for = request.headers.get("x-forwarded-for", "")
    first_hop = forwarded_for.split(",")[0].strip()
    if first_hop:
        return first_hop
    return request.client.host if request.client else None


@router.api_route("", methods=ROUTED_METHODS, response_model=None)
async def submit_lead(
    request: Request,
    use_case: SubmitLeadUseCase = Depends(get_submit_lead_use_case),
) -> JSONResponse:
    """Recebe submissão de lead e devolve o desfecho do pipeline.

    Returns:
        JSONResponse com `{success, ...}` e o status do desfecho.
    """
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        raw_body = await request.body()
        lead_request = LeadRequest(
            method=request.method,
            headers=dict(request.headers),
            body=raw_body or None,
            client_ip=extract_client_ip(request),
        )

        try:
            outcome = await use_case.execute(lead_request)
        except Exception:
            logger.exception(
                "lead_submission_unhandled_error",
                extra={"correlation_id": get_correlation_id()},
            )
            outcome = internal_error_outcome(PipelineStage.RECEIVE_REQUEST)

        logger.info(
            "lead_submission_completed",
            extra={
                "status_code": outcome.status_code,
                "outcome_code": outcome.code,
                "stage": str(outcome.stage),
            },
        )
        return JSONResponse(
            content=outcome.body,
            status_code=outcome.status_code,
            headers={CORRELATION_ID_HEADER: get_correlation_id()},
        )
    finally:
        reset_correlation_id(token)
