"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (Cloud Logging, BigQuery, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Outcome: counter de desfechos do pipeline de leads por etapa/código

Uso:
    from app.observability.metrics import record_latency, record_pipeline_outcome

    start = time.perf_counter()
    # ... operação ...
    record_latency("submit_lead", "execute", (time.perf_counter() - start) * 1000)

    record_pipeline_outcome("respond_success", 200, "CREATED", correlation_id)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "submit_lead", "turnstile")
        operation: Nome da operação (ex: "execute", "verify")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_pipeline_outcome(
    stage: str,
    status_code: int,
    code: str,
    correlation_id: str | None = None,
    metadata: dict[str, str | float | int | bool] | None = None,
) -> None:
    """Registra desfecho de uma execução do pipeline de leads.

    Args:
        stage: Última etapa alcançada (ex: "verify_bot_challenge")
        status_code: Status HTTP devolvido
        code: Código de desfecho (ex: "CREATED", "DUPLICATE", "TURNSTILE_FAILED")
        correlation_id: ID de correlação para rastreamento
        metadata: Metadados adicionais opcionais (sem PII)
    """
    extra: dict[str, str | float | int | bool | None] = {
        "metric_type": "pipeline_outcome",
        "component": "submit_lead",
        "stage": stage,
        "status_code": status_code,
        "outcome_code": code,
        "correlation_id": correlation_id,
    }
    if metadata:
        extra.update(metadata)

    logger.info("metric_pipeline_outcome", extra=extra)
