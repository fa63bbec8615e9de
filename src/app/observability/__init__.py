"""Observabilidade — correlação por request e métricas em log.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_pipeline_outcome
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    accept_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_latency, record_pipeline_outcome

__all__ = [
    "CORRELATION_ID_HEADER",
    "accept_correlation_id",
    "get_correlation_id",
    "record_latency",
    "record_pipeline_outcome",
    "reset_correlation_id",
    "set_correlation_id",
]
