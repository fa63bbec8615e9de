"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.event_publisher import (
    LEAD_EVENT_SOURCE,
    LEAD_SUBMITTED_TYPE,
    LeadEventPublisher,
)
from app.services.idempotency_gateway import CommitResult, IdempotencyGateway

__all__ = [
    "LEAD_EVENT_SOURCE",
    "LEAD_SUBMITTED_TYPE",
    "CommitResult",
    "IdempotencyGateway",
    "LeadEventPublisher",
]
