"""Publicação de eventos de domínio de lead no event bus."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.protocols.event_bus import EventEntry
from config.logging import mask_key
from utils.errors import EventPublishError

if TYPE_CHECKING:
    from app.domain.lead import LeadSubmittedEvent
    from app.protocols.event_bus import EventBusProtocol

logger = logging.getLogger(__name__)

LEAD_EVENT_SOURCE = "portfolio.leads"
LEAD_SUBMITTED_TYPE = "LeadSubmitted"


class LeadEventPublisher:
    """Emite eventos no bus; falha parcial conta como falha total.

    Args:
        bus: Event bus (Pub/Sub ou memória)
    """

    def __init__(self, bus: EventBusProtocol) -> None:
        self._bus = bus

    async def publish(self, event: LeadSubmittedEvent) -> None:
        """Publica LeadSubmitted. Chamado apenas quando o commit é novo.

        Raises:
            EventPublishError: Bus indisponível ou entrada rejeitada.
        """
        event_id = await self.publish_event(
            LEAD_EVENT_SOURCE,
            LEAD_SUBMITTED_TYPE,
            event.to_detail(),
        )
        logger.info(
            "lead_event_published",
            extra={"lead_id": mask_key(event.lead_id), "event_id": event_id},
        )

    publish_lead_submitted = publish

    async def publish_event(
        self,
        source: str,
        detail_type: str,
        detail: dict[str, Any],
    ) -> str | None:
        """Publica evento genérico e retorna o ID atribuído pelo bus.

        Raises:
            EventPublishError: Bus indisponível ou failed_count > 0.
        """
        entry = EventEntry(source=source, detail_type=detail_type, detail=detail)
        try:
            result = await self._bus.publish([entry])
        except EventPublishError:
            raise
        except Exception as exc:
            logger.error(
                "event_publish_error",
                extra={
                    "source": source,
                    "detail_type": detail_type,
                    "error_type": type(exc).__name__,
                },
            )
            raise EventPublishError("Falha ao publicar evento no bus") from exc

        if result.failed_count > 0:
            logger.error(
                "event_publish_partial_failure",
                extra={
                    "source": source,
                    "detail_type": detail_type,
                    "failed_count": result.failed_count,
                },
            )
            raise EventPublishError(
                "Bus rejeitou entradas do evento",
                failed_count=result.failed_count,
            )

        return result.event_ids[0] if result.event_ids else None
