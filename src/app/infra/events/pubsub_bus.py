"""Pub/Sub Event Bus — publicação de eventos de lead no Google Cloud Pub/Sub.

Cada entrada vira uma mensagem com data JSON {source, type, detail} e
atributos `source`/`type` para filtros de subscription.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from app.protocols.event_bus import EventBusProtocol, EventEntry, PublishResult

if TYPE_CHECKING:
    from google.cloud.pubsub_v1 import PublisherClient

logger = logging.getLogger(__name__)


class PubSubEventBus(EventBusProtocol):
    """Event bus usando Pub/Sub.

    Args:
        publisher: PublisherClient do Pub/Sub
        project_id: Projeto GCP do tópico
        topic: Nome do tópico
        timeout_seconds: Espera máxima pela confirmação de cada mensagem
    """

    def __init__(
        self,
        publisher: PublisherClient,
        project_id: str,
        topic: str,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._publisher = publisher
        self._topic_path = publisher.topic_path(project_id, topic)
        self._timeout_seconds = timeout_seconds

    @property
    def topic_path(self) -> str:
        return self._topic_path

    def _publish_sync(self, entries: list[EventEntry]) -> PublishResult:
        futures: list[Any] = []
        for entry in entries:
            data = json.dumps(entry.to_message(), separators=(",", ":")).encode("utf-8")
            futures.append(
                self._publisher.publish(
                    self._topic_path,
                    data,
                    source=entry.source,
                    type=entry.detail_type,
                )
            )

        event_ids: list[str] = []
        failed = 0
        for future in futures:
            try:
                event_ids.append(str(future.result(timeout=self._timeout_seconds)))
            except Exception as exc:
                failed += 1
                logger.error(
                    "pubsub_publish_entry_failed",
                    extra={"topic": self._topic_path, "error_type": type(exc).__name__},
                )
        return PublishResult(failed_count=failed, event_ids=tuple(event_ids))

    async def publish(self, entries: list[EventEntry]) -> PublishResult:
        """Publica entradas e aguarda confirmação fora do event loop."""
        if not entries:
            return PublishResult()
        return await asyncio.to_thread(self._publish_sync, entries)
