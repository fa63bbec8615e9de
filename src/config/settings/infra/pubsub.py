"""Settings do Pub/Sub.

Configurações do event bus de leads (Google Cloud Pub/Sub).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

EventBusBackend = Literal["memory", "pubsub"]


@dataclass(frozen=True)
class PubSubSettings:
    """Configurações do Pub/Sub.

    Attributes:
        backend: Backend do event bus (memory|pubsub)
        topic_leads: Tópico para eventos LeadSubmitted
        publish_timeout_seconds: Timeout de confirmação de cada publish
    """

    backend: EventBusBackend = "memory"
    topic_leads: str = "lead-events"
    publish_timeout_seconds: float = 10.0

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações do Pub/Sub.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "pubsub"):
            errors.append(f"EVENT_BUS_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append("EVENT_BUS_BACKEND=memory proibido em staging/production")

        if self.backend == "pubsub" and not base.gcp_project:
            errors.append("EVENT_BUS_BACKEND=pubsub requer GCP_PROJECT configurado")

        if not self.topic_leads:
            errors.append("PUBSUB_TOPIC_LEADS não pode ser vazio")

        if self.publish_timeout_seconds <= 0:
            errors.append("PUBSUB_PUBLISH_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_pubsub_from_env() -> PubSubSettings:
    """Carrega PubSubSettings de variáveis de ambiente."""
    backend_str = os.getenv("EVENT_BUS_BACKEND", "memory").lower()
    backend: EventBusBackend = backend_str if backend_str in ("memory", "pubsub") else "memory"
    return PubSubSettings(
        backend=backend,
        topic_leads=os.getenv("PUBSUB_TOPIC_LEADS", "lead-events"),
        publish_timeout_seconds=float(os.getenv("PUBSUB_PUBLISH_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_pubsub_settings() -> PubSubSettings:
    """Retorna instância cacheada de PubSubSettings."""
    return _load_pubsub_from_env()
