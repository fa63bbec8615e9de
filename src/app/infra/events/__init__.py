"""Event buses — implementações concretas de publicação de eventos.

Módulos disponíveis:
    - pubsub_bus: Google Cloud Pub/Sub (staging/production)
    - memory_bus: Bus em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.events.memory_bus import MemoryEventBus
from app.infra.events.pubsub_bus import PubSubEventBus

__all__ = [
    "MemoryEventBus",
    "PubSubEventBus",
]
