"""Agregador de settings de infraestrutura GCP.

Re-exporta todas as settings de infraestrutura para uso externo.
"""

from __future__ import annotations

from config.settings.infra.firestore import (
    FirestoreSettings,
    get_firestore_settings,
)
from config.settings.infra.pubsub import (
    EventBusBackend,
    PubSubSettings,
    get_pubsub_settings,
)

__all__ = [
    "EventBusBackend",
    # Firestore
    "FirestoreSettings",
    # Pub/Sub
    "PubSubSettings",
    "get_firestore_settings",
    "get_pubsub_settings",
]
