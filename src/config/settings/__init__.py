"""Agregador de settings do Lead Intake.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    LeadIngestionSettings,
    LeadStoreBackend,
    get_base_settings,
    get_lead_settings,
)

# Infrastructure settings
from config.settings.infra import (
    EventBusBackend,
    FirestoreSettings,
    PubSubSettings,
    get_firestore_settings,
    get_pubsub_settings,
)

# Secrets
from config.settings.secrets import (
    SecretsBackend,
    SecretsSettings,
    get_secrets_settings,
)

# Turnstile
from config.settings.turnstile import (
    TURNSTILE_VERIFY_URL,
    TurnstileSettings,
    get_turnstile_settings,
)

__all__ = [
    # Constants
    "TURNSTILE_VERIFY_URL",
    # Base
    "BaseSettings",
    "Environment",
    "EventBusBackend",
    # Infrastructure
    "FirestoreSettings",
    # Leads
    "LeadIngestionSettings",
    "LeadStoreBackend",
    "PubSubSettings",
    # Secrets
    "SecretsBackend",
    "SecretsSettings",
    "TurnstileSettings",
    "get_base_settings",
    "get_firestore_settings",
    "get_lead_settings",
    "get_pubsub_settings",
    "get_secrets_settings",
    "get_turnstile_settings",
]
