"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.leads import (
    LeadIngestionSettings,
    LeadStoreBackend,
    get_lead_settings,
)

__all__ = [
    # Core
    "BaseSettings",
    "Environment",
    # Leads
    "LeadIngestionSettings",
    "LeadStoreBackend",
    "get_base_settings",
    "get_lead_settings",
]
