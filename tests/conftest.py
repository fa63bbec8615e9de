"""Configuração do pytest para o projeto Lead Intake."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_firestore_settings,
    get_lead_settings,
    get_pubsub_settings,
    get_secrets_settings,
    get_turnstile_settings,
)

_SETTINGS_GETTERS = (
    get_base_settings,
    get_firestore_settings,
    get_lead_settings,
    get_pubsub_settings,
    get_secrets_settings,
    get_turnstile_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são lru_cache; cada teste lê o ambiente de novo."""
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
    yield
    for getter in _SETTINGS_GETTERS:
        getter.cache_clear()
