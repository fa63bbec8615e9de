"""Secrets — integração com provedores de segredos.

Módulos disponíveis:
    - cache: SecretCache com TTL (compartilhado no processo)
    - gcp_secrets: Google Cloud Secret Manager
    - env_secrets: Variáveis de ambiente (dev only)
"""

from __future__ import annotations

from app.infra.secrets.cache import SecretCache, SecretCacheEntry
from app.infra.secrets.env_secrets import EnvSecretStore
from app.infra.secrets.gcp_secrets import GCPSecretStore

__all__ = [
    "EnvSecretStore",
    "GCPSecretStore",
    "SecretCache",
    "SecretCacheEntry",
]
