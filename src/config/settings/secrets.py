"""Settings de secrets (HMAC e Turnstile).

Nomes dos secrets no provedor e TTL do cache em memória.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

SecretsBackend = Literal["env", "gcp"]

DEFAULT_CACHE_TTL_SECONDS = 300


@dataclass(frozen=True)
class SecretsSettings:
    """Configurações de acesso a secrets.

    Attributes:
        backend: Provedor de secrets (env em dev, gcp em staging/production)
        cache_ttl_seconds: Validade de cada entrada do SecretCache
        hmac_secret_name: Nome do secret HMAC compartilhado com o frontend
        turnstile_secret_name: Nome do secret do Cloudflare Turnstile
    """

    backend: SecretsBackend = "env"
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    hmac_secret_name: str = "lead-hmac-server-secret"
    turnstile_secret_name: str = "lead-turnstile-secret"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de secrets.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("env", "gcp"):
            errors.append(f"SECRETS_BACKEND inválido: {self.backend}")

        if self.backend == "env" and not base.is_development:
            errors.append("SECRETS_BACKEND=env proibido em staging/production")

        if self.backend == "gcp" and not base.gcp_project:
            errors.append("SECRETS_BACKEND=gcp requer GCP_PROJECT configurado")

        if self.cache_ttl_seconds <= 0:
            errors.append("SECRETS_CACHE_TTL_SECONDS deve ser > 0")

        if not self.hmac_secret_name or not self.turnstile_secret_name:
            errors.append("Nomes de secrets não podem ser vazios")

        return errors


def _load_secrets_from_env() -> SecretsSettings:
    """Carrega SecretsSettings de variáveis de ambiente."""
    backend_str = os.getenv("SECRETS_BACKEND", "env").lower()
    backend: SecretsBackend = backend_str if backend_str in ("env", "gcp") else "env"
    return SecretsSettings(
        backend=backend,
        cache_ttl_seconds=int(
            os.getenv("SECRETS_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS))
        ),
        hmac_secret_name=os.getenv("HMAC_SERVER_SECRET_NAME", "lead-hmac-server-secret"),
        turnstile_secret_name=os.getenv("TURNSTILE_SECRET_NAME", "lead-turnstile-secret"),
    )


@lru_cache(maxsize=1)
def get_secrets_settings() -> SecretsSettings:
    """Retorna instância cacheada de SecretsSettings."""
    return _load_secrets_from_env()
