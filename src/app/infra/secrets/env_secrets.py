"""Environment Secrets — provedor de secrets via variáveis de ambiente.

Fallback para desenvolvimento local e testes. NÃO usar em staging/production.
"""

from __future__ import annotations

import logging
import os

from utils.errors import SecretUnavailableError

logger = logging.getLogger(__name__)


class EnvSecretStore:
    """Provedor de secrets usando variáveis de ambiente.

    Args:
        prefix: Prefixo para variáveis de ambiente (default: "")
    """

    def __init__(self, prefix: str = "") -> None:
        self._prefix = prefix.upper().rstrip("_") + "_" if prefix else ""

    def env_key(self, name: str) -> str:
        """Converte nome de secret para variável de ambiente."""
        # lead-turnstile-secret -> LEAD_TURNSTILE_SECRET
        return f"{self._prefix}{name.upper().replace('-', '_').replace('/', '_')}"

    async def get_secret(self, name: str) -> str:
        """Obtém secret de variável de ambiente.

        Raises:
            SecretUnavailableError: Se variável não definida ou vazia.
        """
        env_key = self.env_key(name)
        value = os.getenv(env_key)
        if not value:
            logger.debug("env_secret_not_found", extra={"secret_name": name, "env_key": env_key})
            raise SecretUnavailableError(name, reason="not_found")
        return value
