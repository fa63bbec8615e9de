"""GCP Secret Manager — provedor de secrets para staging/production.

Sem cache próprio: o cache com TTL fica em SecretCache, que é quem
decide quando buscar de novo.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import TYPE_CHECKING

from utils.errors import SecretUnavailableError

if TYPE_CHECKING:
    from google.cloud.secretmanager import SecretManagerServiceClient

logger = logging.getLogger(__name__)


class GCPSecretStore:
    """Provedor de secrets usando GCP Secret Manager.

    Tenta o nome com sufixo de ambiente.
    Ex.: name="lead-turnstile-secret", environment="staging"
         -> "lead-turnstile-secret-staging"

    Args:
        client: Cliente do Secret Manager
        project_id: ID do projeto GCP (default: env GCP_PROJECT)
        environment: Sufixo de ambiente ("" desabilita)
        version: Versão do secret
    """

    def __init__(
        self,
        client: SecretManagerServiceClient,
        project_id: str | None = None,
        environment: str = "",
        version: str = "latest",
    ) -> None:
        self._client = client
        self._project_id = project_id or os.getenv("GCP_PROJECT", "")
        self._suffix = f"-{environment}" if environment else ""
        self._version = version

    def resource_name(self, name: str) -> str:
        """Monta o resource name completo do secret."""
        return (
            f"projects/{self._project_id}/secrets/{name}{self._suffix}"
            f"/versions/{self._version}"
        )

    def get_secret_sync(self, name: str) -> str:
        """Obtém valor do secret (chamada bloqueante do SDK).

        Raises:
            SecretUnavailableError: Projeto ausente, secret inexistente ou
                falha de rede.
        """
        if not self._project_id:
            raise SecretUnavailableError(name, reason="missing_project")

        resource = self.resource_name(name)
        try:
            response = self._client.access_secret_version(request={"name": resource})
        except Exception as exc:
            logger.error(
                "secret_load_error",
                extra={"secret_name": name, "error_type": type(exc).__name__},
            )
            raise SecretUnavailableError(name) from exc

        value = response.payload.data.decode("UTF-8")
        logger.debug("secret_loaded", extra={"secret_name": name})
        return value

    async def get_secret(self, name: str) -> str:
        """Obtém secret sem bloquear o event loop (SDK não tem async nativo)."""
        return await asyncio.to_thread(self.get_secret_sync, name)
