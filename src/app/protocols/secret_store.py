"""Protocolo do provedor externo de secrets."""

from __future__ import annotations

from typing import Protocol


class SecretStoreProtocol(Protocol):
    """Contrato mínimo para provedores de secrets (GCP, env).

    Falhas devem ser reportadas como SecretUnavailableError.
    """

    async def get_secret(self, name: str) -> str: ...


class SecretProviderProtocol(Protocol):
    """Contrato de leitura de secrets consumido pelo pipeline (ex.: SecretCache)."""

    async def get(self, secret_name: str) -> str: ...
