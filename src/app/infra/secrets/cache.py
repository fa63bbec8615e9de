"""SecretCache — cache de secrets com TTL, compartilhado no processo.

Construído uma vez pelo bootstrap e passado por referência para o
pipeline. Sobrevive entre requisições de uma mesma instância (warm start).

Sem lock: dois fetches concorrentes da mesma chave apenas sobrescrevem
a entrada com o mesmo valor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.protocols.clock import system_clock
from utils.errors import SecretUnavailableError

if TYPE_CHECKING:
    from app.protocols.clock import Clock
    from app.protocols.secret_store import SecretStoreProtocol

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0


@dataclass(frozen=True, slots=True)
class SecretCacheEntry:
    """Valor do secret + momento do fetch (epoch segundos)."""

    value: str
    fetched_at: float


class SecretCache:
    """Cache de secrets por nome com expiração por TTL.

    Args:
        store: Provedor externo de secrets
        ttl_seconds: Validade de cada entrada
        clock: Relógio injetável (epoch segundos)
    """

    def __init__(
        self,
        store: SecretStoreProtocol,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Clock = system_clock,
    ) -> None:
        if ttl_seconds <= 0:
            msg = "ttl_seconds deve ser > 0"
            raise ValueError(msg)
        self._store = store
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, SecretCacheEntry] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def _fresh_entry(self, secret_name: str, now: float) -> SecretCacheEntry | None:
        entry = self._entries.get(secret_name)
        if entry is None or now - entry.fetched_at >= self._ttl_seconds:
            return None
        return entry

    async def get(self, secret_name: str) -> str:
        """Retorna secret do cache ou busca no provedor se ausente/expirado.

        Raises:
            SecretUnavailableError: Falha no provedor (sem fallback para
                valor expirado).
        """
        now = self._clock()
        entry = self._fresh_entry(secret_name, now)
        if entry is not None:
            return entry.value

        try:
            value = await self._store.get_secret(secret_name)
        except SecretUnavailableError:
            raise
        except Exception as exc:
            logger.error(
                "secret_fetch_failed",
                extra={"secret_name": secret_name, "error_type": type(exc).__name__},
            )
            raise SecretUnavailableError(secret_name) from exc

        if not value:
            raise SecretUnavailableError(secret_name, reason="empty_value")

        self._entries[secret_name] = SecretCacheEntry(value=value, fetched_at=now)
        logger.debug("secret_cache_refreshed", extra={"secret_name": secret_name})
        return value

    def clear(self) -> None:
        """Remove todas as entradas (uso em testes)."""
        self._entries.clear()
