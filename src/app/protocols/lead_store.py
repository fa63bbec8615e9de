"""Protocolo de store de leads com escrita condicional.

Interfaces leves (ABCs) dependidas por Application.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.lead import StoredLead


class LeadStoreProtocol(ABC):
    """Contrato do store externo de leads.

    A única primitiva de concorrência do sistema é `put_if_absent`:
    a escrita só acontece se não existir registro com o mesmo leadId
    no momento do commit.
    """

    @abstractmethod
    async def put_if_absent(self, record: StoredLead) -> bool:
        """Grava registro somente se a chave não existir.

        Args:
            record: Registro novo (expiração em record.ttl)

        Returns:
            True se gravou; False se a chave já existia (AlreadyExists).

        Raises:
            StorageUnavailableError: Qualquer outra falha do store.
        """

    @abstractmethod
    async def get(self, lead_id: str) -> StoredLead | None:
        """Lê registro por chave (None se ausente ou expirado)."""

    @abstractmethod
    async def query_by_created_at(self, start_ms: int, end_ms: int) -> list[StoredLead]:
        """Lista leads com start_ms <= createdAt <= end_ms, ordenados por criação."""
