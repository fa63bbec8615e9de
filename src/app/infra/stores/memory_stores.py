"""Store de leads em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.clock import system_clock
from app.protocols.lead_store import LeadStoreProtocol

if TYPE_CHECKING:
    from app.domain.lead import StoredLead
    from app.protocols.clock import Clock


class MemoryLeadStore(LeadStoreProtocol):
    """Store de leads em memória — apenas para dev/test.

    O check-and-set de `put_if_absent` não tem `await` entre leitura e
    escrita, então é atômico dentro de um event loop.
    """

    def __init__(self, clock: Clock = system_clock) -> None:
        self._records: dict[str, StoredLead] = {}
        self._clock = clock

    def _is_expired(self, record: StoredLead) -> bool:
        return record.ttl <= self._clock()

    def _live_record(self, lead_id: str) -> StoredLead | None:
        record = self._records.get(lead_id)
        if record is None:
            return None
        if self._is_expired(record):
            del self._records[lead_id]
            return None
        return record

    async def put_if_absent(self, record: StoredLead) -> bool:
        """Grava registro se a chave não existir (ou estiver expirada)."""
        if self._live_record(record.lead_id) is not None:
            return False
        self._records[record.lead_id] = record
        return True

    async def get(self, lead_id: str) -> StoredLead | None:
        """Lê registro por chave."""
        return self._live_record(lead_id)

    async def query_by_created_at(self, start_ms: int, end_ms: int) -> list[StoredLead]:
        """Lista leads vivos na janela de criação, ordenados."""
        matches = [
            record
            for record in list(self._records.values())
            if start_ms <= record.created_at <= end_ms and not self._is_expired(record)
        ]
        return sorted(matches, key=lambda record: record.created_at)

    def __len__(self) -> int:
        return len(self._records)
