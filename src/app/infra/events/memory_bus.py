"""Event bus em memória — apenas para desenvolvimento e testes."""

from __future__ import annotations

import uuid

from app.protocols.event_bus import EventBusProtocol, EventEntry, PublishResult


class MemoryEventBus(EventBusProtocol):
    """Acumula entradas publicadas; nada é entregue a consumidores."""

    def __init__(self, max_entries: int = 10000) -> None:
        self._entries: list[EventEntry] = []
        self._max_entries = max_entries

    async def publish(self, entries: list[EventEntry]) -> PublishResult:
        """Registra entradas e devolve IDs sintéticos."""
        self._entries.extend(entries)
        # Limita tamanho para evitar memory leak em dev
        if len(self._entries) > self._max_entries:
            self._entries = self._entries[-self._max_entries:]
        return PublishResult(
            failed_count=0,
            event_ids=tuple(str(uuid.uuid4()) for _ in entries),
        )

    @property
    def entries(self) -> list[EventEntry]:
        """Entradas publicadas (apenas para testes)."""
        return list(self._entries)
