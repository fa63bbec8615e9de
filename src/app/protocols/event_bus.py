"""Protocolo do event bus externo."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class EventEntry:
    """Entrada publicada no bus (envelope {source, type, detail})."""

    source: str
    detail_type: str
    detail: dict[str, Any]

    def to_message(self) -> dict[str, Any]:
        return {"source": self.source, "type": self.detail_type, "detail": self.detail}


@dataclass(frozen=True, slots=True)
class PublishResult:
    """Resultado do publish em lote.

    Atributos:
        failed_count: Quantas entradas o bus rejeitou
        event_ids: IDs atribuídos às entradas aceitas
    """

    failed_count: int = 0
    event_ids: tuple[str, ...] = field(default_factory=tuple)


class EventBusProtocol(ABC):
    """Contrato mínimo do event bus (Pub/Sub em produção)."""

    @abstractmethod
    async def publish(self, entries: list[EventEntry]) -> PublishResult:
        """Publica entradas; falhas parciais são reportadas em failed_count."""
