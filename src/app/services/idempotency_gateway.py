"""Gateway de idempotência e armazenamento de leads.

Colapsa o check-then-act clássico em uma única escrita condicional no
store: exatamente um escritor vence por idempotency key e os demais
leem o registro do vencedor. Nenhum lock em processo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.lead import StoredLead
from app.protocols.clock import system_clock
from config.logging import mask_key
from utils.errors import StorageUnavailableError

if TYPE_CHECKING:
    from app.domain.lead import Submission
    from app.protocols.clock import Clock
    from app.protocols.lead_store import LeadStoreProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommitResult:
    """Resultado do commit.

    Atributos:
        record: Registro autoritativo (novo ou do vencedor anterior)
        is_new: True somente para quem gravou; único caminho que emite evento
    """

    record: StoredLead
    is_new: bool


class IdempotencyGateway:
    """Dono exclusivo dos registros de lead.

    Args:
        store: Store com put_if_absent atômico
        clock: Relógio (epoch segundos) para createdAt/ttl
    """

    def __init__(self, store: LeadStoreProtocol, clock: Clock = system_clock) -> None:
        self._store = store
        self._clock = clock

    async def commit(
        self,
        idempotency_key: str,
        submission: Submission,
        retention_days: int,
    ) -> CommitResult:
        """Persiste a submissão uma única vez por idempotency key.

        Se a chave já existe, a submissão recebida é descartada e o
        registro armazenado é devolvido (mesmo que o conteúdo difira).

        Raises:
            StorageUnavailableError: Qualquer falha do store que não seja
                conflito de chave.
        """
        record = StoredLead.create(
            idempotency_key,
            submission,
            now_ms=int(self._clock() * 1000),
            retention_days=retention_days,
        )

        try:
            created = await self._store.put_if_absent(record)
        except StorageUnavailableError:
            raise
        except Exception as exc:
            raise StorageUnavailableError("Falha na escrita condicional do lead") from exc

        if created:
            logger.info("lead_committed", extra={"lead_id": mask_key(idempotency_key)})
            return CommitResult(record=record, is_new=True)

        existing = await self.get_lead(idempotency_key)
        if existing is None:
            # Conflito reportado mas registro sumiu (expirou entre as chamadas).
            raise StorageUnavailableError("Registro conflitante não encontrado")

        logger.info("lead_duplicate_detected", extra={"lead_id": mask_key(idempotency_key)})
        return CommitResult(record=existing, is_new=False)

    async def get_lead(self, lead_id: str) -> StoredLead | None:
        """Lê lead por ID (None se ausente)."""
        try:
            return await self._store.get(lead_id)
        except StorageUnavailableError:
            raise
        except Exception as exc:
            raise StorageUnavailableError("Falha ao ler lead") from exc

    async def query_by_created_at(self, start_ms: int, end_ms: int) -> list[StoredLead]:
        """Lista leads criados na janela [start_ms, end_ms]."""
        if start_ms > end_ms:
            msg = "start_ms deve ser <= end_ms"
            raise ValueError(msg)
        try:
            return await self._store.query_by_created_at(start_ms, end_ms)
        except StorageUnavailableError:
            raise
        except Exception as exc:
            raise StorageUnavailableError("Falha ao consultar leads") from exc
