"""Firestore Lead Store — persistência de leads com create() condicional.

`DocumentReference.create()` falha com AlreadyExists se o documento já
existe; isso é a escrita condicional atômica usada para idempotência.

Expiração via Firestore TTL policy no campo `expiresAt`. Como a remoção
pela policy é assíncrona, leituras ignoram registros vencidos e um
put_if_absent sobre documento vencido o recria (delete condicional + create).
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from google.api_core.exceptions import AlreadyExists, FailedPrecondition, NotFound
from google.cloud.firestore_v1.base_query import FieldFilter

from app.domain.lead import LEAD_RECORD_TYPE, StoredLead
from app.protocols.clock import system_clock
from app.protocols.lead_store import LeadStoreProtocol
from config.logging import mask_key
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

    from app.protocols.clock import Clock

logger = logging.getLogger(__name__)

# Collection padrão de leads
LEADS_COLLECTION = "leads"
EXPIRES_AT_FIELD = "expiresAt"


class FirestoreLeadStore(LeadStoreProtocol):
    """Store de leads usando Firestore (doc id = leadId).

    Args:
        firestore_client: Cliente Firestore
        collection_name: Nome da collection (default: leads)
        clock: Relógio para filtrar registros expirados
    """

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection_name: str = LEADS_COLLECTION,
        clock: Clock = system_clock,
    ) -> None:
        self._db = firestore_client
        self._collection = collection_name
        self._clock = clock

    def _doc(self, lead_id: str) -> Any:
        return self._db.collection(self._collection).document(lead_id)

    def _is_live(self, data: dict[str, Any]) -> bool:
        return int(data.get("ttl", 0)) > self._clock()

    def _put_if_absent_sync(self, record: StoredLead) -> bool:
        document = {
            **record.to_dict(),
            EXPIRES_AT_FIELD: datetime.fromtimestamp(record.ttl, UTC),
        }
        doc_ref = self._doc(record.lead_id)
        try:
            doc_ref.create(document)
        except AlreadyExists:
            return self._replace_expired_sync(doc_ref, record, document)
        except Exception as exc:
            raise FirestoreUnavailableError("Falha ao gravar lead no Firestore") from exc
        return True

    def _replace_expired_sync(
        self,
        doc_ref: Any,
        record: StoredLead,
        document: dict[str, Any],
    ) -> bool:
        """Recria documento vencido que a TTL policy ainda não removeu.

        O delete leva precondição de last_update_time: se outro request já
        trocou o documento, o delete falha e o create seguinte decide
        (AlreadyExists = outro venceu).
        """
        try:
            snapshot = doc_ref.get()
            if snapshot.exists and self._is_live(snapshot.to_dict() or {}):
                logger.debug("lead_doc_exists", extra={"lead_id": mask_key(record.lead_id)})
                return False

            if snapshot.exists:
                option = self._db.write_option(last_update_time=snapshot.update_time)
                try:
                    doc_ref.delete(option=option)
                except (FailedPrecondition, NotFound):
                    logger.debug(
                        "lead_doc_changed_before_replace",
                        extra={"lead_id": mask_key(record.lead_id)},
                    )

            doc_ref.create(document)
        except AlreadyExists:
            logger.debug("lead_doc_exists", extra={"lead_id": mask_key(record.lead_id)})
            return False
        except Exception as exc:
            raise FirestoreUnavailableError("Falha ao recriar lead vencido no Firestore") from exc

        logger.info("lead_doc_expired_replaced", extra={"lead_id": mask_key(record.lead_id)})
        return True

    def _get_sync(self, lead_id: str) -> StoredLead | None:
        try:
            snapshot = self._doc(lead_id).get()
        except Exception as exc:
            raise FirestoreUnavailableError("Falha ao ler lead no Firestore") from exc
        if not snapshot.exists:
            return None
        data = snapshot.to_dict() or {}
        if not self._is_live(data):
            return None
        return StoredLead.from_dict(data)

    def _query_sync(self, start_ms: int, end_ms: int) -> list[StoredLead]:
        query = (
            self._db.collection(self._collection)
            .where(filter=FieldFilter("type", "==", LEAD_RECORD_TYPE))
            .where(filter=FieldFilter("createdAt", ">=", start_ms))
            .where(filter=FieldFilter("createdAt", "<=", end_ms))
            .order_by("createdAt")
        )
        try:
            documents = [doc.to_dict() or {} for doc in query.stream()]
        except Exception as exc:
            raise FirestoreUnavailableError("Falha ao consultar leads no Firestore") from exc
        return [StoredLead.from_dict(data) for data in documents if self._is_live(data)]

    async def put_if_absent(self, record: StoredLead) -> bool:
        """Cria documento do lead se não existir.

        Usa asyncio.to_thread porque o SDK do Firestore é síncrono.
        """
        return await asyncio.to_thread(self._put_if_absent_sync, record)

    async def get(self, lead_id: str) -> StoredLead | None:
        """Lê lead por ID."""
        return await asyncio.to_thread(self._get_sync, lead_id)

    async def query_by_created_at(self, start_ms: int, end_ms: int) -> list[StoredLead]:
        """Consulta leads por janela de criação (requer índice type+createdAt)."""
        return await asyncio.to_thread(self._query_sync, start_ms, end_ms)
