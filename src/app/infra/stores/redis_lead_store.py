"""Redis Lead Store — persistência de leads com escrita condicional.

Usa SET NX EXAT (set if not exists, expiração absoluta) como operação
atômica: sob N submissões concorrentes com a mesma idempotency key,
exatamente uma grava e as demais recebem False.

Índice por data de criação em um sorted set (score = createdAt em ms).
O índice é auxiliar: o registro em `lead:{id}` é a fonte de verdade.

Contrato de Keys:
    lead_id é a idempotency key (UUID opaco). Nunca usar PII como key.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from app.domain.lead import StoredLead
from app.protocols.lead_store import LeadStoreProtocol
from config.logging import mask_key
from utils.errors import RedisConnectionError, StorageUnavailableError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

# Prefixo para namespace de leads
LEAD_PREFIX = "lead:"
CREATED_AT_INDEX_KEY = "lead-index:created_at"


class RedisLeadStore(LeadStoreProtocol):
    """Store de leads usando Redis.

    Args:
        async_redis_client: Cliente Redis assíncrono
        prefix: Namespace das chaves de registro
        index_key: Sorted set de leadId por createdAt
    """

    def __init__(
        self,
        async_redis_client: AsyncRedis[bytes],
        prefix: str = LEAD_PREFIX,
        index_key: str = CREATED_AT_INDEX_KEY,
    ) -> None:
        self._redis = async_redis_client
        self._prefix = prefix
        self._index_key = index_key

    def _key(self, lead_id: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{self._prefix}{lead_id}"

    @staticmethod
    def _decode(raw: bytes | str) -> StoredLead:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        try:
            return StoredLead.from_dict(json.loads(text))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise StorageUnavailableError("Registro de lead corrompido no Redis") from exc

    async def put_if_absent(self, record: StoredLead) -> bool:
        """Grava lead com SET NX EXAT.

        Returns:
            True se gravou (novo), False se a chave já existia.
        """
        key = self._key(record.lead_id)
        payload = json.dumps(record.to_dict())
        try:
            was_set = await self._redis.set(key, payload, nx=True, exat=record.ttl)
        except Exception as exc:
            raise RedisConnectionError("Falha ao gravar lead no Redis") from exc

        if not was_set:
            logger.debug("lead_key_exists", extra={"lead_id": mask_key(record.lead_id)})
            return False

        try:
            await self._redis.zadd(self._index_key, {record.lead_id: record.created_at})
        except Exception as exc:
            # Registro já está gravado; apenas a consulta por data fica sem ele.
            logger.warning(
                "lead_index_update_failed",
                extra={"lead_id": mask_key(record.lead_id), "error_type": type(exc).__name__},
            )
        return True

    async def get(self, lead_id: str) -> StoredLead | None:
        """Lê lead por chave (None se ausente ou expirado)."""
        try:
            raw = await self._redis.get(self._key(lead_id))
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler lead no Redis") from exc
        if raw is None:
            return None
        return self._decode(raw)

    async def query_by_created_at(self, start_ms: int, end_ms: int) -> list[StoredLead]:
        """Lista leads pelo índice de criação; remove do índice IDs expirados."""
        try:
            members = await self._redis.zrangebyscore(self._index_key, start_ms, end_ms)
            if not members:
                return []
            lead_ids = [m.decode("utf-8") if isinstance(m, bytes) else m for m in members]
            values = await self._redis.mget([self._key(lead_id) for lead_id in lead_ids])
        except Exception as exc:
            raise RedisConnectionError("Falha ao consultar leads no Redis") from exc

        records: list[StoredLead] = []
        expired: list[str] = []
        for lead_id, raw in zip(lead_ids, values, strict=True):
            if raw is None:
                expired.append(lead_id)
                continue
            records.append(self._decode(raw))

        if expired:
            try:
                await self._redis.zrem(self._index_key, *expired)
            except Exception as exc:
                logger.warning(
                    "lead_index_cleanup_failed",
                    extra={"count": len(expired), "error_type": type(exc).__name__},
                )
        return records
