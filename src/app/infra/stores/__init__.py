"""Stores — implementações concretas de persistência de leads.

Módulos disponíveis:
    - redis_lead_store: Store de leads usando Redis (SET NX)
    - firestore_lead_store: Store de leads usando Firestore (create())
    - memory_stores: Store em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.firestore_lead_store import FirestoreLeadStore
from app.infra.stores.memory_stores import MemoryLeadStore
from app.infra.stores.redis_lead_store import RedisLeadStore

__all__ = [
    # Firestore
    "FirestoreLeadStore",
    # Memory (dev/test)
    "MemoryLeadStore",
    # Redis
    "RedisLeadStore",
]
