"""Factories de clientes externos — Redis, Firestore, Secret Manager,
Pub/Sub e HTTP.

Imports dos SDKs são locais: ambientes com backends em memória não
precisam das bibliotecas GCP carregadas.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

import httpx

from config.settings import get_base_settings, get_firestore_settings, get_turnstile_settings

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient
    from google.cloud.pubsub_v1 import PublisherClient
    from google.cloud.secretmanager import SecretManagerServiceClient
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Redis
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def create_async_redis_client() -> AsyncRedis:
    """Cria cliente Redis assíncrono (singleton).

    Raises:
        ValueError: Se REDIS_URL não configurado
    """
    from redis.asyncio import Redis as AsyncRedis

    redis_url = get_base_settings().redis_url or os.getenv("REDIS_URL", "")
    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    client: AsyncRedis = AsyncRedis.from_url(
        redis_url,
        decode_responses=False,
        socket_timeout=5.0,
        socket_connect_timeout=5.0,
    )

    logger.info("async_redis_client_created")
    return client


# ──────────────────────────────────────────────────────────────────────────────
# Google Cloud
# ──────────────────────────────────────────────────────────────────────────────


def _gcp_project() -> str:
    return get_firestore_settings().project_id or get_base_settings().gcp_project


@lru_cache(maxsize=1)
def create_firestore_client() -> FirestoreClient:
    """Cria cliente Firestore (singleton)."""
    from google.cloud import firestore

    project_id = _gcp_project() or None
    client = firestore.Client(project=project_id)
    logger.info("firestore_client_created", extra={"project": project_id})
    return client


@lru_cache(maxsize=1)
def create_secret_manager_client() -> SecretManagerServiceClient:
    """Cria cliente do Secret Manager (singleton)."""
    from google.cloud import secretmanager

    client = secretmanager.SecretManagerServiceClient()
    logger.info("secret_manager_client_created")
    return client


@lru_cache(maxsize=1)
def create_pubsub_publisher() -> PublisherClient:
    """Cria PublisherClient do Pub/Sub (singleton)."""
    from google.cloud import pubsub_v1

    publisher = pubsub_v1.PublisherClient()
    logger.info("pubsub_publisher_created")
    return publisher


# ──────────────────────────────────────────────────────────────────────────────
# HTTP
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def create_http_client() -> httpx.AsyncClient:
    """Cria httpx.AsyncClient compartilhado (fechado no shutdown)."""
    timeout = get_turnstile_settings().timeout_seconds
    client = httpx.AsyncClient(timeout=timeout)
    logger.info("http_client_created", extra={"timeout_seconds": timeout})
    return client
