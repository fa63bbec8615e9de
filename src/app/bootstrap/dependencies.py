"""Factories de implementações concretas baseadas nas settings.

Centraliza a escolha de backend (memória, Redis, Firestore, Pub/Sub,
Secret Manager) e monta o use case de submissão de leads.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import (
    create_async_redis_client,
    create_firestore_client,
    create_http_client,
    create_pubsub_publisher,
    create_secret_manager_client,
)
from app.infra.events import MemoryEventBus, PubSubEventBus
from app.infra.secrets import EnvSecretStore, GCPSecretStore, SecretCache
from app.infra.stores import FirestoreLeadStore, MemoryLeadStore, RedisLeadStore
from app.services import IdempotencyGateway, LeadEventPublisher
from app.use_cases.leads import SubmitLeadConfig, SubmitLeadUseCase
from config.settings import (
    get_base_settings,
    get_firestore_settings,
    get_lead_settings,
    get_pubsub_settings,
    get_secrets_settings,
    get_turnstile_settings,
)

if TYPE_CHECKING:
    from api.connectors.turnstile import TurnstileClient
    from app.protocols import (
        BotVerifierProtocol,
        EventBusProtocol,
        LeadStoreProtocol,
        SecretStoreProtocol,
    )

logger = logging.getLogger(__name__)


def _warn_memory_outside_dev(component: str) -> None:
    base = get_base_settings()
    if not base.is_development:
        logger.warning(
            "memory_backend_in_non_dev",
            extra={"component": component, "environment": base.environment},
        )


# ──────────────────────────────────────────────────────────────────────────────
# Secrets
# ──────────────────────────────────────────────────────────────────────────────


def create_secret_store() -> SecretStoreProtocol:
    """Cria provedor de secrets conforme SECRETS_BACKEND (env|gcp)."""
    settings = get_secrets_settings()

    if settings.backend == "gcp":
        store: SecretStoreProtocol = GCPSecretStore(
            create_secret_manager_client(),
            project_id=get_base_settings().gcp_project,
        )
    elif settings.backend == "env":
        store = EnvSecretStore()
    else:
        msg = f"SECRETS_BACKEND inválido: {settings.backend}"
        raise ValueError(msg)

    logger.info("secret_store_created", extra={"backend": settings.backend})
    return store


def create_secret_cache() -> SecretCache:
    """Cria o SecretCache do processo (uma instância por processo)."""
    settings = get_secrets_settings()
    return SecretCache(create_secret_store(), ttl_seconds=float(settings.cache_ttl_seconds))


# ──────────────────────────────────────────────────────────────────────────────
# Lead Store / Event Bus
# ──────────────────────────────────────────────────────────────────────────────


def create_lead_store() -> LeadStoreProtocol:
    """Cria store de leads conforme LEAD_STORE_BACKEND.

    - "memory": MemoryLeadStore (dev/test)
    - "redis": RedisLeadStore (SET NX)
    - "firestore": FirestoreLeadStore (create())
    """
    backend = get_lead_settings().store_backend

    if backend == "redis":
        store: LeadStoreProtocol = RedisLeadStore(create_async_redis_client())
    elif backend == "firestore":
        store = FirestoreLeadStore(
            create_firestore_client(),
            collection_name=get_firestore_settings().collection_leads,
        )
    elif backend == "memory":
        _warn_memory_outside_dev("lead_store")
        store = MemoryLeadStore()
    else:
        msg = f"LEAD_STORE_BACKEND inválido: {backend}"
        raise ValueError(msg)

    logger.info("lead_store_created", extra={"backend": backend})
    return store


def create_event_bus() -> EventBusProtocol:
    """Cria event bus conforme EVENT_BUS_BACKEND (memory|pubsub)."""
    settings = get_pubsub_settings()

    if settings.backend == "pubsub":
        bus: EventBusProtocol = PubSubEventBus(
            create_pubsub_publisher(),
            project_id=get_base_settings().gcp_project,
            topic=settings.topic_leads,
            timeout_seconds=settings.publish_timeout_seconds,
        )
    elif settings.backend == "memory":
        _warn_memory_outside_dev("event_bus")
        bus = MemoryEventBus()
    else:
        msg = f"EVENT_BUS_BACKEND inválido: {settings.backend}"
        raise ValueError(msg)

    logger.info("event_bus_created", extra={"backend": settings.backend})
    return bus


# ──────────────────────────────────────────────────────────────────────────────
# Turnstile
# ──────────────────────────────────────────────────────────────────────────────


def create_turnstile_client() -> TurnstileClient:
    """Cria verificador Turnstile com o httpx.AsyncClient compartilhado."""
    from api.connectors.turnstile import TurnstileClient

    settings = get_turnstile_settings()
    return TurnstileClient(
        create_http_client(),
        verify_url=settings.verify_url,
        timeout_seconds=settings.timeout_seconds,
    )


# ──────────────────────────────────────────────────────────────────────────────
# Use case
# ──────────────────────────────────────────────────────────────────────────────


def create_submit_lead_use_case(
    *,
    secret_cache: SecretCache,
    lead_store: LeadStoreProtocol,
    event_bus: EventBusProtocol,
    bot_verifier: BotVerifierProtocol | None = None,
) -> SubmitLeadUseCase:
    """Monta SubmitLeadUseCase a partir das dependências e settings."""
    from api.validators.leads import LeadRequestValidator

    lead_settings = get_lead_settings()
    secrets_settings = get_secrets_settings()
    config = SubmitLeadConfig(
        signature_required=lead_settings.signature_required,
        retention_days=lead_settings.ttl_days,
        replay_window_seconds=lead_settings.replay_window_seconds,
        hmac_secret_name=secrets_settings.hmac_secret_name,
        turnstile_secret_name=secrets_settings.turnstile_secret_name,
    )

    return SubmitLeadUseCase(
        validator=LeadRequestValidator(),
        secrets=secret_cache,
        bot_verifier=bot_verifier or create_turnstile_client(),
        gateway=IdempotencyGateway(lead_store),
        publisher=LeadEventPublisher(event_bus),
        config=config,
    )
