"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_submit_lead_use_case

    # Na inicialização do serviço
    initialize_app()

    # Obter o use case (singleton por processo)
    use_case = get_submit_lead_use_case()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_firestore_settings,
    get_lead_settings,
    get_pubsub_settings,
    get_secrets_settings,
    get_turnstile_settings,
)

if TYPE_CHECKING:
    from app.infra.secrets import SecretCache
    from app.protocols import EventBusProtocol, LeadStoreProtocol
    from app.use_cases.leads import SubmitLeadUseCase

# Nome do serviço para logs e métricas
SERVICE_NAME = "lead_intake"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Executa validate() de todas as settings e agrega os erros."""
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"leads: {error}" for error in get_lead_settings().validate(base))
    errors.extend(f"secrets: {error}" for error in get_secrets_settings().validate(base))
    errors.extend(f"turnstile: {error}" for error in get_turnstile_settings().validate())
    errors.extend(f"pubsub: {error}" for error in get_pubsub_settings().validate(base))

    if get_lead_settings().store_backend == "firestore":
        firestore_errors = get_firestore_settings().validate(base.gcp_project)
        errors.extend(f"firestore: {error}" for error in firestore_errors)

    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    environment = get_base_settings().environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Singletons (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_secret_cache() -> SecretCache:
    """Obtém o SecretCache do processo (singleton)."""
    from app.bootstrap.dependencies import create_secret_cache

    return create_secret_cache()


@lru_cache(maxsize=1)
def get_lead_store() -> LeadStoreProtocol:
    """Obtém store de leads (singleton)."""
    from app.bootstrap.dependencies import create_lead_store

    return create_lead_store()


@lru_cache(maxsize=1)
def get_event_bus() -> EventBusProtocol:
    """Obtém event bus (singleton)."""
    from app.bootstrap.dependencies import create_event_bus

    return create_event_bus()


@lru_cache(maxsize=1)
def get_submit_lead_use_case() -> SubmitLeadUseCase:
    """Obtém SubmitLeadUseCase montado com os singletons acima."""
    from app.bootstrap.dependencies import create_submit_lead_use_case

    return create_submit_lead_use_case(
        secret_cache=get_secret_cache(),
        lead_store=get_lead_store(),
        event_bus=get_event_bus(),
    )


async def shutdown_clients() -> None:
    """Fecha clientes compartilhados criados durante a execução."""
    from app.bootstrap.clients import create_async_redis_client, create_http_client

    if create_http_client.cache_info().currsize:
        await create_http_client().aclose()
        create_http_client.cache_clear()

    if create_async_redis_client.cache_info().currsize:
        await create_async_redis_client().aclose()
        create_async_redis_client.cache_clear()
