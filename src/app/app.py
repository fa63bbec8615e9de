"""Entrypoint do serviço Lead Intake.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import initialize_app, shutdown_clients, validate_runtime_settings
from app.bootstrap.clients import create_async_redis_client, create_firestore_client
from config.logging import get_logger
from config.settings import get_lead_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

CORS_ALLOWED_METHODS = ["POST", "OPTIONS"]
CORS_ALLOWED_HEADERS = [
    "Content-Type",
    "X-Idempotency-Key",
    "X-Turnstile-Token",
    "X-Signature",
    "X-Timestamp",
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Inicializa o cliente do backend de store (readiness)

    Shutdown:
    - Fecha clientes compartilhados
    """
    logger.info("app_starting", extra={"component": "app"})
    validate_runtime_settings()
    app.state.redis_client = None
    app.state.firestore_client = None

    backend = get_lead_settings().store_backend
    if backend == "redis":
        try:
            app.state.redis_client = create_async_redis_client()
        except Exception as exc:
            logger.warning("redis_client_not_ready", extra={"error_type": type(exc).__name__})
    elif backend == "firestore":
        try:
            app.state.firestore_client = create_firestore_client()
        except Exception as exc:
            logger.warning("firestore_client_not_ready", extra={"error_type": type(exc).__name__})

    yield

    logger.info("app_shutting_down", extra={"component": "app"})
    await shutdown_clients()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    lead_settings = get_lead_settings()
    fastapi_app = FastAPI(
        title="Lead Intake",
        description="Ingestão idempotente de leads do formulário de contato",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(lead_settings.allowed_origins),
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=CORS_ALLOWED_HEADERS,
    )

    fastapi_app.include_router(create_api_router(lead_settings.route_path))

    logger.info(
        "app_configured",
        extra={"component": "app", "route_path": lead_settings.route_path},
    )

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting Lead Intake in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
