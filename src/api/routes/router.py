"""Agregador de rotas — registra todos os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.leads.router import router as leads_router
from config.settings import get_lead_settings


def create_api_router(route_path: str | None = None) -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Args:
        route_path: Path do endpoint de leads (default: LEAD_ROUTE_PATH).

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    prefix = (route_path or get_lead_settings().route_path).rstrip("/") or "/leads"
    api_router.include_router(leads_router, prefix=prefix, tags=["leads"])

    return api_router
