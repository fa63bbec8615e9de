"""Rotas de submissão de leads."""

from api.routes.leads.router import router

__all__ = ["router"]
