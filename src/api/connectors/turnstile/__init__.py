"""Connector do Cloudflare Turnstile (verificação anti-bot)."""

from api.connectors.turnstile.client import TurnstileClient

__all__ = ["TurnstileClient"]
