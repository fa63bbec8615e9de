"""Connectors — clientes HTTP para serviços externos.

Estrutura:
- turnstile/: Cloudflare Turnstile (siteverify)
"""

__all__: list[str] = []
