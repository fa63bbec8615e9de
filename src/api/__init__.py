"""API — camada de borda HTTP.

Responsabilidades:
- Receber submissões de lead (FastAPI)
- Validar headers e payloads
- Falar com serviços HTTP externos (Turnstile)

Subpastas:
- connectors/: clientes HTTP externos
- validators/: validação de headers e payloads
- routes/: endpoints HTTP (leads, health)

NÃO PODE conter: regras de idempotência, acesso a stores, orquestração de use cases.
"""
