"""Exceções de domínio para falhas de dependências externas.

Falhas de cliente (payload, headers, assinatura, bot challenge) NÃO usam
exceções: são retornadas como resultados explícitos por cada estágio.
Aqui ficam apenas falhas de infraestrutura, mapeadas para HTTP 500.
"""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (secret store, storage, bus)."""


class SecretUnavailableError(InfrastructureError):
    """Falha ao obter secret do provedor de segredos."""

    def __init__(self, secret_name: str, reason: str = "fetch_failed") -> None:
        super().__init__(f"Secret indisponível: {secret_name} ({reason})")
        self.secret_name = secret_name
        self.reason = reason


class StorageUnavailableError(InfrastructureError):
    """Falha no store de leads diferente de conflito de chave."""


class RedisConnectionError(StorageUnavailableError):
    """Falha de conexão/timeout ao acessar Redis."""


class FirestoreUnavailableError(StorageUnavailableError):
    """Falha de indisponibilidade ao acessar Firestore."""


class EventPublishError(InfrastructureError):
    """Falha (total ou parcial) ao publicar evento no bus."""

    def __init__(self, message: str, failed_count: int = 1) -> None:
        super().__init__(message)
        self.failed_count = failed_count
