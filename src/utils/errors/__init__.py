"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    EventPublishError,
    FirestoreUnavailableError,
    InfrastructureError,
    RedisConnectionError,
    SecretUnavailableError,
    StorageUnavailableError,
)

__all__ = [
    "EventPublishError",
    "FirestoreUnavailableError",
    "InfrastructureError",
    "RedisConnectionError",
    "SecretUnavailableError",
    "StorageUnavailableError",
]
