"""Settings do pipeline de ingestão de leads.

Retenção, backend de armazenamento e estágio opcional de assinatura HMAC.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

LeadStoreBackend = Literal["memory", "redis", "firestore"]

# 18 meses
DEFAULT_TTL_DAYS = 548
DEFAULT_REPLAY_WINDOW_SECONDS = 300


@dataclass(frozen=True)
class LeadIngestionSettings:
    """Configurações de ingestão de leads.

    Attributes:
        store_backend: Backend do store de leads (memory|redis|firestore)
        ttl_days: Janela de retenção de cada lead (expiração)
        signature_required: Habilita o estágio VerifySignature (HMAC)
        replay_window_seconds: Tolerância de |now - x-timestamp|
        allowed_origins: Origins liberadas no CORS
        route_path: Path do endpoint de submissão
    """

    store_backend: LeadStoreBackend = "memory"
    ttl_days: int = DEFAULT_TTL_DAYS
    signature_required: bool = False
    replay_window_seconds: int = DEFAULT_REPLAY_WINDOW_SECONDS
    allowed_origins: tuple[str, ...] = ("*",)
    route_path: str = "/leads"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de ingestão.

        Args:
            base: BaseSettings para verificar ambiente e conexões.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.store_backend not in ("memory", "redis", "firestore"):
            errors.append(f"LEAD_STORE_BACKEND inválido: {self.store_backend}")

        if self.store_backend == "memory" and not base.is_development:
            errors.append(
                "LEAD_STORE_BACKEND=memory proibido em staging/production. "
                "Use Redis ou Firestore."
            )

        if self.store_backend == "redis" and not base.redis_url:
            errors.append("LEAD_STORE_BACKEND=redis requer REDIS_URL configurado")

        if self.store_backend == "firestore" and not base.gcp_project:
            errors.append("LEAD_STORE_BACKEND=firestore requer GCP_PROJECT configurado")

        if self.ttl_days <= 0:
            errors.append("LEAD_TTL_DAYS deve ser > 0")

        if self.replay_window_seconds <= 0:
            errors.append("LEAD_REPLAY_WINDOW_SECONDS deve ser > 0")

        if not self.route_path.startswith("/"):
            errors.append("LEAD_ROUTE_PATH deve começar com '/'")

        return errors


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(item.strip() for item in raw.split(",") if item.strip())
    return origins or ("*",)


def _load_leads_from_env() -> LeadIngestionSettings:
    """Carrega LeadIngestionSettings de variáveis de ambiente."""
    backend_str = os.getenv("LEAD_STORE_BACKEND", "memory").lower()
    backend: LeadStoreBackend = (
        backend_str if backend_str in ("memory", "redis", "firestore") else "memory"
    )
    return LeadIngestionSettings(
        store_backend=backend,
        ttl_days=int(os.getenv("LEAD_TTL_DAYS", str(DEFAULT_TTL_DAYS))),
        signature_required=os.getenv("LEAD_SIGNATURE_REQUIRED", "false").lower()
        in ("true", "1", "yes"),
        replay_window_seconds=int(
            os.getenv("LEAD_REPLAY_WINDOW_SECONDS", str(DEFAULT_REPLAY_WINDOW_SECONDS))
        ),
        allowed_origins=_parse_origins(os.getenv("LEAD_ALLOWED_ORIGINS", "*")),
        route_path=os.getenv("LEAD_ROUTE_PATH", "/leads"),
    )


@lru_cache(maxsize=1)
def get_lead_settings() -> LeadIngestionSettings:
    """Retorna instância cacheada de LeadIngestionSettings."""
    return _load_leads_from_env()
