"""Settings do Cloudflare Turnstile (verificação anti-bot)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TURNSTILE_VERIFY_URL: str = "https://challenges.cloudflare.com/turnstile/v0/siteverify"


@dataclass(frozen=True)
class TurnstileSettings:
    """Configurações do Turnstile.

    Attributes:
        verify_url: Endpoint siteverify
        timeout_seconds: Timeout da chamada HTTP
    """

    verify_url: str = TURNSTILE_VERIFY_URL
    timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações do Turnstile."""
        errors: list[str] = []

        if not self.verify_url.startswith("https://"):
            errors.append("TURNSTILE_VERIFY_URL deve usar https")

        if self.timeout_seconds <= 0:
            errors.append("TURNSTILE_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_turnstile_from_env() -> TurnstileSettings:
    """Carrega TurnstileSettings de variáveis de ambiente."""
    return TurnstileSettings(
        verify_url=os.getenv("TURNSTILE_VERIFY_URL", TURNSTILE_VERIFY_URL),
        timeout_seconds=float(os.getenv("TURNSTILE_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_turnstile_settings() -> TurnstileSettings:
    """Retorna instância cacheada de TurnstileSettings."""
    return _load_turnstile_from_env()
