"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    LeadIngestionSettings,
    PubSubSettings,
    SecretsSettings,
    TurnstileSettings,
    get_base_settings,
    get_lead_settings,
    get_pubsub_settings,
    get_secrets_settings,
)


class TestLeadIngestionSettings:
    """Testes de LeadIngestionSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sem env, usa memória, 548 dias e assinatura desligada."""
        for name in (
            "LEAD_STORE_BACKEND",
            "LEAD_TTL_DAYS",
            "LEAD_SIGNATURE_REQUIRED",
            "LEAD_ALLOWED_ORIGINS",
            "LEAD_ROUTE_PATH",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = get_lead_settings()

        assert settings.store_backend == "memory"
        assert settings.ttl_days == 548
        assert settings.signature_required is False
        assert settings.replay_window_seconds == 300
        assert settings.allowed_origins == ("*",)
        assert settings.route_path == "/leads"

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LEAD_STORE_BACKEND", "Redis")
        monkeypatch.setenv("LEAD_SIGNATURE_REQUIRED", "true")
        monkeypatch.setenv("LEAD_ALLOWED_ORIGINS", "https://a.example, https://b.example")

        settings = get_lead_settings()

        assert settings.store_backend == "redis"
        assert settings.signature_required is True
        assert settings.allowed_origins == ("https://a.example", "https://b.example")

    def test_memory_backend_forbidden_in_production(self) -> None:
        """Backend em memória só em development/test."""
        base = BaseSettings(environment="production")

        errors = LeadIngestionSettings(store_backend="memory").validate(base)

        assert any("memory" in error for error in errors)

    def test_redis_backend_requires_url(self) -> None:
        errors = LeadIngestionSettings(store_backend="redis").validate(BaseSettings())

        assert errors == ["LEAD_STORE_BACKEND=redis requer REDIS_URL configurado"]

    def test_non_positive_ttl(self) -> None:
        errors = LeadIngestionSettings(ttl_days=0).validate(BaseSettings())

        assert errors


class TestOtherSettings:
    """Testes de secrets, Turnstile e Pub/Sub."""

    def test_secret_names_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TURNSTILE_SECRET_NAME", "custom-turnstile")
        monkeypatch.setenv("SECRETS_CACHE_TTL_SECONDS", "60")

        settings = get_secrets_settings()

        assert settings.turnstile_secret_name == "custom-turnstile"
        assert settings.cache_ttl_seconds == 60

    def test_gcp_secrets_require_project(self) -> None:
        errors = SecretsSettings(backend="gcp").validate(BaseSettings(gcp_project=""))

        assert errors == ["SECRETS_BACKEND=gcp requer GCP_PROJECT configurado"]

    def test_turnstile_requires_https(self) -> None:
        errors = TurnstileSettings(verify_url="http://insecure.example").validate()

        assert errors == ["TURNSTILE_VERIFY_URL deve usar https"]

    def test_pubsub_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EVENT_BUS_BACKEND", raising=False)
        monkeypatch.delenv("PUBSUB_TOPIC_LEADS", raising=False)

        settings = get_pubsub_settings()

        assert settings.backend == "memory"
        assert settings.topic_leads == "lead-events"

    def test_pubsub_requires_project(self) -> None:
        errors = PubSubSettings(backend="pubsub").validate(BaseSettings())

        assert "EVENT_BUS_BACKEND=pubsub requer GCP_PROJECT configurado" in errors

    def test_environment_test_counts_as_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "test")

        assert get_base_settings().is_development is True
