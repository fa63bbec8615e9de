"""Formatter JSON para logs estruturados."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável facilita leitura no Cloud Logging
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19T10:30:00",
            "level": "INFO",
            "logger": "app.use_cases.leads.submit_lead",
            "message": "lead_committed",
            "correlation_id": "abc-123",
            "service": "lead_intake",
            "lead_id": "0f4c2a1e..."
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
