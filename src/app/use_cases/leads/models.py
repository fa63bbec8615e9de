"""Modelos de entrada/saída do pipeline de submissão de leads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class PipelineStage(StrEnum):
    """Etapas do pipeline, na ordem de execução."""

    RECEIVE_REQUEST = "receive_request"
    VALIDATE_METHOD_AND_HEADERS = "validate_method_and_headers"
    VALIDATE_BODY = "validate_body"
    FETCH_SECRETS = "fetch_secrets"
    VERIFY_SIGNATURE = "verify_signature"
    VERIFY_BOT_CHALLENGE = "verify_bot_challenge"
    COMMIT_IDEMPOTENCY = "commit_idempotency"
    PUBLISH_EVENT = "publish_event"
    RESPOND_SUCCESS = "respond_success"


@dataclass(frozen=True, slots=True)
class LeadRequest:
    """Requisição HTTP já extraída do framework.

    Atributos:
        method: Método HTTP
        headers: Headers brutos (qualquer capitalização)
        body: Corpo bruto (None quando ausente)
        client_ip: IP do cliente, repassado ao verificador anti-bot
    """

    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | str | None = None
    client_ip: str | None = None


@dataclass(frozen=True, slots=True)
class PipelineOutcome:
    """Resposta terminal do pipeline (exatamente uma por requisição).

    Atributos:
        status_code: Status HTTP
        body: Corpo JSON `{success, ...}`
        stage: Etapa em que o pipeline terminou
        code: Código de desfecho (CREATED, DUPLICATE ou código de erro)
        lead_id: ID do lead quando houve sucesso
        is_new: True somente quando o registro foi criado nesta requisição
    """

    status_code: int
    body: dict[str, Any]
    stage: PipelineStage
    code: str
    lead_id: str | None = None
    is_new: bool = False

    @property
    def success(self) -> bool:
        return bool(self.body.get("success"))


@dataclass(frozen=True, slots=True)
class SubmitLeadConfig:
    """Parâmetros do pipeline vindos das settings."""

    signature_required: bool = False
    retention_days: int = 548
    replay_window_seconds: int = 300
    hmac_secret_name: str = "lead-hmac-server-secret"
    turnstile_secret_name: str = "lead-turnstile-secret"
