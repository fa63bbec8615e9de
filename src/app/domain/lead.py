"""Modelos de domínio do lead.

Submission é a entrada já validada/normalizada; StoredLead é o registro
durável (imutável após criação); LeadSubmittedEvent é o evento derivado
do registro no momento da primeira persistência.

Formato persistido usa camelCase (leadId, createdAt) para manter o
contrato com consumidores downstream.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

LEAD_RECORD_TYPE = "LEAD"

_SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True, slots=True)
class Submission:
    """Submissão de formulário validada.

    Atributos:
        name: Nome (2-100 chars, trimmed)
        email: Email (lower-case, <= 100 chars)
        message: Mensagem (10-1000 chars)
        turnstile_token: Token do desafio anti-bot enviado no body
        company: Empresa opcional (<= 100 chars)
    """

    name: str
    email: str
    message: str
    turnstile_token: str
    company: str | None = None


@dataclass(frozen=True, slots=True)
class StoredLead:
    """Registro durável de um lead, chaveado pela idempotency key.

    Atributos:
        lead_id: Idempotency key do cliente (UUID), chave primária
        name: Nome do lead
        email: Email normalizado
        message: Mensagem
        created_at: Criação em epoch milissegundos
        ttl: Expiração em epoch segundos (created_at + retenção)
        company: Empresa opcional
        type: Discriminador do registro (sempre "LEAD")
    """

    lead_id: str
    name: str
    email: str
    message: str
    created_at: int
    ttl: int
    company: str | None = None
    type: str = LEAD_RECORD_TYPE

    @classmethod
    def create(
        cls,
        lead_id: str,
        submission: Submission,
        *,
        now_ms: int,
        retention_days: int,
    ) -> StoredLead:
        """Cria registro novo a partir da submissão validada."""
        return cls(
            lead_id=lead_id,
            name=submission.name,
            email=submission.email,
            message=submission.message,
            company=submission.company or None,
            created_at=now_ms,
            ttl=now_ms // 1000 + retention_days * _SECONDS_PER_DAY,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serializa registro para persistência."""
        data: dict[str, Any] = {
            "leadId": self.lead_id,
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "createdAt": self.created_at,
            "type": self.type,
            "ttl": self.ttl,
        }
        if self.company:
            data["company"] = self.company
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoredLead:
        """Deserializa registro persistido."""
        return cls(
            lead_id=str(data["leadId"]),
            name=data.get("name", ""),
            email=data.get("email", ""),
            message=data.get("message", ""),
            company=data.get("company") or None,
            created_at=int(data["createdAt"]),
            ttl=int(data["ttl"]),
            type=data.get("type", LEAD_RECORD_TYPE),
        )


@dataclass(frozen=True, slots=True)
class LeadSubmittedEvent:
    """Evento de domínio emitido quando um lead é persistido pela primeira vez."""

    lead_id: str
    name: str
    email: str
    message: str
    created_at: int
    company: str | None = None

    @classmethod
    def from_record(cls, record: StoredLead) -> LeadSubmittedEvent:
        """Deriva evento do registro recém-criado."""
        return cls(
            lead_id=record.lead_id,
            name=record.name,
            email=record.email,
            message=record.message,
            company=record.company,
            created_at=record.created_at,
        )

    def to_detail(self) -> dict[str, Any]:
        """Payload `detail` do evento publicado."""
        detail: dict[str, Any] = {
            "leadId": self.lead_id,
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "createdAt": self.created_at,
        }
        if self.company:
            detail["company"] = self.company
        return detail
