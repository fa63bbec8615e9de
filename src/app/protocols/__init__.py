"""Protocolos e contratos do core da aplicação."""

from .bot_verifier import BotFailureReason, BotVerificationResult, BotVerifierProtocol
from .clock import Clock, system_clock
from .event_bus import EventBusProtocol, EventEntry, PublishResult
from .lead_store import LeadStoreProtocol
from .request_validator import LeadRequestValidatorProtocol
from .secret_store import SecretProviderProtocol, SecretStoreProtocol

__all__ = [
    "BotFailureReason",
    "BotVerificationResult",
    "BotVerifierProtocol",
    "Clock",
    "EventBusProtocol",
    "EventEntry",
    "LeadRequestValidatorProtocol",
    "LeadStoreProtocol",
    "PublishResult",
    "SecretProviderProtocol",
    "SecretStoreProtocol",
    "system_clock",
]
