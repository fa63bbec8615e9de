"""Use case de submissão de lead (orquestrador do pipeline).

Etapas estritamente sequenciais, terminais na primeira falha:

    ReceiveRequest -> ValidateMethodAndHeaders -> ValidateBody
    -> FetchSecrets -> VerifySignature (opcional) -> VerifyBotChallenge
    -> CommitIdempotency -> PublishEvent (somente se novo) -> RespondSuccess

Falhas de cliente/autenticidade chegam como objetos de resultado;
falhas de dependência chegam como InfrastructureError e viram 500.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.lead import LeadSubmittedEvent
from app.domain.validation import ValidatedLeadRequest, ValidationFailure
from app.infra.crypto import verify_signature
from app.observability import get_correlation_id, record_latency, record_pipeline_outcome
from app.protocols.clock import system_clock
from app.use_cases.leads.models import (
    LeadRequest,
    PipelineOutcome,
    PipelineStage,
    SubmitLeadConfig,
)
from app.use_cases.leads.responses import (
    CODE_SIGNATURE_INVALID,
    CODE_TURNSTILE_FAILED,
    SIGNATURE_FAILED_MESSAGE,
    TURNSTILE_FAILED_MESSAGE,
    duplicate_outcome,
    error_outcome,
    internal_error_outcome,
    method_not_allowed_outcome,
    success_outcome,
    validation_outcome,
)
from config.logging import mask_key
from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from app.protocols import (
        BotVerifierProtocol,
        LeadRequestValidatorProtocol,
        SecretProviderProtocol,
    )
    from app.protocols.clock import Clock
    from app.services import IdempotencyGateway, LeadEventPublisher

logger = logging.getLogger(__name__)

ALLOWED_METHOD = "POST"


@dataclass(slots=True)
class _Progress:
    """Etapa corrente de uma execução (mapeia falha de dependência -> etapa)."""

    stage: PipelineStage = PipelineStage.FETCH_SECRETS


class SubmitLeadUseCase:
    """Processa uma submissão de lead do recebimento à resposta."""

    def __init__(
        self,
        *,
        validator: LeadRequestValidatorProtocol,
        secrets: SecretProviderProtocol,
        bot_verifier: BotVerifierProtocol,
        gateway: IdempotencyGateway,
        publisher: LeadEventPublisher,
        config: SubmitLeadConfig | None = None,
        clock: Clock = system_clock,
    ) -> None:
        self._validator = validator
        self._secrets = secrets
        self._bot_verifier = bot_verifier
        self._gateway = gateway
        self._publisher = publisher
        self._config = config or SubmitLeadConfig()
        self._clock = clock

    async def execute(self, request: LeadRequest) -> PipelineOutcome:
        """Executa o pipeline e devolve exatamente um desfecho terminal."""
        start = time.perf_counter()
        correlation_id = get_correlation_id() or None
        outcome = await self._run(request)

        record_latency(
            "submit_lead",
            "execute",
            (time.perf_counter() - start) * 1000,
            correlation_id,
        )
        record_pipeline_outcome(
            str(outcome.stage),
            outcome.status_code,
            outcome.code,
            correlation_id,
        )
        return outcome

    async def _run(self, request: LeadRequest) -> PipelineOutcome:
        stage = PipelineStage.VALIDATE_METHOD_AND_HEADERS
        if request.method.upper() != ALLOWED_METHOD:
            return method_not_allowed_outcome()

        headers = self._validator.validate_headers(
            request.headers,
            require_signature=self._config.signature_required,
        )
        if isinstance(headers, ValidationFailure):
            logger.info("lead_headers_invalid", extra={"fields": headers.fields})
            return validation_outcome(headers, stage)

        stage = PipelineStage.VALIDATE_BODY
        submission = self._validator.validate_body(request.body)
        if isinstance(submission, ValidationFailure):
            logger.info(
                "lead_body_invalid",
                extra={"validation_code": str(submission.code), "fields": submission.fields},
            )
            return validation_outcome(submission, stage)

        validated = ValidatedLeadRequest.from_parts(headers, submission, request.body)

        progress = _Progress()
        try:
            return await self._process(validated, request.client_ip, progress)
        except InfrastructureError as exc:
            logger.error(
                "lead_pipeline_dependency_error",
                extra={
                    "lead_id": mask_key(validated.idempotency_key),
                    "error_type": type(exc).__name__,
                    "stage": str(progress.stage),
                },
            )
            return internal_error_outcome(progress.stage)

    async def _process(
        self,
        validated: ValidatedLeadRequest,
        client_ip: str | None,
        progress: _Progress,
    ) -> PipelineOutcome:
        progress.stage = PipelineStage.FETCH_SECRETS
        hmac_secret = None
        if self._config.signature_required:
            hmac_secret = await self._secrets.get(self._config.hmac_secret_name)
        turnstile_secret = await self._secrets.get(self._config.turnstile_secret_name)

        if hmac_secret is not None:
            progress.stage = PipelineStage.VERIFY_SIGNATURE
            outcome = self._verify_signature(validated, hmac_secret)
            if outcome is not None:
                return outcome

        progress.stage = PipelineStage.VERIFY_BOT_CHALLENGE
        verification = await self._bot_verifier.verify(
            validated.headers.turnstile_token,
            turnstile_secret,
            client_ip,
        )
        if not verification.success:
            logger.warning(
                "lead_bot_challenge_failed",
                extra={
                    "lead_id": mask_key(validated.idempotency_key),
                    "reason": str(verification.reason),
                    "error_codes": list(verification.error_codes),
                },
            )
            return error_outcome(
                403,
                TURNSTILE_FAILED_MESSAGE,
                CODE_TURNSTILE_FAILED,
                PipelineStage.VERIFY_BOT_CHALLENGE,
            )

        progress.stage = PipelineStage.COMMIT_IDEMPOTENCY
        commit = await self._gateway.commit(
            validated.idempotency_key,
            validated.submission,
            self._config.retention_days,
        )
        if not commit.is_new:
            return duplicate_outcome(commit.record.lead_id)

        progress.stage = PipelineStage.PUBLISH_EVENT
        await self._publisher.publish(LeadSubmittedEvent.from_record(commit.record))
        return success_outcome(commit.record.lead_id)

    def _verify_signature(
        self,
        validated: ValidatedLeadRequest,
        secret: str,
    ) -> PipelineOutcome | None:
        result = verify_signature(
            secret,
            validated.raw_body,
            validated.headers.signature or "",
            validated.headers.timestamp or "",
            now=datetime.fromtimestamp(self._clock(), UTC),
            max_skew_seconds=self._config.replay_window_seconds,
        )
        if result.valid:
            return None

        logger.warning(
            "lead_signature_rejected",
            extra={
                "lead_id": mask_key(validated.idempotency_key),
                "failure": str(result.failure),
                "skew_seconds": result.skew_seconds,
            },
        )
        return error_outcome(
            403,
            SIGNATURE_FAILED_MESSAGE,
            CODE_SIGNATURE_INVALID,
            PipelineStage.VERIFY_SIGNATURE,
        )

