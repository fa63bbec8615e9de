"""Testes do LeadEventPublisher."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.domain.lead import LeadSubmittedEvent, StoredLead
from app.infra.events import MemoryEventBus
from app.protocols.event_bus import PublishResult
from app.services import LEAD_EVENT_SOURCE, LEAD_SUBMITTED_TYPE, LeadEventPublisher
from tests.fakes.lead_fakes import build_submission
from utils.errors import EventPublishError

KEY = "6f1c2b3a-4d5e-4f60-8a7b-9c0d1e2f3a4b"


def _event() -> LeadSubmittedEvent:
    record = StoredLead.create(KEY, build_submission(), now_ms=1000, retention_days=1)
    return LeadSubmittedEvent.from_record(record)


class TestLeadEventPublisher:
    """Testes de publicação de LeadSubmitted."""

    @pytest.mark.asyncio
    async def test_publishes_lead_submitted(self) -> None:
        """Entrada com source/type fixos e detail do lead."""
        bus = MemoryEventBus()

        await LeadEventPublisher(bus).publish(_event())

        (entry,) = bus.entries
        assert entry.source == LEAD_EVENT_SOURCE == "portfolio.leads"
        assert entry.detail_type == LEAD_SUBMITTED_TYPE == "LeadSubmitted"
        assert entry.detail["leadId"] == KEY

    @pytest.mark.asyncio
    async def test_partial_failure_is_hard_failure(self) -> None:
        """failed_count > 0 levanta EventPublishError."""
        bus = MagicMock()
        bus.publish = AsyncMock(return_value=PublishResult(failed_count=1))

        with pytest.raises(EventPublishError) as exc_info:
            await LeadEventPublisher(bus).publish(_event())

        assert exc_info.value.failed_count == 1

    @pytest.mark.asyncio
    async def test_bus_exception_is_wrapped(self) -> None:
        """Exceção do bus vira EventPublishError."""
        bus = MagicMock()
        bus.publish = AsyncMock(side_effect=ConnectionError("down"))

        with pytest.raises(EventPublishError):
            await LeadEventPublisher(bus).publish_lead_submitted(_event())

    @pytest.mark.asyncio
    async def test_publish_event_returns_event_id(self) -> None:
        """publish_event genérico devolve o ID atribuído."""
        bus = MagicMock()
        bus.publish = AsyncMock(return_value=PublishResult(event_ids=("evt-1",)))

        event_id = await LeadEventPublisher(bus).publish_event(
            "portfolio.leads", "LeadArchived", {"leadId": KEY}
        )

        assert event_id == "evt-1"
