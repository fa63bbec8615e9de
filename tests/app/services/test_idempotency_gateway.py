"""Testes do IdempotencyGateway."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.infra.stores import MemoryLeadStore
from app.services import IdempotencyGateway
from tests.fakes.lead_fakes import FIXED_NOW, FakeClock, build_submission
from utils.errors import RedisConnectionError, StorageUnavailableError

KEY = "6f1c2b3a-4d5e-4f60-8a7b-9c0d1e2f3a4b"


def _gateway(store=None, clock: FakeClock | None = None) -> IdempotencyGateway:
    clock = clock or FakeClock()
    return IdempotencyGateway(store or MemoryLeadStore(clock=clock), clock=clock)


class TestCommit:
    """Testes de commit com escrita condicional."""

    @pytest.mark.asyncio
    async def test_first_commit_is_new(self) -> None:
        """Chave nova cria registro com createdAt do relógio."""
        result = await _gateway().commit(KEY, build_submission(), retention_days=548)

        assert result.is_new is True
        assert result.record.lead_id == KEY
        assert result.record.created_at == int(FIXED_NOW * 1000)

    @pytest.mark.asyncio
    async def test_reused_key_returns_stored_record(self) -> None:
        """Chave repetida com body diferente devolve o registro original."""
        gateway = _gateway()
        first = await gateway.commit(KEY, build_submission(), retention_days=548)

        second = await gateway.commit(
            KEY,
            build_submission(name="Outra Pessoa", message="Mensagem completamente diferente"),
            retention_days=548,
        )

        assert second.is_new is False
        assert second.record == first.record
        assert second.record.name == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_concurrent_commits_have_exactly_one_winner(self) -> None:
        """N commits concorrentes com a mesma chave -> um único is_new."""
        gateway = _gateway()

        results = await asyncio.gather(
            *(gateway.commit(KEY, build_submission(), retention_days=548) for _ in range(20))
        )

        assert sum(1 for result in results if result.is_new) == 1
        assert len({result.record for result in results}) == 1

    @pytest.mark.asyncio
    async def test_store_error_becomes_storage_unavailable(self) -> None:
        """Erro genérico do store vira StorageUnavailableError."""
        store = MagicMock()
        store.put_if_absent = AsyncMock(side_effect=OSError("disk"))

        with pytest.raises(StorageUnavailableError):
            await _gateway(store).commit(KEY, build_submission(), retention_days=548)

    @pytest.mark.asyncio
    async def test_storage_errors_propagate_unchanged(self) -> None:
        """Erros já tipados não são reembrulhados."""
        store = MagicMock()
        store.put_if_absent = AsyncMock(side_effect=RedisConnectionError("down"))

        with pytest.raises(RedisConnectionError):
            await _gateway(store).commit(KEY, build_submission(), retention_days=548)

    @pytest.mark.asyncio
    async def test_conflict_without_record_is_storage_error(self) -> None:
        """Conflito reportado mas registro ausente na leitura -> erro."""
        store = MagicMock()
        store.put_if_absent = AsyncMock(return_value=False)
        store.get = AsyncMock(return_value=None)

        with pytest.raises(StorageUnavailableError):
            await _gateway(store).commit(KEY, build_submission(), retention_days=548)


class TestLookup:
    """Testes de leitura e consulta."""

    @pytest.mark.asyncio
    async def test_get_lead(self) -> None:
        """get_lead devolve registro ou None."""
        gateway = _gateway()
        committed = await gateway.commit(KEY, build_submission(), retention_days=548)

        assert await gateway.get_lead(KEY) == committed.record
        assert await gateway.get_lead("missing") is None

    @pytest.mark.asyncio
    async def test_query_by_created_at(self) -> None:
        """Consulta pela janela de criação."""
        clock = FakeClock()
        gateway = _gateway(clock=clock)
        await gateway.commit("k1", build_submission(), retention_days=548)
        clock.advance(10)
        await gateway.commit("k2", build_submission(), retention_days=548)

        start = int(FIXED_NOW * 1000)
        records = await gateway.query_by_created_at(start, start + 5000)

        assert [record.lead_id for record in records] == ["k1"]

    @pytest.mark.asyncio
    async def test_query_rejects_inverted_window(self) -> None:
        """start > end é erro do chamador."""
        with pytest.raises(ValueError):
            await _gateway().query_by_created_at(10, 5)
