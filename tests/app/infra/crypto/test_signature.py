"""Testes de assinatura HMAC e janela anti-replay."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from app.infra.crypto import (
    SignatureFailure,
    parse_timestamp,
    sign_payload,
    verify_signature,
)

SECRET = "hmac-server-secret"
PAYLOAD = '{"name":"Ada"}'
NOW = datetime(2025, 10, 9, 8, 53, 20, tzinfo=UTC)


def _iso(moment: datetime) -> str:
    return moment.isoformat().replace("+00:00", "Z")


class TestVerifySignature:
    """Testes de verify_signature."""

    def test_valid_signature(self) -> None:
        """Assinatura correta dentro da janela é aceita."""
        timestamp = _iso(NOW - timedelta(seconds=30))
        signature = sign_payload(SECRET, PAYLOAD, timestamp)

        result = verify_signature(SECRET, PAYLOAD, signature, timestamp, now=NOW)

        assert result.valid is True
        assert result.failure is None

    def test_single_byte_difference_is_rejected(self) -> None:
        """Um byte diferente no HMAC -> SIGNATURE_MISMATCH."""
        timestamp = _iso(NOW)
        signature = sign_payload(SECRET, PAYLOAD, timestamp)
        last = "0" if signature[-1] != "0" else "1"
        tampered = signature[:-1] + last

        result = verify_signature(SECRET, PAYLOAD, tampered, timestamp, now=NOW)

        assert result.valid is False
        assert result.failure == SignatureFailure.SIGNATURE_MISMATCH

    def test_modified_payload_is_rejected(self) -> None:
        """Payload alterado invalida a assinatura."""
        timestamp = _iso(NOW)
        signature = sign_payload(SECRET, PAYLOAD, timestamp)

        result = verify_signature(SECRET, PAYLOAD + " ", signature, timestamp, now=NOW)

        assert result.failure == SignatureFailure.SIGNATURE_MISMATCH

    @pytest.mark.parametrize("offset_seconds", [-301, 301, -3600, 3600])
    def test_stale_or_future_timestamp_rejected_even_with_valid_signature(
        self,
        offset_seconds: int,
    ) -> None:
        """Fora de ±5 min rejeita mesmo com HMAC correto."""
        timestamp = _iso(NOW + timedelta(seconds=offset_seconds))
        signature = sign_payload(SECRET, PAYLOAD, timestamp)

        result = verify_signature(SECRET, PAYLOAD, signature, timestamp, now=NOW)

        assert result.valid is False
        assert result.failure == SignatureFailure.STALE_OR_FUTURE_TIMESTAMP

    @pytest.mark.parametrize("offset_seconds", [-300, 300])
    def test_window_boundary_is_inclusive(self, offset_seconds: int) -> None:
        """|now - timestamp| == 300 ainda é aceito."""
        timestamp = _iso(NOW + timedelta(seconds=offset_seconds))
        signature = sign_payload(SECRET, PAYLOAD, timestamp)

        result = verify_signature(SECRET, PAYLOAD, signature, timestamp, now=NOW)

        assert result.valid is True

    @pytest.mark.parametrize("timestamp", ["", "yesterday", "2025-13-40T99:00:00Z"])
    def test_invalid_timestamp_is_reported_distinctly(self, timestamp: str) -> None:
        """Timestamp não parseável -> INVALID_TIMESTAMP."""
        result = verify_signature(SECRET, PAYLOAD, "00" * 32, timestamp, now=NOW)

        assert result.failure == SignatureFailure.INVALID_TIMESTAMP

    def test_non_hex_signature_is_mismatch(self) -> None:
        """Assinatura que não é hex não levanta; apenas rejeita."""
        timestamp = _iso(NOW)

        result = verify_signature(SECRET, PAYLOAD, "zz-not-hex", timestamp, now=NOW)

        assert result.failure == SignatureFailure.SIGNATURE_MISMATCH

    def test_uppercase_hex_is_rejected(self) -> None:
        """Só o hexdigest minúsculo é aceito."""
        timestamp = _iso(NOW)
        signature = sign_payload(SECRET, PAYLOAD, timestamp)

        result = verify_signature(SECRET, PAYLOAD, signature.upper(), timestamp, now=NOW)

        assert result.failure == SignatureFailure.SIGNATURE_MISMATCH

    def test_separated_hex_pairs_are_rejected(self) -> None:
        """Espaços entre os bytes não são tolerados."""
        timestamp = _iso(NOW)
        signature = sign_payload(SECRET, PAYLOAD, timestamp)
        spaced = " ".join(signature[i : i + 2] for i in range(0, len(signature), 2))

        result = verify_signature(SECRET, PAYLOAD, spaced, timestamp, now=NOW)

        assert result.failure == SignatureFailure.SIGNATURE_MISMATCH


class TestParseTimestamp:
    """Testes de parse_timestamp."""

    def test_naive_timestamp_is_utc(self) -> None:
        """Sem offset, assume UTC."""
        parsed = parse_timestamp("2025-10-09T08:53:20")

        assert parsed == NOW

    def test_offset_is_respected(self) -> None:
        """Offset explícito é convertido corretamente."""
        parsed = parse_timestamp("2025-10-09T05:53:20-03:00")

        assert parsed == NOW
