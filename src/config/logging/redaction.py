"""Helpers para manter identificadores fora dos logs em texto integral."""

from __future__ import annotations

_VISIBLE_CHARS = 8


def mask_key(value: str | None) -> str:
    """Mascara chave/ID para log (ex.: idempotency key).

    >>> mask_key("0f4c2a1e-9b7d-4c1a-8e2f-1d2c3b4a5f6e")
    '0f4c2a1e...'
    """
    if not value:
        return ""
    if len(value) <= _VISIBLE_CHARS:
        return value
    return value[:_VISIBLE_CHARS] + "..."
