"""Criptografia de requisições — assinatura HMAC das submissões.

Localizado em app/infra para manter boundaries corretas:
- app/ não importa de api/ (exceto via bootstrap)
"""

from .signature import (
    MAX_TIMESTAMP_SKEW_SECONDS,
    SignatureFailure,
    SignatureResult,
    parse_timestamp,
    sign_payload,
    verify_signature,
)

__all__ = [
    "MAX_TIMESTAMP_SKEW_SECONDS",
    "SignatureFailure",
    "SignatureResult",
    "parse_timestamp",
    "sign_payload",
    "verify_signature",
]
