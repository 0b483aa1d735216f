"""Cryptographic primitives for SHEIN open platform communication."""

from __future__ import annotations

from sheinopen._crypto.aes import decrypt, decrypt_response, derive_key
from sheinopen._crypto.signing import (
    generate_random_key,
    generate_signature,
    generate_signature_with_defaults,
    validate_options,
)

__all__ = [
    "decrypt",
    "decrypt_response",
    "derive_key",
    "generate_random_key",
    "generate_signature",
    "generate_signature_with_defaults",
    "validate_options",
]
