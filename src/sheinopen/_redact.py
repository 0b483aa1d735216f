"""Helpers for safe debug logging.

Signed requests carry secrets in headers (``x-lt-signature``) and token
exchanges return encrypted keys in their bodies. Everything passed to a
DEBUG log goes through :func:`redact_for_log` first.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

# Compared case-insensitively with ``-`` and ``_`` removed.
_SECRET_KEYS: frozenset[str] = frozenset(
    {
        "xltsignature",
        "secretkey",
        "appsecretkey",
        "temptoken",
        "authorization",
        "cookie",
    }
)

# Identifiers that are useful for correlating logs but should not be
# copied whole into them.
_MASKED_KEYS: frozenset[str] = frozenset({"xltopenkeyid", "openkeyid"})

_MASK_VISIBLE = 4
_MAX_DEPTH = 20


def _normalise_key(key: Any) -> str:
    return str(key).lower().replace("-", "").replace("_", "")


def mask_identifier(value: str) -> str:
    """Keep the first few characters of *value* and hide the rest."""
    if len(value) <= _MASK_VISIBLE:
        return "*" * len(value)
    return f"{value[:_MASK_VISIBLE]}{'*' * (len(value) - _MASK_VISIBLE)}"


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a copy of *value* with secrets replaced by ``<redacted>``.

    Mappings are walked recursively; long strings are truncated to
    *max_string* characters and bytes are summarised by length.
    """
    if _depth > _MAX_DEPTH:
        return "<max-depth>"

    if value is None or isinstance(value, (bool, int, float)):
        return value

    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}…<truncated>"

    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for key, item in value.items():
            name = _normalise_key(key)
            if name in _SECRET_KEYS:
                redacted[str(key)] = "<redacted>"
            elif name in _MASKED_KEYS and isinstance(item, str):
                redacted[str(key)] = mask_identifier(item)
            else:
                redacted[str(key)] = redact_for_log(item, max_string=max_string, _depth=_depth + 1)
        return redacted

    if isinstance(value, Sequence):
        return [redact_for_log(item, max_string=max_string, _depth=_depth + 1) for item in value]

    return repr(value)
