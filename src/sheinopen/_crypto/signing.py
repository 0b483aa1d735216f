"""Request signing for the SHEIN open platform.

The ``x-lt-signature`` header is computed as::

    VALUE     = openKeyId + "&" + timestamp + "&" + path
    KEY       = secretKey + randomKey
    signature = randomKey + base64(hex(HMAC-SHA256(KEY, VALUE)))

Note the base64 step encodes the lowercase *hex text*, not the raw digest.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import math
import secrets
import string
import time

from sheinopen._constants import HEADER_RANDOM_KEY_LENGTH
from sheinopen.exceptions import ValidationError
from sheinopen.models.signature import SignatureRequest, SignatureResult

_RANDOM_KEY_ALPHABET = string.ascii_letters + string.digits


def _now_ms() -> int:
    """Current epoch timestamp in milliseconds."""
    return int(time.time() * 1000)


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{name} is required and must be a string")


def validate_options(request: SignatureRequest) -> None:
    """Reject malformed signing inputs.

    Raises
    ------
    ValidationError
        If any string field is empty or not a ``str``, if ``timestamp`` is
        not a finite positive number, or if ``path`` lacks a leading ``/``.
    """
    _require_str(request.open_key_id, "openKeyId")
    _require_str(request.secret_key, "secretKey")
    _require_str(request.path, "path")
    _require_str(request.random_key, "randomKey")

    timestamp = request.timestamp
    if (
        isinstance(timestamp, bool)
        or not isinstance(timestamp, (int, float))
        or not math.isfinite(timestamp)
        or timestamp <= 0
    ):
        raise ValidationError("timestamp must be a valid positive number")

    if not request.path.startswith("/"):
        raise ValidationError('path must start with "/"')


def _render_timestamp(timestamp: int | float) -> str:
    if isinstance(timestamp, float) and timestamp.is_integer():
        return str(int(timestamp))
    return str(timestamp)


def generate_signature(request: SignatureRequest) -> SignatureResult:
    """Compute the ``x-lt-signature`` value for *request*.

    Parameters
    ----------
    request : SignatureRequest
        Credentials, path, timestamp and nonce.

    Returns
    -------
    SignatureResult
        The signature with the timestamp and nonce echoed back.

    Raises
    ------
    ValidationError
        If *request* fails :func:`validate_options`.
    """
    validate_options(request)

    value = f"{request.open_key_id}&{_render_timestamp(request.timestamp)}&{request.path}"
    key = f"{request.secret_key}{request.random_key}"

    hex_digest = hmac.new(key.encode("utf-8"), value.encode("utf-8"), hashlib.sha256).hexdigest()
    encoded = base64.b64encode(hex_digest.encode("ascii")).decode("ascii")

    return SignatureResult(
        signature=f"{request.random_key}{encoded}",
        timestamp=request.timestamp,
        random_key=request.random_key,
    )


def generate_signature_with_defaults(
    open_key_id: str,
    secret_key: str,
    path: str,
    random_key: str | None = None,
) -> SignatureResult:
    """Sign with the current time and, unless given, a fresh nonce.

    An empty or missing *random_key* is replaced by a
    ``HEADER_RANDOM_KEY_LENGTH``-character nonce, matching what the
    vendor's own SDK sends.
    """
    return generate_signature(
        SignatureRequest(
            open_key_id=open_key_id,
            secret_key=secret_key,
            path=path,
            timestamp=_now_ms(),
            random_key=random_key or generate_random_key(HEADER_RANDOM_KEY_LENGTH),
        )
    )


def generate_random_key(length: int = 32) -> str:
    """Return *length* characters drawn uniformly from ``[A-Za-z0-9]``."""
    return "".join(secrets.choice(_RANDOM_KEY_ALPHABET) for _ in range(length))
