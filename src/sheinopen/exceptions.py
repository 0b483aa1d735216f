"""Custom exception hierarchy for sheinopen."""

from __future__ import annotations


class SheinError(Exception):
    """Base exception for all sheinopen errors."""


class SheinConfigError(SheinError):
    """Invalid or missing configuration."""


class ValidationError(SheinError):
    """Malformed or missing signing inputs.

    Raised before any HMAC work starts. Messages name the offending field,
    never its value.
    """


class SheinCryptoError(SheinError):
    """Base for decryption failures."""


class EmptyInputError(SheinCryptoError):
    """Ciphertext or key passed to decryption was empty."""


class MalformedCiphertextError(SheinCryptoError):
    """Decoded ciphertext is too short to hold the IV prefix and a payload."""


class DecryptionError(SheinCryptoError):
    """Cipher, padding, base64 or UTF-8 failure.

    The underlying exception is chained as ``__cause__``.
    """


class SheinTransportError(SheinError):
    """HTTP-level failure (network, timeout, non-2xx)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class SheinHttpError(SheinTransportError):
    """Server answered with a non-success status.

    ``code`` is a stable machine-readable category such as ``HTTP_ERROR``.
    """

    code: str = "HTTP_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
        code: str | None = None,
    ) -> None:
        if code is not None:
            self.code = code
        super().__init__(message, status_code=status_code, endpoint=endpoint)


class SheinAuthenticationError(SheinHttpError):
    """Credentials rejected (HTTP 401)."""

    code = "AUTH_ERROR"


class SheinPermissionError(SheinHttpError):
    """Credentials valid but not allowed to call the endpoint (HTTP 403)."""

    code = "PERMISSION_ERROR"


class SheinNotFoundError(SheinHttpError):
    """Unknown endpoint (HTTP 404)."""

    code = "NOT_FOUND_ERROR"


class SheinRateLimitError(SheinHttpError):
    """Rate limited by the gateway (HTTP 429)."""

    code = "RATE_LIMIT_ERROR"


class SheinServerError(SheinHttpError):
    """Gateway or upstream failure (HTTP 5xx)."""

    code = "SERVER_ERROR"
