"""sheinopen - Async Python SDK for the SHEIN open platform."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sheinopen")
except PackageNotFoundError:
    __version__ = "0+local"
from sheinopen._crypto.signing import (
    generate_random_key,
    generate_signature,
    generate_signature_with_defaults,
    validate_options,
)
from sheinopen.client import SheinClient, get_by_token
from sheinopen.config import SheinConfig
from sheinopen.decrypt import decrypt_event_data, decrypt_response, decrypt_secret_key
from sheinopen.exceptions import (
    DecryptionError,
    EmptyInputError,
    MalformedCiphertextError,
    SheinAuthenticationError,
    SheinConfigError,
    SheinCryptoError,
    SheinError,
    SheinHttpError,
    SheinNotFoundError,
    SheinPermissionError,
    SheinRateLimitError,
    SheinServerError,
    SheinTransportError,
    ValidationError,
)
from sheinopen.models import GetByTokenInfo, GetByTokenResponse, SignatureRequest, SignatureResult

__all__ = [
    "__version__",
    "DecryptionError",
    "EmptyInputError",
    "GetByTokenInfo",
    "GetByTokenResponse",
    "MalformedCiphertextError",
    "SheinAuthenticationError",
    "SheinClient",
    "SheinConfig",
    "SheinConfigError",
    "SheinCryptoError",
    "SheinError",
    "SheinHttpError",
    "SheinNotFoundError",
    "SheinPermissionError",
    "SheinRateLimitError",
    "SheinServerError",
    "SheinTransportError",
    "SignatureRequest",
    "SignatureResult",
    "ValidationError",
    "decrypt_event_data",
    "decrypt_response",
    "decrypt_secret_key",
    "generate_random_key",
    "generate_signature",
    "generate_signature_with_defaults",
    "get_by_token",
    "validate_options",
]
