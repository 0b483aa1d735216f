"""AES-128-CBC decryption for SHEIN encrypted payloads.

Two IV modes are in use:

* fixed IV, derived from the vendor seed ``space-station-de``
  (webhook event data, token-exchange secrets);
* embedded IV, where the first 16 bytes of the decoded payload are the IV
  (gateway response/callback bodies).

Both modes derive the AES key from the source string by truncating or
zero-padding its UTF-8 bytes to 16.
"""

from __future__ import annotations

import base64

from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from sheinopen.exceptions import DecryptionError, EmptyInputError, MalformedCiphertextError

IV_LENGTH = 16
KEY_LENGTH = 16

_DEFAULT_IV_SEED = b"space-station-de"
_DEFAULT_IV = _DEFAULT_IV_SEED[:IV_LENGTH]

_PBKDF2_ITERATIONS = 1000

_EMPTY_MESSAGE = "Ciphertext and key cannot be empty"


def derive_key(key: str) -> bytes:
    """Truncate or zero-pad the UTF-8 bytes of *key* to 16 bytes."""
    raw = key.encode("utf-8")
    return raw[:KEY_LENGTH].ljust(KEY_LENGTH, b"\x00")


def _derive_key_pbkdf2(key: str) -> bytes:
    # Password and salt are both the source string.
    raw = key.encode("utf-8")
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=raw,
        iterations=_PBKDF2_ITERATIONS,
    )
    return kdf.derive(raw)


def _secret_key(key: str, secure: bool) -> bytes:
    """Select the key-derivation strategy.

    Public operations always pass ``secure=False``; the PBKDF2 branch is
    part of the vendor protocol family but not used by any endpoint yet.
    """
    if secure:
        return _derive_key_pbkdf2(key)
    return derive_key(key)


def _b64decode(content: str) -> bytes:
    try:
        return base64.b64decode(content, validate=True)
    except ValueError as exc:
        raise DecryptionError(f"AES decryption failed: {exc}") from exc


def _decrypt_with_iv(ciphertext: bytes, key: str, iv: bytes, secure: bool = False) -> str:
    try:
        cipher = Cipher(algorithms.AES(_secret_key(key, secure)), modes.CBC(iv))
        decryptor = cipher.decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(128).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
        return plaintext.decode("utf-8")
    except Exception as exc:
        raise DecryptionError(f"AES decryption failed: {exc}") from exc


def decrypt(content: str, key: str) -> str:
    """Decrypt base64 *content* using the fixed vendor IV.

    Parameters
    ----------
    content : str
        Base64-encoded ciphertext.
    key : str
        Source key string (any length).

    Returns
    -------
    str
        UTF-8 plaintext.

    Raises
    ------
    EmptyInputError
        If *content* or *key* is empty.
    DecryptionError
        On malformed base64, bad padding, wrong key or invalid UTF-8.
    """
    if not content or not key:
        raise EmptyInputError(_EMPTY_MESSAGE)
    return _decrypt_with_iv(_b64decode(content), key, _DEFAULT_IV)


def decrypt_response(content: str, key: str) -> str:
    """Decrypt base64 ``IV || ciphertext`` *content*.

    Raises
    ------
    EmptyInputError
        If *content* or *key* is empty.
    MalformedCiphertextError
        If the decoded payload is not longer than the 16-byte IV.
    DecryptionError
        On malformed base64, bad padding, wrong key or invalid UTF-8.
    """
    if not content or not key:
        raise EmptyInputError(_EMPTY_MESSAGE)

    decoded = _b64decode(content)
    if len(decoded) <= IV_LENGTH:
        raise MalformedCiphertextError("Ciphertext Error")

    iv, ciphertext = decoded[:IV_LENGTH], decoded[IV_LENGTH:]
    return _decrypt_with_iv(ciphertext, key, iv)
