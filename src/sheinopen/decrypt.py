"""Decryption helpers named after the payloads SHEIN sends.

* :func:`decrypt_event_data` - webhook event bodies, decrypted with the
  seller ``secretKey``.
* :func:`decrypt_secret_key` - the encrypted ``secretKey`` in a
  get-by-token response, decrypted with the developer ``appSecretKey``.
* :func:`decrypt_response` - bodies SHEIN posts to your endpoints, which
  carry their own IV.
"""

from __future__ import annotations

from sheinopen._crypto import aes


def decrypt_event_data(encrypted_data: str, secret_key: str) -> str:
    """Decrypt a webhook event payload."""
    return aes.decrypt(encrypted_data, secret_key)


def decrypt_secret_key(encrypted_data: str, app_secret_key: str) -> str:
    """Decrypt the seller secret returned by the token exchange."""
    return aes.decrypt(encrypted_data, app_secret_key)


def decrypt_response(encrypted_response: str, secret_key: str) -> str:
    """Decrypt a callback body whose first 16 decoded bytes are the IV."""
    return aes.decrypt_response(encrypted_response, secret_key)
