from __future__ import annotations

import base64
import hashlib
import os

import pytest
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from sheinopen._crypto import aes
from sheinopen._crypto.aes import decrypt, decrypt_response, derive_key
from sheinopen.exceptions import DecryptionError, EmptyInputError, MalformedCiphertextError

_FIXED_IV = b"space-station-de"
_KEY = "test-secret-key-123"


def _encrypt(plaintext: str | bytes, key: bytes, iv: bytes) -> bytes:
    data = plaintext.encode("utf-8") if isinstance(plaintext, str) else plaintext
    padder = padding.PKCS7(128).padder()
    padded = padder.update(data) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def _fixed_iv_payload(plaintext: str | bytes, key: str) -> str:
    return base64.b64encode(_encrypt(plaintext, derive_key(key), _FIXED_IV)).decode("ascii")


def _embedded_iv_payload(plaintext: str, key: str, iv: bytes | None = None) -> str:
    iv = iv if iv is not None else os.urandom(16)
    return base64.b64encode(iv + _encrypt(plaintext, derive_key(key), iv)).decode("ascii")


# ------------------------------------------------------------------
# Key derivation
# ------------------------------------------------------------------


def test_derive_key_truncates_long_keys() -> None:
    assert derive_key("this-is-a-very-long-key-that-exceeds-16-bytes") == b"this-is-a-very-l"


def test_derive_key_pads_short_keys_with_zero_bytes() -> None:
    assert derive_key("short") == b"short" + b"\x00" * 11


def test_derive_key_exact_sixteen_bytes_unchanged() -> None:
    assert derive_key("1234567890123456") == b"1234567890123456"


def test_derive_key_counts_utf8_bytes_not_characters() -> None:
    # Six 3-byte characters: 18 bytes, truncated mid-character to 16.
    key = "密钥密钥密钥"
    assert derive_key(key) == key.encode("utf-8")[:16]
    assert len(derive_key(key)) == 16


def test_secret_key_selector_defaults_to_deterministic() -> None:
    assert aes._secret_key(_KEY, False) == derive_key(_KEY)


def test_secret_key_selector_pbkdf2_branch() -> None:
    derived = aes._secret_key(_KEY, True)
    assert len(derived) == 16
    assert derived != derive_key(_KEY)
    assert derived == aes._secret_key(_KEY, True)


def test_pbkdf2_matches_hashlib_reference() -> None:
    raw = _KEY.encode("utf-8")
    assert aes._derive_key_pbkdf2(_KEY) == hashlib.pbkdf2_hmac("sha256", raw, raw, 1000, dklen=16)


# ------------------------------------------------------------------
# Fixed IV
# ------------------------------------------------------------------


def test_decrypt_vendor_sample_event_data() -> None:
    assert decrypt("k7S6rPbAXNt49tlZ76+owTUu/s6miBP8Dp60/FSiOXA=", "283598F3DEA847688A947DB2A54F5878") == '{"name":"你好"}'


def test_decrypt_vendor_sample_secret_key() -> None:
    encrypted = "tRaAgVm76SGoW3Uv8+BQze8v5QT2DD37Qj4BxRG8TB13BeNOl1BYbaBBGkXROxoQ"
    assert decrypt(encrypted, "CD220D80B31E48A69FEC0FB6D7223421") == "6BEC9C4B668B4B14B17EEF106BB98AE5"


def test_decrypt_known_vectors() -> None:
    assert decrypt("S75pPQkNdK3BenOKEmesvA==", "test-secret-key-") == "Hello, World!"
    assert decrypt("S1yWCGqCS67h6fRuoSAYBQ==", "short") == "Hello, World!"
    assert decrypt("Mm6mUidxwnA4k1SLyjHJpQ==", "test-secret-key-") == ""


@pytest.mark.parametrize(
    "plaintext",
    ["", "Hello, World!", "你好世界🌍", "Complex test data with special chars: 测试数据 🔐", "x" * 1000],
)
def test_decrypt_round_trip(plaintext: str) -> None:
    assert decrypt(_fixed_iv_payload(plaintext, _KEY), _KEY) == plaintext


@pytest.mark.parametrize("key", ["short", "1234567890123456", "a" * 1000, "ключ-密钥-🔑", "medium-length-key"])
def test_decrypt_round_trip_key_shapes(key: str) -> None:
    assert decrypt(_fixed_iv_payload("Hello, World!", key), key) == "Hello, World!"


@pytest.mark.parametrize(("content", "key"), [("", _KEY), ("dGVzdA==", ""), (None, _KEY), ("dGVzdA==", None)])
def test_decrypt_empty_inputs(content: str, key: str) -> None:
    with pytest.raises(EmptyInputError, match="Ciphertext and key cannot be empty"):
        decrypt(content, key)


def test_decrypt_wrong_key_raises_decryption_error() -> None:
    payload = _fixed_iv_payload("Hello, World!", _KEY)
    with pytest.raises(DecryptionError, match="AES decryption failed") as exc_info:
        decrypt(payload, "another-key-entirely")
    assert exc_info.value.__cause__ is not None


def test_decrypt_malformed_base64_raises_decryption_error() -> None:
    with pytest.raises(DecryptionError):
        decrypt("not base64!!", _KEY)


def test_decrypt_non_block_multiple_raises_decryption_error() -> None:
    with pytest.raises(DecryptionError):
        decrypt(base64.b64encode(b"0123456789").decode("ascii"), _KEY)


def test_decrypt_invalid_utf8_is_not_mangled() -> None:
    payload = _fixed_iv_payload(b"\xff\xfe\xfd invalid", _KEY)
    with pytest.raises(DecryptionError) as exc_info:
        decrypt(payload, _KEY)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_decryption_error_does_not_leak_key() -> None:
    payload = _fixed_iv_payload("Hello, World!", _KEY)
    with pytest.raises(DecryptionError) as exc_info:
        decrypt(payload, "super-secret-wrong-key")
    assert "super-secret-wrong-key" not in str(exc_info.value)


# ------------------------------------------------------------------
# Embedded IV
# ------------------------------------------------------------------


def test_decrypt_response_known_vector() -> None:
    assert decrypt_response("AAECAwQFBgcICQoLDA0OD87aO6dtSxA3rLTFMJOgaMg=", "test-secret-key-") == "Hello, World!"


@pytest.mark.parametrize("plaintext", ["Hello, World!", "", "你好世界🌍", '{"a": [1, 2, 3]}'])
def test_decrypt_response_round_trip(plaintext: str) -> None:
    assert decrypt_response(_embedded_iv_payload(plaintext, _KEY), _KEY) == plaintext


@pytest.mark.parametrize(("content", "key"), [("", _KEY), ("dGVzdA==", ""), (None, _KEY), ("dGVzdA==", None)])
def test_decrypt_response_empty_inputs(content: str, key: str) -> None:
    with pytest.raises(EmptyInputError, match="Ciphertext and key cannot be empty"):
        decrypt_response(content, key)


@pytest.mark.parametrize("size", [1, 8, 16])
def test_decrypt_response_too_short(size: int) -> None:
    content = base64.b64encode(os.urandom(size)).decode("ascii")
    with pytest.raises(MalformedCiphertextError, match="Ciphertext Error"):
        decrypt_response(content, _KEY)


def test_decrypt_response_invalid_base64() -> None:
    with pytest.raises(DecryptionError):
        decrypt_response("invalid-base64!", _KEY)


def test_decrypt_response_wrong_key() -> None:
    payload = _embedded_iv_payload("Hello, World!", _KEY, iv=b"\x02" * 16)
    with pytest.raises(DecryptionError):
        decrypt_response(payload, "wrong")
