from __future__ import annotations

from sheinopen._redact import mask_identifier, redact_for_log


def test_redact_for_log_redacts_signed_headers() -> None:
    headers = {
        "x-lt-appid": "11795D14130008FA5B4FF15DFCADB",
        "x-lt-openKeyId": "5C83782096BA46008D66C424CB39803F",
        "x-lt-timestamp": "1740709414000",
        "x-lt-signature": "abcdeZDZjYTJj",
    }

    redacted = redact_for_log(headers)
    assert redacted["x-lt-signature"] == "<redacted>"
    assert redacted["x-lt-openKeyId"] == "5C83" + "*" * 28
    assert redacted["x-lt-timestamp"] == "1740709414000"
    assert redacted["x-lt-appid"] == "11795D14130008FA5B4FF15DFCADB"


def test_redact_for_log_redacts_nested_secrets() -> None:
    payload = {
        "code": "0",
        "info": {"secretKey": "ENCRYPTED", "openKeyId": "ab", "supplierId": 1},
        "tempToken": "tok",
        "items": [{"app_secret_key": "s"}],
    }

    redacted = redact_for_log(payload)
    assert redacted["info"]["secretKey"] == "<redacted>"
    assert redacted["info"]["openKeyId"] == "**"
    assert redacted["info"]["supplierId"] == 1
    assert redacted["tempToken"] == "<redacted>"
    assert redacted["items"][0]["app_secret_key"] == "<redacted>"


def test_redact_for_log_truncates_long_strings() -> None:
    redacted = redact_for_log({"value": "x" * 600}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_for_log_summarises_bytes() -> None:
    assert redact_for_log(b"\x00" * 32) == "<bytes:32b>"


def test_mask_identifier() -> None:
    assert mask_identifier("abcdefgh") == "abcd****"
    assert mask_identifier("abc") == "***"
