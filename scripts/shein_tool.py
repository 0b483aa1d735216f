#!/usr/bin/env python3
"""Developer tool for signing requests and decrypting SHEIN payloads.

Credentials default to the ``SHEIN_*`` environment variables read by
:meth:`sheinopen.SheinConfig.from_env`; flags override them.

Examples::

    shein_tool.py sign /open-api/order/purchase-order-info
    shein_tool.py decrypt-event 'k7S6rPbAXNt4...' --key "$SHEIN_SECRET_KEY"
    shein_tool.py decrypt-response "$(cat body.txt)" --key "$SHEIN_SECRET_KEY"
    shein_tool.py get-by-token 11111111 --domain https://openapi-test01.sheincorp.cn
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from sheinopen import (  # noqa: E402
    SheinConfig,
    SheinError,
    decrypt_event_data,
    decrypt_response,
    decrypt_secret_key,
    generate_signature_with_defaults,
    get_by_token,
)
from sheinopen._constants import (  # noqa: E402
    HEADER_APP_ID,
    HEADER_OPEN_KEY_ID,
    HEADER_SIGNATURE,
    HEADER_TIMESTAMP,
)


def _cmd_sign(args: argparse.Namespace, config: SheinConfig) -> int:
    if not config.open_key_id or not config.secret_key:
        print("open key id and secret key are required (flags or SHEIN_* env)", file=sys.stderr)
        return 2
    result = generate_signature_with_defaults(config.open_key_id, config.secret_key, args.path, args.random_key)
    headers = {
        HEADER_APP_ID: config.app_id or "",
        HEADER_OPEN_KEY_ID: config.open_key_id,
        HEADER_TIMESTAMP: str(result.timestamp),
        HEADER_SIGNATURE: result.signature,
    }
    print(json.dumps(headers, indent=2))
    return 0


def _cmd_decrypt(args: argparse.Namespace, config: SheinConfig) -> int:
    if args.command == "decrypt-event":
        print(decrypt_event_data(args.content, args.key or config.secret_key or ""))
    elif args.command == "decrypt-secret-key":
        print(decrypt_secret_key(args.content, args.key or config.app_secret_key or ""))
    else:
        print(decrypt_response(args.content, args.key or config.secret_key or ""))
    return 0


def _cmd_get_by_token(args: argparse.Namespace, config: SheinConfig) -> int:
    response = asyncio.run(get_by_token(config.domain, args.temp_token))
    print(json.dumps(response.raw, indent=2, ensure_ascii=False))
    return 0 if response.ok else 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--domain", help="Open platform base URL")
    parser.add_argument("--open-key-id")
    parser.add_argument("--secret-key")
    parser.add_argument("--app-id")
    parser.add_argument("--app-secret-key")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")

    sub = parser.add_subparsers(dest="command", required=True)

    sign = sub.add_parser("sign", help="Print signed x-lt-* headers for a path")
    sign.add_argument("path")
    sign.add_argument("--random-key", help="Nonce to sign with (generated if omitted)")
    sign.set_defaults(handler=_cmd_sign)

    for name, help_text in (
        ("decrypt-event", "Decrypt webhook event data (fixed IV)"),
        ("decrypt-secret-key", "Decrypt a token-exchange secretKey (fixed IV)"),
        ("decrypt-response", "Decrypt a callback body with embedded IV"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("content", help="Base64 ciphertext")
        cmd.add_argument("--key", help="Decryption key (defaults from config)")
        cmd.set_defaults(handler=_cmd_decrypt)

    token = sub.add_parser("get-by-token", help="Exchange a temporary token for seller credentials")
    token.add_argument("temp_token")
    token.set_defaults(handler=_cmd_get_by_token)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    overrides = {
        field: value
        for field, value in (
            ("domain", args.domain),
            ("open_key_id", args.open_key_id),
            ("secret_key", args.secret_key),
            ("app_id", args.app_id),
            ("app_secret_key", args.app_secret_key),
        )
        if value is not None
    }
    config = SheinConfig.from_env(**overrides)

    try:
        return int(args.handler(args, config))
    except SheinError as exc:
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
