"""High-level async client for the SHEIN open platform."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

import aiohttp

from sheinopen._api.auth import build_get_by_token_body, parse_get_by_token_response
from sheinopen._constants import (
    CONTENT_TYPE,
    GET_BY_TOKEN_PATH,
    HEADER_APP_ID,
    HEADER_OPEN_KEY_ID,
    HEADER_SIGNATURE,
    HEADER_TIMESTAMP,
)
from sheinopen._crypto.signing import generate_signature_with_defaults
from sheinopen._transport import HttpTransport, Transport
from sheinopen.config import SheinConfig
from sheinopen.decrypt import decrypt_secret_key
from sheinopen.exceptions import SheinConfigError, SheinError
from sheinopen.models.token import GetByTokenResponse

_logger = logging.getLogger(__name__)


class SheinClient:
    """Async client for the SHEIN open platform.

    Usage::

        async with SheinClient(config) as client:
            orders = await client.get("/open-api/order/purchase-order-info", query={"page": 1})
    """

    def __init__(
        self,
        config: SheinConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> SheinClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    @property
    def config(self) -> SheinConfig:
        return self._config

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise SheinError("Client not initialized. Use 'async with SheinClient(...) as client:'")
        return self._transport

    def build_url(self, path: str, query: Mapping[str, Any] | None = None) -> str:
        """Join the configured domain, *path* and an optional query string."""
        domain = self._config.domain
        if not domain or not isinstance(domain, str):
            raise SheinConfigError('Configuration must include a valid "domain" field (string)')

        base_url = domain.rstrip("/")
        clean_path = path if path.startswith("/") else f"/{path}"
        url = f"{base_url}{clean_path}"
        if query:
            url = f"{url}?{urlencode(query, doseq=True)}"
        return url

    def signed_headers(self, path: str) -> dict[str, str]:
        """Build the ``x-lt-*`` headers for a signed request to *path*.

        Raises
        ------
        SheinConfigError
            If ``open_key_id`` or ``secret_key`` is missing, or *path* is
            not a non-empty string.
        """
        open_key_id = self._config.open_key_id
        secret_key = self._config.secret_key

        if not open_key_id or not isinstance(open_key_id, str):
            raise SheinConfigError("open_key_id is required for signed requests")
        if not open_key_id.strip():
            raise SheinConfigError("open_key_id cannot be empty")
        if not secret_key or not isinstance(secret_key, str):
            raise SheinConfigError("secret_key is required for signed requests")
        if not secret_key.strip():
            raise SheinConfigError("secret_key cannot be empty")
        if not path or not isinstance(path, str):
            raise SheinConfigError("Request path must be a valid string")

        result = generate_signature_with_defaults(open_key_id, secret_key, path)
        _logger.debug("Signed %s timestamp=%s nonce=%s", path, result.timestamp, result.random_key)
        return {
            HEADER_APP_ID: self._config.app_id or "",
            HEADER_OPEN_KEY_ID: open_key_id,
            HEADER_TIMESTAMP: str(result.timestamp),
            HEADER_SIGNATURE: result.signature,
            "Content-Type": CONTENT_TYPE,
        }

    # ------------------------------------------------------------------
    # HTTP verbs
    # ------------------------------------------------------------------

    async def get(
        self,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a signed GET request and return the decoded body."""
        transport = self._require_transport()
        url = self.build_url(path, query)
        merged = {**self.signed_headers(path), **(headers or {})}
        return await transport.request("GET", url, headers=merged, endpoint=path)

    async def post(
        self,
        path: str,
        *,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a signed POST request and return the decoded body."""
        transport = self._require_transport()
        url = self.build_url(path, query)
        merged = {**self.signed_headers(path), **(headers or {})}
        return await transport.request("POST", url, headers=merged, body=body, endpoint=path)

    async def pure_post(
        self,
        path: str,
        *,
        body: Any = None,
        query: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send an unsigned POST request and return the decoded body."""
        transport = self._require_transport()
        url = self.build_url(path, query)
        return await transport.request("POST", url, headers=dict(headers or {}), body=body, endpoint=path)

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def get_by_token(self, temp_token: str) -> GetByTokenResponse:
        """Exchange a temporary authorization token for seller credentials.

        The returned ``info.secret_key`` is still encrypted; see
        :meth:`decrypt_secret_key`.
        """
        body = build_get_by_token_body(temp_token)
        response = await self.pure_post(GET_BY_TOKEN_PATH, body=body)
        return parse_get_by_token_response(response)

    def decrypt_secret_key(self, encrypted_secret_key: str) -> str:
        """Decrypt a token-exchange seller secret with ``app_secret_key``."""
        app_secret_key = self._config.app_secret_key
        if not app_secret_key:
            raise SheinConfigError("app_secret_key is required to decrypt the seller secret key")
        return decrypt_secret_key(encrypted_secret_key, app_secret_key)


async def get_by_token(
    domain: str,
    temp_token: str,
    *,
    session: aiohttp.ClientSession | None = None,
) -> GetByTokenResponse:
    """Run the token exchange with a short-lived client that only knows *domain*."""
    async with SheinClient(SheinConfig(domain=domain), session=session) as client:
        return await client.get_by_token(temp_token)
