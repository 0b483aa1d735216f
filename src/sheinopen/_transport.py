"""HTTP transport and status-code mapping."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from sheinopen._constants import CONTENT_TYPE
from sheinopen._redact import redact_for_log
from sheinopen.config import SheinConfig
from sheinopen.exceptions import (
    SheinAuthenticationError,
    SheinHttpError,
    SheinNotFoundError,
    SheinPermissionError,
    SheinRateLimitError,
    SheinServerError,
    SheinTransportError,
)

_logger = logging.getLogger(__name__)

_STATUS_ERRORS: dict[int, tuple[type[SheinHttpError], str]] = {
    401: (SheinAuthenticationError, "Authentication failed. Please check your API credentials."),
    403: (SheinPermissionError, "Access forbidden. Please check your API permissions."),
    404: (SheinNotFoundError, "API endpoint not found."),
    429: (SheinRateLimitError, "Rate limit exceeded. Please retry after some time."),
}


class Transport(Protocol):
    """Structural transport interface used by the client.

    Test doubles only need to provide ``request``.
    """

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Any = None,
        endpoint: str = "",
    ) -> Any:
        ...


def raise_for_status(status: int, payload: Any, *, endpoint: str = "", reason: str = "") -> None:
    """Raise the :class:`SheinHttpError` subclass matching *status*.

    Does nothing for 2xx statuses. :class:`HttpTransport` only calls this
    for 5xx replies; callers wanting strict handling of a returned 4xx
    body can call it themselves.
    """
    if 200 <= status < 300:
        return

    known = _STATUS_ERRORS.get(status)
    if known is not None:
        error_cls, message = known
        raise error_cls(message, status_code=status, endpoint=endpoint)

    if status >= 500:
        raise SheinServerError(
            "Server error occurred. Please try again later.",
            status_code=status,
            endpoint=endpoint,
        )

    status_text = f"{status} {reason}".strip()
    detail = reason
    if isinstance(payload, Mapping):
        detail = str(payload.get("message") or payload.get("msg") or reason)
    raise SheinHttpError(
        f"Request failed ({status_text}): {detail}",
        status_code=status,
        endpoint=endpoint,
    )


def _decode_body(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


class HttpTransport:
    """aiohttp-backed transport sending JSON bodies."""

    def __init__(self, config: SheinConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.timeout)

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Any = None,
        endpoint: str = "",
    ) -> Any:
        """Send *method* to *url* and return the decoded response body.

        JSON bodies are decoded to Python objects; anything else is
        returned as text, and an empty body as ``None``. Replies below 500,
        4xx included, are returned as decoded.

        Raises
        ------
        SheinTransportError
            On network failure or timeout.
        SheinServerError
            On a 5xx status.
        """
        send_headers = dict(headers)
        data: bytes | None = None
        if body is not None:
            send_headers.setdefault("Content-Type", CONTENT_TYPE)
            data = json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

        _logger.debug(
            "%s %s headers=%s body=%s",
            method,
            url,
            redact_for_log(send_headers),
            redact_for_log(body),
        )

        try:
            async with self._http.request(
                method,
                url,
                data=data,
                headers=send_headers,
                timeout=self._timeout,
            ) as resp:
                status = resp.status
                reason = resp.reason or ""
                text = await resp.text()
        except TimeoutError as exc:
            raise SheinTransportError(
                f"Request to {endpoint or url} timed out after {self._config.timeout}s",
                endpoint=endpoint,
            ) from exc
        except aiohttp.ClientError as exc:
            raise SheinTransportError(
                f"Network error calling {endpoint or url}: {exc}",
                endpoint=endpoint,
            ) from exc

        payload = _decode_body(text)
        _logger.debug("HTTP %s from %s body=%s", status, endpoint or url, redact_for_log(payload))
        # 4xx replies carry the platform {code, msg} envelope and go back to the caller.
        if status >= 500:
            raise_for_status(status, payload, endpoint=endpoint, reason=reason)
        return payload
