"""Token exchange endpoint.

Endpoint:
  - /open-api/auth/get-by-token

The request is unsigned: the temporary token from the seller authorization
redirect is the only credential.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from sheinopen._constants import GET_BY_TOKEN_PATH
from sheinopen._redact import redact_for_log
from sheinopen.exceptions import SheinConfigError, SheinError
from sheinopen.models.token import GetByTokenResponse

_logger = logging.getLogger(__name__)


def build_get_by_token_body(temp_token: str) -> dict[str, str]:
    """Build the JSON body for the token exchange.

    Raises
    ------
    SheinConfigError
        If *temp_token* is empty or not a string.
    """
    if not isinstance(temp_token, str) or not temp_token.strip():
        raise SheinConfigError("temp_token must be a non-empty string")
    return {"tempToken": temp_token.strip()}


def parse_get_by_token_response(response: Any) -> GetByTokenResponse:
    """Validate the decoded token exchange response.

    Raises
    ------
    SheinError
        If the response is not a JSON object with the expected shape.
    """
    if not isinstance(response, dict):
        raise SheinError(f"{GET_BY_TOKEN_PATH} returned a non-object body")
    _logger.debug("get-by-token response parsed=%s", redact_for_log(response))
    try:
        return GetByTokenResponse.model_validate(response)
    except PydanticValidationError as exc:
        raise SheinError(f"{GET_BY_TOKEN_PATH} returned an unexpected payload: {exc.error_count()} errors") from exc
