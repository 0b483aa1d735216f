"""Client configuration for sheinopen."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from sheinopen._constants import DEFAULT_DOMAIN, DEFAULT_TIMEOUT
from sheinopen.exceptions import SheinConfigError


@dataclasses.dataclass(frozen=True)
class SheinConfig:
    """Client configuration.

    Parameters
    ----------
    domain : str
        Open platform base URL, e.g. ``https://openapi.sheincorp.com``.
    open_key_id : str or None
        Seller open key ID. Required for signed requests.
    secret_key : str or None
        Seller secret key. Required for signed requests and used to
        decrypt event data.
    app_id : str or None
        Developer app ID, sent as ``x-lt-appid``.
    app_secret_key : str or None
        Developer app secret, used to decrypt the seller secret returned
        by the token exchange.
    timeout : float
        Total request timeout in seconds.
    """

    domain: str = DEFAULT_DOMAIN
    open_key_id: str | None = None
    secret_key: str | None = dataclasses.field(default=None, repr=False)
    app_id: str | None = None
    app_secret_key: str | None = dataclasses.field(default=None, repr=False)
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, **overrides: Any) -> SheinConfig:
        """Create configuration from ``SHEIN_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        SheinConfigError
            If ``SHEIN_TIMEOUT`` is not a number.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "SHEIN_DOMAIN": "domain",
            "SHEIN_OPEN_KEY_ID": "open_key_id",
            "SHEIN_SECRET_KEY": "secret_key",
            "SHEIN_APP_ID": "app_id",
            "SHEIN_APP_SECRET_KEY": "app_secret_key",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("SHEIN_TIMEOUT")
        if timeout_env is not None and "timeout" not in overrides:
            try:
                config_kwargs["timeout"] = float(timeout_env)
            except ValueError as exc:
                raise SheinConfigError("SHEIN_TIMEOUT must be a number") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
