"""Token exchange (get-by-token) models."""

from __future__ import annotations

from pydantic import Field, field_validator

from sheinopen.models._base import SheinBaseModel


class GetByTokenInfo(SheinBaseModel):
    """Seller account returned by the token exchange.

    Parameters
    ----------
    secret_key : str
        Seller secret, still encrypted with the developer ``appSecretKey``.
        Use :func:`sheinopen.decrypt.decrypt_secret_key` to recover it.
    open_key_id : str
        Seller open key ID.
    app_id : str
        Developer app ID.
    state : str or None
        Opaque value echoed back from the authorization request.
    supplier_id : int
        SHEIN merchant ID.
    supplier_source : int
        Supplier source code.
    supplier_business_mode : str or None
        Supplier business type.
    """

    secret_key: str = Field(repr=False)
    open_key_id: str
    app_id: str = Field(alias="appid")
    state: str | None = None
    supplier_id: int
    supplier_source: int
    supplier_business_mode: str | None = None


class GetByTokenResponse(SheinBaseModel):
    """Envelope of the ``/open-api/auth/get-by-token`` response."""

    code: str
    msg: str | None = None
    info: GetByTokenInfo | None = None
    trace_id: str | None = None

    @field_validator("code", mode="before")
    @classmethod
    def _code_as_str(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value

    @property
    def ok(self) -> bool:
        """Whether the platform reported success (``code == "0"``)."""
        return self.code == "0"
