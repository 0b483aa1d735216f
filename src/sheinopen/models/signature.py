"""Signing input and output models."""

from __future__ import annotations

import dataclasses

from pydantic import BaseModel, ConfigDict


@dataclasses.dataclass(frozen=True)
class SignatureRequest:
    """Inputs to :func:`sheinopen._crypto.signing.generate_signature`.

    Field types are deliberately not coerced here; the signing gate
    (``validate_options``) rejects anything malformed before computing.

    Parameters
    ----------
    open_key_id : str
        Vendor-issued open key identifier.
    secret_key : str
        Vendor-issued secret. Hidden from ``repr``.
    path : str
        Request path, must start with ``/``.
    timestamp : int
        Milliseconds since epoch.
    random_key : str
        Per-request nonce.
    """

    open_key_id: str
    secret_key: str = dataclasses.field(repr=False)
    path: str
    timestamp: int
    random_key: str


class SignatureResult(BaseModel):
    """Signature plus the timestamp/nonce pair it was computed with."""

    model_config = ConfigDict(frozen=True)

    signature: str
    timestamp: int | float
    random_key: str
