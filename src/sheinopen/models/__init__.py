"""Data models for SHEIN open platform requests and responses."""

from sheinopen.models._base import SheinBaseModel
from sheinopen.models.signature import SignatureRequest, SignatureResult
from sheinopen.models.token import GetByTokenInfo, GetByTokenResponse

__all__ = [
    "GetByTokenInfo",
    "GetByTokenResponse",
    "SheinBaseModel",
    "SignatureRequest",
    "SignatureResult",
]
