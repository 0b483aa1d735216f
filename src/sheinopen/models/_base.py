"""Base model for SHEIN open platform responses.

Every response model inherits from :class:`SheinBaseModel`, which maps the
platform's camelCase keys to snake_case fields and keeps the original
payload in ``raw``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class SheinBaseModel(BaseModel):
    """Base for SHEIN API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        """Drop ``None`` entries and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        cleaned = {key: value for key, value in values.items() if value is not None}
        # Keep an explicitly passed raw= as is.
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
