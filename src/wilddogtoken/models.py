"""Pydantic v2 models for wilddogtoken."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenFormat(int, Enum):
    """Token format variant; the value is embedded as the ``v`` claim."""

    LEGACY = 0
    CURRENT = 1

    @classmethod
    def parse(cls, value: str | int | TokenFormat) -> TokenFormat:
        """Accept an enum member, its version number, or its lowercase name."""
        if isinstance(value, TokenFormat):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        text = str(value).strip().lower()
        if text.isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            valid = ", ".join(m.name.lower() for m in cls)
            raise ValueError(f"Unknown token format '{value}'. Valid formats: {valid}") from None


def epoch_seconds(value: datetime) -> int:
    """Integer epoch seconds for a datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


class TokenOptions(BaseModel):
    """Issuer options, keyed on the wire by their camelCase names."""

    model_config = ConfigDict(populate_by_name=True)

    admin: bool = False
    debug: bool = False
    expires: Optional[datetime] = None
    not_before: Optional[datetime] = Field(default=None, alias="notBefore")

    def to_claims(self) -> dict[str, Any]:
        """Project options onto claim keys: exp/nbf only when set."""
        claims: dict[str, Any] = {"admin": self.admin, "debug": self.debug}
        if self.expires is not None:
            claims["exp"] = epoch_seconds(self.expires)
        if self.not_before is not None:
            claims["nbf"] = epoch_seconds(self.not_before)
        return claims


# Wire name -> model field
OPTION_FIELDS: dict[str, str] = {
    field.alias or name: name
    for name, field in TokenOptions.model_fields.items()
}
