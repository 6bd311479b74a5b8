"""Issuance profile loading from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from wilddogtoken.issuer import TokenIssuer
from wilddogtoken.models import TokenFormat


class IssueProfile(BaseModel):
    """Token format, data, and options to mint a token with."""

    format: TokenFormat = TokenFormat.CURRENT
    data: dict[str, Any] = Field(default_factory=dict)
    options: dict[str, Any] = Field(default_factory=dict)

    @field_validator("format", mode="before")
    @classmethod
    def _parse_format(cls, value: Any) -> TokenFormat:
        return TokenFormat.parse(value)


def load_profile(path: str | Path) -> IssueProfile:
    """Load an issuance profile from a YAML file.

    Example::

        format: current
        data:
          uid: alice-1
          role: editor
        options:
          debug: true
          expires: 2030-01-01T00:00:00Z

    Option values are passed through untouched; type checks happen when the
    profile is applied to an issuer.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Profile not found: {path}")

    with open(path) as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid profile {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"Profile {path} must be a mapping, got {type(raw).__name__}")
    return IssueProfile.model_validate(raw)


def build_issuer(profile: IssueProfile, secret: str) -> TokenIssuer:
    """Create an issuer configured from a profile."""
    return (
        TokenIssuer(secret, profile.format)
        .set_data(profile.data)
        .set_options(profile.options)
    )
