"""Secret and token-format configuration from the environment."""

from __future__ import annotations

import os

from wilddogtoken.models import TokenFormat

# Used when WILDDOG_SECRET is unset outside production
_DEV_SECRET = "dev-insecure-wilddog-secret-do-not-use-in-production"


def is_dev_mode() -> bool:
    return os.environ.get("ENVIRONMENT", "development") != "production"


def get_secret() -> str:
    secret = os.environ.get("WILDDOG_SECRET")
    if secret:
        return secret
    if is_dev_mode():
        return _DEV_SECRET
    raise ValueError("WILDDOG_SECRET environment variable must be set in production")


def get_token_format() -> TokenFormat:
    """Token format from WILDDOG_TOKEN_FORMAT ("legacy"/"current" or 0/1)."""
    return TokenFormat.parse(os.environ.get("WILDDOG_TOKEN_FORMAT", "current"))
