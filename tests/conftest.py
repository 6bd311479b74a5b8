"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timezone

import jwt as pyjwt
import pytest

from wilddogtoken.issuer import TokenIssuer
from wilddogtoken.models import TokenFormat

SECRET = "s3cr3t"

# 2026-01-01T00:00:00Z
FIXED_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)
FIXED_IAT = 1767225600


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def current(fixed_clock):
    """Current-format (v=1) issuer with a frozen clock."""
    return TokenIssuer(SECRET, TokenFormat.CURRENT, clock=fixed_clock)


@pytest.fixture
def legacy(fixed_clock):
    """Legacy-format (v=0) issuer with a frozen clock."""
    return TokenIssuer(SECRET, TokenFormat.LEGACY, clock=fixed_clock)


@pytest.fixture
def decode():
    """Decode a token's claims, checking the signature but not time claims."""

    def _decode(token: str, secret: str = SECRET) -> dict:
        return pyjwt.decode(
            token,
            secret,
            algorithms=["HS256"],
            options={"verify_exp": False, "verify_nbf": False, "verify_iat": False},
        )

    return _decode
