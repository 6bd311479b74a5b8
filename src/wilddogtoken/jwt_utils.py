"""HS256 signing for issued tokens."""

from __future__ import annotations

from typing import Any, Mapping

import jwt

JWT_ALGORITHM = "HS256"


def sign(claims: Mapping[str, Any], secret: str, algorithm: str = JWT_ALGORITHM) -> str:
    """Sign claims into a compact JWT (header ``{"alg": "HS256", "typ": "JWT"}``)."""
    return jwt.encode(dict(claims), secret, algorithm=algorithm)
