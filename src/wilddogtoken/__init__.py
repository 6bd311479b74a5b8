"""Signed authentication token issuer for Wilddog applications.

Usage:
    from wilddogtoken import TokenFormat, TokenIssuer

    token = (
        TokenIssuer(secret, TokenFormat.CURRENT)
        .set_data({"uid": "alice-1", "role": "editor"})
        .set_option("expires", 1900000000)
        .create()
    )
"""

from __future__ import annotations

from wilddogtoken.errors import (
    EmptySubject,
    InvalidOptionType,
    InvalidSecretType,
    InvalidSubject,
    InvalidSubjectType,
    MissingSubject,
    SigningFailure,
    SubjectTooLong,
    TokenError,
    TokenTooLarge,
    UnsupportedOption,
)
from wilddogtoken.issuer import TokenIssuer, current_issuer, legacy_issuer
from wilddogtoken.models import TokenFormat, TokenOptions

__all__ = [
    "EmptySubject",
    "InvalidOptionType",
    "InvalidSecretType",
    "InvalidSubject",
    "InvalidSubjectType",
    "MissingSubject",
    "SigningFailure",
    "SubjectTooLong",
    "TokenError",
    "TokenFormat",
    "TokenIssuer",
    "TokenOptions",
    "TokenTooLarge",
    "UnsupportedOption",
    "current_issuer",
    "legacy_issuer",
]
