"""Per-format validation limits and claim-assembly strategies.

The legacy format (``v=0``) embeds the whole data payload under ``d``.
The current format (``v=1``) promotes ``uid`` to a top-level claim and
nests whatever remains under ``claims``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from wilddogtoken.errors import (
    EmptySubject,
    InvalidSubject,
    InvalidSubjectType,
    SubjectTooLong,
)
from wilddogtoken.models import TokenFormat

UID_KEY = "uid"
MAX_TOKEN_BYTES = 1024

CURRENT_UID_PATTERN = re.compile(r"[A-Za-z0-9:-]*")


def assemble_legacy(data: Mapping[str, Any]) -> dict[str, Any]:
    """Embed the full payload, uid included, under ``d``."""
    return {"d": dict(data)}


def assemble_current(data: Mapping[str, Any]) -> dict[str, Any]:
    """Promote uid to the top level and nest the rest under ``claims``."""
    rest = {k: v for k, v in data.items() if k != UID_KEY}
    claims: dict[str, Any] = {}
    if UID_KEY in data:
        claims[UID_KEY] = data[UID_KEY]
    if rest:
        claims["claims"] = rest
    return claims


@dataclass(frozen=True)
class FormatRules:
    """Limits and claim shape for one token format."""

    version: int
    max_uid_bytes: int
    uid_pattern: Optional[re.Pattern[str]]
    assemble: Callable[[Mapping[str, Any]], dict[str, Any]]
    max_token_bytes: int = MAX_TOKEN_BYTES


_RULES: dict[TokenFormat, FormatRules] = {
    TokenFormat.LEGACY: FormatRules(
        version=TokenFormat.LEGACY.value,
        max_uid_bytes=256,
        uid_pattern=None,
        assemble=assemble_legacy,
    ),
    TokenFormat.CURRENT: FormatRules(
        version=TokenFormat.CURRENT.value,
        max_uid_bytes=64,
        uid_pattern=CURRENT_UID_PATTERN,
        assemble=assemble_current,
    ),
}


def rules_for(fmt: TokenFormat) -> FormatRules:
    return _RULES[fmt]


def validate_uid(uid: object, rules: FormatRules) -> None:
    """Check a uid against the format's character class and byte limit.

    Raises:
        InvalidSubjectType: uid is not a string.
        InvalidSubject: uid contains characters outside the allowed class.
        SubjectTooLong: uid exceeds ``rules.max_uid_bytes`` in UTF-8.
        EmptySubject: uid is the empty string.
    """
    if not isinstance(uid, str):
        raise InvalidSubjectType(type(uid).__name__)
    if rules.uid_pattern is not None and rules.uid_pattern.fullmatch(uid) is None:
        raise InvalidSubject(uid)

    uid_size = len(uid.encode("utf-8"))
    if uid_size > rules.max_uid_bytes:
        raise SubjectTooLong(rules.max_uid_bytes, uid_size)
    if uid_size == 0:
        raise EmptySubject()
