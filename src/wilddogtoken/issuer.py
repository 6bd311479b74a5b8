"""Token issuer: option intake, claim assembly, and signing."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Callable, Mapping

from wilddogtoken.errors import (
    InvalidOptionType,
    InvalidSecretType,
    MissingSubject,
    SigningFailure,
    TokenTooLarge,
    UnsupportedOption,
)
from wilddogtoken.formats import UID_KEY, FormatRules, rules_for, validate_uid
from wilddogtoken.jwt_utils import JWT_ALGORITHM, sign
from wilddogtoken.models import OPTION_FIELDS, TokenFormat, TokenOptions

logger = logging.getLogger(__name__)

Signer = Callable[[Mapping[str, Any], str, str], str]

_BOOL_OPTIONS = {"admin", "debug"}
_INSTANT_OPTIONS = {"expires", "notBefore"}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _type_name(value: object) -> str:
    return type(value).__name__


class TokenIssuer:
    """Builds and signs authentication tokens for one application secret.

    Configure with ``set_data`` / ``set_option`` / ``set_options`` (all
    chainable), then call ``create``. ``create`` re-reads the current
    configuration on every call and never mutates it, so it can be called
    repeatedly. Instances are not thread-safe; use one per caller.

    Args:
        secret: Application secret used as the HMAC key.
        token_format: Claim shape and validation limits to apply.
        signer: Signing primitive ``(claims, secret, algorithm) -> token``.
        clock: Returns the current time; used for the ``iat`` claim.
    """

    def __init__(
        self,
        secret: str,
        token_format: TokenFormat = TokenFormat.CURRENT,
        *,
        signer: Signer = sign,
        clock: Callable[[], datetime] | None = None,
    ):
        if not isinstance(secret, str):
            raise InvalidSecretType(_type_name(secret))
        self._secret = secret
        self._format = TokenFormat.parse(token_format)
        self._rules: FormatRules = rules_for(self._format)
        self._signer = signer
        self._clock = clock or _utcnow
        self._data: dict[str, Any] = {}
        self._options = TokenOptions()

    @property
    def token_format(self) -> TokenFormat:
        return self._format

    @property
    def rules(self) -> FormatRules:
        return self._rules

    @property
    def data(self) -> Mapping[str, Any]:
        return MappingProxyType(self._data)

    @property
    def options(self) -> TokenOptions:
        return self._options

    # --- Configuration intake ---

    def set_data(self, data: Mapping[str, Any]) -> TokenIssuer:
        """Replace the token data. Must contain ``uid`` unless admin is set."""
        self._data = dict(data)
        return self

    def set_option(self, name: str, value: Any) -> TokenIssuer:
        """Set one option, validating its name and value type.

        ``admin`` and ``debug`` take a bool. ``expires`` and ``notBefore``
        take a datetime or integer epoch seconds; integers are stored as UTC
        datetimes.

        Raises:
            UnsupportedOption: ``name`` is not a known option.
            InvalidOptionType: ``value`` has the wrong type for ``name``.
        """
        if name not in OPTION_FIELDS:
            raise UnsupportedOption(name, list(OPTION_FIELDS))

        if name in _BOOL_OPTIONS:
            if not isinstance(value, bool):
                raise InvalidOptionType(name, "bool", _type_name(value))
        elif name in _INSTANT_OPTIONS:
            if isinstance(value, bool) or not isinstance(value, (int, datetime)):
                raise InvalidOptionType(name, "int or datetime", _type_name(value))
            if isinstance(value, int):
                try:
                    value = datetime.fromtimestamp(value, tz=timezone.utc)
                except (OverflowError, OSError, ValueError) as exc:
                    raise InvalidOptionType(
                        name, "int epoch seconds within datetime range", str(value)
                    ) from exc

        self._options = self._options.model_copy(update={OPTION_FIELDS[name]: value})
        return self

    def set_options(self, options: Mapping[str, Any]) -> TokenIssuer:
        """Apply ``set_option`` for each entry, stopping at the first failure."""
        for name, value in options.items():
            self.set_option(name, value)
        return self

    # --- Claim assembly ---

    def _validate(self) -> None:
        if not self._options.admin and UID_KEY not in self._data:
            raise MissingSubject()
        if UID_KEY in self._data:
            validate_uid(self._data[UID_KEY], self._rules)

    def claims(self) -> dict[str, Any]:
        """Validate the configuration and return the unsigned claim set."""
        self._validate()
        claims = self._options.to_claims()
        claims.update(self._rules.assemble(self._data))
        claims["v"] = self._rules.version
        claims["iat"] = int(self._clock().timestamp())
        return claims

    # --- Signing ---

    def create(self) -> str:
        """Validate, assemble, and sign a token.

        Returns:
            The compact JWT string.

        Raises:
            TokenError: a subclass describing the validation, signing, or
                size failure.
        """
        claims = self.claims()
        try:
            token = self._signer(claims, self._secret, JWT_ALGORITHM)
        except Exception as exc:
            logger.warning("Token signing failed: %s", exc)
            raise SigningFailure(str(exc)) from exc

        token_size = len(token.encode("utf-8"))
        if token_size > self._rules.max_token_bytes:
            raise TokenTooLarge(self._rules.max_token_bytes, token_size)

        logger.debug("Issued v%d token (%d bytes)", self._rules.version, token_size)
        return token


def legacy_issuer(secret: str, **kwargs: Any) -> TokenIssuer:
    """Issuer for the legacy ``v=0`` format."""
    return TokenIssuer(secret, TokenFormat.LEGACY, **kwargs)


def current_issuer(secret: str, **kwargs: Any) -> TokenIssuer:
    """Issuer for the current ``v=1`` format."""
    return TokenIssuer(secret, TokenFormat.CURRENT, **kwargs)
