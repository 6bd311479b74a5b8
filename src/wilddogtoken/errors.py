"""Exceptions raised while configuring an issuer or minting a token."""

from __future__ import annotations


class TokenError(Exception):
    """Base exception for token issuance."""


class InvalidSecretType(TokenError, TypeError):
    """The application secret is not a string."""

    def __init__(self, actual: str):
        self.actual = actual
        super().__init__(f"The Wilddog secret must be a string, {actual} given.")


class UnsupportedOption(TokenError, KeyError):
    """Unknown option name."""

    def __init__(self, option: str, valid: list[str]):
        self.option = option
        self.valid = valid
        super().__init__(
            f'Unsupported option "{option}". Valid options are: {", ".join(valid)}'
        )

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class InvalidOptionType(TokenError, TypeError):
    """Option value has the wrong type."""

    def __init__(self, option: str, expected: str, actual: str):
        self.option = option
        self.expected = expected
        self.actual = actual
        super().__init__(
            f'Invalid option "{option}". Expected {expected}, but {actual} given'
        )


class MissingSubject(TokenError, ValueError):
    """No uid in the data and the issuer is not in admin mode."""

    def __init__(self):
        super().__init__("No uid provided in data and admin option not set.")


class InvalidSubjectType(TokenError, TypeError):
    """The uid is not a string."""

    def __init__(self, actual: str):
        self.actual = actual
        super().__init__(f"The uid must be a string, {actual} given.")


class InvalidSubject(TokenError, ValueError):
    """The uid contains characters outside the allowed set."""

    def __init__(self, uid: str):
        self.uid = uid
        super().__init__(
            f"The uid {uid!r} may only contain letters, digits, ':' and '-'."
        )


class SubjectTooLong(TokenError, ValueError):
    """The uid exceeds the byte limit of its token format."""

    def __init__(self, limit: int, actual: int):
        self.limit = limit
        self.actual = actual
        super().__init__(f"The provided uid is longer than {limit} bytes ({actual}).")


class EmptySubject(TokenError, ValueError):
    def __init__(self):
        super().__init__("The provided uid is empty.")


class SigningFailure(TokenError, RuntimeError):
    """The signer raised; the original message is preserved."""


class TokenTooLarge(TokenError, ValueError):
    """The signed token exceeds the size ceiling."""

    def __init__(self, limit: int, actual: int):
        self.limit = limit
        self.actual = actual
        super().__init__(
            f"The generated token is larger than {limit} bytes ({actual})"
        )
