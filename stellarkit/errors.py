"""Errors raised by the SDK."""

from __future__ import annotations

from typing import Any


class StellarSdkError(Exception):
    """Base class of every error raised by the SDK.

    Errors compare equal when they have the same type and the same fields.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self._describe())

    def _fields(self) -> dict[str, Any]:
        return {key: value for key, value in vars(self).items() if not key.startswith("_")}

    def _describe(self) -> str:
        fields = self._fields()
        name = type(self).__name__
        if not fields:
            return name
        inner = ", ".join(f"{key}={value!r}" for key, value in fields.items())
        return f"{name}({inner})"

    def __repr__(self) -> str:
        return self._describe()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(self._fields().items()))))


class InvalidBase32Character(StellarSdkError):
    """A character that is not part of the base32 alphabet was found."""

    def __init__(self, at_position: int) -> None:
        self.at_position = at_position
        super().__init__()


class InvalidStellarKeyEncoding(StellarSdkError):
    """The encoding decodes, but is not the canonical encoding of the key."""


class InvalidStellarKeyEncodingLength(StellarSdkError):
    """The encoding has an invalid length."""


class InvalidStellarKeyEncodingVersion(StellarSdkError):
    """The version byte of the encoding is not the expected one."""

    def __init__(self, expected_version: str, found_version: str) -> None:
        self.expected_version = expected_version
        self.found_version = found_version
        super().__init__()


class InvalidStellarKeyChecksum(StellarSdkError):
    """The checksum in the encoding is invalid."""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__()


class InvalidSignatureLength(StellarSdkError):
    """The signature has an invalid length."""

    def __init__(self, found_length: int, expected_length: int) -> None:
        self.found_length = found_length
        self.expected_length = expected_length
        super().__init__()


class PublicKeyCantVerify(StellarSdkError):
    """Verification with this public key failed."""


class InvalidBase64Encoding(StellarSdkError):
    """The base64 encoding is invalid."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__()


class TooManySignatures(StellarSdkError):
    """The envelope already holds the maximal number of signatures."""


class AssetCodeTooLong(StellarSdkError):
    """The asset code has more than 12 characters."""


class InvalidAssetCodeCharacter(StellarSdkError):
    """The asset code holds a character that is not ASCII alphanumeric."""


class ExceedsMaximumLength(StellarSdkError):
    """A value is longer than its type allows."""

    def __init__(self, requested_length: int, allowed_length: int) -> None:
        self.requested_length = requested_length
        self.allowed_length = allowed_length
        super().__init__()


class InvalidHexEncoding(StellarSdkError):
    """The hex encoding is invalid."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__()


class InvalidHashLength(StellarSdkError):
    """The hash has an invalid length."""

    def __init__(self, found_length: int, expected_length: int) -> None:
        self.found_length = found_length
        self.expected_length = expected_length
        super().__init__()


class NotApproximableAsFraction(StellarSdkError):
    """The number cannot be approximated by a fraction."""


class InvalidPrice(StellarSdkError):
    """The price is not positive."""


class InvalidTrustLineLimit(StellarSdkError):
    """The trust line limit is invalid."""


class InvalidAuthorizeFlag(StellarSdkError):
    """The authorize flag is not allowed here."""


class InvalidAmountString(StellarSdkError):
    """The amount string is malformed."""


class AmountOverflow(StellarSdkError):
    """The amount does not fit into a signed 64-bit integer."""


class AmountNegative(StellarSdkError):
    """The amount is negative."""


class AmountNonPositive(StellarSdkError):
    """The amount is zero or negative."""


class InvalidBinaryLength(StellarSdkError):
    """Binary data has a length other than the expected one."""

    def __init__(self, found_length: int, expected_length: int) -> None:
        self.found_length = found_length
        self.expected_length = expected_length
        super().__init__()


class InvalidBalanceId(StellarSdkError):
    """The claimable balance id is invalid."""


class EmptyClaimants(StellarSdkError):
    """The list of claimants is empty."""


class InvalidSignerWeight(StellarSdkError):
    """The signer weight is invalid."""


class CantWrapFeeBumpTransaction(StellarSdkError):
    """A fee bump transaction cannot wrap another fee bump transaction."""