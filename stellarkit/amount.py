"""Amounts in lumens and stroops, and parsing of decimal amount strings."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import AmountNegative, AmountNonPositive, AmountOverflow, InvalidAmountString

STROOPS_PER_LUMEN = 10_000_000

_I64_MAX = 2**63 - 1
_I64_MIN = -(2**63)
_DECIMAL_PLACES = 7
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class StroopAmount:
    """An amount given in stroops (1/10,000,000 of a lumen)."""

    value: int

    def to_lumens(self) -> LumenAmount:
        return LumenAmount(self.value / STROOPS_PER_LUMEN)


@dataclass(frozen=True)
class LumenAmount:
    """An amount given in lumens as a float."""

    value: float

    def to_stroops(self) -> StroopAmount:
        """Convert to stroops, truncating toward zero.

        Raises AmountOverflow when the result exceeds a signed 64-bit integer.
        """
        stroops = self.value * STROOPS_PER_LUMEN
        if stroops > float(_I64_MAX):
            raise AmountOverflow()
        if math.isnan(stroops):
            return StroopAmount(0)
        if math.isinf(stroops):
            return StroopAmount(_I64_MIN)
        return StroopAmount(min(max(int(stroops), _I64_MIN), _I64_MAX))


def _check_stroops(value: int, allow_zero: bool) -> int:
    if allow_zero:
        if value < 0:
            raise AmountNegative()
    elif value <= 0:
        raise AmountNonPositive()
    return value


def _parse_digits(text: str) -> int:
    if not text or not set(text) <= _DIGITS:
        raise InvalidAmountString()
    value = int(text)
    if value > _I64_MAX:
        raise InvalidAmountString()
    return value


def _parse_amount_string(text: str, allow_zero: bool) -> int:
    integer_text, separator, decimals_text = text.partition(".")
    decimals = 0
    if separator:
        if len(decimals_text) > _DECIMAL_PLACES:
            raise InvalidAmountString()
        decimals = _parse_digits(decimals_text.ljust(_DECIMAL_PLACES, "0"))

    result = _parse_digits(integer_text) * STROOPS_PER_LUMEN
    if result > _I64_MAX:
        raise AmountOverflow()
    result += decimals
    if result > _I64_MAX:
        raise AmountOverflow()

    if result == 0 and not allow_zero:
        raise AmountNonPositive()
    return result


def into_stroop_amount(
    amount: StroopAmount | LumenAmount | str | bytes, allow_zero: bool
) -> int:
    """Return ``amount`` as a number of stroops.

    Strings are decimal lumen amounts with at most seven decimal places.
    """
    if isinstance(amount, LumenAmount):
        amount = amount.to_stroops()
    if isinstance(amount, StroopAmount):
        return _check_stroops(amount.value, allow_zero)
    if isinstance(amount, (bytes, bytearray, memoryview)):
        return _parse_amount_string(bytes(amount).decode("latin-1"), allow_zero)
    if isinstance(amount, str):
        return _parse_amount_string(amount, allow_zero)
    raise TypeError(f"cannot interpret {type(amount).__name__} as an amount")