"""Conversion between human-readable decimal amounts and integer base units.

All conversions here use exact Decimal arithmetic. Binary floats are only
produced at the very edge, when a quote is handed back to the caller.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import TypeAlias

from src.quoter.errors import AmountPrecisionError, InvalidAmountError

AmountLike: TypeAlias = str | Decimal | int

# Largest amount the Quoter's uint256 amountIn can carry
MAX_UINT256 = 2**256 - 1
MAX_UINT256_DIGITS = len(str(MAX_UINT256))


def _check_decimals(decimals: int) -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        msg = f"decimals must be an int, got {type(decimals).__name__}"
        raise TypeError(msg)
    if decimals < 0:
        msg = f"decimals must be non-negative, got {decimals}"
        raise ValueError(msg)


def parse_amount(amount: AmountLike) -> Decimal:
    """Parse a non-negative finite decimal amount.

    Floats are rejected outright: "0.1" and 0.1 are not the same number.
    """
    if isinstance(amount, bool) or isinstance(amount, float):
        raise InvalidAmountError(amount, "use a decimal string, not a float")
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, str):
        text = amount.strip()
        if "_" in text:
            raise InvalidAmountError(amount, "digit separators are not allowed")
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise InvalidAmountError(amount, "not a decimal number") from None
    else:
        raise InvalidAmountError(amount, f"unsupported type {type(amount).__name__}")

    if not value.is_finite():
        raise InvalidAmountError(amount, "must be finite")
    if value < 0:
        raise InvalidAmountError(amount, "must be non-negative")
    return value


def to_base_units(amount: AmountLike, decimals: int) -> int:
    """Convert a decimal amount to an integer count of base units.

    Integrality is decided on the coefficient and exponent directly, so no
    decimal context can round or overflow along the way.

    Example:
        >>> to_base_units("0.0001", 18)
        100000000000000

    Raises:
        InvalidAmountError: amount is not a non-negative finite decimal, or
            does not fit in a uint256
        AmountPrecisionError: amount has finer precision than ``decimals``
    """
    _check_decimals(decimals)
    value = parse_amount(amount)

    _, digits, exponent = value.as_tuple()
    coefficient = int("".join(map(str, digits)) or "0")
    if coefficient == 0:
        return 0

    shift = exponent + decimals
    if shift >= 0:
        # Digit count of the result; bail out before building a huge int
        if len(str(coefficient)) + shift > MAX_UINT256_DIGITS:
            raise InvalidAmountError(amount, "exceeds uint256 range")
        raw = coefficient * 10**shift
    else:
        dropped = -shift
        if dropped >= len(str(coefficient)):
            raise AmountPrecisionError(amount, decimals)
        raw, remainder = divmod(coefficient, 10**dropped)
        if remainder:
            raise AmountPrecisionError(amount, decimals)

    if raw > MAX_UINT256:
        raise InvalidAmountError(amount, "exceeds uint256 range")
    return raw


def from_base_units(raw: int, decimals: int) -> Decimal:
    """Convert an integer count of base units back to a decimal amount."""
    _check_decimals(decimals)
    if isinstance(raw, bool) or not isinstance(raw, int):
        msg = f"raw amount must be an int, got {type(raw).__name__}"
        raise TypeError(msg)

    with localcontext() as ctx:
        ctx.prec = max(28, len(str(abs(raw))) + 2)
        return Decimal(raw).scaleb(-decimals)


def round_significant(value: Decimal, digits: int = 12) -> Decimal:
    """Round to a fixed number of significant digits (half-up)."""
    if digits < 1:
        msg = f"digits must be positive, got {digits}"
        raise ValueError(msg)
    if value.is_zero():
        return Decimal(0)

    with localcontext() as ctx:
        ctx.prec = digits + 2
        quantum = Decimal(1).scaleb(value.adjusted() - digits + 1)
        return value.quantize(quantum, rounding=ROUND_HALF_UP)
