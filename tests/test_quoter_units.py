"""Tests for decimal <-> base unit conversion."""

from decimal import Decimal

import pytest

from src.quoter.errors import AmountPrecisionError, InvalidAmountError
from src.quoter.units import (
    MAX_UINT256,
    from_base_units,
    parse_amount,
    round_significant,
    to_base_units,
)


def test_tiny_amount_scales_exactly_at_18_decimals() -> None:
    assert to_base_units("0.0001", 18) == 100_000_000_000_000


def test_amount_beyond_64_bits() -> None:
    raw = to_base_units("123456789012345.123456789012345678", 18)
    assert raw == 123456789012345123456789012345678
    assert raw > 2**64


@pytest.mark.parametrize("decimals", [0, 6, 8, 18])
@pytest.mark.parametrize("raw", [0, 1, 7, 10**6 + 1, 99500000, 2**96 + 12345])
def test_round_trip_has_no_drift(decimals: int, raw: int) -> None:
    text = format(from_base_units(raw, decimals), "f")
    assert to_base_units(text, decimals) == raw


def test_precision_finer_than_token_is_rejected() -> None:
    with pytest.raises(AmountPrecisionError) as exc_info:
        to_base_units("0.0000001", 6)
    assert exc_info.value.decimals == 6


def test_fraction_on_zero_decimal_token_is_rejected() -> None:
    with pytest.raises(AmountPrecisionError):
        to_base_units("1.5", 0)


def test_trailing_zeros_beyond_decimals_are_accepted() -> None:
    assert to_base_units("1.500", 2) == 150


def test_decimal_and_int_inputs() -> None:
    assert to_base_units(Decimal("2.5"), 6) == 2_500_000
    assert to_base_units(3, 8) == 300_000_000


@pytest.mark.parametrize("bad", ["", "abc", "1,5", "-1", "NaN", "Infinity", 0.1, True, None])
def test_invalid_amounts_are_rejected(bad: object) -> None:
    with pytest.raises(InvalidAmountError):
        parse_amount(bad)  # type: ignore[arg-type]


def test_negative_decimals_rejected() -> None:
    with pytest.raises(ValueError):
        to_base_units("1", -1)


def test_from_base_units_scales_down() -> None:
    assert from_base_units(99500000, 6) == Decimal("99.5")
    assert from_base_units(1, 18) == Decimal("1E-18")


def test_round_significant() -> None:
    assert round_significant(Decimal("1.23456789012345"), 12) == Decimal("1.23456789012")
    assert round_significant(Decimal("0.000123456"), 3) == Decimal("0.000123")
    assert round_significant(Decimal("99.99"), 2) == Decimal("1.0E+2")
    assert round_significant(Decimal(0), 12) == 0


def test_round_significant_rejects_non_positive_digits() -> None:
    with pytest.raises(ValueError):
        round_significant(Decimal("1"), 0)


@pytest.mark.parametrize("tiny", ["1E-1000000000", "5E-19", "0.0000000000000000001"])
def test_sub_base_unit_amounts_are_not_truncated_to_zero(tiny: str) -> None:
    with pytest.raises(AmountPrecisionError):
        to_base_units(tiny, 18)


def test_zero_with_extreme_exponent_is_zero() -> None:
    assert to_base_units("0E-1000000000", 18) == 0
    assert to_base_units("0E+999990", 18) == 0


@pytest.mark.parametrize("huge", ["1E+999990", "1E+60", str(2**256)])
def test_amounts_beyond_uint256_are_rejected(huge: str) -> None:
    with pytest.raises(InvalidAmountError, match="uint256"):
        to_base_units(huge, 18 if "E" in huge else 0)


def test_max_uint256_is_accepted() -> None:
    assert to_base_units(str(MAX_UINT256), 0) == MAX_UINT256


def test_exponent_notation_scales_exactly() -> None:
    assert to_base_units("1.5E-17", 18) == 15
    assert to_base_units("2E+3", 6) == 2_000_000_000


@pytest.mark.parametrize("separated", ["1_000", "0.000_1"])
def test_digit_separators_are_rejected(separated: str) -> None:
    with pytest.raises(InvalidAmountError, match="separators"):
        to_base_units(separated, 6)
