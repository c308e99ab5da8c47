from decimal import Decimal

import pytest

from advisor.errors import InvalidAmount, InvalidRange
from advisor.validation import validate_amount, validate_integer
from terminal.app import format_money


@pytest.mark.parametrize(
    "raw, expected",
    [("100", Decimal("100")), ("0", Decimal("0")), (" 2.50 ", Decimal("2.50")), (7, Decimal("7"))],
)
def test_validate_amount_parses_plain_numbers(raw, expected):
    assert validate_amount(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["abc", "", "$5", "-1", "nan", "inf", "1,000", "1_000", "0_3", "1e3", "\u0661\u0662", "\uff15"],
)
def test_validate_amount_rejects_bad_input(raw):
    with pytest.raises(InvalidAmount):
        validate_amount(raw)


def test_validate_amount_honours_minimum():
    assert validate_amount("5", minimum=5) == Decimal("5")
    with pytest.raises(InvalidAmount, match=">= 5"):
        validate_amount("4.99", minimum=5)


@pytest.mark.parametrize("raw, expected", [("1", 1), (" 8 ", 8), (3, 3)])
def test_validate_integer_accepts_values_in_range(raw, expected):
    assert validate_integer(raw, 1, 8) == expected


@pytest.mark.parametrize("raw", ["0", "9", "2.5", "two", "", True, "1_0", "\u0663", "+"])
def test_validate_integer_rejects_out_of_range_or_non_integers(raw):
    with pytest.raises(InvalidRange, match="between 1 and 8"):
        validate_integer(raw, 1, 8)


@pytest.mark.parametrize("raw", ["-0", "-0.00", " -0.0 "])
def test_validate_amount_drops_the_sign_of_zero(raw):
    amount = validate_amount(raw)
    assert amount == 0
    assert not str(amount).startswith("-")
    assert format_money(amount) == "$0.00"
