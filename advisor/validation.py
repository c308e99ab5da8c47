from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Union

from .errors import InvalidAmount, InvalidRange

# Plain numeric text only; currency symbols are an output-only concern. The
# patterns keep out what Python's own parsers also allow: "1_000", exponents,
# non-ASCII digits.
AMOUNT_TEXT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")

AmountLike = Union[str, int, float, Decimal]


def validate_amount(raw: AmountLike, minimum: AmountLike = 0) -> Decimal:
    """Return ``raw`` as a Decimal, rejecting non-numbers and values below ``minimum``."""
    floor = Decimal(str(minimum))
    message = f"Invalid amount {raw!r}. Please enter a number >= {floor}"
    if isinstance(raw, str):
        text = raw.strip()
        if not AMOUNT_TEXT.fullmatch(text):
            raise InvalidAmount(message)
    else:
        text = str(raw)
    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise InvalidAmount(message) from None
    if not amount.is_finite() or amount < floor:
        raise InvalidAmount(message)
    if amount == 0:
        # "-0" compares equal to zero but would render as "-0.00".
        amount = abs(amount)
    return amount


def validate_integer(raw: Union[str, int], lo: int, hi: int) -> int:
    message = f"Invalid input {raw!r}. Please enter a number between {lo} and {hi}"
    if isinstance(raw, bool):
        raise InvalidRange(message)
    if isinstance(raw, str):
        text = raw.strip()
        if not INTEGER_TEXT.fullmatch(text):
            raise InvalidRange(message)
        value = int(text)
    elif isinstance(raw, int):
        value = raw
    else:
        raise InvalidRange(message)
    if value < lo or value > hi:
        raise InvalidRange(message)
    return value
