"""Numeric coercion helpers shared by the integer and number validators."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Union

Number = Union[int, float]

# Same ceiling CPython puts on int<->str conversion.
MAX_INTEGER_DIGITS = 4300


def is_number(value: Any) -> bool:
    """bool is an int subclass but never a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_decimal(value: Any) -> Decimal:
    """Parse a numeric string or number into a Decimal.

    Raises ValueError if the value is not numeric and OverflowError if a
    string holds more than MAX_INTEGER_DIGITS integer digits.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid numeric value '{value}'")

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise ValueError(f"Non-finite numeric value '{value}'")
        return Decimal(repr(value))

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Empty numeric value")
        try:
            dec = Decimal(text)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid numeric value '{value}'") from exc
        if not dec.is_finite():
            raise ValueError(f"Non-finite numeric value '{value}'")
        if dec.adjusted() >= MAX_INTEGER_DIGITS:
            raise OverflowError(f"Numeric value '{value}' has too many digits")
        return dec

    raise ValueError(f"Invalid numeric value '{value}'")


def is_integral(dec: Decimal) -> bool:
    return dec == dec.to_integral_value()


def coerce_number(value: Any) -> Number:
    """Coerce a numeric string to int when it is an exact integer, else float.

    Numbers are returned unchanged. Raises ValueError for anything else and
    OverflowError when the value does not fit a finite float.
    """
    if is_number(value):
        return value
    dec = parse_decimal(value)
    if is_integral(dec):
        return int(dec)
    result = float(dec)
    if result in (float("inf"), float("-inf")):
        raise OverflowError(f"Numeric value '{value}' is out of float range")
    return result
