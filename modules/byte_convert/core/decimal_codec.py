"""Unsigned decimal codec built on digit-string arithmetic.

Single-value decimal input may be arbitrarily wide, so the value itself is
only ever held as a string of decimal digits. Conversions walk that string
digit by digit: halving it to peel off bits on the way in, doubling and
incrementing it on the way out. Byte packing is left to the binary codec.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from modules.byte_convert.core import binary_codec
from modules.byte_convert.core.errors import (
    CharacterError,
    RangeError,
    StructuralError,
)

DIGITS = "0123456789"
MAX_BYTE = 255
ZERO_BYTE_BITS = "00000000"


def _digit(char: str) -> int:
    value = DIGITS.find(char)
    if value < 0:
        raise CharacterError(
            f"Unexpected character: {char!r}. "
            "The number must be a valid unsigned integer."
        )
    return value


def _is_digits(value: str) -> bool:
    return bool(value) and all(char in DIGITS for char in value)


def divide_by_two(value: str) -> str:
    """Long division of a digit string by two, dropping the remainder."""
    digits: List[str] = []
    remainder = 0
    for char in value:
        operand = _digit(char) + remainder * 10
        quotient = operand // 2
        digits.append(DIGITS[quotient])
        remainder = operand - quotient * 2

    result = "".join(digits)
    if len(result) > 1 and result[0] == "0":
        result = result.lstrip("0") or "0"
    return result


def multiply_by_two(value: str) -> str:
    digits: List[str] = []
    carry = 0
    for char in reversed(value):
        operand = _digit(char) * 2 + carry
        digits.append(DIGITS[operand % 10])
        carry = operand // 10

    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def add_one(value: str) -> str:
    digits: List[str] = []
    carry = 1
    for char in reversed(value):
        if not carry:
            digits.append(char)
            continue
        digit = _digit(char) + 1
        if digit > 9:
            digits.append("0")
        else:
            digits.append(DIGITS[digit])
            carry = 0

    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def decimal_to_binary(value: str) -> str:
    """Minimum-width bit string for a digit string; zero maps to a full byte."""
    working = value.lstrip("0")
    if not working:
        return ZERO_BYTE_BITS

    bits: List[str] = []
    while working != "0":
        bits.append("1" if _digit(working[-1]) % 2 else "0")
        working = divide_by_two(working)
    return "".join(reversed(bits))


def binary_to_decimal(bits: str) -> str:
    significant = bits.lstrip("0")
    if not significant:
        return "0"

    # an empty accumulator doubles to "" and the first set bit makes it "1"
    value = ""
    for char in significant:
        value = multiply_by_two(value)
        if char == "1":
            value = add_one(value)
    return value


def _check_value(token: str) -> None:
    if not token:
        raise StructuralError("Value is required.")
    for char in token:
        if char not in DIGITS:
            raise CharacterError(
                f"Unexpected character: {char!r}. "
                "The number must be a valid unsigned integer."
            )


def _byte_digits(token: str) -> str:
    """Digits of a byte-list token; one leading ``+`` is allowed."""
    if not token:
        raise StructuralError("Each byte must be an unsigned 8-bit number.")
    if token.startswith("-") and _is_digits(token[1:]):
        raise RangeError(f"{token}: each byte must be an unsigned 8-bit number.")

    digits = token[1:] if token.startswith("+") else token
    if not digits:
        raise CharacterError(
            f"{token}: no digits, each byte must be an unsigned 8-bit number."
        )
    for char in digits:
        if char not in DIGITS:
            raise CharacterError(
                f"{token}: unexpected character {char!r}, "
                "each byte must be an unsigned 8-bit number."
            )
    # compare as digit strings so huge tokens never become native integers
    significant = digits.lstrip("0") or "0"
    if len(significant) > 3 or (len(significant) == 3 and significant > str(MAX_BYTE)):
        raise RangeError(f"{token}: each byte must be an unsigned 8-bit number.")
    return digits


def validate_string(tokens: Sequence[str]) -> None:
    if len(tokens) == 1:
        _check_value(tokens[0])
        return

    for token in tokens:
        _byte_digits(token)


def validate_bytes(data: Iterable[int]) -> None:
    return None


def decode(tokens: Sequence[str]) -> bytes:
    if len(tokens) == 1:
        _check_value(tokens[0])
        return binary_codec.decode([decimal_to_binary(tokens[0])])
    return binary_codec.decode(
        [decimal_to_binary(_byte_digits(token)) for token in tokens]
    )


def encode(data: Iterable[int], concat: bool) -> List[str]:
    return [binary_to_decimal(bits) for bits in binary_codec.encode(data, concat)]
