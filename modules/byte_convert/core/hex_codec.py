from __future__ import annotations

from typing import Iterable, List, Sequence

from modules.byte_convert.core.errors import CharacterError, StructuralError

LOWER_DIGITS = "0123456789abcdef"
UPPER_DIGITS = "0123456789ABCDEF"
ALLOWED = set(LOWER_DIGITS + UPPER_DIGITS)


def _check_byte_token(token: str) -> None:
    if len(token) != 2:
        raise StructuralError(f"Unexpected number of characters in byte: {token!r}")


def _check_even(text: str) -> None:
    if len(text) % 2 != 0:
        raise StructuralError(
            "Input contains partial bytes. Input length should be a multiple of 2."
        )


def validate_string(tokens: Sequence[str]) -> None:
    multi = len(tokens) > 1
    for token in tokens:
        if multi:
            _check_byte_token(token)
        else:
            _check_even(token)

        for char in token:
            if char not in ALLOWED:
                raise CharacterError(f"Unexpected character: {char!r}")


def validate_bytes(data: Iterable[int]) -> None:
    return None


def _nibble(char: str) -> int:
    value = LOWER_DIGITS.find(char.lower())
    if value < 0:
        raise CharacterError(f"Unexpected character: {char!r}")
    return value


def decode_string(text: str) -> bytes:
    """Pack consecutive hex digit pairs into bytes, high nibble first."""
    _check_even(text)
    output = bytearray()
    for start in range(0, len(text), 2):
        output.append((_nibble(text[start]) << 4) | _nibble(text[start + 1]))
    return bytes(output)


def decode(tokens: Sequence[str]) -> bytes:
    if len(tokens) == 1:
        return decode_string(tokens[0])

    output = bytearray()
    for token in tokens:
        _check_byte_token(token)
        output.extend(decode_string(token))
    return bytes(output)


def encode_bytes(data: Iterable[int], *, uppercase: bool = False) -> str:
    digits = UPPER_DIGITS if uppercase else LOWER_DIGITS
    chars: List[str] = []
    for byte in bytes(data):
        chars.append(digits[(byte >> 4) & 0xF])
        chars.append(digits[byte & 0xF])
    return "".join(chars)


def encode(data: Iterable[int], concat: bool, *, uppercase: bool = False) -> List[str]:
    data = bytes(data)
    if concat:
        return [encode_bytes(data, uppercase=uppercase)]
    return [encode_bytes([byte], uppercase=uppercase) for byte in data]
