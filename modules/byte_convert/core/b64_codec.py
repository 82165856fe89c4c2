from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from modules.byte_convert.core.errors import (
    CharacterError,
    PaddingError,
    StructuralError,
)

STANDARD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
PAD = "="
MAX_PADDING = 2

_STANDARD_LOOKUP: Dict[str, int] = {char: index for index, char in enumerate(STANDARD_ALPHABET)}
_URL_LOOKUP: Dict[str, int] = {char: index for index, char in enumerate(URL_ALPHABET)}


def _encode_with(data: Iterable[int], alphabet: str, *, pad: bool) -> str:
    data = bytes(data)
    chars: List[str] = []

    for start in range(0, len(data), 3):
        chunk = data[start : start + 3]
        value = 0
        for index in range(3):
            value <<= 8
            if index < len(chunk):
                value |= chunk[index]

        # only the symbols that carry input bits are emitted
        missing = 3 - len(chunk)
        for index in range(4 - missing):
            chars.append(alphabet[(value >> ((3 - index) * 6)) & 0x3F])

        if pad:
            chars.append(PAD * missing)

    return "".join(chars)


def _decode_with(text: str, lookup: Dict[str, int], *, lenient: bool) -> bytes:
    """Unpack 6-bit symbols; `lenient` skips padding and whitespace."""
    output = bytearray()
    buffer = 0
    buffered_bits = 0

    for char in text:
        if lenient and (char == PAD or char.isspace()):
            continue
        value = lookup.get(char)
        if value is None:
            raise CharacterError(f"Unexpected character: {char!r}")

        buffer = (buffer << 6) | value
        buffered_bits += 6
        if buffered_bits >= 8:
            buffered_bits -= 8
            output.append((buffer >> buffered_bits) & 0xFF)
            buffer &= (1 << buffered_bits) - 1

    return bytes(output)


def encode_standard(data: Iterable[int]) -> str:
    return _encode_with(data, STANDARD_ALPHABET, pad=True)


def decode_standard(text: str) -> bytes:
    return _decode_with(text, _STANDARD_LOOKUP, lenient=True)


def encode_url(data: Iterable[int]) -> str:
    """Encode with the URL-safe alphabet and no padding, as JWT segments are."""
    return _encode_with(data, URL_ALPHABET, pad=False)


def decode_url(text: str) -> bytes:
    return _decode_with(text, _URL_LOOKUP, lenient=False)


def validate_string(tokens: Sequence[str]) -> None:
    text = "".join(tokens)
    if len(text) % 4 != 0:
        raise StructuralError(
            "Incomplete group, base64 string length must be a multiple of 4."
        )

    padding = 0
    for char in text:
        if char == PAD:
            padding += 1
            if padding > MAX_PADDING:
                raise PaddingError("More than 2 padding characters in input string.")
            continue
        if char.isspace():
            continue
        if char not in _STANDARD_LOOKUP:
            raise CharacterError(f"Unexpected character: {char!r}")


def validate_bytes(data: Iterable[int]) -> None:
    return None


def decode(tokens: Sequence[str]) -> bytes:
    return decode_standard("".join(tokens))


def encode(data: Iterable[int], concat: bool) -> List[str]:
    return [encode_standard(data)]
