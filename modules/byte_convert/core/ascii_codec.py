from __future__ import annotations

from typing import Iterable, List, Sequence

from modules.byte_convert.core.errors import RangeError

PRINTABLE_MIN = 32
PRINTABLE_MAX = 126


def text_to_bytes(text: str) -> bytes:
    output = bytearray()
    for char in text:
        code = ord(char)
        if code > 0xFF:
            raise RangeError(f"Character {char!r} does not fit in a single byte.")
        output.append(code)
    return bytes(output)


def bytes_to_text(data: Iterable[int]) -> str:
    return "".join(chr(byte) for byte in bytes(data))


def validate_string(tokens: Sequence[str]) -> None:
    return None


def validate_bytes(data: Iterable[int]) -> None:
    for byte in data:
        if byte < PRINTABLE_MIN or byte > PRINTABLE_MAX:
            raise RangeError(
                "Byte value(s) out of range for printable characters. "
                f"Should be between {PRINTABLE_MIN} and {PRINTABLE_MAX}."
            )


def decode(tokens: Sequence[str]) -> bytes:
    # characters need not be space delimited, so arity is irrelevant here
    return text_to_bytes("".join(tokens))


def encode(data: Iterable[int], concat: bool) -> List[str]:
    return [bytes_to_text(data)]
