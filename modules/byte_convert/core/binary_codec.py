from __future__ import annotations

from typing import Iterable, List, Sequence

from modules.byte_convert.core.errors import CharacterError, StructuralError

BITS_PER_BYTE = 8


def _check_token(token: str, multi: bool) -> None:
    if not token:
        raise StructuralError("Must have at least 1 bit per byte.")
    if multi and len(token) > BITS_PER_BYTE:
        raise StructuralError("Cannot have more than 8 bits per byte.")


def validate_string(tokens: Sequence[str]) -> None:
    multi = len(tokens) > 1
    for token in tokens:
        _check_token(token, multi)
        for char in token:
            if char not in "01":
                raise CharacterError(f"Unexpected bit: {char!r}")


def validate_bytes(data: Iterable[int]) -> None:
    return None


def bits_to_byte(bits: str) -> int:
    byte = 0
    for char in bits:
        if char not in "01":
            raise CharacterError(f"Unexpected bit: {char!r}")
        byte = ((byte << 1) | (char == "1")) & 0xFF
    return byte


def byte_to_bits(byte: int) -> str:
    return "".join("1" if byte & (0x80 >> index) else "0" for index in range(BITS_PER_BYTE))


def pad_to_bytes(bits: str) -> str:
    remainder = len(bits) % BITS_PER_BYTE
    if remainder:
        return "0" * (BITS_PER_BYTE - remainder) + bits
    return bits


def decode(tokens: Sequence[str]) -> bytes:
    multi = len(tokens) > 1
    for token in tokens:
        _check_token(token, multi)

    if not multi:
        bits = pad_to_bytes(tokens[0])
        return bytes(
            bits_to_byte(bits[start : start + BITS_PER_BYTE])
            for start in range(0, len(bits), BITS_PER_BYTE)
        )
    return bytes(bits_to_byte(token) for token in tokens)


def encode(data: Iterable[int], concat: bool) -> List[str]:
    chunks = [byte_to_bits(byte) for byte in bytes(data)]
    if concat:
        return ["".join(chunks)]
    return chunks
