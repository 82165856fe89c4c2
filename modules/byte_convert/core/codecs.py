from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Sequence

from modules.byte_convert.core import (
    ascii_codec,
    b64_codec,
    binary_codec,
    decimal_codec,
    hex_codec,
)
from modules.byte_convert.core.formats import Format, parse_format


@dataclass(frozen=True)
class Codec:
    validate_string: Callable[[Sequence[str]], None]
    validate_bytes: Callable[[Iterable[int]], None]
    decode: Callable[[Sequence[str]], bytes]
    encode: Callable[[Iterable[int], bool], List[str]]


def _codec(module) -> Codec:
    return Codec(
        validate_string=module.validate_string,
        validate_bytes=module.validate_bytes,
        decode=module.decode,
        encode=module.encode,
    )


CODECS: Dict[Format, Codec] = {
    Format.BIN: _codec(binary_codec),
    Format.HEX: _codec(hex_codec),
    Format.B64: _codec(b64_codec),
    Format.ASCII: _codec(ascii_codec),
    Format.DEC: _codec(decimal_codec),
}


def get_codec(fmt: Format | str) -> Codec:
    return CODECS[parse_format(fmt)]


def validate_string(fmt: Format | str, tokens: Sequence[str]) -> None:
    get_codec(fmt).validate_string(list(tokens))


def validate_bytes(fmt: Format | str, data: Iterable[int]) -> None:
    get_codec(fmt).validate_bytes(bytes(data))


def decode(fmt: Format | str, tokens: Sequence[str]) -> bytes:
    return get_codec(fmt).decode(list(tokens))


def encode(fmt: Format | str, data: Iterable[int], concat: bool) -> List[str]:
    return get_codec(fmt).encode(bytes(data), concat)


__all__ = [
    "Codec",
    "CODECS",
    "get_codec",
    "validate_string",
    "validate_bytes",
    "decode",
    "encode",
]
