from __future__ import annotations

from enum import Enum
from typing import Dict

from modules.byte_convert.core.errors import UnknownFormatError


class Format(str, Enum):
    BIN = "bin"
    HEX = "hex"
    B64 = "b64"
    ASCII = "ascii"
    DEC = "dec"


ALIASES: Dict[str, Format] = {
    "binary": Format.BIN,
    "base64": Format.B64,
    "text": Format.ASCII,
    "decimal": Format.DEC,
}


def parse_format(value: object, *, label: str = "Format") -> Format:
    if isinstance(value, Format):
        return value
    raw = str(value or "").strip().lower()
    if not raw:
        raise UnknownFormatError(f"{label} is required.")
    if raw in ALIASES:
        return ALIASES[raw]
    try:
        return Format(raw)
    except ValueError:
        choices = ", ".join(item.value for item in Format)
        raise UnknownFormatError(
            f"{label} must be one of: {choices}."
        ) from None
