from __future__ import annotations

import secrets
from typing import Any, Dict, Iterable, Tuple

from modules.byte_convert.core import b64_codec, hex_codec
from modules.byte_convert.core.errors import UnknownFormatError
from modules.byte_convert.core.formats import Format, parse_format

MAX_RANDOM_BYTES = 4096
DEFAULT_COUNT = 32
OUTPUT_FORMATS = (Format.HEX, Format.B64)


def _parse_int(value: Any, *, label: str, default: int | None = None) -> Tuple[int | None, str | None]:
    if value is None or str(value).strip() == "":
        if default is None:
            return None, f"{label} is required."
        return default, None
    raw = str(value).strip()
    try:
        number = int(raw)
    except ValueError:
        return None, f"{label} must be a whole number."
    return number, None


def _output_format(value: object) -> Format:
    fmt = parse_format(value or Format.HEX.value)
    if fmt not in OUTPUT_FORMATS:
        raise UnknownFormatError("Format must be one of: hex, b64.")
    return fmt


def format_random_bytes(data: Iterable[int], fmt: Format | str, *, upper: bool = False) -> str:
    fmt = _output_format(fmt)
    if fmt is Format.B64:
        return b64_codec.encode_standard(data)
    return hex_codec.encode_bytes(data, uppercase=upper)


def generate_random_bytes(
    count: Any,
    fmt: Any = Format.HEX.value,
    *,
    upper: bool = False,
) -> Tuple[Dict[str, Any] | None, str | None]:
    count_int, error = _parse_int(count, label="Count", default=DEFAULT_COUNT)
    if error or count_int is None:
        return None, error
    if count_int <= 0 or count_int > MAX_RANDOM_BYTES:
        return None, f"Count must be between 1 and {MAX_RANDOM_BYTES}."

    try:
        output_format = _output_format(fmt)
    except UnknownFormatError as exc:
        return None, exc.detail

    data = secrets.token_bytes(count_int)
    return {
        "count": count_int,
        "format": output_format.value,
        "upper": bool(upper) and output_format is Format.HEX,
        "value": format_random_bytes(data, output_format, upper=upper),
    }, None
