"""Conversion pipeline between the supported byte formats.

Rules:

- one token is a single number; the ascii format treats the characters of
  that token (or of all tokens) as consecutive bytes
- several tokens are a list of bytes, so each token must fit in 0 - 255
  (at most 8 bits, exactly 2 hex characters, a decimal value up to 255);
  base64 tokens are simply joined back together
- bytes headed for ascii output must be printable, i.e. 32 - 126
- hex input ignores casing
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

import structlog

from modules.byte_convert.core.codecs import get_codec
from modules.byte_convert.core.errors import ConversionError, StructuralError
from modules.byte_convert.core.formats import Format, parse_format

logger = structlog.get_logger(__name__)


def convert(
    tokens: Sequence[str],
    source: Format | str,
    target: Format | str,
    *,
    upper: bool = False,
) -> str:
    source_format = parse_format(source, label="From format")
    target_format = parse_format(target, label="To format")
    tokens = list(tokens)
    if not tokens:
        raise StructuralError("Value is required.")

    single = len(tokens) == 1
    source_codec = get_codec(source_format)
    target_codec = get_codec(target_format)

    source_codec.validate_string(tokens)
    data = source_codec.decode(tokens)
    target_codec.validate_bytes(data)
    output = target_codec.encode(data, single)

    if target_format is Format.HEX and upper:
        output = [item.upper() for item in output]

    logger.debug(
        "byte_convert.converted",
        source=source_format.value,
        target=target_format.value,
        mode="single" if single else "multi",
        byte_count=len(data),
    )
    return " ".join(output)


def split_tokens(value: str, source: Format) -> List[str]:
    # ascii input keeps its spaces, every other format is space delimited
    if source is Format.ASCII:
        return [value] if value else []
    return value.split()


def convert_value(
    value: object,
    base_from: object,
    base_to: object,
    *,
    upper: bool = False,
    max_length: int | None = None,
) -> Tuple[Dict[str, Any] | None, str | None]:
    if value is None:
        return None, "Value is required."
    raw = str(value)
    if max_length is not None and len(raw) > max_length:
        return None, f"Value must be at most {max_length} characters."

    try:
        source = parse_format(base_from or Format.DEC.value, label="From format")
        target = parse_format(base_to or Format.DEC.value, label="To format")
        tokens = split_tokens(raw, source)
        output = convert(tokens, source, target, upper=upper)
    except ConversionError as exc:
        logger.info("byte_convert.rejected", code=exc.code, detail=exc.detail)
        return None, exc.detail

    return {
        "input": raw if source is Format.ASCII else raw.strip(),
        "from": source.value,
        "to": target.value,
        "mode": "single" if len(tokens) == 1 else "multi",
        "token_count": len(tokens),
        "output": output,
    }, None
