from __future__ import annotations


class ConversionError(ValueError):
    """Conversion failure normalized by the tool and CLI error handlers."""

    code = "conversion"

    def __init__(self, detail: str, *, code: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        if code is not None:
            self.code = code


class StructuralError(ConversionError):
    """Wrong token count or length for the declared format."""

    code = "structural"


class CharacterError(ConversionError):
    """A character outside the format's alphabet."""

    code = "character"


class RangeError(ConversionError):
    """A value outside the numeric range the format allows."""

    code = "range"


class PaddingError(ConversionError):
    """Too many Base64 padding characters."""

    code = "padding"


class UnknownFormatError(ConversionError):
    code = "format"


__all__ = [
    "ConversionError",
    "StructuralError",
    "CharacterError",
    "RangeError",
    "PaddingError",
    "UnknownFormatError",
]
