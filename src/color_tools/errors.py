# errors.py

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_COLOR_FORMAT = "InvalidColorFormat"
    INVALID_RATIO = "InvalidRatio"
    UNSUPPORTED_TARGET_FORMAT = "UnsupportedTargetFormat"
    UNKNOWN_PALETTE_TYPE = "UnknownPaletteType"
    INVALID_COUNT = "InvalidCount"


class ColorError(ValueError):
    """Base for every caller-input error raised by the color engine."""

    kind: ErrorKind

    def to_dict(self) -> dict[str, str]:
        return {"error": str(self), "kind": self.kind.value}


class InvalidColorFormat(ColorError):
    kind = ErrorKind.INVALID_COLOR_FORMAT


class InvalidRatio(ColorError):
    kind = ErrorKind.INVALID_RATIO


class UnsupportedTargetFormat(ColorError):
    kind = ErrorKind.UNSUPPORTED_TARGET_FORMAT


class UnknownPaletteType(ColorError):
    kind = ErrorKind.UNKNOWN_PALETTE_TYPE


class InvalidCount(ColorError):
    kind = ErrorKind.INVALID_COUNT


__all__ = [
    "ColorError",
    "ErrorKind",
    "InvalidColorFormat",
    "InvalidRatio",
    "UnsupportedTargetFormat",
    "UnknownPaletteType",
    "InvalidCount",
]
