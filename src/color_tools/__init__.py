"""Deterministic color parsing, conversion and analysis for 8-bit sRGB."""

from .blend import blend
from .contrast import ContrastReport, analyze_contrast, contrast_ratio, relative_luminance
from .convert import ColorFormat, convert, describe
from .errors import (
    ColorError,
    ErrorKind,
    InvalidColorFormat,
    InvalidCount,
    InvalidRatio,
    UnknownPaletteType,
    UnsupportedTargetFormat,
)
from .model import HSL, CanonicalColor
from .names import NAMED_COLORS, NameMatch, NamedColorEntry, color_name
from .palette import PaletteType, generate_palette
from .parse import parse

__all__ = [
    "CanonicalColor",
    "ColorError",
    "ColorFormat",
    "ContrastReport",
    "ErrorKind",
    "HSL",
    "InvalidColorFormat",
    "InvalidCount",
    "InvalidRatio",
    "NAMED_COLORS",
    "NameMatch",
    "NamedColorEntry",
    "PaletteType",
    "UnknownPaletteType",
    "UnsupportedTargetFormat",
    "analyze_contrast",
    "blend",
    "color_name",
    "contrast_ratio",
    "convert",
    "describe",
    "generate_palette",
    "parse",
    "relative_luminance",
]
