# convert.py

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from .errors import UnsupportedTargetFormat
from .model import CanonicalColor, round_half_up


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"


def _format_alpha(a: float) -> str:
    # fixed-point so the parser can read it back; 7 places stays within 1e-6
    return f"{a:.7f}".rstrip("0").rstrip(".")


def rounded_hsl(c: CanonicalColor) -> tuple[int, int, int]:
    h, s, l = c.hsl
    return round_half_up(h) % 360, round_half_up(s), round_half_up(l)


def to_hex(c: CanonicalColor) -> str:
    return c.hex


def to_rgb(c: CanonicalColor) -> str:
    # alpha is intentionally not rendered here
    return f"rgb({c.r}, {c.g}, {c.b})"


def to_hsl(c: CanonicalColor) -> str:
    h, s, l = rounded_hsl(c)
    if c.a is not None:
        return f"hsla({h}, {s}%, {l}%, {_format_alpha(c.a)})"
    return f"hsl({h}, {s}%, {l}%)"


_RENDERERS = {
    ColorFormat.HEX: to_hex,
    ColorFormat.RGB: to_rgb,
    ColorFormat.HSL: to_hsl,
}


def parse_format(to: Union[str, ColorFormat]) -> ColorFormat:
    try:
        return ColorFormat(to.strip().lower() if isinstance(to, str) else to)
    except (ValueError, AttributeError):
        supported = ", ".join(f.value for f in ColorFormat)
        raise UnsupportedTargetFormat(
            f"unsupported target format {to!r}; expected one of: {supported}"
        ) from None


def convert(c: CanonicalColor, to: Union[str, ColorFormat]) -> str:
    return _RENDERERS[parse_format(to)](c)


def describe(c: CanonicalColor) -> dict[str, Any]:
    """Every representation of `c` as a JSON-ready mapping."""
    h, s, l = rounded_hsl(c)
    out: dict[str, Any] = {
        "hex": to_hex(c),
        "rgb": to_rgb(c),
        "hsl": to_hsl(c),
        "values": {
            "rgb": {"r": c.r, "g": c.g, "b": c.b},
            "hsl": {"h": h, "s": s, "l": l},
        },
    }
    if c.a is not None:
        out["alpha"] = c.a
    return out


__all__ = ["ColorFormat", "convert", "describe", "parse_format", "to_hex", "to_hsl", "to_rgb"]
