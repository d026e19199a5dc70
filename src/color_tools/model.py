# model.py

from __future__ import annotations

from dataclasses import dataclass
from math import floor, isnan
from typing import NamedTuple, Optional

from coloraide import Color

from .errors import InvalidColorFormat

Hex = str
Channel = int
Alpha = Optional[float]


class HSL(NamedTuple):
    h: float  # degrees, [0, 360)
    s: float  # percent, [0, 100]
    l: float  # percent, [0, 100]


def round_half_up(x: float) -> int:
    # 127.5 -> 128; Python's round() would give banker's rounding
    return int(floor(x + 0.5))


def _clamp(v: float, lo: float, hi: float) -> float:
    return hi if v > hi else lo if v < lo else v


def rgb_to_hsl(r: Channel, g: Channel, b: Channel) -> HSL:
    h, s, l = Color("srgb", [r / 255.0, g / 255.0, b / 255.0]).convert("hsl").coords()
    if isnan(h):  # achromatic: hue is undefined
        h = 0.0
    if isnan(s):
        s = 0.0
    return HSL(h % 360.0, _clamp(s * 100.0, 0.0, 100.0), _clamp(l * 100.0, 0.0, 100.0))


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[Channel, Channel, Channel]:
    """sRGB HSL -> 8-bit RGB; `s` and `l` in percent, `h` in degrees (any range)."""
    rgb = Color("hsl", [h % 360.0, s / 100.0, l / 100.0]).convert("srgb").coords()
    return tuple(  # type: ignore[return-value]
        max(0, min(255, round_half_up(v * 255.0))) for v in rgb
    )


@dataclass(frozen=True)
class CanonicalColor:
    """8-bit sRGB plus optional alpha. RGB is authoritative; every other view is derived."""

    r: Channel
    g: Channel
    b: Channel
    a: Alpha = None

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidColorFormat(f"channel {name} must be an integer, got {v!r}")
            if not 0 <= v <= 255:
                raise InvalidColorFormat(f"channel {name} out of range [0, 255]: {v}")
        if self.a is not None:
            if isinstance(self.a, bool) or not isinstance(self.a, (int, float)):
                raise InvalidColorFormat(f"alpha must be a number, got {self.a!r}")
            a = float(self.a)
            if not 0.0 <= a <= 1.0:
                raise InvalidColorFormat(f"alpha out of range [0, 1]: {self.a}")
            # absent and 1.0 mean the same thing; keep one spelling
            object.__setattr__(self, "a", None if a == 1.0 else a)

    @property
    def rgb(self) -> tuple[Channel, Channel, Channel]:
        return (self.r, self.g, self.b)

    @property
    def alpha(self) -> float:
        return 1.0 if self.a is None else self.a

    @property
    def hsl(self) -> HSL:
        return rgb_to_hsl(self.r, self.g, self.b)

    @property
    def hex(self) -> Hex:
        out = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a is not None:
            out += f"{round_half_up(self.a * 255.0):02x}"
        return out

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: Alpha = None) -> "CanonicalColor":
        return cls(*hsl_to_rgb(h, s, l), a=a)


__all__ = ["CanonicalColor", "HSL", "Hex", "hsl_to_rgb", "rgb_to_hsl", "round_half_up"]
