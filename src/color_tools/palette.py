# palette.py

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional, Union

import numpy as np

from .errors import InvalidCount, UnknownPaletteType
from .model import HSL, CanonicalColor

log = logging.getLogger(__name__)


class PaletteType(str, Enum):
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    MONOCHROMATIC = "monochromatic"
    SHADES = "shades"
    TINTS = "tints"


DEFAULT_COUNTS = {
    PaletteType.COMPLEMENTARY: 2,
    PaletteType.TRIADIC: 3,
    PaletteType.ANALOGOUS: 3,
    PaletteType.MONOCHROMATIC: 5,
    PaletteType.SHADES: 5,
    PaletteType.TINTS: 5,
}

ANALOGOUS_SPREAD = 30.0  # degrees either side of the base hue
MONO_RANGE = (10.0, 90.0)  # lightness percent

Step = tuple[float, float, float]  # (h, s, l)


def _rotations(base: HSL, step: float, n: int) -> List[Step]:
    # cycles through the offsets once they wrap (e.g. 0/180/0/180 for complementary)
    return [((base.h + i * step) % 360.0, base.s, base.l) for i in range(n)]


def _complementary(base: HSL, n: int) -> List[Step]:
    return _rotations(base, 180.0, n)


def _triadic(base: HSL, n: int) -> List[Step]:
    return _rotations(base, 120.0, n)


def _analogous(base: HSL, n: int) -> List[Step]:
    """Base first, then the other hues spread evenly from -30° to +30°."""
    if n == 1:
        offsets = np.empty(0)
    elif n == 2:
        offsets = np.array([ANALOGOUS_SPREAD])
    else:
        offsets = np.linspace(-ANALOGOUS_SPREAD, ANALOGOUS_SPREAD, n - 1)
    out: List[Step] = [(base.h, base.s, base.l)]
    out += [((base.h + float(d)) % 360.0, base.s, base.l) for d in offsets]
    return out


def _monochromatic(base: HSL, n: int) -> List[Step]:
    lo, hi = MONO_RANGE
    ls = np.clip(np.linspace(lo, hi, n), lo, hi)
    return [(base.h, base.s, float(l)) for l in ls]


def _shades(base: HSL, n: int) -> List[Step]:
    return [(base.h, base.s, base.l * (1.0 - i / n)) for i in range(n)]


def _tints(base: HSL, n: int) -> List[Step]:
    return [(base.h, base.s, base.l + (100.0 - base.l) * i / n) for i in range(n)]


_STRATEGIES: dict[PaletteType, Callable[[HSL, int], List[Step]]] = {
    PaletteType.COMPLEMENTARY: _complementary,
    PaletteType.ANALOGOUS: _analogous,
    PaletteType.TRIADIC: _triadic,
    PaletteType.MONOCHROMATIC: _monochromatic,
    PaletteType.SHADES: _shades,
    PaletteType.TINTS: _tints,
}


def parse_palette_type(value: Union[str, PaletteType]) -> PaletteType:
    try:
        return PaletteType(value.strip().lower() if isinstance(value, str) else value)
    except (ValueError, AttributeError):
        supported = ", ".join(t.value for t in PaletteType)
        raise UnknownPaletteType(
            f"unsupported palette type {value!r}; expected one of: {supported}"
        ) from None


def resolve_count(kind: PaletteType, count: Optional[int]) -> int:
    if count is None:
        return DEFAULT_COUNTS[kind]
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidCount(f"count must be an integer, got {count!r}")
    if count < 1:
        raise InvalidCount(f"count must be at least 1, got {count}")
    return count


def generate_palette(
    base: CanonicalColor,
    type: Union[str, PaletteType],
    count: Optional[int] = None,
) -> List[CanonicalColor]:
    """
    Derive `count` related colors from `base` in HSL space.

    complementary  – base, then hue +180°
    triadic        – base, hue +120°, hue +240°
    analogous      – hues spread evenly over ±30° around the base, base first
    monochromatic  – same hue/saturation, lightness spread over [10, 90]
    shades         – base lightness stepping down toward 0
    tints          – base lightness stepping up toward 100
    """
    kind = parse_palette_type(type)
    n = resolve_count(kind, count)
    hsl = base.hsl
    steps = _STRATEGIES[kind](hsl, n)
    log.debug("palette %s from %s: %d colors", kind.value, base.hex, n)
    return [CanonicalColor.from_hsl(h, s, l, a=base.a) for h, s, l in steps]


__all__ = [
    "DEFAULT_COUNTS",
    "PaletteType",
    "generate_palette",
    "parse_palette_type",
    "resolve_count",
]
