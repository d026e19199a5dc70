# blend.py

from __future__ import annotations

from .errors import InvalidRatio
from .model import CanonicalColor, round_half_up


def _lerp(x: float, y: float, t: float) -> float:
    return x * (1.0 - t) + y * t


def blend(c1: CanonicalColor, c2: CanonicalColor, ratio: float = 0.5) -> CanonicalColor:
    """
    Per-channel linear mix in gamma-encoded sRGB: 0 gives `c1`, 1 gives `c2`.

    Alpha is mixed only when both inputs carry it; otherwise the result is
    opaque.
    """
    if isinstance(ratio, bool) or not isinstance(ratio, (int, float)):
        raise InvalidRatio(f"ratio must be a number, got {ratio!r}")
    t = float(ratio)
    if not 0.0 <= t <= 1.0:
        raise InvalidRatio(f"ratio must be between 0 and 1, got: {ratio}")

    if t == 0.0:
        return c1
    if t == 1.0:
        return c2

    r, g, b = (round_half_up(_lerp(x, y, t)) for x, y in zip(c1.rgb, c2.rgb))
    a = None
    if c1.a is not None and c2.a is not None:
        a = _lerp(c1.a, c2.a, t)
    return CanonicalColor(r, g, b, a)


__all__ = ["blend"]
