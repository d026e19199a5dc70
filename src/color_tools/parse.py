# parse.py

from __future__ import annotations

import logging
import math
import re
import string
from typing import Optional

from .errors import InvalidColorFormat
from .model import CanonicalColor
from .names import NAME_LOOKUP

log = logging.getLogger(__name__)

_NUM = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)"
_INT = re.compile(r"[-+]?\d+", re.ASCII)

_RGB_RE = re.compile(
    rf"^(rgba?)\s*\(\s*({_NUM})\s*,\s*({_NUM})\s*,\s*({_NUM})\s*(?:,\s*({_NUM})\s*)?\)$",
    re.ASCII,
)
_HSL_RE = re.compile(
    rf"^(hsla?)\s*\(\s*({_NUM})(?:deg)?\s*,\s*({_NUM})\s*%\s*,\s*({_NUM})\s*%\s*"
    rf"(?:,\s*({_NUM})\s*)?\)$",
    re.ASCII,
)


def _parse_hex(s: str) -> CanonicalColor:
    raw = s[1:]
    if len(raw) not in (3, 6, 8) or not all(c in string.hexdigits for c in raw):
        raise InvalidColorFormat(f"invalid hex color: {s!r} (expected #RGB, #RRGGBB or #RRGGBBAA)")
    if len(raw) == 3:
        raw = "".join(ch * 2 for ch in raw)
    r, g, b = (int(raw[i : i + 2], 16) for i in (0, 2, 4))
    a = int(raw[6:8], 16) / 255.0 if len(raw) == 8 else None
    return CanonicalColor(r, g, b, a)


def _check_arity(fn: str, alpha: Optional[str], src: str) -> None:
    has_a = fn.endswith("a")
    if has_a and alpha is None:
        raise InvalidColorFormat(f"{fn}() needs 4 arguments: {src!r}")
    if not has_a and alpha is not None:
        raise InvalidColorFormat(f"{fn}() takes 3 arguments, use {fn}a() for alpha: {src!r}")


def _alpha(tok: Optional[str]) -> Optional[float]:
    if tok is None:
        return None
    a = float(tok)
    if not math.isfinite(a) or not 0.0 <= a <= 1.0:
        raise InvalidColorFormat(f"alpha out of range [0, 1]: {tok}")
    return a


def _parse_rgb(m: re.Match, src: str) -> CanonicalColor:
    fn, *chans, alpha = m.groups()
    _check_arity(fn, alpha, src)
    values = []
    for name, tok in zip("rgb", chans):
        if not _INT.fullmatch(tok):
            raise InvalidColorFormat(f"{name} must be an integer 0-255, got {tok}")
        v = int(tok)
        if not 0 <= v <= 255:
            raise InvalidColorFormat(f"{name} out of range [0, 255]: {v}")
        values.append(v)
    return CanonicalColor(*values, a=_alpha(alpha))


def _parse_hsl(m: re.Match, src: str) -> CanonicalColor:
    fn, h_tok, s_tok, l_tok, alpha = m.groups()
    _check_arity(fn, alpha, src)
    h, s, l = float(h_tok), float(s_tok), float(l_tok)
    if not all(math.isfinite(v) for v in (h, s, l)):
        raise InvalidColorFormat(f"hsl components must be finite numbers: {src!r}")
    h %= 360.0
    if not 0.0 <= s <= 100.0:
        raise InvalidColorFormat(f"saturation out of range [0, 100]: {s_tok}%")
    if not 0.0 <= l <= 100.0:
        raise InvalidColorFormat(f"lightness out of range [0, 100]: {l_tok}%")
    return CanonicalColor.from_hsl(h, s, l, a=_alpha(alpha))


def parse(value: str) -> CanonicalColor:
    """
    Parse a color string into a CanonicalColor.

    Grammars are tried in a fixed order and the first match wins:
      hex     – #RGB, #RRGGBB, #RRGGBBAA
      rgb     – rgb(r, g, b) / rgba(r, g, b, a); integer channels, no clamping
      hsl     – hsl(h, s%, l%) / hsla(h, s%, l%, a); h taken mod 360
      named   – case-insensitive lookup in the named color table
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(f"color must be a string, got {type(value).__name__}")
    s = value.strip().lower()

    if s.startswith("#"):
        return _parse_hex(s)
    m = _RGB_RE.match(s)
    if m:
        return _parse_rgb(m, value)
    m = _HSL_RE.match(s)
    if m:
        return _parse_hsl(m, value)
    rgb = NAME_LOOKUP.get(s)
    if rgb is not None:
        return CanonicalColor(*rgb)

    log.debug("unrecognized color input %r", value)
    raise InvalidColorFormat(f"unsupported color format: {value!r}")


__all__ = ["parse"]
