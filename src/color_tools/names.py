# names.py

from __future__ import annotations

import logging
from typing import Mapping, NamedTuple

import numpy as np

from .model import CanonicalColor

log = logging.getLogger(__name__)


class NamedColorEntry(NamedTuple):
    name: str
    rgb: tuple[int, int, int]


class NameMatch(NamedTuple):
    name: str
    exact: bool
    hex: str


# Order is part of the contract: nearest-name ties resolve to the earlier entry
# (e.g. cyan wins over aqua).
NAMED_COLORS: tuple[NamedColorEntry, ...] = (
    NamedColorEntry("black", (0, 0, 0)),
    NamedColorEntry("white", (255, 255, 255)),
    NamedColorEntry("red", (255, 0, 0)),
    NamedColorEntry("green", (0, 128, 0)),
    NamedColorEntry("blue", (0, 0, 255)),
    NamedColorEntry("yellow", (255, 255, 0)),
    NamedColorEntry("cyan", (0, 255, 255)),
    NamedColorEntry("magenta", (255, 0, 255)),
    NamedColorEntry("orange", (255, 165, 0)),
    NamedColorEntry("purple", (128, 0, 128)),
    NamedColorEntry("pink", (255, 192, 203)),
    NamedColorEntry("brown", (165, 42, 42)),
    NamedColorEntry("gray", (128, 128, 128)),
    NamedColorEntry("silver", (192, 192, 192)),
    NamedColorEntry("maroon", (128, 0, 0)),
    NamedColorEntry("navy", (0, 0, 128)),
    NamedColorEntry("teal", (0, 128, 128)),
    NamedColorEntry("olive", (128, 128, 0)),
    NamedColorEntry("lime", (0, 255, 0)),
    NamedColorEntry("aqua", (0, 255, 255)),
    NamedColorEntry("coral", (255, 127, 80)),
    NamedColorEntry("salmon", (250, 128, 114)),
    NamedColorEntry("gold", (255, 215, 0)),
    NamedColorEntry("khaki", (240, 230, 140)),
    NamedColorEntry("plum", (221, 160, 221)),
    NamedColorEntry("violet", (238, 130, 238)),
    NamedColorEntry("indigo", (75, 0, 130)),
    NamedColorEntry("beige", (245, 245, 220)),
    NamedColorEntry("ivory", (255, 255, 240)),
    NamedColorEntry("lavender", (230, 230, 250)),
)

# name -> rgb for the parser; built once at import, read-only afterwards
NAME_LOOKUP: Mapping[str, tuple[int, int, int]] = {e.name: e.rgb for e in NAMED_COLORS}

_TABLE = np.array([e.rgb for e in NAMED_COLORS], dtype=np.int64)  # N×3
_TABLE.setflags(write=False)


def color_name(c: CanonicalColor) -> NameMatch:
    """Nearest table entry by squared Euclidean distance in RGB."""
    d2 = ((_TABLE - np.array(c.rgb, dtype=np.int64)) ** 2).sum(axis=1)
    i = int(np.argmin(d2))  # argmin returns the first minimum
    entry = NAMED_COLORS[i]
    log.debug("nearest name for %s: %s (d2=%d)", c.hex, entry.name, int(d2[i]))
    return NameMatch(
        name=entry.name,
        exact=bool(d2[i] == 0),
        hex=CanonicalColor(*entry.rgb).hex,
    )


__all__ = ["NAMED_COLORS", "NAME_LOOKUP", "NameMatch", "NamedColorEntry", "color_name"]
