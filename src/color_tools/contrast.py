# contrast.py – WCAG 2.x relative luminance and contrast ratio

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from .model import CanonicalColor, round_half_up

# --- constants ---------------------------------------------------------------
_THRESHOLD = 0.03928  # WCAG 2.x wording of the sRGB knee
_GAMMA = 2.4
_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5


def _linearize(v: np.ndarray) -> np.ndarray:
    v = np.asarray(v, np.float64) / 255.0
    return np.where(v <= _THRESHOLD, v / 12.92, ((v + 0.055) / 1.055) ** _GAMMA)


def relative_luminance(c: CanonicalColor) -> float:
    return float(_WEIGHTS @ _linearize(c.rgb))


def contrast_ratio(c1: CanonicalColor, c2: CanonicalColor) -> float:
    """(L_lighter + 0.05) / (L_darker + 0.05), in [1, 21]; symmetric in its arguments."""
    l1, l2 = relative_luminance(c1), relative_luminance(c2)
    hi, lo = max(l1, l2), min(l1, l2)
    return (hi + 0.05) / (lo + 0.05)


@dataclass(frozen=True)
class ContrastReport:
    """Pass/fail flags are judged on the 2-decimal ratio that gets reported."""

    ratio: float

    @property
    def rounded(self) -> float:
        return round_half_up(self.ratio * 100.0) / 100.0

    @property
    def aa_normal(self) -> bool:
        return self.rounded >= AA_NORMAL

    @property
    def aa_large(self) -> bool:
        return self.rounded >= AA_LARGE

    @property
    def aaa_normal(self) -> bool:
        return self.rounded >= AAA_NORMAL

    @property
    def aaa_large(self) -> bool:
        return self.rounded >= AAA_LARGE

    @property
    def formatted(self) -> str:
        return f"{self.rounded:.2f}:1"

    def to_dict(self) -> dict[str, Any]:
        return {
            "ratio": self.rounded,
            "formatted": self.formatted,
            "aa": {"normal": self.aa_normal, "large": self.aa_large},
            "aaa": {"normal": self.aaa_normal, "large": self.aaa_large},
        }


def analyze_contrast(c1: CanonicalColor, c2: CanonicalColor) -> ContrastReport:
    return ContrastReport(contrast_ratio(c1, c2))


__all__ = [
    "ContrastReport",
    "analyze_contrast",
    "contrast_ratio",
    "relative_luminance",
]
