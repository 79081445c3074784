"""WCAG 2.1 contrast and the choice of a legible text colour for a swatch."""

from __future__ import annotations

from numpy.typing import ArrayLike

from .spaces import C

NEAR_WHITE: tuple[float, float, float] = (0.96, 0.96, 0.96)
NEAR_BLACK: tuple[float, float, float] = (0.04, 0.04, 0.04)
TEXT_COLORS: tuple[tuple[float, float, float], ...] = (NEAR_WHITE, NEAR_BLACK)


def _srgb(rgb: ArrayLike) -> C:
    return C("srgb", [float(v) for v in rgb])


def relative_luminance(rgb: ArrayLike) -> float:
    return _srgb(rgb).luminance()


def contrast_ratio(a: ArrayLike, b: ArrayLike) -> float:
    return _srgb(a).contrast(_srgb(b), method="wcag21")


def pick_text_color(
    background: ArrayLike, candidates: tuple[tuple[float, float, float], ...] = TEXT_COLORS
) -> tuple[float, float, float]:
    """
    Return the candidate with the strictly largest contrast against ``background``.

    Ties, and ratios that compare as NaN, keep the earlier candidate.
    """
    best = candidates[0]
    best_ratio = contrast_ratio(best, background)
    for candidate in candidates[1:]:
        ratio = contrast_ratio(candidate, background)
        if ratio > best_ratio:
            best, best_ratio = candidate, ratio
    return best
