"""Componentwise interpolation with shorter-arc handling of a hue angle."""

from __future__ import annotations

from .rgb import Triplet, triplet


def hue_delta(h1: float, h2: float) -> float:
    """Signed difference h2 - h1 reduced into (-180, 180]."""
    return 180.0 - (180.0 - (h2 - h1)) % 360.0


def mix_hue(h1: float, h2: float, t: float) -> float:
    return (h1 + t * hue_delta(h1, h2)) % 360.0


def mix(a: Triplet, b: Triplet, t: float, hue_index: int | None = None) -> Triplet:
    """Interpolate two values of the same model; ``hue_index`` marks a hue in degrees."""
    a = triplet(a)
    b = triplet(b)
    out = a + t * (b - a)
    if hue_index is not None:
        out[hue_index] = mix_hue(float(a[hue_index]), float(b[hue_index]), t)
    return out
