"""Triplet coercion and the 8-bit display boundary for sRGB colours.

Colours that leave the sRGB cube while being mixed come back out of range and
are only clipped by :func:`to_u8` when they are displayed.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

Triplet = np.ndarray


def triplet(values: ArrayLike) -> Triplet:
    return np.asarray(values, dtype=np.float64).reshape(3).copy()


def to_u8(rgb: ArrayLike) -> np.ndarray:
    """
    Quantize an sRGB triplet to 8 bits, rounding halves up.

    This is the only place a colour is clipped to [0, 1].
    """
    scaled = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0) * 255.0
    return np.floor(scaled + 0.5).astype(np.uint8)


def rgb01_to_hex(rgb: ArrayLike) -> str:
    rgb_u8 = to_u8(rgb)
    return f"#{rgb_u8[0]:02x}{rgb_u8[1]:02x}{rgb_u8[2]:02x}"
