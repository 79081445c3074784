"""
ColorAide colour spaces behind the ordinary models, and conversions between them.

Conversions skip ColorAide's achromatic normalisation, so a hue always comes
back as a number, and nothing is clamped or gamut mapped on the way.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from coloraide import Color
from coloraide.spaces.hsluv import HSLuv
from coloraide.spaces.hwb import HWB
from coloraide.spaces.lchuv import LChuv
from coloraide.spaces.luv import Luv
from coloraide.spaces.okhsl import Okhsl
from coloraide.spaces.okhsv import Okhsv
from coloraide.spaces.xyy import xyY

from .rgb import Triplet, triplet

# XYZ D65, Y == 1 for sRGB white
REFERENCE = "xyz-d65"


class Okhwb(HWB):
    """HWB built on Okhsv the way HWB is built on HSV."""

    BASE = "okhsv"
    NAME = "okhwb"
    SERIALIZE = ("--okhwb",)
    GAMUT_CHECK = None
    CLIP_SPACE = None


class C(Color):
    pass


C.register([Okhsl(), Okhsv(), Okhwb(), Luv(), LChuv(), HSLuv(), xyY()])


def convert(values: ArrayLike, source: str, target: str) -> Triplet:
    """Coordinates in ``source`` -> coordinates in ``target``, unclamped."""
    color = C(source, [float(v) for v in triplet(values)])
    return np.asarray(color.convert(target, norm=False).coords(nans=False), dtype=np.float64)


def srgb_to_xyz(rgb: ArrayLike) -> Triplet:
    return convert(rgb, "srgb", REFERENCE)


def xyz_to_srgb(xyz: ArrayLike) -> Triplet:
    return convert(xyz, REFERENCE, "srgb")
