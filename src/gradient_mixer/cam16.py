"""
CAM16 colour appearance model.

The viewing conditions are baked once into a :class:`ViewingConditions`
value and passed explicitly to every conversion, so a batch of colours shares
the same derived constants.  The transforms are ColorAide's; its
``Environment`` holds the baked constants.

Reference: Li, C. et al. (2017), "Comprehensive color solutions: CAM16, CAT16,
and CAM16-UCS", Color Research & Application 42(6).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

import numpy as np
from coloraide.cat import WHITES
from coloraide.spaces.cam16 import Environment, cam_to_xyz, xyz_to_cam

from .rgb import Triplet, triplet

ADAPTING_LUMINANCE = 40.0  # L_A, cd/m^2
BACKGROUND_LUMINANCE = 20.0  # Y_b, relative to Y_w = 100
SURROUND = "average"
D65: tuple[float, float] = WHITES["2deg"]["D65"]


@dataclass(frozen=True)
class ViewingConditions:
    """A white point, adapting field and surround, plus the constants derived from them."""

    white: tuple[float, float]
    adapting_luminance: float
    background_luminance: float
    surround: str
    discounting: bool
    env: Environment = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        env = Environment(
            white=self.white,
            adapting_luminance=self.adapting_luminance,
            background_luminance=self.background_luminance,
            surround=self.surround,
            discounting=self.discounting,
        )
        object.__setattr__(self, "env", env)

    @classmethod
    def bake(
        cls,
        white: tuple[float, float] = D65,
        adapting_luminance: float = ADAPTING_LUMINANCE,
        background_luminance: float = BACKGROUND_LUMINANCE,
        surround: str = SURROUND,
        discounting: bool = False,
    ) -> ViewingConditions:
        return cls(
            white=(float(white[0]), float(white[1])),
            adapting_luminance=float(adapting_luminance),
            background_luminance=float(background_luminance),
            surround=surround.lower(),
            discounting=discounting,
        )


@lru_cache(maxsize=None)
def default_conditions() -> ViewingConditions:
    """D65, L_A = 40, Y_b = 20, average surround."""
    return ViewingConditions.bake()


@dataclass(frozen=True)
class Cam16:
    J: float
    C: float
    h: float
    s: float
    Q: float
    M: float
    H: float


def xyz_to_cam16(xyz: Triplet, conditions: ViewingConditions) -> Cam16:
    coords = [float(v) for v in triplet(xyz)]
    return Cam16(*xyz_to_cam(coords, conditions.env, calc_hue_quadrature=True))


def cam16_to_xyz(
    conditions: ViewingConditions,
    *,
    h: float,
    J: float | None = None,
    Q: float | None = None,
    C: float | None = None,
    M: float | None = None,
    s: float | None = None,
) -> Triplet:
    """
    Invert CAM16 from a lightness (``J`` or ``Q``), a chroma-like correlate
    (``C``, ``M`` or ``s``) and the hue angle ``h`` in degrees.

    Raises ValueError unless exactly one of each is given.
    """
    xyz = cam_to_xyz(J=J, C=C, h=h, s=s, Q=Q, M=M, env=conditions.env)
    return np.asarray(xyz, dtype=np.float64)
