"""
The fixed set of colour models a gradient can be computed in.

Ordinary models are ColorAide colour spaces; appearance models route through
CAM16 and take an explicit :class:`~gradient_mixer.cam16.ViewingConditions`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Union

import numpy as np

from .cam16 import ViewingConditions, cam16_to_xyz, xyz_to_cam16
from .hue import mix
from .rgb import Triplet, triplet
from .spaces import REFERENCE, convert, srgb_to_xyz, xyz_to_srgb

_DOCS = "https://docs.rs/palette/0.7.6/palette/"


@dataclass(frozen=True)
class ColorModel:
    name: str
    reference: str
    space: str  # ColorAide space name
    hue_index: int | None = None

    def from_reference(self, xyz: Triplet) -> Triplet:
        return convert(xyz, REFERENCE, self.space)

    def to_reference(self, value: Triplet) -> Triplet:
        return convert(value, self.space, REFERENCE)

    def from_srgb(self, color: Triplet) -> Triplet:
        return convert(color, "srgb", self.space)

    def to_srgb(self, value: Triplet) -> Triplet:
        return convert(value, self.space, "srgb")

    def mix(self, a: Triplet, b: Triplet, t: float) -> Triplet:
        return mix(a, b, t, self.hue_index)


@dataclass(frozen=True)
class AppearanceModel:
    """A CAM16 correlate set: ``(lightness, chroma, h)``."""

    name: str
    reference: str
    lightness: Literal["J", "Q"]
    chroma: Literal["C", "M", "s"]
    hue_index: int = 2

    def from_reference(self, xyz: Triplet, conditions: ViewingConditions) -> Triplet:
        cam = xyz_to_cam16(xyz, conditions)
        return np.array([getattr(cam, self.lightness), getattr(cam, self.chroma), cam.h])

    def to_reference(self, value: Triplet, conditions: ViewingConditions) -> Triplet:
        lightness, chroma, h = (float(v) for v in triplet(value))
        return cam16_to_xyz(
            conditions, h=h, **{self.lightness: lightness, self.chroma: chroma}
        )

    def from_srgb(self, color: Triplet, conditions: ViewingConditions) -> Triplet:
        return self.from_reference(srgb_to_xyz(color), conditions)

    def to_srgb(self, value: Triplet, conditions: ViewingConditions) -> Triplet:
        return xyz_to_srgb(self.to_reference(value, conditions))

    def mix(self, a: Triplet, b: Triplet, t: float) -> Triplet:
        return mix(a, b, t, self.hue_index)


Model = Union[ColorModel, AppearanceModel]

SRGB = ColorModel("rgb", _DOCS + "type.Srgb.html", "srgb")
LINEAR_SRGB = ColorModel("lin. srgb", _DOCS + "type.LinSrgb.html", "srgb-linear")
HSL = ColorModel("hsl", _DOCS + "struct.Hsl.html", "hsl", 0)
OKHSL = ColorModel("okhsl", _DOCS + "struct.Okhsl.html", "okhsl", 0)
HSLUV = ColorModel("hsluv", _DOCS + "struct.Hsluv.html", "hsluv", 0)
HSV = ColorModel("hsv", _DOCS + "struct.Hsv.html", "hsv", 0)
OKHSV = ColorModel("okhsv", _DOCS + "struct.Okhsv.html", "okhsv", 0)
HWB = ColorModel("hwb", _DOCS + "struct.Hwb.html", "hwb", 0)
OKHWB = ColorModel("okhwb", _DOCS + "struct.Okhwb.html", "okhwb", 0)
LAB = ColorModel("lab", _DOCS + "struct.Lab.html", "lab-d65")
OKLAB = ColorModel("oklab", _DOCS + "struct.Oklab.html", "oklab")
LCH = ColorModel("lch", _DOCS + "struct.Lch.html", "lch-d65", 2)
OKLCH = ColorModel("oklch", _DOCS + "struct.Oklch.html", "oklch", 2)
LCHUV = ColorModel("lchuv", _DOCS + "struct.Lchuv.html", "lchuv", 2)
LUV = ColorModel("luv", _DOCS + "struct.Luv.html", "luv")
XYZ = ColorModel("xyz", _DOCS + "struct.Xyz.html", REFERENCE)
YXY = ColorModel("yxy", _DOCS + "struct.Yxy.html", "xyy")

CAM16_JCH = AppearanceModel("Cam16Jch", _DOCS + "cam16/struct.Cam16Jch.html", "J", "C")
CAM16_JMH = AppearanceModel("Cam16Jmh", _DOCS + "cam16/struct.Cam16Jmh.html", "J", "M")
CAM16_JSH = AppearanceModel("Cam16Jsh", _DOCS + "cam16/struct.Cam16Jsh.html", "J", "s")
CAM16_QCH = AppearanceModel("Cam16Qch", _DOCS + "cam16/struct.Cam16Qch.html", "Q", "C")
CAM16_QMH = AppearanceModel("Cam16Qmh", _DOCS + "cam16/struct.Cam16Qmh.html", "Q", "M")
CAM16_QSH = AppearanceModel("Cam16Qsh", _DOCS + "cam16/struct.Cam16Qsh.html", "Q", "s")

ORDINARY_MODELS: tuple[ColorModel, ...] = (
    SRGB,
    LINEAR_SRGB,
    HSL,
    OKHSL,
    HSLUV,
    HSV,
    OKHSV,
    HWB,
    OKHWB,
    LAB,
    OKLAB,
    LCH,
    OKLCH,
    LCHUV,
    LUV,
    XYZ,
    YXY,
)

APPEARANCE_MODELS: tuple[AppearanceModel, ...] = (
    CAM16_JCH,
    CAM16_JMH,
    CAM16_JSH,
    CAM16_QCH,
    CAM16_QMH,
    CAM16_QSH,
)

MODELS: tuple[Model, ...] = ORDINARY_MODELS + APPEARANCE_MODELS

MODELS_BY_NAME: Mapping[str, Model] = {m.name.lower(): m for m in MODELS}


def get_model(name: str) -> Model:
    """Look up a model by its display name (case-insensitive); raises KeyError."""
    return MODELS_BY_NAME[name.strip().lower()]


def supported_models() -> tuple[str, ...]:
    return tuple(m.name for m in MODELS)
