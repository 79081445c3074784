"""Gradients between two sRGB colours, one colour model at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Iterable

from .cam16 import ViewingConditions
from .contrast import pick_text_color
from .models import MODELS, AppearanceModel, Model
from .rgb import Triplet, rgb01_to_hex, triplet

log = logging.getLogger(__name__)

RGB = tuple[float, float, float]


@dataclass(frozen=True)
class Swatch:
    color: RGB
    text: RGB

    @property
    def hex(self) -> str:
        return rgb01_to_hex(self.color)

    @property
    def text_hex(self) -> str:
        return rgb01_to_hex(self.text)


@dataclass(frozen=True)
class GradientResult:
    name: str
    reference: str
    swatches: tuple[Swatch, ...]


def gradient(
    model: Model,
    start: Triplet,
    end: Triplet,
    steps: int,
    conditions: ViewingConditions | None = None,
) -> list[Triplet]:
    """
    ``steps`` colours from ``start`` to ``end`` (gamma-encoded sRGB, 0-1),
    interpolated in ``model`` and returned as unclamped sRGB.

    Appearance models bake their viewing conditions once per call, unless
    ``conditions`` is given, and use them for every colour.
    """
    if isinstance(model, AppearanceModel):
        if conditions is None:
            conditions = ViewingConditions.bake()
        encode = partial(model.from_srgb, conditions=conditions)
        decode = partial(model.to_srgb, conditions=conditions)
    else:
        encode = model.from_srgb
        decode = model.to_srgb

    a = encode(triplet(start))
    b = encode(triplet(end))
    factor = 1.0 / max(steps - 1, 1)
    log.debug("[%s] %s -> %s, %d steps", model.name, a, b, steps)
    return [decode(model.mix(a, b, factor * idx)) for idx in range(steps)]


def make_swatch(color: Triplet) -> Swatch:
    color = tuple(float(c) for c in color)
    return Swatch(color=color, text=pick_text_color(color))


def swatches(
    model: Model,
    start: Triplet,
    end: Triplet,
    steps: int,
    conditions: ViewingConditions | None = None,
) -> tuple[Swatch, ...]:
    return tuple(make_swatch(c) for c in gradient(model, start, end, steps, conditions))


def compute_all(
    start: Triplet, end: Triplet, steps: int, models: Iterable[Model] = MODELS
) -> list[GradientResult]:
    """One gradient per model, in the order given."""
    return [
        GradientResult(m.name, m.reference, swatches(m, start, end, steps)) for m in models
    ]
