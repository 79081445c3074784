"""Compare two-colour gradients across sRGB, CIE, Oklab-family and CAM16 models."""

from .contrast import pick_text_color
from .gradient import GradientResult, Swatch, compute_all, gradient, swatches
from .hue import mix, mix_hue
from .models import MODELS, get_model

__all__ = [
    "GradientResult",
    "MODELS",
    "Swatch",
    "compute_all",
    "get_model",
    "gradient",
    "mix",
    "mix_hue",
    "pick_text_color",
    "swatches",
]
