import numpy as np
import pytest

from gradient_mixer.cam16 import default_conditions
from gradient_mixer.hue import hue_delta
from gradient_mixer.models import APPEARANCE_MODELS, ORDINARY_MODELS
from gradient_mixer.spaces import srgb_to_xyz

tolerance = 1e-4

SAMPLES = [
    "#000000",
    "#ffffff",
    "#808080",
    "#ff0000",
    "#00ff00",
    "#0000ff",
    "#003366",
    "#99cc00",
    "#f03010",
    "#00c020",
    "#201080",
    "#e8f860",
    "#100408",
    "#f3f7ff",
    "#7f3fbf",
    "#00ffff",
]

CHROMATIC = [s for s in SAMPLES if s not in {"#000000", "#ffffff", "#808080"}]


def hex_to_rgb01(hex_str):
    hex_str = hex_str.lstrip("#")
    return np.array([int(hex_str[i : i + 2], 16) / 255.0 for i in (0, 2, 4)])


def assert_values_close(a, b, hue_index):
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    for i in range(3):
        if i == hue_index:
            assert abs(hue_delta(a[i], b[i])) < tolerance * 100
        else:
            assert abs(a[i] - b[i]) < tolerance * max(1.0, abs(a[i]))


@pytest.mark.parametrize("model", ORDINARY_MODELS, ids=lambda m: m.name)
@pytest.mark.parametrize("color", SAMPLES)
def test_reference_round_trip(model, color):
    xyz = srgb_to_xyz(hex_to_rgb01(color))
    back = model.to_reference(model.from_reference(xyz))
    assert np.allclose(back, xyz, atol=tolerance)


@pytest.mark.parametrize("model", ORDINARY_MODELS, ids=lambda m: m.name)
@pytest.mark.parametrize("color", CHROMATIC)
def test_model_value_round_trip(model, color):
    value = model.from_reference(srgb_to_xyz(hex_to_rgb01(color)))
    again = model.from_reference(model.to_reference(value))
    assert_values_close(again, value, model.hue_index)


@pytest.mark.parametrize("model", APPEARANCE_MODELS, ids=lambda m: m.name)
@pytest.mark.parametrize("color", SAMPLES)
def test_appearance_reference_round_trip(model, color):
    vc = default_conditions()
    xyz = srgb_to_xyz(hex_to_rgb01(color))
    back = model.to_reference(model.from_reference(xyz, vc), vc)
    assert np.allclose(back, xyz, atol=tolerance)


@pytest.mark.parametrize("model", APPEARANCE_MODELS, ids=lambda m: m.name)
@pytest.mark.parametrize("color", CHROMATIC)
def test_appearance_value_round_trip(model, color):
    vc = default_conditions()
    value = model.from_reference(srgb_to_xyz(hex_to_rgb01(color)), vc)
    again = model.from_reference(model.to_reference(value, vc), vc)
    assert_values_close(again, value, model.hue_index)


@pytest.mark.parametrize("model", ORDINARY_MODELS, ids=lambda m: m.name)
def test_srgb_shortcut_matches_reference_path(model):
    rgb = hex_to_rgb01("#7f3fbf")
    direct = model.from_srgb(rgb)
    via_xyz = model.from_reference(srgb_to_xyz(rgb))
    assert_values_close(direct, via_xyz, model.hue_index)
    assert np.allclose(model.to_srgb(direct), rgb, atol=tolerance)
