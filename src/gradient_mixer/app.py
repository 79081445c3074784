from __future__ import annotations

import logging
import string
from typing import Any, Mapping

import numpy as np
from flask import Flask, jsonify, request

from .gradient import GradientResult, compute_all
from .models import MODELS, get_model, supported_models
from .rgb import Triplet, rgb01_to_hex
from .spaces import C

log = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = {
    "DEFAULT_START": "#003366",
    "DEFAULT_END": "#99CC00",
    "DEFAULT_STEPS": 12,
    "STEPS_MIN": 3,
    "STEPS_MAX": 50,
}

PRESETS: tuple[tuple[str, str, str], ...] = (
    ("red → green", "#f03010", "#00c020"),
    ("green → blue", "#00c020", "#201080"),
    ("blue → yellow", "#201080", "#e8f860"),
    ("yellow → red", "#e8f860", "#f03010"),
    ("reddish black → blueish white", "#100408", "#f3f7ff"),
)


def canon_hex(s: str) -> str:
    """Normalize to '#rrggbb'; accept 3- or 6-digit hex only."""
    raw = (s or "").strip().lstrip("#")
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise ValueError("hex must be 3 or 6 hex digits")
    return "#" + raw.lower()


def parse_color(s: str) -> Triplet:
    """Hex colour text -> gamma-encoded sRGB floats in [0, 1]."""
    return np.asarray(C(canon_hex(s)).convert("srgb").coords(), dtype=np.float64)


def parse_steps(val: str | int | None, lo: int, hi: int) -> int:
    try:
        n = int(val)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError("steps must be an integer") from None
    if not lo <= n <= hi:
        raise ValueError(f"steps must be between {lo} and {hi}")
    return n


def render(result: GradientResult) -> dict[str, Any]:
    return {
        "name": result.name,
        "reference": result.reference,
        "swatches": [{"color": s.hex, "text": s.text_hex} for s in result.swatches],
    }


# ----------------------------- Flask app ----------------------------------


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULTS)
    if config is not None:
        app.config.from_mapping(config)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    @app.route("/models")
    def models():
        return jsonify([{"name": m.name, "reference": m.reference} for m in MODELS])

    @app.route("/presets")
    def presets():
        return jsonify([{"name": n, "start": a, "end": b} for n, a, b in PRESETS])

    @app.route("/gradients")
    def gradients():
        cfg = app.config
        # Inputs
        try:
            start = parse_color(request.args.get("start", cfg["DEFAULT_START"]))
            end = parse_color(request.args.get("end", cfg["DEFAULT_END"]))
        except ValueError as e:
            return jsonify({"error": f"invalid color: {e}"}), 400
        try:
            steps = parse_steps(
                request.args.get("steps", cfg["DEFAULT_STEPS"]),
                cfg["STEPS_MIN"],
                cfg["STEPS_MAX"],
            )
        except ValueError as e:
            return jsonify({"error": str(e)}), 400

        if request.args.get("invert") in {"1", "true", "yes"}:
            start, end = end, start

        names = request.args.getlist("model")
        try:
            selected = [get_model(n) for n in names] if names else list(MODELS)
        except KeyError as e:
            return (
                jsonify(
                    {
                        "error": f"unknown model {e}",
                        "supported": supported_models(),
                    }
                ),
                400,
            )

        try:
            results = compute_all(start, end, steps, selected)
        except Exception as exc:
            log.exception("Gradient computation failed")
            return jsonify({"error": str(exc)}), 500

        return jsonify(
            {
                "start": rgb01_to_hex(start),
                "end": rgb01_to_hex(end),
                "steps": steps,
                "models": [render(r) for r in results],
            }
        )

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
