from __future__ import annotations

import logging
from typing import Any, Mapping

import numpy as np
from flask import Flask, jsonify, render_template, request

from .blend import blend_palette
from .palette import (
    DEFAULT_COLORS,
    FORMATS,
    MAX_COLORS,
    MAX_STEPS,
    clamp_count,
    clamp_steps,
    format_result,
    parse_format,
    resize_palette,
    serialize_result,
)

log = logging.getLogger(__name__)


def _colors_arg() -> list[str]:
    colors = [c.strip() for c in request.args.getlist("color") if c.strip()]
    return colors or list(DEFAULT_COLORS)


# ----------------------------- Flask app ----------------------------------


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__, static_folder="static", template_folder="templates")
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    app.config.update(MAX_STEPS=MAX_STEPS, MAX_COLORS=MAX_COLORS)
    app.config.from_prefixed_env("COLOR_BLENDER")
    if config:
        app.config.update(config)

    @app.route("/")
    def index():
        return render_template(
            "index.html",
            colors=list(DEFAULT_COLORS),
            steps=clamp_steps(None, app.config["MAX_STEPS"]),
            max_steps=app.config["MAX_STEPS"],
            max_colors=app.config["MAX_COLORS"],
        )

    @app.route("/blend")
    def blend():
        colors = _colors_arg()

        raw_steps = request.args.get("steps")
        try:
            n = None if raw_steps is None else int(raw_steps)
        except ValueError:
            return jsonify({"error": "steps must be an integer"}), 400
        steps = clamp_steps(n, app.config["MAX_STEPS"])

        try:
            fmt = parse_format(request.args.get("format"))
        except ValueError as e:
            return jsonify({"error": str(e), "supported": FORMATS}), 400

        try:
            result = format_result(blend_palette(colors, steps), fmt)
        except Exception as exc:
            log.exception("Blending failed")
            return jsonify({"error": str(exc)}), 500

        return jsonify(
            {
                "colors": colors,
                "steps": steps,
                "result": result,
                "raw": serialize_result(result),
            }
        )

    @app.route("/palette")
    def palette():
        colors = _colors_arg()
        n = clamp_count(request.args.get("n", len(colors)), app.config["MAX_COLORS"])

        seed = request.args.get("seed")
        try:
            rng = np.random.default_rng(None if seed is None else int(seed))
        except ValueError:
            return jsonify({"error": "seed must be a non-negative integer"}), 400

        return jsonify({"colors": resize_palette(colors, n, rng)})

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
