from __future__ import annotations

import json
import logging
from typing import Literal, Sequence, cast

import numpy as np
from coloraide import Color

log = logging.getLogger(__name__)

OutputFormat = Literal["rgba", "hex"]

DEFAULT_COLORS: tuple[str, ...] = ("#493bb5", "#0de7d4")
DEFAULT_STEPS = 3

MIN_COLORS, MAX_COLORS = 2, 99
MIN_STEPS, MAX_STEPS = 1, 99

FORMATS: tuple[str, ...] = ("rgba", "hex")


def _clamp(val: object, lo: int, hi: int, default: int) -> int:
    try:
        n = int(val)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        n = default
    return max(lo, min(n, hi))


def clamp_count(val: object, hi: int = MAX_COLORS) -> int:
    return _clamp(val, MIN_COLORS, hi, len(DEFAULT_COLORS))


def clamp_steps(val: object, hi: int = MAX_STEPS) -> int:
    return _clamp(val, MIN_STEPS, hi, DEFAULT_STEPS)


def random_color(rng: np.random.Generator | None = None) -> str:
    """Uniformly random opaque color as '#rrggbb'."""
    rng = rng if rng is not None else np.random.default_rng()
    r, g, b = (int(v) for v in rng.integers(0, 256, size=3))
    return f"#{r:02x}{g:02x}{b:02x}"


def resize_palette(
    colors: Sequence[str], n: int, rng: np.random.Generator | None = None
) -> list[str]:
    """Truncate to ``n`` colors, or pad with random ones up to ``n``."""
    n = max(0, int(n))
    out = list(colors[:n])
    if len(out) < n:
        rng = rng if rng is not None else np.random.default_rng()
        out.extend(random_color(rng) for _ in range(n - len(out)))
        log.debug("padded palette %d → %d colors", len(colors), n)
    return out


def to_hex(color: str) -> str:
    """'#rrggbb', or '#rrggbbaa' when the color is translucent."""
    return Color(color).convert("srgb").clip().to_string(hex=True)


def parse_format(val: str | None) -> OutputFormat:
    f = (val or "rgba").strip().lower()
    if f not in FORMATS:
        raise ValueError(f"unknown format '{val}'")
    return cast(OutputFormat, f)


def format_result(result: Sequence[str], fmt: OutputFormat = "rgba") -> list[str]:
    if fmt == "hex":
        return [to_hex(c) for c in result]
    return list(result)


def serialize_result(result: Sequence[str]) -> str:
    """The whole result as a JSON list, two-space indented (clipboard text)."""
    return json.dumps(list(result), indent=2)


__all__ = [
    "DEFAULT_COLORS",
    "DEFAULT_STEPS",
    "FORMATS",
    "MAX_COLORS",
    "MAX_STEPS",
    "clamp_count",
    "clamp_steps",
    "format_result",
    "parse_format",
    "random_color",
    "resize_palette",
    "serialize_result",
    "to_hex",
]
