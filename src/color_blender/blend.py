"""Linear RGBA blending between CSS colors.

Two entry points:

* ``blend_pair``    – start → end over ``steps`` intermediates (endpoints included).
* ``blend_palette`` – every adjacent pair of a palette, boundary duplicates collapsed.

Colors are parsed with ColorAide, so anything CSS accepts works: hex, named
colors, ``rgb()``/``rgba()``, ``hsl()`` and friends.  Interpolation happens on
the raw 0–255 sRGB channels.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import Iterable, Sequence

import numpy as np
from coloraide import Color

log = logging.getLogger(__name__)

Channels = tuple[float, float, float, float]  # r, g, b in 0..255; alpha in 0..1

ALPHA_DIGITS = 3  # decimal places kept when parsing alpha


def parse_color(value: object) -> Channels | None:
    """CSS color string → (r, g, b, a), or None when it can't be parsed."""
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        c = Color(value.strip()).convert("srgb").clip()
    except ValueError:
        return None
    # index 3 is alpha; "none" channels come back as NaN
    r, g, b, a = (0.0 if math.isnan(c[i]) else float(c[i]) for i in range(4))
    return (round(r * 255), round(g * 255), round(b * 255), round(a, ALPHA_DIGITS))


def _num(v: float) -> str:
    v = float(v)
    if v.is_integer():
        return str(int(v))
    return format(v, "g")


def format_rgba(channels: Iterable[float]) -> str:
    return "rgba(" + ",".join(_num(v) for v in channels) + ")"


def blend_pair(start: str, end: str, steps: int) -> list[str]:
    """
    Blend ``start`` → ``end`` with ``steps`` colors strictly between them.

    Returns ``steps + 2`` ``rgba(...)`` strings, or an empty list if either
    endpoint fails to parse.  Channel i of sample k is
    ``start[i] + round(inc[i] * k)`` with ``inc = (end - start) / (steps + 1)``;
    alpha included.  Values are not clamped; ``steps`` must be an int.
    """
    steps = operator.index(steps)
    if steps < 0:
        raise ValueError("steps must be ≥ 0")

    a = parse_color(start)
    b = parse_color(end)
    if a is None or b is None:
        log.debug("cannot blend %r → %r: unparseable color", start, end)
        return []

    s = np.asarray(a, dtype=np.float64)
    e = np.asarray(b, dtype=np.float64)
    inc = (e - s) / (steps + 1)
    offsets = inc[None, :] * np.arange(steps + 2, dtype=np.float64)[:, None]

    # np.round is half-to-even, same as round()
    samples = s + np.round(offsets)

    samples[0] = s
    samples[-1] = e
    return [format_rgba(row) for row in samples]


def blend_palette(colors: Sequence[str], steps: int) -> list[str]:
    """Blend every adjacent pair of ``colors`` and drop repeated neighbours."""
    results: list[str] = []
    for left, right in zip(colors, colors[1:]):
        results.extend(blend_pair(left, right, steps))
    return [v for i, v in enumerate(results) if i == 0 or v != results[i - 1]]


__all__ = ["Channels", "blend_pair", "blend_palette", "format_rgba", "parse_color"]
