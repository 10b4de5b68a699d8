"""An ever-deepening zoom into the Mandelbrot set near the seahorse valley.

The view drifts slightly around a fixed point of interest, and points in
the set are overlaid with banded outlines derived from several rescaled
copies of the Mandelbrot set.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from .shading import (
    INNER_DARK,
    INNER_LIGHT,
    WARM_PALETTE,
    mandelbrot,
    mix,
    palette,
    pixel_plane,
    to_rgb8,
)

MAX_ITER = 300
ZOOM_RATE = 0.13
CENTER = complex(-0.745428, 0.131825)
DRIFT = 0.01
PLANE_SCALE = 0.2
INNER_THRESHOLD = 0.98
OUTLINE_BANDS = 15.0
INNER_WEIGHT = 0.95
RECURSIVE_SCALE = 2.0

_LAYERS = ((1.0, 0.95), (2.0, 0.8), (4.0, 0.6), (6.0, 0.4), (8.0, 0.3), (10.0, 0.1))


def zoom_at(time: float) -> float:
    """Exponential zoom factor at ``time`` seconds."""
    return math.exp(time * ZOOM_RATE)


def _drift(time: float) -> complex:
    return DRIFT * complex(math.sin(time * 0.15), math.cos(time * 0.1))


def animated_center(time: float) -> complex:
    """View centre, drifting slightly around the point of interest."""
    return CENTER + _drift(time)


def recursive_fractal(c, scale: float):
    """Weighted sum of Mandelbrot escape times at several magnifications of ``c``."""
    c = np.asarray(c, dtype=np.complex128)
    return sum(mandelbrot(c * scale * factor, MAX_ITER) * weight for factor, weight in _LAYERS)


@dataclass(frozen=True)
class MandelbrotScene:
    """Mandelbrot zoom around ``center``."""

    center: complex = CENTER

    title: ClassVar[str] = "Mandelbrot Renderer"

    def render(self, width: int, height: int, time: float) -> np.ndarray:
        """Render a ``(height, width, 3)`` array of 8-bit RGB pixels."""
        focus = self.center + _drift(time)
        plane = pixel_plane(width, height, PLANE_SCALE, zoom_at(time), focus)
        escape = mandelbrot(plane, MAX_ITER)
        colors = palette(escape, WARM_PALETTE)
        inside = escape > INNER_THRESHOLD
        if inside.any():
            inner = np.atleast_1d(recursive_fractal(plane[inside], RECURSIVE_SCALE))
            outline = np.mod(inner * OUTLINE_BANDS, 1.0)
            inner_colors = mix(INNER_DARK, INNER_LIGHT, outline[:, np.newaxis])
            colors[inside] = mix(colors[inside], inner_colors, INNER_WEIGHT)
        return to_rgb8(colors)