"""An ever-deepening zoom into a Julia set with a wobbling constant.

Points that stay bounded are overlaid with banded outlines derived from
several rescaled copies of the same Julia set.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from .shading import (
    DARK_PALETTE,
    INNER_DARK,
    INNER_LIGHT,
    julia,
    mix,
    palette,
    pixel_plane,
    to_rgb8,
)

MAX_ITER = 300
ZOOM_RATE = 0.09
JULIA_CONSTANT = complex(-0.8, 0.156)
WOBBLE = 0.02
INNER_THRESHOLD = 0.98
OUTLINE_BANDS = 15.0
INNER_WEIGHT = 0.95
RECURSIVE_SCALE = 2.0

_LAYERS = ((1.0, 0.8), (2.0, 0.5), (4.0, 0.3), (6.0, 0.1))


def zoom_at(time: float) -> float:
    """Exponential zoom factor at ``time`` seconds."""
    return math.exp(time * ZOOM_RATE)


def animated_constant(time: float) -> complex:
    """Julia constant, gently wobbling around its base value."""
    return JULIA_CONSTANT + WOBBLE * complex(math.sin(time * 0.15), math.cos(time * 0.1))


def recursive_fractal(z, c, scale: float):
    """Weighted sum of Julia escape times at several magnifications of ``z``."""
    z = np.asarray(z, dtype=np.complex128)
    return sum(julia(z * scale * factor, c, MAX_ITER) * weight for factor, weight in _LAYERS)


@dataclass(frozen=True)
class JuliaScene:
    """Julia set zoom centred on ``center``."""

    center: complex = 0j

    title: ClassVar[str] = "Julia Set Renderer"

    def render(self, width: int, height: int, time: float) -> np.ndarray:
        """Render a ``(height, width, 3)`` array of 8-bit RGB pixels."""
        c = animated_constant(time)
        plane = pixel_plane(width, height, 1.0, zoom_at(time), self.center)
        escape = julia(plane, c, MAX_ITER)
        colors = palette(escape, DARK_PALETTE)
        inside = escape > INNER_THRESHOLD
        if inside.any():
            inner = np.atleast_1d(recursive_fractal(plane[inside], c, RECURSIVE_SCALE))
            outline = np.mod(inner * OUTLINE_BANDS, 1.0)
            inner_colors = mix(INNER_DARK, INNER_LIGHT, outline[:, np.newaxis])
            colors[inside] = mix(colors[inside], inner_colors, INNER_WEIGHT)
        return to_rgb8(colors)