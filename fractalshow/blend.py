"""A zooming view that blends the Mandelbrot and Julia sets.

The camera zooms in for 80 seconds, then out for 45 seconds, over a
125-second cycle. The Mandelbrot and Julia escape times are cross-faded
by a slow sine wave, and the view centre can be moved in fixed steps.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Sequence

import numpy as np

from .shading import (
    WARM_PALETTE,
    julia,
    mandelbrot,
    mix,
    palette,
    pixel_plane,
    smooth_ease_in_out,
    to_rgb8,
)

CYCLE_SECONDS = 125.0
ZOOM_IN_SECONDS = 80.0
ZOOM_OUT_SECONDS = 45.0
MAX_ZOOM = 10.0
BASE_ZOOM = 0.5
MAX_ITER = 256
JULIA_CONSTANT = complex(-0.8, 0.156)
BLEND_RATE = 0.2
BLEND_SPAN = 0.4


def zoom_at(time: float) -> float:
    """Zoom factor at ``time`` seconds, eased in and out over one cycle."""
    phase = (time % CYCLE_SECONDS) / CYCLE_SECONDS
    zoom_in_share = ZOOM_IN_SECONDS / CYCLE_SECONDS
    if phase < zoom_in_share:
        eased = smooth_ease_in_out(phase / zoom_in_share)
        return BASE_ZOOM + eased * (MAX_ZOOM - BASE_ZOOM)
    eased = smooth_ease_in_out((phase - zoom_in_share) / (ZOOM_OUT_SECONDS / CYCLE_SECONDS))
    return MAX_ZOOM - eased * (MAX_ZOOM - BASE_ZOOM)


def blend_factor(time: float) -> float:
    """Oscillating blend driver in ``[-1, 1]``."""
    return math.sin(time * BLEND_RATE)


@dataclass
class BlendScene:
    """Mandelbrot/Julia cross-fade with a movable camera."""

    center_x: float = 0.15
    center_y: float = 0.0
    move_speed: float = 0.01
    max_iter: int = MAX_ITER
    colors: Sequence[Sequence[float]] = WARM_PALETTE

    title: ClassVar[str] = "Fractal Renderer"
    duration: ClassVar[float] = CYCLE_SECONDS

    @property
    def center(self) -> complex:
        return complex(self.center_x, self.center_y)

    def move(self, dx: float, dy: float) -> None:
        """Shift the camera by ``dx`` and ``dy`` steps of ``move_speed``."""
        self.center_x += dx * self.move_speed
        self.center_y += dy * self.move_speed

    def render(self, width: int, height: int, time: float) -> np.ndarray:
        """Render a ``(height, width, 3)`` array of 8-bit RGB pixels."""
        plane = pixel_plane(width, height, 1.0, zoom_at(time), self.center)
        mandel = mandelbrot(plane, self.max_iter)
        jul = julia(plane, JULIA_CONSTANT, self.max_iter)
        weight = (blend_factor(time) + 1.0) * BLEND_SPAN
        blended = mix(mandel, jul, weight)
        return to_rgb8(palette(blended, self.colors))