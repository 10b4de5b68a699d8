"""Per-pixel shading primitives shared by the fractal scenes.

Everything here is vectorised with numpy: functions accept scalars or
arrays and operate element-wise. The math follows the fragment-shader
conventions the scenes are built on: ``mix`` is linear interpolation,
the palette cycles through four colours, and escape time counts how many
iterations of ``z -> z**2 + c`` happen before ``|z|`` exceeds 2.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

ESCAPE_RADIUS = 2.0

WARM_PALETTE: tuple[tuple[float, float, float], ...] = (
    (0.996, 0.976, 0.882),  # #FEF9E1
    (0.898, 0.816, 0.675),  # #E5D0AC
    (0.639, 0.114, 0.114),  # #A31D1D
    (0.427, 0.137, 0.137),  # #6D2323
)

DARK_PALETTE: tuple[tuple[float, float, float], ...] = (
    (0.11, 0.0, 0.0),
    (0.898, 0.816, 0.675),
    (0.639, 0.114, 0.114),
    (0.427, 0.137, 0.137),
)

INNER_DARK = (0.427, 0.137, 0.137)
INNER_LIGHT = (0.996, 0.976, 0.882)


def _unwrap(value: np.ndarray):
    """Return a plain float for 0-d results, the array otherwise."""
    if value.ndim == 0:
        return float(value)
    return value


def mix(a, b, t):
    """Linearly interpolate between ``a`` and ``b`` by ``t``.

    Computed as ``a * (1 - t) + b * t`` so that ``t == 0`` gives ``a`` and
    ``t == 1`` gives ``b`` exactly. Inputs broadcast under numpy rules.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    t = np.asarray(t, dtype=float)
    return _unwrap(a * (1.0 - t) + b * t)


def palette(t, colors: Sequence[Sequence[float]] = WARM_PALETTE):
    """Map values ``t`` onto a cyclic four-colour gradient.

    The range is split into quarters; each quarter blends one colour into
    the next, and the last quarter blends back into the first. Values
    outside ``[0, 1]`` extrapolate the first or last segment. The result has
    shape ``t.shape + (3,)``.
    """
    cols = np.asarray(colors, dtype=float)
    if cols.shape != (4, 3):
        raise ValueError(f"palette needs four RGB colours, got shape {cols.shape}")
    t = np.asarray(t, dtype=float)
    segment = np.clip(np.floor(t * 4.0), 0, 3).astype(int)
    local = (t - 0.25 * segment) * 4.0
    start = cols[segment]
    end = cols[(segment + 1) % 4]
    return np.asarray(mix(start, end, local[..., np.newaxis]))


def escape_time(z, c, max_iter: int):
    """Iterate ``z -> z**2 + c`` and return the normalised iteration count.

    The count stops growing at the first iteration where ``|z| > 2`` and is
    divided by ``max_iter``, so points that never escape give ``1.0``.
    """
    if isinstance(max_iter, bool) or not isinstance(max_iter, (int, np.integer)):
        raise TypeError("max_iter must be an integer")
    if max_iter <= 0:
        raise ValueError("max_iter must be positive")
    z_arr, c_arr = np.broadcast_arrays(
        np.asarray(z, dtype=np.complex128), np.asarray(c, dtype=np.complex128)
    )
    z_arr = z_arr.copy()
    c_arr = np.ascontiguousarray(c_arr)
    counts = np.zeros(z_arr.shape, dtype=np.int64)
    active = np.ones(z_arr.shape, dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(max_iter):
            active &= ~(np.abs(z_arr) > ESCAPE_RADIUS)
            if not active.any():
                break
            z_arr[active] = z_arr[active] ** 2 + c_arr[active]
            counts += active
    return _unwrap(counts / float(max_iter))


def mandelbrot(c, max_iter: int):
    """Escape time of the Mandelbrot iteration started at ``z = c``."""
    return escape_time(c, c, max_iter)


def julia(z, c, max_iter: int):
    """Escape time of the Julia iteration for starting point ``z`` and constant ``c``."""
    return escape_time(z, c, max_iter)


def smooth_ease_in_out(t):
    """Smoothstep easing: ``t * t * (3 - 2 * t)``."""
    t = np.asarray(t, dtype=float)
    return _unwrap(t * t * (3.0 - 2.0 * t))


def pixel_plane(width: int, height: int, scale: float, zoom: float, center):
    """Return the complex-plane coordinate of every pixel centre.

    The result has shape ``(height, width)``; row 0 is the top of the image.
    The image is centred on ``center`` and one unit of the plane spans
    ``height * scale * zoom`` pixels, so the aspect ratio is preserved.
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"{name} must be an integer")
        if value <= 0:
            raise ValueError(f"{name} must be positive")
    if scale == 0 or zoom == 0:
        raise ValueError("scale and zoom must be non-zero")
    center = complex(*center) if isinstance(center, (tuple, list)) else complex(center)
    unit = height * scale * zoom
    xs = np.arange(width, dtype=float) + 0.5
    ys = height - (np.arange(height, dtype=float) + 0.5)
    re = (xs - 0.5 * width) / unit + center.real
    im = (ys - 0.5 * height) / unit + center.imag
    return re[np.newaxis, :] + 1j * im[:, np.newaxis]


def to_rgb8(colors):
    """Convert floating-point colours in ``[0, 1]`` to 8-bit channels.

    Values are clamped to the unit range before scaling, as a framebuffer
    write would do.
    """
    arr = np.asarray(colors, dtype=float)
    return np.rint(np.clip(arr, 0.0, 1.0) * 255.0).astype(np.uint8)