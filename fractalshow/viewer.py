"""Window loop that animates one of the fractal scenes with pygame."""

from __future__ import annotations

import argparse
import time
from typing import Callable, Sequence

import numpy as np
import pygame

from .blend import CYCLE_SECONDS, BlendScene
from .julia_zoom import JuliaScene
from .mandelbrot_zoom import MandelbrotScene

DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080

# Scenes are rendered at a fraction of the window size and scaled up,
# which keeps the per-pixel iteration affordable on the CPU.
_RENDER_DIVISOR = 4

SCENES: dict[str, Callable[[], object]] = {
    "blend": BlendScene,
    "julia": JuliaScene,
    "mandelbrot": MandelbrotScene,
}

_MOVEMENT_KEYS = (
    (pygame.K_LEFT, -1.0, 0.0),
    (pygame.K_RIGHT, 1.0, 0.0),
    (pygame.K_UP, 0.0, 1.0),
    (pygame.K_DOWN, 0.0, -1.0),
)


def build_scene(name: str):
    """Create the scene registered under ``name``."""
    try:
        factory = SCENES[name.lower()]
    except KeyError:
        known = ", ".join(sorted(SCENES))
        raise ValueError(f"unknown scene {name!r}; choose one of: {known}") from None
    return factory()


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line options, filling in the chosen scene's defaults.

    The blend scene opens a window, closes itself after one zoom cycle and
    lets the arrow keys move the camera. The zoom scenes open full screen
    and run until closed.
    """
    parser = argparse.ArgumentParser(
        prog="fractalshow", description="Animate a fractal zoom."
    )
    parser.add_argument("scene", choices=sorted(SCENES), help="scene to show")
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_HEIGHT)
    parser.add_argument(
        "--fullscreen",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="use the whole screen (default depends on the scene)",
    )
    parser.add_argument(
        "--duration",
        type=_non_negative_float,
        default=None,
        help="seconds before the window closes by itself",
    )
    args = parser.parse_args(argv)
    is_blend = args.scene == "blend"
    if args.fullscreen is None:
        args.fullscreen = not is_blend
    if args.duration is None and is_blend:
        args.duration = CYCLE_SECONDS
    args.movable = is_blend
    return args


def _frame_surface(pixels: np.ndarray) -> pygame.Surface:
    return pygame.surfarray.make_surface(np.ascontiguousarray(pixels.swapaxes(0, 1)))


def run(scene, width: int, height: int, fullscreen: bool, duration, movable: bool) -> int:
    """Show ``scene`` until the window is closed or ``duration`` elapses.

    Escape or closing the window ends the loop. With ``movable`` the arrow
    keys move the scene's camera. Returns the number of frames drawn.
    """
    if movable and not callable(getattr(scene, "move", None)):
        raise TypeError(f"{type(scene).__name__} has no movable camera")
    if width <= 0 or height <= 0:
        raise ValueError("window size must be positive")

    pygame.init()
    try:
        flags = pygame.FULLSCREEN if fullscreen else 0
        screen = pygame.display.set_mode((width, height), flags)
        pygame.display.set_caption(getattr(scene, "title", "Fractal"))
        start = time.monotonic()
        frames = 0
        running = True
        while running:
            elapsed = time.monotonic() - start
            if duration is not None and elapsed > duration:
                running = False

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            if movable:
                pressed = pygame.key.get_pressed()
                for key, dx, dy in _MOVEMENT_KEYS:
                    if pressed[key]:
                        scene.move(dx, dy)

            view_w, view_h = screen.get_size()
            render_w = max(1, view_w // _RENDER_DIVISOR)
            render_h = max(1, view_h // _RENDER_DIVISOR)
            pixels = scene.render(render_w, render_h, time.monotonic() - start)
            frame = pygame.transform.scale(_frame_surface(pixels), (view_w, view_h))
            screen.blit(frame, (0, 0))
            pygame.display.flip()
            frames += 1
        return frames
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    args = parse_args(argv)
    scene = build_scene(args.scene)
    run(scene, args.width, args.height, args.fullscreen, args.duration, args.movable)
    return 0