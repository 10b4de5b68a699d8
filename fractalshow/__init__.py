"""Animated Mandelbrot and Julia set zooms rendered with numpy and shown with pygame."""

__version__ = "0.1.0"