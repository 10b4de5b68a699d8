[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractalshow"
version = "0.1.0"
description = "Animated Mandelbrot and Julia set zooms rendered with numpy and shown with pygame"
requires-python = ">=3.10"
keywords = ["fractal", "mandelbrot", "julia", "animation", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractalshow = "fractalshow.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["fractalshow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
