# fractalshow

Animated fractal zooms drawn in a window: a Mandelbrot dive, a Julia set
dive, and a scene that blends the Mandelbrot and Julia sets while the
camera zooms in and out. Every frame is computed with numpy and shown
with pygame, using warm four-colour palettes.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
fractalshow mandelbrot
fractalshow julia
fractalshow blend
```

Press Escape or close the window to quit.

Options:

- `--width N`, `--height N`: window size in pixels (default 1920 × 1080).
- `--fullscreen` / `--no-fullscreen`: the `mandelbrot` and `julia` scenes
  open full screen by default, `blend` opens in a window.
- `--duration SECONDS`: close the window by itself after this many
  seconds. `blend` defaults to one full zoom cycle (125 seconds); the other
  scenes run until closed.

In the `blend` scene the arrow keys pan the camera.

Frames are computed at a quarter of the window size in each direction and
scaled up to fill the window.

## Scenes

- **mandelbrot** (`fractalshow.mandelbrot_zoom.MandelbrotScene`): zooms
  exponentially towards a point near (-0.745428, 0.131825), drifting
  slightly around it. Points inside the set show layered rings made from
  the set at several scales.
- **julia** (`fractalshow.julia_zoom.JuliaScene`): zooms exponentially into
  the Julia set for c ≈ -0.8 + 0.156i, centred on the origin. The constant
  wobbles slowly over time, and the inside is ringed the same way.
- **blend** (`fractalshow.blend.BlendScene`): cross-fades the Mandelbrot and
  Julia escape values with a slow sine wave. The zoom eases in from 0.5 to
  10 over 80 seconds, then back out over 45 seconds, repeating every 125
  seconds. `BlendScene.move(dx, dy)` shifts the centre by steps of
  `move_speed`.

## Using it as a library

Each scene renders a frame to an RGB array:

```python
from fractalshow.mandelbrot_zoom import MandelbrotScene

scene = MandelbrotScene()
frame = scene.render(320, 180, 5.0)   # uint8 array, shape (180, 320, 3)
```

`fractalshow.shading` has the building blocks: `escape_time`,
`mandelbrot`, `julia`, `palette`, `mix`, `smooth_ease_in_out`,
`pixel_plane` and `to_rgb8`. They work element-wise on scalars and numpy
arrays.

`fractalshow.viewer` offers `build_scene(name)`, `parse_args(argv)`,
`run(scene, width, height, fullscreen, duration, movable)` and
`main(argv=None)`.

## What it does not do

All rendering happens on the CPU with numpy, so large windows and deep
iteration counts are slow; that is why frames are drawn at reduced size.
There is no way to save frames or animations to image or video files;
frames are only shown on screen, or returned as arrays by `render`.