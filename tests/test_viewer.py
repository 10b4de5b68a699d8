import numpy as np
import pytest

from fractalshow.blend import CYCLE_SECONDS, BlendScene
from fractalshow.julia_zoom import JuliaScene
from fractalshow.mandelbrot_zoom import MandelbrotScene
from fractalshow.viewer import build_scene, main, parse_args, run


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


@pytest.mark.parametrize(
    "name, cls",
    [("blend", BlendScene), ("julia", JuliaScene), ("mandelbrot", MandelbrotScene)],
)
def test_build_scene_returns_matching_class(name, cls):
    scene = build_scene(name)
    assert type(scene).__name__ == cls.__name__
    image = scene.render(4, 3, 1.5)
    assert image.shape == (3, 4, 3)
    np.testing.assert_array_equal(image, cls().render(4, 3, 1.5))


def test_build_scene_ignores_case():
    scene = build_scene("Julia")
    assert type(scene).__name__ == "JuliaScene"
    np.testing.assert_array_equal(
        scene.render(4, 3, 2.0), JuliaScene().render(4, 3, 2.0)
    )


def test_build_scene_rejects_unknown_name():
    with pytest.raises(ValueError):
        build_scene("sierpinski")


def test_blend_defaults():
    args = parse_args(["blend"])
    assert args.fullscreen is False
    assert args.duration == CYCLE_SECONDS
    assert args.movable is True
    assert (args.width, args.height) == (1920, 1080)


@pytest.mark.parametrize("name", ["julia", "mandelbrot"])
def test_zoom_scene_defaults(name):
    args = parse_args([name])
    assert args.fullscreen is True
    assert args.duration is None
    assert args.movable is False


def test_overrides_are_kept():
    args = parse_args(["julia", "--windowed", "--width", "640", "--height", "480", "--duration", "3"])
    assert args.fullscreen is False
    assert (args.width, args.height) == (640, 480)
    assert args.duration == 3.0


@pytest.mark.parametrize(
    "argv",
    [["nope"], ["blend", "--width", "0"], ["blend", "--duration", "-1"], []],
)
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_run_rejects_movable_scene_without_camera():
    with pytest.raises(TypeError):
        run(JuliaScene(), 32, 24, False, 0.0, True)


def test_run_rejects_bad_size():
    with pytest.raises(ValueError):
        run(BlendScene(), 0, 24, False, 0.0, False)


@pytest.mark.parametrize("scene", [BlendScene(), JuliaScene(), MandelbrotScene()])
def test_run_draws_final_frame_when_duration_elapsed(headless, scene):
    assert run(scene, 32, 24, False, 0.0, False) == 1


def test_run_movable_blend_scene_keeps_center_without_keys(headless):
    scene = BlendScene()
    before = scene.center
    assert run(scene, 32, 24, False, 0.0, True) == 1
    assert scene.center == before


def test_main_returns_zero(headless):
    assert main(["blend", "--width", "32", "--height", "24", "--duration", "0"]) == 0