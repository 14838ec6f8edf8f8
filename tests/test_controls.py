import math

import numpy as np
import pytest

from tesseract.controls import OrbitControls
from tesseract.headless import ImageSurface
from tesseract.host import PointerEvent
from tesseract.scene import PerspectiveCamera


@pytest.fixture
def surface():
    surface = ImageSurface()
    surface.set_size(800, 600)
    return surface


@pytest.fixture
def camera():
    camera = PerspectiveCamera(75, 800 / 600, 0.1, 1000)
    camera.position = np.array([0.0, 0.0, 3.0])
    return camera


@pytest.fixture
def controls(camera, surface):
    controls = OrbitControls(camera, surface)
    controls.enable_damping = True
    controls.damping_factor = 0.05
    controls.enable_pan = False
    controls.min_distance = 2
    controls.max_distance = 10
    controls.max_polar_angle = math.pi / 2
    return controls


def settle(controls, frames=600):
    for _ in range(frames):
        controls.update()


def test_construction_keeps_camera_in_place(controls, camera):
    np.testing.assert_allclose(camera.position, [0, 0, 3], atol=1e-9)
    assert controls.get_distance() == pytest.approx(3)


def test_update_without_input_does_not_move(controls):
    assert controls.update() is False


def test_damped_drag_eases_to_full_rotation(controls, surface):
    surface.dispatch_pointer(PointerEvent("rotate", 100, 0))

    controls.update()
    first_step = controls.get_azimuthal_angle()
    expected = -2 * math.pi * 100 / 600
    assert first_step == pytest.approx(expected * 0.05)

    settle(controls)
    assert controls.get_azimuthal_angle() == pytest.approx(expected, abs=1e-6)
    assert controls.get_distance() == pytest.approx(3)


def test_polar_angle_never_goes_below_horizon(controls, camera, surface):
    surface.dispatch_pointer(PointerEvent("rotate", 0, -2000))
    for _ in range(600):
        controls.update()
        assert camera.position[1] >= -1e-9
    assert controls.get_polar_angle() <= math.pi / 2 + 1e-9


def test_polar_angle_stops_at_the_pole(controls, surface):
    surface.dispatch_pointer(PointerEvent("rotate", 0, 2000))
    settle(controls)
    assert 0 < controls.get_polar_angle() < 1e-3


def test_zoom_clamped_to_distance_range(controls, surface):
    for _ in range(100):
        surface.dispatch_pointer(PointerEvent("dolly", 0, -1))
    controls.update()
    assert controls.get_distance() == pytest.approx(2)

    for _ in range(100):
        surface.dispatch_pointer(PointerEvent("dolly", 0, 1))
    controls.update()
    assert controls.get_distance() == pytest.approx(10)


def test_single_wheel_notch_dollies_by_five_percent(controls, surface):
    surface.dispatch_pointer(PointerEvent("dolly", 0, -1))
    controls.update()
    assert controls.get_distance() == pytest.approx(3 * 0.95)


def test_pan_is_disabled(controls, surface):
    surface.dispatch_pointer(PointerEvent("pan", 50, 50))
    settle(controls, 10)
    np.testing.assert_allclose(controls.target, [0, 0, 0])


def test_pan_moves_target_when_enabled(controls, surface):
    controls.enable_pan = True
    controls.enable_damping = False
    surface.dispatch_pointer(PointerEvent("pan", 50, 0))
    controls.update()
    assert controls.target[0] < 0
    assert controls.target[1] == pytest.approx(0)


def test_dispose_stops_listening(controls, surface):
    controls.dispose()
    surface.dispatch_pointer(PointerEvent("rotate", 100, 100))
    assert controls.update() is False
