import math

import pytest

from rasterkit.scene import Camera, Light, Scene
from rasterkit.vector import Vec3


def _camera(look=Vec3(0, 0, -5)):
    return Camera(look, Vec3(1, 2, 3), 45, 1.0, 0.1, 50)


def test_camera_normalises_look_direction():
    camera = _camera()
    assert camera.look_at == Vec3(0, 0, -1)
    assert camera.pos == Vec3(1, 2, 3)
    assert (camera.fov, camera.aspect_ratio, camera.z_near, camera.z_far) == (45, 1.0, 0.1, 50)


def test_camera_up_along_forward_z():
    assert tuple(_camera().up) == pytest.approx((0, 1, 0))


@pytest.mark.parametrize("look", [Vec3(-1, 1, -3), Vec3(2, -1, 0.5), Vec3(0, 3, 0)])
def test_up_is_unit_and_perpendicular(look):
    camera = _camera(look)
    assert all(math.isfinite(c) for c in camera.up)
    assert camera.up.norm() == pytest.approx(1)
    assert camera.up.dot(camera.look_at) == pytest.approx(0, abs=1e-9)


def test_light_defaults_are_independent_zero_vectors():
    first, second = Light(), Light()
    assert first.pos == Vec3() and first.intensity == Vec3()
    first.pos.x = 5
    assert second.pos == Vec3()


def test_scene_collects_models_and_lights_in_order():
    camera = _camera()
    scene = Scene(camera)
    models = [object(), object()]
    lights = [Light(Vec3(2, 2, 2), Vec3(15, 15, 15)), Light(Vec3(-2, 2, -2), Vec3(1, 1, 1))]
    for model in models:
        scene.add_model(model)
    for light in lights:
        scene.add_light(light)
    assert scene.camera is camera
    assert scene.models == models
    assert scene.lights == lights