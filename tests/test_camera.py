import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3

VUP = Vector3(0, 1, 0)


@pytest.fixture
def pinhole():
    return Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), VUP, 90.0, 1.0)


def _approx(v, expected):
    assert v.x == pytest.approx(expected[0], abs=1e-9)
    assert v.y == pytest.approx(expected[1], abs=1e-9)
    assert v.z == pytest.approx(expected[2], abs=1e-9)


def test_center_ray_looks_down_negative_z(pinhole, rng):
    ray = pinhole.get_ray(0.5, 0.5, rng)
    assert ray.origin == Vector3(0, 0, 0)
    _approx(ray.direction, (0, 0, -1))


def test_corner_rays_span_the_field_of_view(pinhole, rng):
    _approx(pinhole.get_ray(0.0, 0.0, rng).direction, (-1, -1, -1))
    _approx(pinhole.get_ray(1.0, 1.0, rng).direction, (1, 1, -1))


def test_aspect_ratio_widens_viewport(rng):
    cam = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), VUP, 90.0, 2.0)
    _approx(cam.get_ray(1.0, 0.5, rng).direction, (2, 0, -1))


def test_aperture_jitters_origin_but_keeps_focus_point(rng):
    cam = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), VUP, 90.0, 1.0, aperture=0.5, focus_dist=3.0)
    sharp = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), VUP, 90.0, 1.0, focus_dist=3.0)
    target = sharp.get_ray(0.3, 0.6, rng).at(1.0)
    moved = 0
    for _ in range(50):
        ray = cam.get_ray(0.3, 0.6, rng)
        assert ray.origin.z == 0.0
        assert ray.origin.length() < 0.25
        focus = ray.at(1.0)
        _approx(focus, (target.x, target.y, target.z))
        moved += ray.origin.length() > 0
    assert moved > 0


def test_ray_time_lies_in_shutter_interval(rng):
    cam = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), VUP, 40.0, 1.5, time0=0.25, time1=0.75)
    times = [cam.get_ray(0.5, 0.5, rng).time for _ in range(100)]
    assert all(0.25 <= t <= 0.75 for t in times)
    assert len(set(times)) > 1


def test_instant_shutter(pinhole, rng):
    assert pinhole.get_ray(0.2, 0.2, rng).time == 0.0


def test_basis_from_lookat():
    cam = Camera(Vector3(3, 0, 0), Vector3(0, 0, 0), VUP, 60.0, 1.0)
    _approx(cam.w, (1, 0, 0))
    _approx(cam.u, (0, 0, -1))
    _approx(cam.v, (0, 1, 0))


def test_invalid_configurations():
    with pytest.raises(ValueError):
        Camera(Vector3(0, 0, 0), Vector3(0, 1, 0), VUP, 90.0, 1.0)
    with pytest.raises(ValueError):
        Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), VUP, 90.0, 1.0, focus_dist=0.0)
    with pytest.raises(ValueError):
        Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), VUP, 90.0, 1.0, time0=1.0, time1=0.0)
