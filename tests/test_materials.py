import math
import random

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect
from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import CheckerTexture

WHITE = Vector3(1.0, 1.0, 1.0)


def test_dielectric_attenuation_is_always_white(make_record):
    rng = random.Random(42)
    glass = Dielectric(1.5)
    for _ in range(500):
        direction = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 0), rng.uniform(-1, 1))
        if direction.near_zero():
            continue
        rec = make_record(front_face=rng.random() < 0.5)
        scattered, attenuation = glass.scatter(Ray(Vector3(0, 1, 0), direction), rec, rng)
        assert attenuation == WHITE
        assert scattered.origin is rec.p


def test_dielectric_total_internal_reflection(make_record, scripted_rng):
    glass = Dielectric(1.5)
    # Exiting the glass at a grazing angle: ratio 1.5 * sin(theta) > 1.
    direction = Vector3(1.0, -0.2, 0.0)
    rec = make_record(front_face=False)
    scattered, _ = glass.scatter(Ray(Vector3(-1, 0.2, 0), direction), rec, scripted_rng(randoms=[0.999]))
    expected = reflect(direction.normalize(), rec.normal)
    assert scattered.direction.x == pytest.approx(expected.x)
    assert scattered.direction.y == pytest.approx(expected.y)
    assert scattered.direction.y > 0


def test_dielectric_normal_incidence_refracts_straight(make_record, scripted_rng):
    glass = Dielectric(1.5)
    rec = make_record(front_face=True)
    scattered, _ = glass.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), rec, scripted_rng(randoms=[0.5]))
    assert scattered.direction.x == pytest.approx(0.0)
    assert scattered.direction.y == pytest.approx(-1.0)


def test_dielectric_oblique_refraction_obeys_snell(make_record, scripted_rng):
    glass = Dielectric(1.5)
    rec = make_record(front_face=True)
    # 45 degrees in from air; reflectance is about 0.05 so 0.999 refracts.
    direction = Vector3(1.0, -1.0, 0.0)
    scattered, _ = glass.scatter(Ray(Vector3(-1, 1, 0), direction), rec, scripted_rng(randoms=[0.999]))
    out = scattered.direction.normalize()
    assert out.y < 0
    assert out.x == pytest.approx(math.sin(math.pi / 4) / 1.5)
    assert out.z == pytest.approx(0.0)


def test_dielectric_schlick_reflection_wins_low_draws(make_record, scripted_rng):
    glass = Dielectric(1.5)
    rec = make_record(front_face=True)
    # Reflectance at normal incidence is 0.04.
    scattered, _ = glass.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), rec, scripted_rng(randoms=[0.01]))
    assert scattered.direction.y == pytest.approx(1.0)


def test_dielectric_keeps_ray_time(make_record, rng):
    scattered, _ = Dielectric(1.5).scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0), 0.7),
                                           make_record(), rng)
    assert scattered.time == 0.7


def test_lambertian_attenuation_samples_texture(make_record, rng):
    texture = CheckerTexture(Vector3(1, 0, 0), Vector3(0, 0, 1))
    mat = Lambertian(texture)
    rec = make_record(p=Vector3(-0.1, 0.1, 0.1))
    scattered, attenuation = mat.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0), 0.25), rec, rng)
    assert attenuation == Vector3(0, 0, 1)
    assert scattered.origin is rec.p
    assert scattered.time == 0.25
    assert scattered.direction.dot(rec.normal) >= 0


def test_lambertian_accepts_plain_color(make_record, rng):
    _, attenuation = Lambertian(Vector3(0.3, 0.4, 0.5)).scatter(
        Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), make_record(), rng)
    assert attenuation == Vector3(0.3, 0.4, 0.5)


def test_lambertian_degenerate_direction_falls_back_to_normal(make_record, scripted_rng):
    rec = make_record()
    # The unit sphere sample is exactly -normal, so normal + sample is zero.
    rng = scripted_rng(uniforms=[0.0, -0.5, 0.0])
    scattered, _ = Lambertian(Vector3(0.5, 0.5, 0.5)).scatter(
        Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), rec, rng)
    assert scattered.direction == rec.normal


def test_metal_fuzz_is_clamped():
    assert Metal(Vector3(1, 1, 1), 5.0).fuzz == 1.0
    assert Metal(Vector3(1, 1, 1), -1.0).fuzz == 0.0
    assert Metal(Vector3(1, 1, 1), 0.3).fuzz == 0.3


def test_metal_mirror_reflection(make_record, scripted_rng):
    albedo = Vector3(0.8, 0.6, 0.2)
    rng = scripted_rng(uniforms=[0.0, 0.0, 0.0])
    scattered, attenuation = Metal(albedo, 0.0).scatter(
        Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0)), make_record(), rng)
    assert attenuation is albedo
    assert scattered.direction.x == pytest.approx(1 / math.sqrt(2))
    assert scattered.direction.y == pytest.approx(1 / math.sqrt(2))


def test_metal_absorbs_when_fuzz_points_below_surface(make_record, scripted_rng):
    rng = scripted_rng(uniforms=[0.0, -0.9, 0.0])
    result = Metal(Vector3(1, 1, 1), 1.0).scatter(
        Ray(Vector3(-1, 0.01, 0), Vector3(1, -0.01, 0)), make_record(), rng)
    assert result is None


def test_dielectric_rejects_bad_index():
    with pytest.raises(ValueError):
        Dielectric(0.0)
