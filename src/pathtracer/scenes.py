# scenes.py
"""
Scene builders. Each takes the image aspect ratio and a random generator
and returns the world as a HittableList together with its camera.
"""
from typing import Callable, Dict, Tuple

from pathtracer.core.vector import Vector3, Point3, Color
from pathtracer.camera.camera import Camera
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import ColorPresets, DielectricPresets, MetalPresets, TexturePresets

VUP = Vector3(0, 1, 0)


def single_sphere(aspect_ratio: float, rng) -> Tuple[HittableList, Camera]:
    world = HittableList()
    world.add(Sphere(Point3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.GRAY)))
    camera = Camera(Point3(0, 0, 0), Point3(0, 0, -1), VUP, 90.0, aspect_ratio)
    return world, camera


def materials(aspect_ratio: float, rng) -> Tuple[HittableList, Camera]:
    world = HittableList()
    world.add(Sphere(Point3(0, -100.5, -1), 100, Lambertian(ColorPresets.GROUND)))
    world.add(Sphere(Point3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.BLUE)))
    world.add(Sphere(Point3(-1, 0, -1), 0.5, DielectricPresets.glass()))
    world.add(Sphere(Point3(1, 0, -1), 0.5, MetalPresets.gold()))
    lookfrom = Point3(-2, 2, 1)
    lookat = Point3(0, 0, -1)
    camera = Camera(lookfrom, lookat, VUP, 30.0, aspect_ratio,
                    focus_dist=(lookfrom - lookat).length())
    return world, camera


def random_spheres(aspect_ratio: float, rng) -> Tuple[HittableList, Camera]:
    world = HittableList()
    checker = TexturePresets.checkerboard()
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(checker)))

    glass = DielectricPresets.glass()
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse, bouncing upwards during the exposure
                albedo = _random_color(rng) * _random_color(rng)
                center_end = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(Sphere.moving_sphere(center, center_end, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = _random_color(rng, 0.5, 1.0)
                world.add(Sphere(center, 0.2, Metal(albedo, rng.uniform(0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, glass))

    world.add(Sphere(Point3(0, 1, 0), 1.0, glass))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(ColorPresets.BROWN)))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalPresets.mirror()))

    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), VUP, 20.0, aspect_ratio,
                    aperture=0.1, focus_dist=10.0, time0=0.0, time1=1.0)
    return world, camera


def two_spheres(aspect_ratio: float, rng) -> Tuple[HittableList, Camera]:
    world = HittableList()
    checker = TexturePresets.checkerboard()
    world.add(Sphere(Point3(0, -10, 0), 10, Lambertian(checker)))
    world.add(Sphere(Point3(0, 10, 0), 10, Lambertian(checker)))
    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), VUP, 20.0, aspect_ratio, focus_dist=10.0)
    return world, camera


def two_perlin_spheres(aspect_ratio: float, rng) -> Tuple[HittableList, Camera]:
    world = HittableList()
    noise = Lambertian(TexturePresets.noise(rng))
    world.add(Sphere(Point3(0, -1000, 0), 1000, noise))
    world.add(Sphere(Point3(0, 2, 0), 2, noise))
    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), VUP, 20.0, aspect_ratio, focus_dist=10.0)
    return world, camera


def _random_color(rng, low: float = 0.0, high: float = 1.0) -> Color:
    return Color(rng.uniform(low, high), rng.uniform(low, high), rng.uniform(low, high))


SCENES: Dict[str, Callable] = {
    "single_sphere": single_sphere,
    "materials": materials,
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
}
