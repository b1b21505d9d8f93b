# camera/camera.py
import math
from pathtracer.core.vector import Vector3, Point3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk

class Camera:
    """
    Thin-lens camera. Maps image-plane coordinates (s, t) in [0, 1]^2,
    with t counted upwards, to a primary ray. A non-zero aperture jitters
    the origin on the lens disk while keeping the focus-plane target
    fixed; the shutter is open over [time0, time1].
    """
    def __init__(self, lookfrom: Point3, lookat: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0, time0: float = 0.0, time1: float = 0.0):
        if focus_dist <= 0:
            raise ValueError(f"Focus distance must be positive, got {focus_dist}")
        if time1 < time0:
            raise ValueError(f"Shutter interval is inverted: [{time0}, {time1}]")
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1

        theta = math.radians(vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis: w points backwards, u right, v up.
        self.w = (lookfrom - lookat).normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)
        if self.u.near_zero():
            raise ValueError("vup must not be parallel to the viewing direction")

        self.origin = lookfrom
        self.horizontal = self.u * (viewport_width * focus_dist)
        self.vertical = self.v * (viewport_height * focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """Generates a ray through (s, t), with depth of field and motion blur."""
        target = self.lower_left_corner + self.horizontal * s + self.vertical * t
        time = self.time0 if self.time1 == self.time0 else rng.uniform(self.time0, self.time1)

        if self.lens_radius <= 0:
            return Ray(self.origin, target - self.origin, time)

        # Random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y
        ray_origin = self.origin + offset
        return Ray(ray_origin, target - ray_origin, time)
