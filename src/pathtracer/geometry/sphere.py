# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    The center may move linearly from center_start at time_start to
    center_end at time_end; a stationary sphere has both centers equal.
    """
    def __init__(self, center: Vector3, radius: float, material,
                 center_end: Vector3 = None, time_start: float = 0.0, time_end: float = 1.0):
        if radius == 0 or not math.isfinite(radius):
            raise ValueError(f"Sphere radius must be finite and non-zero, got {radius}")
        self.center_start = center
        self.center_end = center if center_end is None else center_end
        self.moving = self.center_end != self.center_start
        if self.moving and time_end == time_start:
            raise ValueError("Moving sphere needs a non-empty time interval")
        self.time_start = time_start
        self.time_end = time_end
        self.radius = radius
        self.material = material

    @classmethod
    def moving_sphere(cls, center_start: Vector3, center_end: Vector3,
                      time_start: float, time_end: float, radius: float, material) -> "Sphere":
        return cls(center_start, radius, material, center_end=center_end,
                   time_start=time_start, time_end=time_end)

    def center(self, time: float) -> Vector3:
        if not self.moving:
            return self.center_start
        fraction = (time - self.time_start) / (self.time_end - self.time_start)
        return self.center_start + (self.center_end - self.center_start) * fraction

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center(ray.time)
        oc = ray.origin - center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Near root first, so the entry point wins over the exit point.
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root > t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = get_sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        # The bounding box of a sphere is center +/- radius, swept over time
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        c0 = self.center(time0)
        box0 = AABB(c0 - offset, c0 + offset)
        if not self.moving:
            return box0
        c1 = self.center(time1)
        box1 = AABB(c1 - offset, c1 + offset)
        return AABB.surrounding_box(box0, box1)

    def __repr__(self) -> str:
        if self.moving:
            return f"Sphere({self.center_start} -> {self.center_end}, r={self.radius})"
        return f"Sphere({self.center_start}, r={self.radius})"

def get_sphere_uv(p: Vector3):
    """
    Maps a point on the unit sphere to (u, v) in [0, 1]^2.

    u: angle around the Y axis from X=-1, v: angle from Y=-1 to Y=+1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi
