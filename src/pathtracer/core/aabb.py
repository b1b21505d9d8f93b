# core/aabb.py
from pathtracer.core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box. Immutable once built.
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        for axis in range(3):
            if minimum[axis] > maximum[axis]:
                raise ValueError(f"AABB minimum {minimum} exceeds maximum {maximum} on axis {axis}")
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, clip the running [t_min, t_max] interval.
        # A zero direction component gives an infinite reciprocal; the NaN from
        # 0 * inf fails both comparisons and leaves the interval untouched.
        inv_direction = ray.inv_direction
        for axis in range(3):
            inv_d = inv_direction[axis]
            origin = ray.origin[axis]
            t0 = (self.minimum[axis] - origin) * inv_d
            t1 = (self.maximum[axis] - origin) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(self.minimum[a] <= other.minimum[a] and other.maximum[a] <= self.maximum[a]
                   for a in range(3))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
