# geometry/bvh.py
from typing import List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

class BVHNode(Hittable):
    """
    Bounding volume hierarchy node over a flat list of hittables.

    Built once, top-down: a random axis is chosen per node, the span is
    sorted by box minimum on that axis and split at the middle index.
    A span of one element stores it as both children. The tree is
    read-only after construction, so it can be shared between workers.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float, time1: float, rng):
        object_span = end - start
        if object_span <= 0:
            raise ValueError("Cannot build a BVH node over an empty range of objects")

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            self.left = objects[start]
            self.right = objects[start + 1]
        else:
            axis = rng.randint(0, 2)
            objects[start:end] = sorted(objects[start:end],
                                        key=lambda obj: _box_of(obj, time0, time1).minimum[axis])
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)

        box_left = _box_of(self.left, time0, time1)
        box_right = _box_of(self.right, time0, time1)
        self.box = AABB.surrounding_box(box_left, box_right)

    @classmethod
    def from_list(cls, world, time0: float, time1: float, rng) -> "BVHNode":
        """
        Builds a hierarchy over a HittableList (or any iterable of hittables).
        The caller's list is copied, never reordered.
        """
        objects = list(world)
        return cls(objects, 0, len(objects), time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        # The right child may only improve on the left hit.
        if hit_left is not None:
            t_max = hit_left.t
        hit_right = self.right.hit(ray, t_min, t_max)

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return self.box

    def depth(self) -> int:
        """Height of the tree rooted here, counting this node."""
        return 1 + max(child.depth() if isinstance(child, BVHNode) else 0
                       for child in (self.left, self.right))

def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise ValueError(f"No bounding box for {obj!r} in BVHNode constructor")
    return box
