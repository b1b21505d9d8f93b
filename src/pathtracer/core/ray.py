# core/ray.py
import numpy as np
from pathtracer.core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and the
    moment in the exposure interval it was cast at.
    """
    __slots__ = ("origin", "direction", "time", "_inv_direction")

    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time
        self._inv_direction = None

    @property
    def inv_direction(self) -> tuple:
        """
        Componentwise reciprocal of the direction, computed on first use by
        the slab test. A zero component maps to +/-inf instead of raising.
        """
        if self._inv_direction is None:
            with np.errstate(divide="ignore"):
                inv = np.reciprocal(np.array([self.direction.x, self.direction.y, self.direction.z],
                                             dtype=np.float64))
            self._inv_direction = tuple(inv.tolist())
        return self._inv_direction

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin}, {self.direction}, time={self.time})"
