# materials/perlin.py
import math
from typing import List
from pathtracer.core.vector import Vector3

POINT_COUNT = 256

class Perlin:
    """
    Lattice noise table: 256 random scalars and three independent
    permutations of [0, 256), one per axis. Immutable after construction.
    """
    def __init__(self, rng):
        self.ranfloat = [rng.random() for _ in range(POINT_COUNT)]
        self.perm_x = perlin_generate_perm(rng)
        self.perm_y = perlin_generate_perm(rng)
        self.perm_z = perlin_generate_perm(rng)

    def noise(self, p: Vector3) -> float:
        """Value in [0, 1) for the lattice cell containing 4p."""
        i = math.floor(4 * p.x) & 255
        j = math.floor(4 * p.y) & 255
        k = math.floor(4 * p.z) & 255
        return self.ranfloat[self.perm_x[i] ^ self.perm_y[j] ^ self.perm_z[k]]

def perlin_generate_perm(rng) -> List[int]:
    p = list(range(POINT_COUNT))
    permute(p, rng)
    return p

def permute(p: List[int], rng):
    # Fisher-Yates, walking backwards; target drawn from [0, i] inclusive.
    for i in range(len(p) - 1, 0, -1):
        target = rng.randint(0, i)
        p[i], p[target] = p[target], p[i]
