# materials/textures.py
import math
from typing import Union
from pathtracer.core.vector import Vector3, Color
from pathtracer.materials.perlin import Perlin

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        """Sample the texture at surface coordinates (u, v) and hit point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float) -> "SolidColor":
        return cls(Color(red, green, blue))

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color

def as_texture(albedo: Union[Color, Texture]) -> Texture:
    """Wraps a plain color in a SolidColor; textures pass through."""
    if isinstance(albedo, Vector3):
        return SolidColor(albedo)
    return albedo

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(10x) sin(10y) sin(10z) picks
    between the two sub-textures, independent of the surface (u, v).
    """
    def __init__(self, even: Union[Color, Texture], odd: Union[Color, Texture]):
        self.even = as_texture(even)
        self.odd = as_texture(odd)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        sines = math.sin(10.0 * p.x) * math.sin(10.0 * p.y) * math.sin(10.0 * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """Grayscale lattice noise backed by a Perlin table."""
    def __init__(self, rng):
        self.noise = Perlin(rng)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        n = self.noise.noise(p)
        return Color(n, n, n)
