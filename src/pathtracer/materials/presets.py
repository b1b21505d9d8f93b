# materials/presets.py
from pathtracer.core.vector import Color
from pathtracer.materials.metal import Metal
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.textures import CheckerTexture, NoiseTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class ColorPresets:
    """Common color presets for materials."""

    BLUE = Color(0.1, 0.2, 0.5)
    GREEN = Color(0.2, 0.3, 0.1)
    BROWN = Color(0.4, 0.2, 0.1)

    WHITE = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)
    GROUND = Color(0.8, 0.8, 0.0)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(even: Color = None, odd: Color = None) -> CheckerTexture:
        """Checkerboard with default or custom colors."""
        if even is None:
            even = ColorPresets.WHITE
        if odd is None:
            odd = ColorPresets.GREEN
        return CheckerTexture(even, odd)

    @staticmethod
    def noise(rng) -> NoiseTexture:
        return NoiseTexture(rng)
