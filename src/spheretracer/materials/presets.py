# materials/presets.py
from spheretracer.core.vector import Vector3
from spheretracer.materials.metal import Metal
from spheretracer.materials.lambertian import Lambertian
from spheretracer.materials.dielectric import Dielectric


class MetalPresets:
    """Metals used by the built-in scenes."""

    @staticmethod
    def bronze_mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)


class DielectricPresets:

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)


class ColorPresets:
    """Albedos for the matte spheres of the built-in scenes."""

    BROWN = Vector3(0.4, 0.2, 0.1)
    GRAY = Vector3(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)
