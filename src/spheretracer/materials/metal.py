# materials/metal.py
from typing import Optional, Tuple

import numpy as np

from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.core.utils import reflect, random_in_unit_sphere
from spheretracer.geometry.hittable import HitRecord
from spheretracer.materials.material import Material


class Metal(Material):
    """
    Metal material with reflective properties. fuzz perturbs the mirror
    direction and is clamped to [0, 1].
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo

        return None  # Absorb the ray if it does not scatter forward

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
