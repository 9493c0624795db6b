# materials/dielectric.py
import math
from typing import Tuple

import numpy as np

from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.core.utils import reflect, refract
from spheretracer.errors import SceneError
from spheretracer.geometry.hittable import HitRecord
from spheretracer.materials.material import Material

# Glass doesn't absorb light
_NO_ATTENUATION = Vector3(1.0, 1.0, 1.0)


class Dielectric(Material):
    def __init__(self, ref_idx: float):
        if not ref_idx > 0:
            raise SceneError(f"Refractive index must be positive, got {ref_idx}")
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Tuple[Ray, Vector3]:
        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()

        # Calculate cosine using the angle between incoming ray and normal
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return Ray(rec.p, direction), _NO_ATTENUATION

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"


def reflectance(cos_theta: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
