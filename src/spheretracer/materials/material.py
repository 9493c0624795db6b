# materials/material.py
from typing import Optional, Tuple

import numpy as np

from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.geometry.hittable import HitRecord


class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    A material instance is shared by every sphere that uses it and is never
    modified after construction.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        All randomness is drawn from rng.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
