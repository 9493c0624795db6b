from spheretracer.geometry.hittable import HitRecord, Hittable
from spheretracer.geometry.sphere import Sphere
from spheretracer.geometry.world import HittableList

World = HittableList

__all__ = ["HitRecord", "Hittable", "HittableList", "Sphere", "World"]
