# renderer/integrator.py
import math

import numpy as np

from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.geometry.world import HittableList

# Lower bound for hit tests so a bounce doesn't re-hit its own surface.
HIT_EPSILON = 0.001

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def sky_color(ray: Ray) -> Vector3:
    """
    Background gradient: white looking straight down, sky blue straight up.
    This is the only light in the scene.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world: HittableList, depth: int,
              rng: np.random.Generator) -> Vector3:
    """
    Estimate the radiance carried back along ray.

    Each bounce multiplies a running attenuation with the material's
    attenuation until the ray escapes to the sky, gets absorbed or runs
    out of depth. A depth of 0 still allows one hit test; any negative
    depth is black.
    """
    attenuation = WHITE
    while depth >= 0:
        rec = world.hit(ray, HIT_EPSILON, math.inf)
        if rec is None:
            return attenuation * sky_color(ray)

        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return BLACK

        ray, albedo = scattered
        attenuation = attenuation * albedo
        depth -= 1

    return BLACK


def normal_color(ray: Ray, world: HittableList, depth: int = 0,
                 rng: np.random.Generator = None) -> Vector3:
    """
    Debug shading: maps the surface normal at the first hit to a color,
    ignoring materials. depth and rng are accepted for a uniform signature.
    """
    rec = world.hit(ray, HIT_EPSILON, math.inf)
    if rec is None:
        return sky_color(ray)
    return (rec.normal + 1.0) * 0.5


SHADERS = {
    "material": ray_color,
    "normals": normal_color,
}
