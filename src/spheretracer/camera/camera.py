# camera/camera.py
import math

import numpy as np

from spheretracer.core.vector import Vector3
from spheretracer.core.ray import Ray

WORLD_UP = Vector3(0, 1, 0)


class Camera:
    """
    Thin-lens camera placed at look_from and aimed at look_at.

    vertical_fov is in degrees. Objects at focus_dist from the lens are in
    perfect focus; aperture controls how blurry everything else gets.
    The basis and viewport are computed once, the camera never changes after.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vertical_fov: float,
                 aspect_ratio: float, aperture: float = 0.0, focus_dist: float = 1.0,
                 up: Vector3 = WORLD_UP):
        self.look_from = look_from
        self.look_at = look_at
        self.vertical_fov = vertical_fov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist

        theta = math.radians(vertical_fov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis: w points backwards, u right, v up.
        self.w = (look_from - look_at).normalize()
        self.u = up.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = look_from
        self.horizontal = self.u * viewport_width * focus_dist
        self.vertical = self.v * viewport_height * focus_dist
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2 -
                                  self.vertical / 2 -
                                  self.w * focus_dist)
        self.lens_radius = aperture / 2.0

    def get_ray(self, s: float, t: float, rng: np.random.Generator) -> Ray:
        """Generates a ray with depth of field effect."""
        target = self.lower_left_corner + self.horizontal * s + self.vertical * t
        if self.lens_radius <= 0:
            return Ray(self.origin, target - self.origin)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        return Ray(ray_origin, target - ray_origin)


def random_in_unit_disk(rng: np.random.Generator) -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        x, y = rng.uniform(-1.0, 1.0, 2).tolist()
        if x * x + y * y < 1:
            return Vector3(x, y, 0)
