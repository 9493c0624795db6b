"""Monte-Carlo path tracer for scenes made of spheres.

Subpackages:
    core: Vector algebra, rays and random sampling helpers
    geometry: Spheres, hit records and the world list
    materials: Lambertian, metal and dielectric scattering
    camera: Thin-lens camera
    renderer: Radiance estimator, sampling loop, tone mapping and image output
"""

__version__ = "0.1.0"
