# scene.py
from typing import Tuple

from loguru import logger

from spheretracer.config import CameraSettings
from spheretracer.core.vector import Vector3
from spheretracer.errors import ConfigError
from spheretracer.geometry.sphere import Sphere
from spheretracer.geometry.world import HittableList
from spheretracer.materials.presets import ColorPresets, DielectricPresets, MetalPresets


def create_world() -> HittableList:
    """
    Ground plane with a glass, a matte and a mirror sphere side by side.
    """
    world = HittableList()

    world.add(Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.bronze_mirror()))

    logger.debug("Created demo world with {} spheres", len(world))
    return world


def create_ground_world() -> HittableList:
    """
    A single huge diffuse sphere acting as the ground, nothing else.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)))
    return world


SCENES = {
    "demo": (create_world, CameraSettings()),
    "ground": (create_ground_world, CameraSettings(
        look_from=(0.0, 3.0, 3.0),
        look_at=(0.0, 0.0, 0.0),
        vertical_fov=90.0,
        aperture=0.0,
        focus_dist=1.0,
    )),
}


def build_scene(name: str) -> Tuple[HittableList, CameraSettings]:
    """
    Look up a scene by name and build its world.

    Returns:
        The world and the camera settings that frame it.

    Raises:
        ConfigError: If there is no scene with that name.
    """
    if name not in SCENES:
        raise ConfigError(f"unknown scene {name!r}, expected one of {', '.join(SCENES)}")
    factory, camera_settings = SCENES[name]
    return factory(), camera_settings
