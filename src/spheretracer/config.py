# config.py
from dataclasses import dataclass, field, replace
from typing import Tuple

from spheretracer.camera.camera import Camera
from spheretracer.core.vector import Vector3
from spheretracer.errors import ConfigError

SHADING_MODES = ("material", "normals")

# Samples, bounce limit and resolution scale per quality level.
QUALITY_LEVELS = {
    "preview": {"samples": 1, "bounces": 4, "scale": 0.25},
    "default": {"samples": 10, "bounces": 50, "scale": 1.0},
    "final": {"samples": 100, "bounces": 50, "scale": 1.0},
}


@dataclass(frozen=True)
class RenderSettings:
    """
    Everything the renderer needs besides the scene and the camera.

    height is derived from width and aspect_ratio by truncation. seed fixes
    every random draw of a render; workers > 1 renders rows on a process pool
    and gives the same image as a single worker.
    """
    width: int = 1200
    aspect_ratio: float = 1.5
    samples_per_pixel: int = 10
    max_depth: int = 50
    seed: int = 0
    workers: int = 1
    shading: str = "material"

    def __post_init__(self):
        if self.width < 1:
            raise ConfigError(f"width must be at least 1, got {self.width}")
        if not self.aspect_ratio > 0:
            raise ConfigError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.height < 1:
            raise ConfigError(
                f"width {self.width} and aspect_ratio {self.aspect_ratio} give an empty image")
        if self.samples_per_pixel < 1:
            raise ConfigError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ConfigError(f"max_depth must not be negative, got {self.max_depth}")
        if self.workers < 1:
            raise ConfigError(f"workers must be at least 1, got {self.workers}")
        if self.seed < 0:
            raise ConfigError(f"seed must not be negative, got {self.seed}")
        if self.shading not in SHADING_MODES:
            raise ConfigError(
                f"unknown shading {self.shading!r}, expected one of {', '.join(SHADING_MODES)}")

    @property
    def height(self) -> int:
        return int(self.width / self.aspect_ratio)

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "RenderSettings":
        """
        Build settings from a named quality level. The level's scale applies
        to the default width unless width is overridden.
        """
        if name not in QUALITY_LEVELS:
            raise ConfigError(
                f"unknown preset {name!r}, expected one of {', '.join(QUALITY_LEVELS)}")
        quality = QUALITY_LEVELS[name]
        base = cls()
        values = {
            "width": max(1, int(base.width * quality["scale"])),
            "samples_per_pixel": quality["samples"],
            "max_depth": quality["bounces"],
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    def with_overrides(self, **overrides) -> "RenderSettings":
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


@dataclass(frozen=True)
class CameraSettings:
    look_from: Tuple[float, float, float] = (13.0, 2.0, 3.0)
    look_at: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    vertical_fov: float = 20.0
    aperture: float = 0.1
    focus_dist: float = 10.0
    up: Tuple[float, float, float] = field(default=(0.0, 1.0, 0.0))

    def build(self, aspect_ratio: float) -> Camera:
        return Camera(
            look_from=Vector3(*self.look_from),
            look_at=Vector3(*self.look_at),
            vertical_fov=self.vertical_fov,
            aspect_ratio=aspect_ratio,
            aperture=self.aperture,
            focus_dist=self.focus_dist,
            up=Vector3(*self.up),
        )
