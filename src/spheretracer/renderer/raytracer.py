# renderer/raytracer.py
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Optional, Tuple

import numpy as np
from loguru import logger

from spheretracer.camera.camera import Camera
from spheretracer.config import RenderSettings
from spheretracer.core.vector import Vector3
from spheretracer.geometry.world import HittableList
from .integrator import SHADERS
from .tone_mapping import gamma_quantize

# Per-process scene handed over once by the pool initializer.
_worker_scene: Optional[Tuple[Camera, HittableList, RenderSettings]] = None


def row_rng(seed: int, row: int) -> np.random.Generator:
    """
    Independent random stream for one image row. Rows never share a
    generator, so the result doesn't depend on which worker renders them.
    """
    return np.random.default_rng([seed, row])


def render_row(camera: Camera, world: HittableList, settings: RenderSettings,
               row: int) -> np.ndarray:
    """
    Sum samples_per_pixel radiance estimates for every pixel of one row.

    row is the world-space scanline, 0 being the bottom of the image.
    Returns a (width, 3) float array of sums, not averages.
    """
    width, height = settings.width, settings.height
    samples = settings.samples_per_pixel
    max_depth = settings.max_depth
    shade = SHADERS[settings.shading]
    rng = row_rng(settings.seed, row)

    # A 1-pixel wide or tall image would otherwise divide by zero.
    u_scale = max(width - 1, 1)
    v_scale = max(height - 1, 1)

    sums = np.zeros((width, 3), dtype=np.float64)
    for i in range(width):
        pixel_color = Vector3.zero()
        for _ in range(samples):
            u = (i + rng.random()) / u_scale
            v = (row + rng.random()) / v_scale
            ray = camera.get_ray(u, v, rng)
            pixel_color = pixel_color + shade(ray, world, max_depth, rng)
        sums[i] = pixel_color.to_tuple()
    return sums


def _init_worker(camera: Camera, world: HittableList, settings: RenderSettings):
    global _worker_scene
    _worker_scene = (camera, world, settings)


def _render_row_in_worker(row: int) -> Tuple[int, np.ndarray]:
    camera, world, settings = _worker_scene
    return row, render_row(camera, world, settings, row)


class Renderer:
    """
    Drives per-pixel sampling over the whole image and produces 8-bit pixels.

    Rows are rendered from the top of the image (largest world-space y) to the
    bottom, so row 0 of the output is the top scanline. With more than one
    worker, rows are spread over a process pool and written back by index.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.width = settings.width
        self.height = settings.height
        self.accumulation_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)

    def reset_accumulation(self):
        self.accumulation_buffer.fill(0.0)

    def _store_row(self, row: int, sums: np.ndarray):
        self.accumulation_buffer[self.height - 1 - row] = sums

    def render(self, camera: Camera, world: HittableList) -> np.ndarray:
        """
        Render world through camera. Returns a (height, width, 3) uint8 array.
        """
        settings = self.settings
        logger.info(
            "Rendering {}x{} image, {} samples per pixel, max depth {}, {} worker(s)",
            self.width, self.height, settings.samples_per_pixel, settings.max_depth,
            settings.workers)
        start = time.perf_counter()
        self.reset_accumulation()

        if settings.workers > 1:
            self._render_parallel(camera, world)
        else:
            self._render_serial(camera, world)

        pixels = gamma_quantize(self.accumulation_buffer, float(settings.samples_per_pixel))
        logger.info("Rendering finished in {:.2f}s", time.perf_counter() - start)
        return pixels

    def _render_serial(self, camera: Camera, world: HittableList):
        for row in range(self.height - 1, -1, -1):
            self._store_row(row, render_row(camera, world, self.settings, row))
            logger.debug("Scanlines remaining: {}", row)

    def _render_parallel(self, camera: Camera, world: HittableList):
        remaining = self.height
        with ProcessPoolExecutor(max_workers=self.settings.workers,
                                 initializer=_init_worker,
                                 initargs=(camera, world, self.settings)) as executor:
            futures = [executor.submit(_render_row_in_worker, row)
                       for row in range(self.height - 1, -1, -1)]
            for future in as_completed(futures):
                row, sums = future.result()
                self._store_row(row, sums)
                remaining -= 1
                logger.debug("Scanlines remaining: {}", remaining)
