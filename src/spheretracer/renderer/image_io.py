# renderer/image_io.py
import os
import sys
from typing import TextIO, Union

import numpy as np
from PIL import Image

MAX_CHANNEL_VALUE = 255


def write_ppm(pixels: np.ndarray, stream: TextIO):
    """
    Write pixels as a plain-text (P3) PPM stream: a header followed by one
    "r g b" line per pixel, top row first.

    Args:
        pixels: (height, width, 3) uint8 array, row 0 at the top.
        stream: Text stream to write to. Write errors propagate.
    """
    height, width, _ = pixels.shape
    stream.write(f"P3\n{width} {height}\n{MAX_CHANNEL_VALUE}\n")
    for r, g, b in pixels.reshape(-1, 3).tolist():
        stream.write(f"{r} {g} {b}\n")


def to_image(pixels: np.ndarray) -> Image.Image:
    return Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))


def save_image(pixels: np.ndarray, path: Union[str, os.PathLike]):
    """
    Save pixels to path. ".ppm" files get the plain-text P3 format; every
    other extension is handed to Pillow.

    Raises:
        OSError: If the file cannot be written.
        ValueError: If Pillow does not know the extension.
    """
    path = os.fspath(path)
    if path.lower().endswith(".ppm"):
        with open(path, "w", encoding="ascii") as f:
            write_ppm(pixels, f)
    else:
        to_image(pixels).save(path)


def emit(pixels: np.ndarray, output: str = None):
    """
    Send pixels to output, or as a P3 stream to stdout when output is None or "-".
    """
    if output is None or output == "-":
        write_ppm(pixels, sys.stdout)
        sys.stdout.flush()
    else:
        save_image(pixels, output)
