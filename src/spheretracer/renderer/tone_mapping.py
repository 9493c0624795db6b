# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit

# Upper clamp before scaling by 256 so a channel never rounds to 256.
MAX_INTENSITY = 0.999


@njit
def gamma_quantize(accumulated, samples_per_pixel):
    """
    Turn a (height, width, 3) buffer of summed samples into 8-bit pixels.

    Each channel is averaged over the sample count, gamma corrected with
    gamma 2 (square root), clamped to [0, 0.999] and scaled by 256, with
    the fractional part truncated.
    """
    height, width, channels = accumulated.shape
    output = np.empty((height, width, channels), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                value = accumulated[y, x, c] / samples_per_pixel
                value = math.sqrt(value) if value > 0.0 else 0.0
                if value > MAX_INTENSITY:
                    value = MAX_INTENSITY
                output[y, x, c] = int(value * 256.0)
    return output
