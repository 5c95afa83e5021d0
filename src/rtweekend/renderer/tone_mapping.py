# renderer/tone_mapping.py
import math
from typing import Tuple
import numpy as np
from rtweekend.core.vector import Vector3
from rtweekend.core.utils import clamp

# Largest value kept after clamping; 256 * MAX_INTENSITY truncates to 255.
MAX_INTENSITY = 0.999

def write_color(pixel_color: Vector3, samples_per_pixel: int) -> Tuple[int, int, int]:
    """
    Turn a summed linear color into an 8-bit RGB triple: average over the
    samples, gamma 2 (square root), clamp, then scale by 256 and truncate.

    This is the reference mapping for one pixel. Renderer converts whole
    buffers with gamma_tone_mapping, which must agree with it byte for byte.
    """
    r = math.sqrt(pixel_color.x / samples_per_pixel)
    g = math.sqrt(pixel_color.y / samples_per_pixel)
    b = math.sqrt(pixel_color.z / samples_per_pixel)
    return (int(256 * clamp(r, 0.0, MAX_INTENSITY)),
            int(256 * clamp(g, 0.0, MAX_INTENSITY)),
            int(256 * clamp(b, 0.0, MAX_INTENSITY)))

def gamma_tone_mapping(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Same mapping as write_color applied to a whole (height, width, 3)
    buffer of summed linear colors. Returns uint8.
    """
    mapped = np.sqrt(accumulated / samples_per_pixel)
    mapped = mapped.clip(0.0, MAX_INTENSITY)
    return (mapped * 256).astype(np.uint8)
