# renderer/raytracer.py
import logging
import random
import time
import numpy as np
from rtweekend.core.vector import Vector3
from rtweekend.core.ray import Ray
from rtweekend.geometry.hittable import Hittable
from rtweekend.renderer.tone_mapping import gamma_tone_mapping

logger = logging.getLogger(__name__)

# Offset of the search interval that keeps bounced rays from re-hitting
# the surface they start on.
T_MIN = 0.001
INFINITY = float('inf')

WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def background(ray: Ray) -> Vector3:
    """Vertical white to sky-blue gradient seen by rays that escape."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * WHITE + t * SKY_BLUE

def ray_color(ray: Ray, world: Hittable, depth: int, rng) -> Vector3:
    """
    Returns the color seen along the ray, following at most 'depth' bounces.

    Written as a loop: the attenuation of every scatter is multiplied into
    a running throughput, so stack use does not grow with depth. A path
    that runs out of bounces or is absorbed returns black; one that escapes
    returns throughput * background.
    """
    throughput = Vector3(1.0, 1.0, 1.0)
    for _ in range(depth):
        rec = world.hit(ray, T_MIN, INFINITY)
        if rec is None:
            return throughput * background(ray)

        scatter_result = rec.material.scatter(ray, rec, rng)
        if scatter_result is None:
            return Vector3(0, 0, 0)
        ray, attenuation = scatter_result
        throughput = throughput * attenuation

    return Vector3(0, 0, 0)  # Exceeded bounce limit, no more light

class Renderer:
    """
    Single-threaded batch renderer: N jittered samples per pixel, averaged
    and gamma corrected into an 8-bit image.

    With per_pixel_seed every pixel gets its own generator seeded from
    (seed, row, column), so a pixel's value does not depend on the
    traversal order. Otherwise one stream seeded by `seed` is used.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = 50, seed: int = 0, per_pixel_seed: bool = False):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.seed = seed
        self.per_pixel_seed = per_pixel_seed
        self.accumulation_buffer = np.zeros((height, width, 3), dtype=np.float64)

    def pixel_rng(self, i: int, j: int) -> random.Random:
        return random.Random((self.seed * self.height + j) * self.width + i)

    def sample_pixel(self, world: Hittable, camera, i: int, j: int, rng) -> Vector3:
        """Sum of samples_per_pixel radiance estimates for pixel (i, j); j counts up from the bottom row."""
        # A one-pixel dimension would otherwise divide by zero
        u_scale = max(self.width - 1, 1)
        v_scale = max(self.height - 1, 1)
        pixel_color = Vector3(0, 0, 0)
        for _ in range(self.samples_per_pixel):
            u = (i + rng.random()) / u_scale
            v = (j + rng.random()) / v_scale
            ray = camera.get_ray(u, v, rng)
            pixel_color += ray_color(ray, world, self.max_depth, rng)
        return pixel_color

    def render(self, world: Hittable, camera) -> np.ndarray:
        """
        Render the scene and return a (height, width, 3) uint8 array whose
        first row is the top of the image.
        """
        logger.info("Rendering %dx%d, %d samples per pixel, max depth %d",
                    self.width, self.height, self.samples_per_pixel, self.max_depth)
        start = time.perf_counter()
        self.accumulation_buffer.fill(0.0)
        rng = random.Random(self.seed)

        for j in range(self.height - 1, -1, -1):
            logger.debug("Scanlines remaining: %d", j + 1)
            row = self.height - 1 - j
            for i in range(self.width):
                if self.per_pixel_seed:
                    rng = self.pixel_rng(i, j)
                color = self.sample_pixel(world, camera, i, j, rng)
                self.accumulation_buffer[row, i] = tuple(color)

        image = gamma_tone_mapping(self.accumulation_buffer, self.samples_per_pixel)
        logger.info("Done in %.2fs", time.perf_counter() - start)
        return image
