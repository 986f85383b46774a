# renderer/raytracer.py
import logging
import random
import time
from typing import Callable, Union
import numpy as np
from pathtracer.core.vector import Color
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable
from pathtracer.camera.camera import Camera

logger = logging.getLogger(__name__)

# Lower bound of the hit interval; skips self-intersection at the ray origin.
SHADOW_ACNE_EPSILON = 0.001
INFINITY = float("inf")

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

Background = Union[Color, Callable[[Ray], Color]]

def sky_gradient(ray: Ray) -> Color:
    """Blends white at the horizon into light blue overhead."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def background_radiance(background: Background, ray: Ray) -> Color:
    if callable(background):
        return background(ray)
    return background

def ray_color(ray: Ray, background: Background, world: Hittable, depth: int, rng) -> Color:
    """
    Returns the radiance seen along the ray. If the ray hits an object, the
    material scatter is followed recursively up to 'depth' bounces.
    """
    if depth <= 0:
        return BLACK  # Exceeded recursion depth

    rec = world.hit(ray, SHADOW_ACNE_EPSILON, INFINITY)
    if rec is None:
        return background_radiance(background, ray)

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter_result = rec.material.scatter(ray, rec, rng)
    if scatter_result is None:
        return emitted

    scattered, attenuation = scatter_result
    return emitted + attenuation * ray_color(scattered, background, world, depth - 1, rng)

class Renderer:
    """
    Renders a world through a camera into a linear-space float image.

    Each scanline draws from its own random stream derived from the seed, so
    rows are independent and can be rendered in any order or in parallel
    with identical results.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 16,
                 max_depth: int = 50, seed: int = 0):
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.seed = seed

    def scanline_rng(self, j: int) -> random.Random:
        return random.Random(self.seed * 1_000_003 + j)

    def render_scanline(self, world: Hittable, camera: Camera, background: Background,
                        j: int) -> np.ndarray:
        """
        Returns the (width, 3) mean colors of row j, where j = 0 is the bottom row.
        """
        rng = self.scanline_rng(j)
        row = np.zeros((self.width, 3), dtype=np.float64)
        w_span = max(self.width - 1, 1)
        h_span = max(self.height - 1, 1)
        for i in range(self.width):
            r = g = b = 0.0
            for _ in range(self.samples_per_pixel):
                s = (i + rng.random()) / w_span
                t = (j + rng.random()) / h_span
                ray = camera.get_ray(s, t, rng)
                color = ray_color(ray, background, world, self.max_depth, rng)
                r += color.x
                g += color.y
                b += color.z
            row[i] = (r, g, b)
        return row / self.samples_per_pixel

    def render(self, world: Hittable, camera: Camera, background: Background) -> np.ndarray:
        """
        Returns a (height, width, 3) array of linear colors, top row first.
        """
        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d",
                    self.width, self.height, self.samples_per_pixel, self.max_depth)
        start = time.perf_counter()
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        for j in range(self.height - 1, -1, -1):
            logger.debug("Scanlines remaining: %d", j)
            image[self.height - 1 - j] = self.render_scanline(world, camera, background, j)
        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image
