# renderer/raytracer.py
import math
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Optional

import numpy as np
from tqdm import tqdm

from pathtracer.core.vector import Color
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable
from pathtracer.camera.camera import Camera

MAX_DEPTH = 50
SAMPLES_PER_PIXEL = 100
# Shadow-acne epsilon: rejects self-hits at the origin of a scattered ray.
T_MIN = 0.001

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def background_color(ray: Ray) -> Color:
    """
    Sky gradient: white at the horizon blending to blue overhead.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world: Hittable, depth: int, rng) -> Color:
    """
    Returns the color seen along the ray. If the ray hits an object, the material
    scatter is computed recursively up to 'depth' bounces.
    """
    if depth <= 0:
        return BLACK  # Exceeded recursion depth.

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background_color(ray)

    scatter_result = rec.material.scatter(ray, rec, rng)
    if scatter_result is None:
        return BLACK
    scattered, attenuation = scatter_result
    return attenuation * ray_color(scattered, world, depth - 1, rng)


def render_pixel(i: int, j: int, world: Hittable, camera: Camera, width: int, height: int,
                 samples_per_pixel: int, max_depth: int, rng) -> Color:
    """
    Average of samples_per_pixel jittered samples for pixel column i and
    image-plane row j (counted from the bottom).
    """
    r = g = b = 0.0
    for _ in range(samples_per_pixel):
        s = (i + rng.random()) / max(width - 1, 1)
        t = (j + rng.random()) / max(height - 1, 1)
        col = ray_color(camera.get_ray(s, t, rng), world, max_depth, rng)
        r += col.x
        g += col.y
        b += col.z
    scale = 1.0 / samples_per_pixel
    return Color(r * scale, g * scale, b * scale)


def render_row(y: int, world: Hittable, camera: Camera, width: int, height: int,
               samples_per_pixel: int, max_depth: int, rng) -> np.ndarray:
    """
    Renders image row y (counted from the top) into a (width, 3) array.
    """
    row = np.zeros((width, 3), dtype=np.float64)
    j = height - 1 - y
    for i in range(width):
        col = render_pixel(i, j, world, camera, width, height, samples_per_pixel, max_depth, rng)
        row[i] = (col.x, col.y, col.z)
    return row


def row_rng(seed: Optional[int], y: int) -> random.Random:
    """Private generator for one row; deterministic when a seed is given."""
    if seed is None:
        return random.Random()
    return random.Random(f"{seed}:{y}")


# Per-process scene state, installed once by the pool initializer.
_worker_state = {}

def _init_worker(world, camera, width, height, samples_per_pixel, max_depth):
    _worker_state.update(world=world, camera=camera, width=width, height=height,
                         samples_per_pixel=samples_per_pixel, max_depth=max_depth)

def _render_row_task(y: int, seed: Optional[int]):
    st = _worker_state
    row = render_row(y, st["world"], st["camera"], st["width"], st["height"],
                     st["samples_per_pixel"], st["max_depth"], row_rng(seed, y))
    return y, row


class Renderer:
    """
    CPU path tracer. Rows are independent and are fanned out over a process
    pool; the scene is sent to each worker once and treated as read-only.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = SAMPLES_PER_PIXEL,
                 max_depth: int = MAX_DEPTH, workers: Optional[int] = None,
                 seed: Optional[int] = None, verbose: bool = True):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if workers is not None and workers <= 0:
            raise ValueError(f"workers must be positive, got {workers}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers
        self.seed = seed
        self.verbose = verbose

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """
        Returns the linear RGB image as a (height, width, 3) float array,
        row 0 at the top.
        """
        if self.verbose:
            print("\n=== Rendering ===")
            print(f"Resolution: {self.width}x{self.height}")
            print(f"Samples per pixel: {self.samples_per_pixel}")
            print(f"Max depth: {self.max_depth}")
            print(f"Workers: {self.workers or 'auto'}")

        start = time.perf_counter()
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        with tqdm(total=self.height, desc="Scanlines", unit="row", disable=not self.verbose) as progress:
            if self.workers == 1:
                for y in range(self.height):
                    image[y] = render_row(y, world, camera, self.width, self.height,
                                          self.samples_per_pixel, self.max_depth,
                                          row_rng(self.seed, y))
                    progress.update(1)
            else:
                initargs = (world, camera, self.width, self.height,
                            self.samples_per_pixel, self.max_depth)
                with ProcessPoolExecutor(max_workers=self.workers, initializer=_init_worker,
                                         initargs=initargs) as executor:
                    futures = [executor.submit(_render_row_task, y, self.seed)
                               for y in range(self.height)]
                    for future in as_completed(futures):
                        y, row = future.result()
                        image[y] = row
                        progress.update(1)

        if self.verbose:
            print(f"Done in {time.perf_counter() - start:.2f}s")
        return image
