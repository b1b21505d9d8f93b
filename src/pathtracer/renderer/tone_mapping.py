# renderer/tone_mapping.py
from typing import Tuple

import numpy as np
from PIL import Image

from pathtracer.core.vector import Color

def to_rgb8(image: np.ndarray) -> np.ndarray:
    """
    Map a linear RGB image to 8-bit channels: clamp to [0, 0.999], scale by 256.
    No gamma correction is applied.
    """
    return (np.clip(image, 0.0, 0.999) * 256).astype(np.uint8)

def color_to_rgb8(color: Color) -> Tuple[int, int, int]:
    return tuple(int(256 * min(max(c, 0.0), 0.999)) for c in color)

def save_image(rgb8: np.ndarray, path) -> None:
    """
    Write an (height, width, 3) uint8 array; the format follows the extension.
    """
    if rgb8.dtype != np.uint8 or rgb8.ndim != 3 or rgb8.shape[2] != 3:
        raise ValueError(f"Expected a (height, width, 3) uint8 array, got {rgb8.dtype} {rgb8.shape}")
    Image.fromarray(rgb8).save(path)
