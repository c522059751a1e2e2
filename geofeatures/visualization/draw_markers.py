"""
Visualization utilities for rendering point features.

This module provides:
    • draw_points(img, points, color, radius)
    • to_bgr(gray)

Used by:
    - detectors (corner markers, canonical output images)
    - visualization.composite
"""

import cv2
import numpy as np
from typing import Iterable, Tuple


def to_bgr(image: np.ndarray) -> np.ndarray:
    """Returns a new 3-channel copy of a grayscale (or already BGR) image."""
    if image.ndim == 2:
        return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    return image.copy()


def draw_points(
    image,
    points: Iterable[Tuple[int, int]],
    color: Tuple[int, int, int],
    radius: int
):
    """
    Draws a filled circle at every (x, y) point.

    Args:
        image: BGR numpy array (modified in-place)
        points: integer pixel coordinates
        color: (B, G, R)
        radius: circle radius in pixels
    """
    for x, y in points:
        cv2.circle(image, (int(x), int(y)), radius, color, thickness=-1)
    return image
