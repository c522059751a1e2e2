"""
Visualization utilities for rendering line segments.

This module provides:
    • draw_segments(img, segments, color, thickness)

Used by:
    - detectors.line_detector
"""

import cv2
from typing import List, Tuple

from ..config import COLOR_LINE, LINE_THICKNESS
from ..models.segment import LineSegment


def draw_segments(
    image,
    segments: List[LineSegment],
    color: Tuple[int, int, int] = COLOR_LINE,
    thickness: int = LINE_THICKNESS
):
    """
    Draws a list of LineSegment objects onto an image.

    Args:
        image: BGR numpy array (modified in-place)
        segments: list of LineSegment objects
        color: (B, G, R)
        thickness: pixel width
    """
    for seg in segments:
        cv2.line(image, seg.start, seg.end, color, thickness)
    return image
