"""
Visualization Tools

Provides drawing utilities for:
- Line segments
- Point markers (corners, endpoints)
- The combined line + corner overlay
- On-screen display
"""

from .draw_lines import draw_segments
from .draw_markers import draw_points, to_bgr
from .display import show_images
from .composite import CompositeVisualizer

__all__ = [
    "draw_segments",
    "draw_points",
    "to_bgr",
    "show_images",
    "CompositeVisualizer",
]
