"""
Utility Functions

Provides image loading/saving, the per-detector ImageBuffer, feature
text export, and the segment geometry used by the merger.
"""

from .image_io import load_image, ensure_output_dir, save_image
from .image_buffer import ImageBuffer
from .feature_io import write_features, read_features
from .geometry import angle_difference, midpoint_distance, is_mergeable

__all__ = [
    "load_image",
    "ensure_output_dir",
    "save_image",
    "ImageBuffer",
    "write_features",
    "read_features",
    "angle_difference",
    "midpoint_distance",
    "is_mergeable",
]
