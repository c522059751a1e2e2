"""
Geometric Feature Extraction Package

Extracts straight-line segments and corner points from a still image:

- Shared preprocessing into a canonical 800x600 grayscale frame
- Corner detection (Shi-Tomasi / Harris)
- Line detection (Canny + probabilistic Hough) with segment merging
- Feature text export and annotated image output
- Combined line + corner overlay
"""

from .detectors import CornerDetector, LineDetector, SegmentMerger
from .exceptions import FeatureDetectionError, LoadError, ExportError, DetectionError

__all__ = [
    "config",
    "main",
    "detectors",
    "models",
    "utils",
    "visualization",
    "CornerDetector",
    "LineDetector",
    "SegmentMerger",
    "FeatureDetectionError",
    "LoadError",
    "ExportError",
    "DetectionError",
]
