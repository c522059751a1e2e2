"""
Detectors Package

Contains the detection modules:
- Shared preprocessing pipeline
- Detector base contract
- Corner detection
- Line detection & segment merging
"""

from .preprocessing import PreprocessingPipeline
from .base import FeatureDetector
from .corner_detector import CornerDetector
from .line_detector import LineDetector, detect_segments
from .segment_merger import SegmentMerger, merge_segments

__all__ = [
    "PreprocessingPipeline",
    "FeatureDetector",
    "CornerDetector",
    "LineDetector",
    "detect_segments",
    "SegmentMerger",
    "merge_segments",
]
