"""
Data Models

Defines the core data structures:
- LineSegment
- CornerPoint
- CornerParams / LineParams
- DetectionResult
"""

from .segment import LineSegment
from .corner import CornerPoint
from .params import CornerParams, LineParams
from .detection_result import DetectionResult

__all__ = ["LineSegment", "CornerPoint", "CornerParams", "LineParams", "DetectionResult"]
