"""
Per-detector tunables.

Values are read when analyze_features() runs; changing them afterwards
does not alter results that were already computed. Ranges are not
validated, OpenCV decides what out-of-range values do.
"""

from dataclasses import dataclass

from ..config import (
    CORNER_QUALITY_LEVEL,
    CORNER_MIN_DISTANCE,
    CORNER_BLOCK_SIZE,
    CORNER_USE_HARRIS,
    CORNER_HARRIS_K,
    LINE_THRESHOLD,
)


@dataclass
class CornerParams:
    quality_level: float = CORNER_QUALITY_LEVEL   # minimal accepted corner quality (relative)
    min_distance: float = CORNER_MIN_DISTANCE     # min Euclidean distance between corners
    block_size: int = CORNER_BLOCK_SIZE           # derivative covariation neighbourhood
    use_harris_detector: bool = CORNER_USE_HARRIS
    harris_k: float = CORNER_HARRIS_K             # Harris free parameter, usually 0.04-0.06


@dataclass
class LineParams:
    threshold: int = LINE_THRESHOLD               # Canny low threshold, high = 3x
