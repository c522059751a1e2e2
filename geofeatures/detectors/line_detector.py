import logging

import cv2

from ..config import (
    CANONICAL_WIDTH,
    CANONICAL_HEIGHT,
    CANNY_HIGH_RATIO,
    CANNY_APERTURE,
    HOUGH_RHO,
    HOUGH_THETA,
    HOUGH_VOTES,
    HOUGH_MIN_LINE_LENGTH,
    HOUGH_MAX_LINE_GAP,
)
from ..models.detection_result import DetectionResult
from ..models.params import LineParams
from ..models.segment import LineSegment
from ..visualization.display import show_images
from ..visualization.draw_lines import draw_segments
from ..visualization.draw_markers import to_bgr
from .base import FeatureDetector
from .segment_merger import SegmentMerger

logger = logging.getLogger(__name__)


def detect_segments(image_gray, threshold):
    """
    Canny edges followed by the probabilistic Hough transform.

    Parameters
    ----------
    image_gray : np.ndarray
        Canonical grayscale image.
    threshold : int
        Canny low threshold; the high threshold is three times this.

    Returns
    -------
    (list[LineSegment], np.ndarray)
        Raw segments in primitive order, and the edge map.
    """
    edges = cv2.Canny(image_gray, threshold, threshold * CANNY_HIGH_RATIO, apertureSize=CANNY_APERTURE)

    detected = cv2.HoughLinesP(
        edges,
        HOUGH_RHO,
        HOUGH_THETA,
        HOUGH_VOTES,
        minLineLength=HOUGH_MIN_LINE_LENGTH,
        maxLineGap=HOUGH_MAX_LINE_GAP,
    )

    if detected is None:
        return [], edges

    return [LineSegment.from_array(vec) for vec in detected.reshape(-1, 4)], edges


class LineDetector(FeatureDetector):
    """
    Straight segments on the canonical grayscale frame, reduced by the
    SegmentMerger before drawing and export.
    """

    name = "line"

    def __init__(self, source, params: LineParams = None, pipeline=None, merger: SegmentMerger = None):
        super().__init__(source, pipeline)
        self.params = params or LineParams()
        self.merger = merger or SegmentMerger()

    def analyze_features(self):
        gray = self.preprocess()

        raw, edges = detect_segments(gray, self.params.threshold)
        segments = self.merger.merge(raw)

        output = to_bgr(gray)
        draw_segments(output, segments)

        original = cv2.resize(self.buffer.original, (CANONICAL_WIDTH, CANONICAL_HEIGHT))

        self.result = DetectionResult(
            output_image=output,
            features=segments,
            extras={"edges": edges, "original": original},
        )
        logger.info("Detected %d raw segments, %d after merging", len(raw), len(segments))
        return self.result

    @property
    def segments(self):
        return list(self._require_result().features)

    def get_feature_coordinates(self):
        coordinates = []
        for seg in self._require_result().features:
            coordinates.append(seg.start)
            coordinates.append(seg.end)
        return coordinates

    def plot_features(self):
        result = self._require_result()
        show_images({
            "Canny Edges": result.extras["edges"],
            "Original Picture": result.extras["original"],
            "Detected Lines": result.output_image,
        })

    def report(self):
        segments = self._require_result().features
        lines = ["Detailed Line Information:"]
        for i, seg in enumerate(segments, 1):
            lines.append(f"Line {i}:")
            lines.append(f"  Start Point: ({seg.x1}, {seg.y1})")
            lines.append(f"  End Point:   ({seg.x2}, {seg.y2})")
            lines.append(f"  Length:      {seg.length:g}")
            lines.append(f"  Angle:       {seg.angle:g} degrees")
            lines.append("-------------------------")
        lines.append(f"Detected lines: {len(segments)}")
        return "\n".join(lines)
