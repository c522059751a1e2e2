import logging

import cv2

from ..config import MAX_CORNERS, COLOR_CORNER, CORNER_RADIUS
from ..models.corner import CornerPoint
from ..models.detection_result import DetectionResult
from ..models.params import CornerParams
from ..visualization.display import show_images
from ..visualization.draw_markers import draw_points, to_bgr
from .base import FeatureDetector

logger = logging.getLogger(__name__)


class CornerDetector(FeatureDetector):
    """
    Shi-Tomasi (or Harris) corners on the canonical grayscale frame.

    Tunables live on self.params and are read when analyze_features() runs.
    """

    name = "corner"

    def __init__(self, source, params: CornerParams = None, pipeline=None):
        super().__init__(source, pipeline)
        self.params = params or CornerParams()

    def analyze_features(self):
        gray = self.preprocess()
        p = self.params

        detected = cv2.goodFeaturesToTrack(
            gray,
            MAX_CORNERS,
            p.quality_level,
            p.min_distance,
            mask=None,
            blockSize=p.block_size,
            useHarrisDetector=p.use_harris_detector,
            k=p.harris_k,
        )

        # goodFeaturesToTrack returns None (or an empty array) when nothing passes
        corners = []
        if detected is not None:
            corners = [CornerPoint(float(x), float(y)) for x, y in detected.reshape(-1, 2)]

        output = to_bgr(gray)
        draw_points(output, (c.as_int() for c in corners), COLOR_CORNER, CORNER_RADIUS)

        self.result = DetectionResult(output_image=output, features=corners)
        logger.info("Detected %d corners", len(corners))
        return self.result

    def get_feature_coordinates(self):
        return [corner.as_int() for corner in self._require_result().features]

    def plot_features(self):
        show_images({"Detected Corners": self._require_result().output_image})

    def report(self):
        corners = self._require_result().features
        lines = ["Detected Corner Information:"]
        for i, corner in enumerate(corners, 1):
            lines.append(f"Corner {i}:")
            lines.append(f"  Coordinates: ({corner.x:g}, {corner.y:g})")
            lines.append("-------------------------")
        lines.append(f"Number of Corners: {len(corners)}")
        return "\n".join(lines)
