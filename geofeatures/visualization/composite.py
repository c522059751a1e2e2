"""
Combined overlay of line and corner features.

Both detectors must already be analyzed on the same source image, so
their features share the canonical 800x600 coordinate space. The line
detector's annotated image is the base layer; neither detector's stored
result is modified.
"""

import logging

import numpy as np

from ..config import COLOR_COMBINED_LINE, COLOR_COMBINED_CORNER, COMBINED_RADIUS
from ..exceptions import DetectionError
from ..utils.image_io import save_image
from .display import show_images
from .draw_markers import draw_points

logger = logging.getLogger(__name__)


class CompositeVisualizer:

    def __init__(self, output_path, line_color=COLOR_COMBINED_LINE, corner_color=COLOR_COMBINED_CORNER,
                 radius=COMBINED_RADIUS):
        self.output_path = str(output_path)
        self.line_color = line_color
        self.corner_color = corner_color
        self.radius = radius

    def combine(self, line_detector, corner_detector, show=False) -> np.ndarray:
        """
        Draws every line endpoint and every corner on a copy of the line
        output, saves it to output_path and returns it.

        Raises:
            DetectionError: a detector was not analyzed, or the two outputs
                do not share the same canonical frame
            ExportError: the image could not be written
        """
        for detector in (line_detector, corner_detector):
            if not detector.analyzed:
                raise DetectionError(f"{detector.name} detector must be analyzed before combining")

        combined = line_detector.get_output_image()
        corner_shape = corner_detector.get_output_image().shape
        if combined.shape[:2] != corner_shape[:2]:
            raise DetectionError(
                f"Cannot combine images of different sizes: {combined.shape[:2]} vs {corner_shape[:2]}"
            )

        draw_points(combined, line_detector.get_feature_coordinates(), self.line_color, self.radius)
        draw_points(combined, corner_detector.get_feature_coordinates(), self.corner_color, self.radius)

        save_image(self.output_path, combined)
        logger.info("Combined overlay saved: %s", self.output_path)

        if show:
            show_images({"Combined Features": combined})

        return combined
