"""
Preprocessing shared by every detector.

Fixed order, no step may be skipped or reordered:
    1. Gaussian blur      (5x5, sigma 1.5)
    2. Rescale            (800x600)
    3. Grayscale
    4. Bilateral denoise  (d=9, sigmaColor=75, sigmaSpace=75)

Running it twice on the same buffer changes image statistics, so
detectors call it exactly once per analysis pass.
"""

import numpy as np

from ..config import (
    GAUSSIAN_KERNEL,
    GAUSSIAN_SIGMA,
    CANONICAL_WIDTH,
    CANONICAL_HEIGHT,
    BILATERAL_DIAMETER,
    BILATERAL_SIGMA_COLOR,
    BILATERAL_SIGMA_SPACE,
)
from ..utils.image_buffer import ImageBuffer


class PreprocessingPipeline:
    """Turns a loaded color image into the canonical 800x600 grayscale frame."""

    STEPS = ("filter_noise", "rescale", "convert_to_gray", "denoise_bilateral")

    def run(self, buffer: ImageBuffer) -> np.ndarray:
        buffer.filter_noise(GAUSSIAN_KERNEL, GAUSSIAN_SIGMA)
        buffer.rescale(CANONICAL_WIDTH, CANONICAL_HEIGHT)
        buffer.convert_to_gray()
        buffer.denoise_bilateral(BILATERAL_DIAMETER, BILATERAL_SIGMA_COLOR, BILATERAL_SIGMA_SPACE)
        return buffer.working
