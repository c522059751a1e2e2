"""
ImageBuffer: owns one image for one detector.

Two copies are kept:
    • original  - pristine copy, read-only once set
    • working   - mutated in place by the preprocessing steps

Each step replaces the working array with the result of a single OpenCV
primitive. Nothing here is shared between buffers, so two detectors
built from the same file never see each other's changes.
"""

import cv2
import numpy as np

from .image_io import load_image


class ImageBuffer:

    def __init__(self, image: np.ndarray):
        self._original = None
        self.working = None
        self.set_image(image)

    @classmethod
    def from_file(cls, path):
        return cls(load_image(path))

    # ------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------
    def set_image(self, image: np.ndarray):
        """Stores independent pristine and working clones of image."""
        original = np.array(image, copy=True)
        original.setflags(write=False)
        self._original = original
        self.working = original.copy()

    @property
    def original(self) -> np.ndarray:
        return self._original

    def reset(self):
        """Restores the working buffer from the pristine copy."""
        self.working = self._original.copy()

    # ------------------------------------------------------------
    # Primitive transforms
    # ------------------------------------------------------------
    def filter_noise(self, ksize, sigma):
        self.working = cv2.GaussianBlur(self.working, ksize, sigma)

    def rescale(self, width, height):
        self.working = cv2.resize(self.working, (width, height), interpolation=cv2.INTER_LINEAR)

    def convert_to_gray(self):
        if self.working.ndim == 2:
            self.working = self.working.copy()
        elif self.working.shape[2] == 4:
            self.working = cv2.cvtColor(self.working, cv2.COLOR_BGRA2GRAY)
        else:
            self.working = cv2.cvtColor(self.working, cv2.COLOR_BGR2GRAY)

    def denoise_bilateral(self, diameter, sigma_color, sigma_space):
        self.working = cv2.bilateralFilter(self.working, diameter, sigma_color, sigma_space)

    @property
    def channels(self):
        return 1 if self.working.ndim == 2 else self.working.shape[2]

    def __repr__(self):
        h, w = self.working.shape[:2]
        return f"ImageBuffer({w}x{h}, channels={self.channels})"
