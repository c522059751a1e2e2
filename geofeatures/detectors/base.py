"""
Common detector contract.

Every detector:
    • loads its own ImageBuffer (independent clones, no aliasing)
    • runs the shared PreprocessingPipeline once per analysis pass
    • exposes analyze_features / get_feature_coordinates /
      get_output_image / plot_features
    • can export its features and its annotated image
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

import numpy as np

from ..exceptions import DetectionError
from ..models.detection_result import DetectionResult
from ..utils.feature_io import write_features
from ..utils.image_buffer import ImageBuffer
from ..utils.image_io import save_image
from .preprocessing import PreprocessingPipeline


class FeatureDetector(ABC):

    #: human readable name used in reports and errors
    name = "features"

    def __init__(self, source, pipeline: Optional[PreprocessingPipeline] = None):
        """
        Args:
            source: path to a 3/4-channel image, or an already loaded array
            pipeline: preprocessing to use (defaults to the shared pipeline)

        Raises:
            LoadError: the path is missing, unreadable or has the wrong channel count
        """
        if isinstance(source, np.ndarray):
            self.buffer = ImageBuffer(source)
        else:
            self.buffer = ImageBuffer.from_file(source)
        self.pipeline = pipeline or PreprocessingPipeline()
        self.result: Optional[DetectionResult] = None

    # ------------------------------------------------------------
    # Shared preprocessing
    # ------------------------------------------------------------
    def preprocess(self) -> np.ndarray:
        """
        Restores the pristine image and runs the pipeline on it, so a
        repeated analysis never preprocesses twice.
        """
        self.buffer.reset()
        return self.pipeline.run(self.buffer)

    @property
    def analyzed(self) -> bool:
        return self.result is not None

    def _require_result(self) -> DetectionResult:
        if self.result is None:
            raise DetectionError(f"{self.name} detector has not been analyzed yet")
        return self.result

    # ------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------
    @abstractmethod
    def analyze_features(self) -> DetectionResult:
        """Runs preprocessing and detection, replacing any previous result."""

    @abstractmethod
    def get_feature_coordinates(self) -> List[Tuple[int, int]]:
        """Integer (x, y) points in detection order."""

    @abstractmethod
    def plot_features(self):
        """Shows the detector's images on screen."""

    @abstractmethod
    def report(self) -> str:
        """Multi-line description of every detected feature."""

    def get_output_image(self) -> np.ndarray:
        """Independent copy of the annotated image."""
        return self._require_result().output_image.copy()

    # ------------------------------------------------------------
    # Export
    # ------------------------------------------------------------
    def write_features_to_file(self, path):
        write_features(path, self.get_feature_coordinates())

    def save_output_image(self, path):
        save_image(path, self.get_output_image())

    def __str__(self):
        if self.result is None:
            return f"{type(self).__name__} (not analyzed)"
        return self.report()
