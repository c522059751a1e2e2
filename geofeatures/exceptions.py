"""Custom exceptions for the feature-detection pipeline."""


class FeatureDetectionError(Exception):
    """Base error for the package."""
    pass


class LoadError(FeatureDetectionError):
    """Source image is missing, unreadable, or has an unsupported channel count."""

    def __init__(self, path, reason="Could not open or find the image, or the number of channels is not supported"):
        self.path = str(path)
        super().__init__(f"{reason}: {self.path}")


class ExportError(FeatureDetectionError, OSError):
    """A feature file or output image could not be written."""
    pass


class DetectionError(FeatureDetectionError):
    """Detector results requested before analysis, or incompatible results combined."""
    pass
