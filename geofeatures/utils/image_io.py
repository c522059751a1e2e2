"""
Image I/O utilities for the feature-detection pipeline.

This module provides:
    • load_image(path)
    • ensure_output_dir(path)
    • save_image(path, image)

Handles all filesystem interaction for raster images in one place.
"""

import logging
import os

import cv2
import numpy as np

from ..exceptions import LoadError, ExportError

logger = logging.getLogger(__name__)

SUPPORTED_CHANNELS = (3, 4)


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_image(path) -> np.ndarray:
    """
    Reads a 3- or 4-channel color image as 8-bit.

    16-bit files are scaled down to 8-bit, since the filters and Canny
    downstream only accept 8-bit input.

    Raises LoadError naming the path when the file is missing, cannot be
    decoded, decodes to any other channel count, or has another depth.
    """
    path = str(path)
    if not os.path.isfile(path):
        raise LoadError(path)

    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None or img.ndim != 3 or img.shape[2] not in SUPPORTED_CHANNELS:
        raise LoadError(path)

    if img.dtype == np.uint16:
        img = cv2.convertScaleAbs(img, alpha=255.0 / 65535)
    elif img.dtype != np.uint8:
        raise LoadError(path, reason=f"Unsupported image depth {img.dtype}")

    logger.debug("Loaded %s (%dx%d, %d channels)", path, img.shape[1], img.shape[0], img.shape[2])
    return img


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.

    cv2.imwrite signals failure by returning False (or raising cv2.error
    for an unknown extension); both surface as ExportError.
    """
    path = str(path)
    try:
        ensure_output_dir(os.path.dirname(path))
        ok = cv2.imwrite(path, image)
    except (OSError, cv2.error) as exc:
        raise ExportError(f"Could not save the image: {path}") from exc

    if not ok:
        raise ExportError(f"Could not save the image: {path}")

    logger.info("Image saved successfully: %s", path)
