"""Pytest configuration and shared fixtures for the feature-detection tests.

All images are synthetic and written into the per-test tmp_path.
"""
import logging

import cv2
import numpy as np
import pytest

from geofeatures.models.segment import LineSegment


logging.getLogger('geofeatures').setLevel(logging.DEBUG)


def _write(path, image):
    assert cv2.imwrite(str(path), image)
    return str(path)


@pytest.fixture
def flat_image():
    """Uniform gray 3-channel image, no intensity discontinuities."""
    return np.full((240, 320, 3), 128, dtype=np.uint8)


@pytest.fixture
def flat_image_path(tmp_path, flat_image):
    return _write(tmp_path / "flat.png", flat_image)


@pytest.fixture
def rectangle_image():
    """White filled rectangle on black, already at canonical size."""
    img = np.zeros((600, 800, 3), dtype=np.uint8)
    cv2.rectangle(img, (200, 150), (600, 450), (255, 255, 255), thickness=-1)
    return img


@pytest.fixture
def rectangle_image_path(tmp_path, rectangle_image):
    return _write(tmp_path / "rectangle.png", rectangle_image)


@pytest.fixture
def checkerboard_image_path(tmp_path):
    """20px checkerboard, far more corners than the detector may return."""
    ys, xs = np.mgrid[0:600, 0:800]
    board = (((xs // 20) + (ys // 20)) % 2 * 255).astype(np.uint8)
    img = cv2.cvtColor(board, cv2.COLOR_GRAY2BGR)
    return _write(tmp_path / "checkerboard.png", img)


@pytest.fixture
def bgra_image_path(tmp_path, rectangle_image):
    img = cv2.cvtColor(rectangle_image, cv2.COLOR_BGR2BGRA)
    return _write(tmp_path / "rectangle_alpha.png", img)


@pytest.fixture
def grayscale_image_path(tmp_path):
    img = np.full((100, 100), 50, dtype=np.uint8)
    return _write(tmp_path / "gray.png", img)


@pytest.fixture
def horizontal_segment():
    return LineSegment(0, 0, 20, 0)


@pytest.fixture
def uint16_image_path(tmp_path, rectangle_image):
    """Same rectangle stored as a 16-bit 3-channel PNG."""
    img = rectangle_image.astype(np.uint16) * 257
    return _write(tmp_path / "rectangle16.png", img)
