"""
Configuration file for the feature-detection system.

Holds the fixed preprocessing constants, detector defaults, merge thresholds,
drawing styles and the artifact paths used by main.py.
Modules import the constants they need directly.
"""

import math
import os
from dataclasses import dataclass


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

DEFAULT_IMAGE_PATH = "color.png"
OUTPUT_FOLDER = "output"

# Open cv2 windows for every detector when running main.py
SHOW_WINDOWS = False


@dataclass(frozen=True)
class OutputPaths:
    """
    Artifact locations for one run. Passed explicitly to the components
    that write files instead of hard-coding demo names.
    """

    output_dir: str = OUTPUT_FOLDER
    line_features: str = "lines_features.txt"
    line_image: str = "lines_output.png"
    corner_features: str = "corners_features.txt"
    corner_image: str = "corners_output.png"
    combined_image: str = "merged_features.png"

    def resolve(self, name: str) -> str:
        return os.path.join(self.output_dir, name)


# ===============================================================
# PREPROCESSING (shared by every detector)
# ===============================================================

GAUSSIAN_KERNEL = (5, 5)
GAUSSIAN_SIGMA = 1.5

CANONICAL_WIDTH = 800
CANONICAL_HEIGHT = 600

BILATERAL_DIAMETER = 9
BILATERAL_SIGMA_COLOR = 75
BILATERAL_SIGMA_SPACE = 75


# ===============================================================
# CORNER DETECTION (Shi-Tomasi / Harris)
# ===============================================================

MAX_CORNERS = 200

CORNER_QUALITY_LEVEL = 0.01
CORNER_MIN_DISTANCE = 10
CORNER_BLOCK_SIZE = 3
CORNER_USE_HARRIS = False
CORNER_HARRIS_K = 0.04


# ===============================================================
# LINE DETECTION (Canny + probabilistic Hough)
# ===============================================================

LINE_THRESHOLD = 10                # Canny low threshold
CANNY_HIGH_RATIO = 3               # high = low * ratio
CANNY_APERTURE = 3

HOUGH_RHO = 0.1
HOUGH_THETA = math.pi / 180
HOUGH_VOTES = 3
HOUGH_MIN_LINE_LENGTH = 15
HOUGH_MAX_LINE_GAP = 10


# ---------------------------------------------------------------
# SEGMENT MERGING
# ---------------------------------------------------------------

MERGE_ANGLE_THRESHOLD = math.radians(8.0)
MERGE_DISTANCE_THRESHOLD = 10.0    # between segment midpoints


# ---------------------------------------------------------------
# VISUALIZATION COLORS & SIZES (BGR)
# ---------------------------------------------------------------

COLOR_CORNER = (0, 255, 0)         # green
COLOR_LINE = (0, 255, 0)           # green
CORNER_RADIUS = 5
LINE_THICKNESS = 5

COLOR_COMBINED_LINE = (0, 255, 0)  # line endpoints - green
COLOR_COMBINED_CORNER = (255, 0, 0)  # corners - blue
COMBINED_RADIUS = 3
