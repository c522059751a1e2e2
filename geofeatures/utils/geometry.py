"""
This module provides:
    - angle_difference
    - midpoint_distance
    - is_mergeable  (with default thresholds from config)
"""

import math

from ..config import MERGE_ANGLE_THRESHOLD, MERGE_DISTANCE_THRESHOLD


# ----------------------------------------------------------------------
#  ANGLE BETWEEN TWO SEGMENTS (RAW atan2, RADIANS)
# ----------------------------------------------------------------------

def angle_difference(seg1, seg2):
    """
    Absolute difference of the two raw signed angles, in radians.

    Not wrapped: segments pointing in opposite directions differ by
    about pi even when they are collinear.
    """
    return abs(seg1.angle_radians - seg2.angle_radians)


# ----------------------------------------------------------------------
#  DISTANCE BETWEEN MIDPOINTS
# ----------------------------------------------------------------------

def midpoint_distance(seg1, seg2):
    return math.dist(seg1.midpoint, seg2.midpoint)


# ----------------------------------------------------------------------
#  MERGE TEST
# ----------------------------------------------------------------------

def is_mergeable(seg1, seg2, angle_threshold=None, distance_threshold=None):
    """
    True when both the angle and midpoint distance are within thresholds.
    Values equal to a threshold still merge.
    """
    if angle_threshold is None:
        angle_threshold = MERGE_ANGLE_THRESHOLD
    if distance_threshold is None:
        distance_threshold = MERGE_DISTANCE_THRESHOLD

    if angle_difference(seg1, seg2) > angle_threshold:
        return False
    return midpoint_distance(seg1, seg2) <= distance_threshold
