"""
Merging of near-duplicate line segments.

One forward sweep over all pairs (i < j), done in two phases:
    1. read-only scan that records which (i, j) pairs merge
    2. rebuild: untouched segments in their original order, then one
       merged segment per recorded pair

A segment takes part in at most one merge per sweep and there is no
second pass, so this is a pairwise reduction and not transitive
clustering. Two segments that could each merge with the same third
segment stay separate.
"""

import logging
from typing import List, Sequence, Tuple

from ..config import MERGE_ANGLE_THRESHOLD, MERGE_DISTANCE_THRESHOLD
from ..models.segment import LineSegment
from ..utils.geometry import is_mergeable

logger = logging.getLogger(__name__)


class SegmentMerger:

    def __init__(self, angle_threshold=MERGE_ANGLE_THRESHOLD, distance_threshold=MERGE_DISTANCE_THRESHOLD):
        """
        angle_threshold:    max raw angle difference, radians
        distance_threshold: max distance between midpoints, pixels
        """
        self.angle_threshold = angle_threshold
        self.distance_threshold = distance_threshold

    # ------------------------------------------------------------
    # Phase 1: find pairs
    # ------------------------------------------------------------
    def find_merge_pairs(self, segments: Sequence[LineSegment]) -> List[Tuple[int, int]]:
        """
        Returns (i, j) index pairs in discovery order. Once i finds a
        partner its scan stops; consumed indices are never compared again.
        """
        consumed = set()
        pairs = []

        for i in range(len(segments)):
            if i in consumed:
                continue
            for j in range(i + 1, len(segments)):
                if j in consumed:
                    continue
                if is_mergeable(segments[i], segments[j], self.angle_threshold, self.distance_threshold):
                    pairs.append((i, j))
                    consumed.update((i, j))
                    break

        return pairs

    # ------------------------------------------------------------
    # Phase 2: rebuild
    # ------------------------------------------------------------
    def merge(self, segments: Sequence[LineSegment]) -> List[LineSegment]:
        pairs = self.find_merge_pairs(segments)
        if not pairs:
            return list(segments)

        consumed = {idx for pair in pairs for idx in pair}
        kept = [seg for idx, seg in enumerate(segments) if idx not in consumed]
        merged = [segments[i].merged_with(segments[j]) for i, j in pairs]

        logger.debug("Merged %d segment pairs (%d -> %d)", len(pairs), len(segments), len(kept) + len(merged))
        return kept + merged


def merge_segments(segments: Sequence[LineSegment]) -> List[LineSegment]:
    """Merges with the default thresholds (8 degrees, 10 pixels)."""
    return SegmentMerger().merge(segments)
