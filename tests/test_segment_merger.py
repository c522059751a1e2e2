import math

import pytest

from geofeatures.detectors.segment_merger import SegmentMerger, merge_segments
from geofeatures.models.segment import LineSegment


def test_defaults():
    merger = SegmentMerger()
    assert merger.angle_threshold == pytest.approx(math.radians(8))
    assert merger.distance_threshold == 10.0


def test_empty_input():
    assert merge_segments([]) == []


def test_coincident_parallel_pair_becomes_one_segment():
    first = LineSegment(0, 0, 20, 0)
    second = LineSegment(2, 0, 18, 0)

    merged = merge_segments([first, second])

    assert merged == [LineSegment(0, 0, 18, 0)]
    assert merged[0].start == first.start
    assert merged[0].end == second.end


def test_angle_above_threshold_is_never_merged():
    flat = LineSegment(0, 0, 100, 0)
    tilted = LineSegment(0, 0, 100, 20)   # ~11.3 degrees, midpoints 10px apart

    assert merge_segments([flat, tilted]) == [flat, tilted]


def test_small_angle_within_threshold_merges():
    flat = LineSegment(0, 0, 100, 0)
    tilted = LineSegment(0, 0, 100, 12)   # ~6.8 degrees

    assert merge_segments([flat, tilted]) == [LineSegment(0, 0, 100, 12)]


def test_distance_above_threshold_is_not_merged():
    a = LineSegment(0, 0, 20, 0)
    b = LineSegment(0, 20, 20, 20)

    assert merge_segments([a, b]) == [a, b]


def test_distance_equal_to_threshold_merges():
    a = LineSegment(0, 0, 20, 0)
    b = LineSegment(0, 10, 20, 10)

    assert merge_segments([a, b]) == [LineSegment(0, 0, 20, 10)]


def test_antiparallel_collinear_segments_stay_separate():
    forward = LineSegment(0, 0, 20, 0)
    backward = LineSegment(20, 0, 0, 0)

    assert merge_segments([forward, backward]) == [forward, backward]


def test_single_pass_is_not_transitive():
    a = LineSegment(0, 0, 20, 0)     # mid (10, 0)
    b = LineSegment(0, 6, 20, 6)     # mid (10, 6)
    c = LineSegment(0, 12, 20, 12)   # mid (10, 12): close to b, far from a

    merged = merge_segments([a, b, c])

    assert merged == [c, LineSegment(0, 0, 20, 6)]


def test_unmerged_keep_order_and_merged_are_appended():
    a = LineSegment(0, 0, 20, 0)
    far1 = LineSegment(300, 300, 340, 300)
    b = LineSegment(1, 2, 21, 2)
    far2 = LineSegment(500, 100, 500, 160)

    merged = merge_segments([a, far1, b, far2])

    assert merged == [far1, far2, LineSegment(0, 0, 21, 2)]


def test_each_segment_consumed_at_most_once():
    a = LineSegment(0, 0, 20, 0)
    b = LineSegment(0, 1, 20, 1)
    c = LineSegment(0, 2, 20, 2)
    d = LineSegment(0, 3, 20, 3)

    merger = SegmentMerger()
    assert merger.find_merge_pairs([a, b, c, d]) == [(0, 1), (2, 3)]
    assert merger.merge([a, b, c, d]) == [LineSegment(0, 0, 20, 1), LineSegment(0, 2, 20, 3)]


def test_input_sequence_is_not_modified():
    segments = [LineSegment(0, 0, 20, 0), LineSegment(2, 0, 18, 0)]
    snapshot = list(segments)

    merge_segments(segments)

    assert segments == snapshot


def test_custom_thresholds():
    a = LineSegment(0, 0, 20, 0)
    b = LineSegment(0, 20, 20, 20)

    assert SegmentMerger(distance_threshold=25).merge([a, b]) == [LineSegment(0, 0, 20, 20)]
