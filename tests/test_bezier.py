import numpy as np
import pytest

from relaxed_splines.core.bezier import (
    BezierSegment,
    bezier_segments,
    sample_curve,
    segments_from_control_points,
)
from relaxed_splines.core.points import Point
from relaxed_splines.exceptions import ConfigurationError, ValidationError


def test_segment_handles(zigzag_points):
    segments = bezier_segments(zigzag_points)

    assert len(segments) == 3
    first = segments[0]
    assert first.start == zigzag_points[0]
    assert first.end == zigzag_points[1]
    # B0 = (0, 0), B1 = (1, 10/3)
    np.testing.assert_allclose(first.control1.as_tuple(), (1.0 / 3.0, 10.0 / 9.0))
    np.testing.assert_allclose(first.control2.as_tuple(), (2.0 / 3.0, 20.0 / 9.0))


def test_segments_are_c1_continuous(random_points):
    segments = bezier_segments(random_points[:50])
    for left, right in zip(segments, segments[1:]):
        incoming = np.subtract(left.end.as_tuple(), left.control2.as_tuple())
        outgoing = np.subtract(right.control1.as_tuple(), right.start.as_tuple())
        np.testing.assert_allclose(incoming, outgoing, atol=1e-9)


def test_evaluate_endpoints():
    segment = BezierSegment(Point(0, 0), Point(1, 1), Point(2, 1), Point(3, 0))
    np.testing.assert_array_equal(segment.evaluate(0.0), [0.0, 0.0])
    np.testing.assert_allclose(segment.evaluate(1.0), [3.0, 0.0])
    assert segment.evaluate(np.linspace(0, 1, 5)).shape == (5, 2)


def test_sample_curve_passes_through_points(zigzag_points):
    curve = sample_curve(zigzag_points, samples_per_segment=8)

    assert curve.shape == (3 * 8 + 1, 2)
    data = np.array([p.as_tuple() for p in zigzag_points])
    np.testing.assert_allclose(curve[::8], data, atol=1e-12)


def test_sample_curve_rejects_bad_count(zigzag_points):
    with pytest.raises(ConfigurationError):
        sample_curve(zigzag_points, samples_per_segment=0)


def test_segments_length_mismatch(zigzag_points):
    with pytest.raises(ValidationError):
        segments_from_control_points(zigzag_points, zigzag_points[:3])
