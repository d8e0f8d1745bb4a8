import pytest

from shapeweave.geometry import Line, Point, is_left, segment_intersection


def test_point_arithmetic():
    p = Point(1.0, 2.0)
    q = Point(3.0, -1.0)
    assert p + q == Point(4.0, 1.0)
    assert p - q == Point(-2.0, 3.0)
    assert p * q == Point(3.0, -2.0)
    assert q / p == Point(3.0, -0.5)
    assert p + 1 == Point(2.0, 3.0)
    assert p * 2 == Point(2.0, 4.0)
    assert 2 * p == Point(2.0, 4.0)
    assert p / 2 == Point(0.5, 1.0)
    assert tuple(p) == (1.0, 2.0)


def test_point_is_immutable():
    p = Point(0.0, 0.0)
    with pytest.raises(AttributeError):
        p.x = 1.0


def test_crossing_segments():
    hit = Line(Point(0, 0), Point(2, 2)).intersection(Line(Point(0, 2), Point(2, 0)))
    assert hit == Point(1.0, 1.0)


def test_parallel_segments_do_not_intersect():
    assert Line(Point(0, 0), Point(2, 0)).intersection(Line(Point(0, 1), Point(2, 1))) is None
    # collinear overlap is treated as parallel as well
    assert Line(Point(0, 0), Point(2, 0)).intersection(Line(Point(1, 0), Point(3, 0))) is None


def test_lines_meet_outside_segment():
    # y = x and y = 3 - x meet at (1.5, 1.5), beyond the first segment
    assert segment_intersection((0, 0), (1, 1), (3, 0), (2, 1)) is None


def test_touching_endpoints_are_inclusive():
    hit = Line(Point(0, 0), Point(1, 0)).intersection(Line(Point(1, 0), Point(1, 1)))
    assert tuple(hit) == pytest.approx((1.0, 0.0))


def test_eps_controls_parallel_cutoff():
    a = ((0.0, 0.0), (1.0, 0.0))
    b = ((0.0, -1e-4), (1.0, 1e-4))
    assert segment_intersection(*a, *b) == pytest.approx((0.5, 0.0))
    assert segment_intersection(*a, *b, eps=1e-3) is None


def test_translate_line():
    moved = Line(Point(0, 0), Point(1, 1)) + Point(2, 3)
    assert moved == Line(Point(2, 3), Point(3, 4))


def test_is_left():
    assert is_left(0.0, 1.0, 0.0, 0.0, 1.0, 0.0)
    assert not is_left(0.0, -1.0, 0.0, 0.0, 1.0, 0.0)
    assert not is_left(2.0, 0.0, 0.0, 0.0, 1.0, 0.0)
    assert Line(Point(0, 0), Point(1, 0)).is_left(Point(0.5, 1.0))
