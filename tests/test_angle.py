import math

import pytest

from repcoach.exercises.base import ORIGIN, AngleCalculator, Point


TRIPLES = [
    (Point(0.2, 0.1), Point(0.4, 0.5), Point(0.9, 0.6)),
    (Point(0.0, 1.0), Point(0.5, 0.5), Point(1.0, 1.0)),
    (Point(0.31, 0.72), Point(0.33, 0.41), Point(0.05, 0.02)),
    (Point(0.9, 0.9), Point(0.1, 0.1), Point(0.1, 0.8)),
]


def test_right_angle():
    assert AngleCalculator.calculate_angle(Point(1, 0), Point(0, 0), Point(0, 1)) == pytest.approx(90.0)


def test_straight_line_is_180():
    assert AngleCalculator.calculate_angle(Point(0, 0), Point(1, 0), Point(2, 0)) == pytest.approx(180.0)


def test_reflex_angle_is_folded():
    a = Point(math.cos(math.radians(170)), math.sin(math.radians(170)))
    c = Point(math.cos(math.radians(190)), math.sin(math.radians(190)))
    assert AngleCalculator.calculate_angle(a, ORIGIN, c) == pytest.approx(20.0)


@pytest.mark.parametrize("a,b,c", TRIPLES)
def test_angle_in_range(a, b, c):
    angle = AngleCalculator.calculate_angle(a, b, c)
    assert 0.0 <= angle <= 180.0


@pytest.mark.parametrize("a,b,c", TRIPLES)
def test_symmetric_in_outer_joints(a, b, c):
    assert AngleCalculator.calculate_angle(a, b, c) == pytest.approx(
        AngleCalculator.calculate_angle(c, b, a))


def test_coincident_points_give_zero():
    p = Point(0.3, 0.3)
    angle = AngleCalculator.calculate_angle(p, p, p)
    assert angle == 0.0
    assert not math.isnan(angle)


def test_all_origin_gives_zero():
    assert AngleCalculator.calculate_angle(ORIGIN, ORIGIN, ORIGIN) == 0.0


def test_non_finite_input_gives_zero():
    assert AngleCalculator.calculate_angle(Point(float("nan"), 0.0), ORIGIN, Point(1, 1)) == 0.0


def test_accepts_plain_tuples():
    assert AngleCalculator.calculate_angle((1, 0), (0, 0), (0, 1)) == pytest.approx(90.0)
    assert isinstance(AngleCalculator.calculate_angle((1, 0), (0, 0), (0, 1)), float)
