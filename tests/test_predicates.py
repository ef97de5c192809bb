"""Tests for the geometry predicates."""

import numpy as np
import pytest

from polypart.predicates import (
    Turn,
    cross2d,
    is_convex,
    is_reflex,
    on_segment,
    orientation,
    point_in_triangle,
    segments_intersect,
    signed_area,
)


def test_orientation_signs():
    """Test left, right and collinear turns."""
    assert orientation((0, 0), (1, 0), (0, 1)) == Turn.LEFT
    assert orientation((0, 0), (0, 1), (1, 0)) == Turn.RIGHT
    assert orientation((0, 0), (1, 1), (2, 2)) == Turn.COLLINEAR
    assert cross2d((0, 0), (1, 0), (0, 1)) == 1


def test_orientation_tolerance():
    """Test that eps widens the collinear band."""
    a, b, c = (0.0, 0.0), (1.0, 0.0), (2.0, 1e-12)
    assert orientation(a, b, c) == Turn.LEFT
    assert orientation(a, b, c, eps=1e-9) == Turn.COLLINEAR


def test_convex_and_reflex_are_strict():
    assert is_convex((0, 0), (1, 0), (1, 1))
    assert is_reflex((0, 0), (1, 0), (1, -1))
    assert not is_convex((0, 0), (1, 0), (2, 0))
    assert not is_reflex((0, 0), (1, 0), (2, 0))


@pytest.mark.parametrize(
    "p1, p2, q1, q2, expected",
    [
        ((0, 0), (2, 2), (0, 2), (2, 0), True),   # proper crossing
        ((0, 0), (1, 1), (1, 1), (2, 0), True),   # shared endpoint
        ((0, 0), (2, 0), (1, 0), (1, 5), True),   # T junction
        ((0, 0), (2, 0), (1, 0), (3, 0), True),   # collinear overlap
        ((0, 0), (1, 0), (2, 0), (3, 0), False),  # collinear, disjoint
        ((0, 0), (1, 0), (0, 1), (1, 1), False),  # parallel
        ((0, 0), (1, 1), (2, 0), (3, -5), False),
    ],
)
def test_segments_intersect(p1, p2, q1, q2, expected):
    assert segments_intersect(p1, p2, q1, q2) is expected
    assert segments_intersect(q1, q2, p1, p2) is expected


def test_on_segment():
    assert on_segment((0, 0), (2, 2), (1, 1))
    assert on_segment((0, 0), (2, 2), (2, 2))
    assert not on_segment((0, 0), (2, 2), (3, 3))
    assert not on_segment((0, 0), (2, 2), (1, 0))


def test_point_in_triangle_includes_boundary():
    a, b, c = (0, 0), (1, 0), (0, 1)
    assert point_in_triangle((0.2, 0.2), a, b, c)
    assert point_in_triangle((0.5, 0.0), a, b, c)
    assert point_in_triangle((0, 0), a, b, c)
    assert not point_in_triangle((1, 1), a, b, c)
    assert not point_in_triangle((-0.1, 0.5), a, b, c)


def test_signed_area(square):
    assert signed_area(square, [0, 1, 2, 3]) == pytest.approx(1.0)
    assert signed_area(square, [3, 2, 1, 0]) == pytest.approx(-1.0)
    assert signed_area(np.array(square), [0, 1, 2]) == pytest.approx(0.5)
    assert signed_area(square, [0, 1]) == 0.0
