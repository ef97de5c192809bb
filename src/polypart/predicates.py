"""
Geometry predicates on 2D coordinates.

All tests are sign comparisons on floating-point cross products. With the default
``eps`` of 0.0 they are exact comparisons; a positive ``eps`` widens the band of
cross products that count as collinear.
"""

from enum import IntEnum

import numpy as np

DEFAULT_EPS = 0.0


class Turn(IntEnum):
    RIGHT = -1
    COLLINEAR = 0
    LEFT = 1


# ─── Orientation ──────────────────────────────────────────────────────────────

def cross2d(o, a, b):
    """Z-component of (a-o) × (b-o). Positive = left turn (CCW)."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def orientation(a, b, c, eps=DEFAULT_EPS):
    """Classify the turn a -> b -> c."""
    d = cross2d(a, b, c)
    if d > eps:
        return Turn.LEFT
    if d < -eps:
        return Turn.RIGHT
    return Turn.COLLINEAR


def is_convex(p1, p2, p3, eps=DEFAULT_EPS):
    """True if p1 -> p2 -> p3 is a strict left turn."""
    return orientation(p1, p2, p3, eps) == Turn.LEFT


def is_reflex(p1, p2, p3, eps=DEFAULT_EPS):
    """True if p1 -> p2 -> p3 is a strict right turn."""
    return orientation(p1, p2, p3, eps) == Turn.RIGHT


def same_point(a, b):
    return a[0] == b[0] and a[1] == b[1]


# ─── Segments ─────────────────────────────────────────────────────────────────

def on_segment(a, b, p, eps=DEFAULT_EPS):
    """Return True if p lies on the closed segment a-b."""
    if orientation(a, b, p, eps) != Turn.COLLINEAR:
        return False
    return (
        min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
        and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])
    )


def segments_intersect(p1, p2, q1, q2, eps=DEFAULT_EPS):
    """
    Return True if the closed segments p1-p2 and q1-q2 share at least one point.
    Touching at an endpoint and collinear overlap both count.
    """
    d1 = orientation(q1, q2, p1, eps)
    d2 = orientation(q1, q2, p2, eps)
    d3 = orientation(p1, p2, q1, eps)
    d4 = orientation(p1, p2, q2, eps)
    if d1 * d2 < 0 and d3 * d4 < 0:
        return True
    # Collinear / touching cases
    return (
        (d1 == Turn.COLLINEAR and on_segment(q1, q2, p1, eps))
        or (d2 == Turn.COLLINEAR and on_segment(q1, q2, p2, eps))
        or (d3 == Turn.COLLINEAR and on_segment(p1, p2, q1, eps))
        or (d4 == Turn.COLLINEAR and on_segment(p1, p2, q2, eps))
    )


def point_in_triangle(p, a, b, c, eps=DEFAULT_EPS):
    """
    Return True if p is inside or on the boundary of the CCW triangle a, b, c.
    """
    return (
        orientation(a, b, p, eps) != Turn.RIGHT
        and orientation(b, c, p, eps) != Turn.RIGHT
        and orientation(c, a, p, eps) != Turn.RIGHT
    )


# ─── Areas ────────────────────────────────────────────────────────────────────

def signed_area(points, contour):
    """Shoelace area of the contour (indices into points). Positive for CCW."""
    pts = np.asarray(points, dtype=float)[list(contour)]
    if len(pts) < 3:
        return 0.0
    x, y = pts[:, 0], pts[:, 1]
    return float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2.0
