"""
Diagonal tests for simple polygons.

Positions are indices into a contour, and contours are lists of indices into the
point sequence. A diagonal (i, j) connects two non-adjacent positions whose open
segment runs through the interior without touching the boundary.
"""

import numpy as np

from .predicates import DEFAULT_EPS, is_convex, on_segment, same_point, segments_intersect


def in_cone(prev, apex, nxt, p, eps=DEFAULT_EPS):
    """
    Return True if p lies strictly inside the interior angle prev-apex-nxt of a
    CCW contour. Works for convex and reflex apexes.
    """
    if is_convex(prev, apex, nxt, eps):
        return is_convex(prev, apex, p, eps) and is_convex(apex, nxt, p, eps)
    return is_convex(prev, apex, p, eps) or is_convex(apex, nxt, p, eps)


def blocks(a, b, c, d, eps=DEFAULT_EPS):
    """
    Return True if edge c-d gets in the way of segment a-b. Contact at a shared
    endpoint (same coordinates) does not count.
    """
    if same_point(a, c) or same_point(a, d) or same_point(b, c) or same_point(b, d):
        return False
    return segments_intersect(a, b, c, d, eps)


def is_diagonal(points, contour, i, j, eps=DEFAULT_EPS):
    """
    Return True if positions i and j of the CCW contour form an internal diagonal.
    """
    n = len(contour)
    i %= n
    j %= n
    if i == j or (i + 1) % n == j or (j + 1) % n == i:
        return False

    a = points[contour[i]]
    b = points[contour[j]]
    if same_point(a, b):
        return False

    if not in_cone(points[contour[i - 1]], a, points[contour[(i + 1) % n]], b, eps):
        return False
    if not in_cone(points[contour[j - 1]], b, points[contour[(j + 1) % n]], a, eps):
        return False

    for k in range(n):
        c = points[contour[k]]
        d = points[contour[(k + 1) % n]]
        if blocks(a, b, c, d, eps):
            return False
        # A vertex sitting on the open segment splits it even without a crossing
        if k not in (i, j) and not same_point(c, a) and not same_point(c, b):
            if on_segment(a, b, c, eps):
                return False
    return True


def diagonals(points, contour, eps=DEFAULT_EPS):
    """All diagonals (i, j) with i < j, in lexicographic order."""
    n = len(contour)
    return [
        (i, j)
        for i in range(n - 2)
        for j in range(i + 2, n)
        if is_diagonal(points, contour, i, j, eps)
    ]


def visibility_table(points, contour, eps=DEFAULT_EPS):
    """
    Symmetric (n, n) boolean matrix: True for contour edges and diagonals.
    """
    n = len(contour)
    visible = np.zeros((n, n), dtype=bool)
    for i in range(n):
        visible[i, (i + 1) % n] = visible[(i + 1) % n, i] = True
    for i, j in diagonals(points, contour, eps):
        visible[i, j] = visible[j, i] = True
    return visible
