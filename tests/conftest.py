"""Shared polygons and partition checks."""

import numpy as np
import pytest

from polypart.predicates import cross2d, signed_area


@pytest.fixture
def triangle():
    return [(0.0, 0.0), (4.0, 0.0), (1.0, 3.0)]


@pytest.fixture
def square():
    return [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.fixture
def l_shape():
    """Unit-2 square with a unit notch cut from its top-right corner."""
    return [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]


@pytest.fixture
def u_shape():
    """Two pillars on a bar; needs three convex parts."""
    return [(0, 0), (3, 0), (3, 2), (2, 2), (2, 1), (1, 1), (1, 2), (0, 2)]


@pytest.fixture
def square_with_hole():
    points = [
        (0, 0), (10, 0), (10, 10), (0, 10),
        (3, 3), (3, 7), (7, 7), (7, 3),
    ]
    return points, [[0, 1, 2, 3]], [[4, 5, 6, 7]]


def star_polygon(n_sides, seed):
    """
    Random star-shaped CCW polygon around the origin. Angles are jittered around
    an even spacing so the polygon is always simple.
    """
    rng = np.random.RandomState(seed)
    spacing = 2 * np.pi / n_sides
    angles = np.arange(n_sides) * spacing + rng.uniform(-0.3, 0.3, n_sides) * spacing
    radii = rng.uniform(0.5, 3.0, n_sides)
    pts = np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])
    return [tuple(p) for p in pts.tolist()]


def monotone_polygon(n_sides, seed):
    """
    Random x-monotone CCW polygon. The lower chain stays below y = 0 and the upper
    chain above it, so the polygon is simple but rarely star-shaped.
    """
    rng = np.random.RandomState(seed)
    xs = np.sort(rng.uniform(0.0, 10.0, n_sides))
    inner = xs[1:-1]
    on_top = rng.rand(n_sides - 2) < 0.5
    lower = [(x, -rng.uniform(0.1, 4.0)) for x in inner[~on_top]]
    upper = [(x, rng.uniform(0.1, 4.0)) for x in inner[on_top][::-1]]
    pts = [(xs[0], 0.0)] + lower + [(xs[-1], 0.0)] + upper
    return [(float(x), float(y)) for x, y in pts]


def _separated(points, part, other):
    """True if some edge line of part has all of other on its outer side."""
    n = len(part)
    for i in range(n):
        a, b = points[part[i]], points[part[(i + 1) % n]]
        if all(cross2d(a, b, points[v]) <= 1e-9 for v in other):
            return True
    return False


@pytest.fixture
def check_partition():
    """Return a function asserting the convex partition invariants."""

    def check(points, parts, expected_area):
        total = 0.0
        for part in parts:
            assert len(part) >= 3
            area = signed_area(points, part)
            assert area > 0.0, f"part {part} is not counter-clockwise"
            n = len(part)
            for i in range(n):
                turn = cross2d(points[part[i - 1]], points[part[i]], points[part[(i + 1) % n]])
                assert turn >= -1e-9, f"part {part} is reflex at {part[i]}"
            total += area
        assert total == pytest.approx(expected_area, rel=1e-9, abs=1e-9)
        # Convex parts have disjoint interiors iff an edge line separates them
        for x, p in enumerate(parts):
            for q in parts[x + 1:]:
                assert _separated(points, p, q) or _separated(points, q, p), (
                    f"parts {p} and {q} overlap"
                )

    return check
