"""
Ear-clipping triangulation of a CCW contour.

Used as the starting point of the Hertel-Mehlhorn reducer. The contour may repeat
point indices (the bridge vertices produced by hole removal), so the ring works on
contour positions and compares vertices by coordinate where identity matters.
"""

import math

from .errors import DegenerateGeometryError
from .predicates import DEFAULT_EPS, is_convex, point_in_triangle, same_point


class _EarRing:
    """Doubly-linked ring of contour positions with per-vertex ear state."""

    def __init__(self, coords, eps):
        n = len(coords)
        self.coords = coords
        self.eps = eps
        self.prev = [(i - 1) % n for i in range(n)]
        self.next = [(i + 1) % n for i in range(n)]
        self.active = [True] * n
        self.is_ear = [False] * n
        self.angle = [0.0] * n
        for i in range(n):
            self.update(i)

    def update(self, i):
        """Recompute convexity, ear status and sharpness of position i."""
        a = self.coords[self.prev[i]]
        b = self.coords[i]
        c = self.coords[self.next[i]]

        # Cosine of the corner angle; larger means a sharper ear
        v1 = (a[0] - b[0], a[1] - b[1])
        v3 = (c[0] - b[0], c[1] - b[1])
        len1 = math.hypot(*v1)
        len3 = math.hypot(*v3)
        if len1 > 0.0 and len3 > 0.0:
            self.angle[i] = (v1[0] * v3[0] + v1[1] * v3[1]) / (len1 * len3)
        else:
            self.angle[i] = -1.0

        if not is_convex(a, b, c, self.eps):
            self.is_ear[i] = False
            return

        self.is_ear[i] = True
        for k, p in enumerate(self.coords):
            if not self.active[k]:
                continue
            if same_point(p, a) or same_point(p, b) or same_point(p, c):
                continue
            if point_in_triangle(p, a, b, c, self.eps):
                self.is_ear[i] = False
                return

    def best_ear(self):
        """The active ear with the sharpest corner, or None."""
        best = None
        for i, ear in enumerate(self.is_ear):
            if not (ear and self.active[i]):
                continue
            if best is None or self.angle[i] > self.angle[best]:
                best = i
        return best

    def clip(self, i):
        p, q = self.prev[i], self.next[i]
        self.active[i] = False
        self.next[p] = q
        self.prev[q] = p
        return p, q


def triangulate(points, contour, eps=DEFAULT_EPS):
    """
    Triangulate a CCW contour by ear clipping.

    points:  sequence of (x, y) coordinates
    contour: list of indices into points (repeats allowed for bridged holes)
    Returns: (triangles, diagonals) where triangles are CCW triples of contour
             positions (n - 2 of them) and diagonals are the (n - 3) position
             pairs cut off while clipping.
    """
    n = len(contour)
    if n < 3:
        raise DegenerateGeometryError(f"cannot triangulate a contour with {n} vertices")
    if n == 3:
        return [(0, 1, 2)], []

    ring = _EarRing([points[v] for v in contour], eps)
    triangles = []
    diagonals = []

    for step in range(n - 3):
        ear = ring.best_ear()
        if ear is None:
            raise DegenerateGeometryError(
                f"no ear left after clipping {step} of {n - 3} triangles"
            )
        p, q = ring.prev[ear], ring.next[ear]
        triangles.append((p, ear, q))
        diagonals.append((p, q))
        ring.clip(ear)
        ring.update(p)
        ring.update(q)

    last = next(i for i in range(n) if ring.active[i])
    triangles.append((ring.prev[last], last, ring.next[last]))
    return triangles, diagonals
