"""
Entry points of the convex partition engine.

All three operations take point coordinates by an externally owned, read-only
sequence and report success as a bool. ``parts`` is an output list: it is cleared
on every call and, on success, filled with convex parts given as lists of point
indices in CCW order.
"""

import logging

import numpy as np

from .errors import InvalidPolygonError, PartitionError, UnresolvableHoleError
from .hertel_mehlhorn import hertel_mehlhorn
from .holes import remove_holes
from .optimal import optimal_partition
from .predicates import DEFAULT_EPS, Turn, orientation, same_point, segments_intersect, signed_area

logger = logging.getLogger(__name__)


# ─── Input validation ─────────────────────────────────────────────────────────

def as_points(points):
    """Read-only list of (x, y) float tuples from any (n, 2) array-like."""
    try:
        arr = np.asarray(points, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidPolygonError(f"points are not numeric: {exc}") from exc
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidPolygonError(f"points must have shape (n, 2), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidPolygonError("points contain NaN or infinite coordinates")
    return [tuple(p) for p in arr.tolist()]


def is_simple(points, contour):
    """Return True if the closed contour has no self-contact."""
    n = len(contour)
    if n < 3 or len(set(contour)) != n:
        return False
    pts = [points[v] for v in contour]
    for i in range(n):
        a, b, c = pts[i], pts[(i + 1) % n], pts[(i + 2) % n]
        if same_point(a, b):
            return False
        # Adjacent edges may only meet at their shared vertex
        if orientation(a, b, c) == Turn.COLLINEAR:
            if (a[0] - b[0]) * (c[0] - b[0]) + (a[1] - b[1]) * (c[1] - b[1]) > 0:
                return False
    for i in range(n):
        a, b = pts[i], pts[(i + 1) % n]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue  # Adjacent wrap-around edges share a vertex
            if segments_intersect(a, b, pts[j], pts[(j + 1) % n]):
                return False
    return True


def check_contour(points, contour, ccw=True, what="polygon"):
    """Validate one contour and return it as a list of ints."""
    try:
        contour = [int(v) for v in contour]
    except (TypeError, ValueError) as exc:
        raise InvalidPolygonError(f"{what} indices are not integers: {exc}") from exc
    if len(contour) < 3:
        raise InvalidPolygonError(f"{what} has {len(contour)} vertices, need at least 3")
    if any(v < 0 or v >= len(points) for v in contour):
        raise InvalidPolygonError(f"{what} refers to a point outside 0..{len(points) - 1}")
    if not is_simple(points, contour):
        raise InvalidPolygonError(f"{what} is not simple")
    area = signed_area(points, contour)
    if ccw and area <= 0.0:
        raise InvalidPolygonError(f"{what} is not counter-clockwise (area {area:g})")
    if not ccw and area >= 0.0:
        raise InvalidPolygonError(f"{what} is not clockwise (area {area:g})")
    return contour


# ─── Partition ────────────────────────────────────────────────────────────────

class PolygonPartition:
    """
    Convex partition of polygons.

    eps is the absolute tolerance on cross products below which three points are
    treated as collinear. The default 0.0 means exact sign tests.
    """

    def __init__(self, eps=DEFAULT_EPS):
        if eps < 0:
            raise ValueError(f"eps must be non-negative, got {eps}")
        self.eps = eps

    def _run(self, name, parts, compute):
        parts.clear()
        try:
            result = compute()
        except PartitionError as exc:
            logger.debug("%s failed: %s", name, exc)
            return False
        parts.extend(result)
        logger.debug("%s produced %d parts", name, len(result))
        return True

    def apply_opt(self, poly, parts):
        """
        Optimal convex partition (minimum number of parts) by Keil-Snoeyink.
        O(n^3) time and memory.

        poly:  vertices of a polygon without holes, counter-clockwise
        parts: output list, filled with parts as lists of indices into poly
        Returns True on success, False on failure (parts is then empty).
        """
        def compute():
            points = as_points(poly)
            contour = check_contour(points, range(len(points)))
            return optimal_partition(points, contour, self.eps)

        return self._run("apply_opt", parts, compute)

    def apply_hm(self, poly, parts):
        """
        Convex partition by Hertel-Mehlhorn: at most four times the optimal
        number of parts, usually far closer. O(n^2) time.

        poly:  vertices of a polygon without holes, counter-clockwise
        parts: output list, filled with parts as lists of indices into poly
        Returns True on success, False on failure (parts is then empty).
        """
        def compute():
            points = as_points(poly)
            contour = check_contour(points, range(len(points)))
            return hertel_mehlhorn(points, contour, self.eps)

        return self._run("apply_hm", parts, compute)

    def apply(self, points, polys, holes, parts):
        """
        Convex partition of a general polygon made of outer contours and holes,
        using Hertel-Mehlhorn after the holes are bridged away.

        points: shared point coordinates
        polys:  outer contours, counter-clockwise lists of indices into points
        holes:  hole contours, clockwise lists of indices into points
        parts:  output list, filled with parts as lists of indices into points
        Returns True on success, False on failure (parts is then empty).
        """
        def compute():
            pts = as_points(points)
            outers = [check_contour(pts, c, True, "outer contour") for c in polys]
            inners = [check_contour(pts, c, False, "hole") for c in holes]
            if inners and not outers:
                raise UnresolvableHoleError("holes given without any outer contour")
            result = []
            for contour in remove_holes(pts, outers, inners, self.eps):
                result.extend(hertel_mehlhorn(pts, contour, self.eps))
            return result

        return self._run("apply", parts, compute)


_default = PolygonPartition()
apply_opt = _default.apply_opt
apply_hm = _default.apply_hm
apply = _default.apply
