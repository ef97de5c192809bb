"""
Hertel-Mehlhorn convex partition.

Triangulate, then greedily drop triangulation diagonals whose removal keeps the
merged face convex at both diagonal endpoints. The result has at most four times
as many parts as the optimum.
"""

import logging

from .classify import is_convex_polygon
from .predicates import DEFAULT_EPS, is_reflex
from .triangulation import triangulate

logger = logging.getLogger(__name__)


def _merge(face_a, face_b, u, v):
    """
    Merge two faces across the diagonal u-v, where u -> v is an edge of face_a and
    v -> u an edge of face_b. Returns the merged CCW face.
    """
    na, nb = len(face_a), len(face_b)
    va = face_a.index(v)
    ub = face_b.index(u)
    # face_a from v round to the vertex before u, then face_b from u round to before v
    merged = [face_a[(va + k) % na] for k in range(na - 1)]
    merged += [face_b[(ub + k) % nb] for k in range(nb - 1)]
    return merged


def hertel_mehlhorn(points, contour, eps=DEFAULT_EPS):
    """
    Partition a CCW contour into convex parts.

    points:  sequence of (x, y) coordinates
    contour: list of indices into points
    Returns: list of convex parts, each a CCW list of indices into points
    """
    if is_convex_polygon(points, contour, eps):
        return [list(contour)]

    coords = [points[v] for v in contour]
    triangles, diagonals = triangulate(points, contour, eps)

    # Faces hold contour positions, which stay unique even when point indices repeat
    faces = {fid: list(tri) for fid, tri in enumerate(triangles)}
    owner = {}
    for fid, face in faces.items():
        for k in range(3):
            owner[(face[k], face[(k + 1) % 3])] = fid

    def corner_ok(prev, curr, nxt):
        return not is_reflex(coords[prev], coords[curr], coords[nxt], eps)

    # Merging only widens angles, so one pass leaves no removable diagonal behind
    removed = 0
    for p, q in diagonals:
        fa = owner.get((p, q))
        fb = owner.get((q, p))
        if fa is None or fb is None or fa == fb:
            continue
        face_a, face_b = faces[fa], faces[fb]
        na, nb = len(face_a), len(face_b)
        pa, qa = face_a.index(p), face_a.index(q)
        pb, qb = face_b.index(p), face_b.index(q)

        # At p: previous vertex comes from face_a, next from face_b
        if not corner_ok(face_a[(pa - 1) % na], p, face_b[(pb + 1) % nb]):
            continue
        # At q: previous vertex comes from face_b, next from face_a
        if not corner_ok(face_b[(qb - 1) % nb], q, face_a[(qa + 1) % na]):
            continue

        merged = _merge(face_a, face_b, p, q)
        del faces[fb]
        faces[fa] = merged
        m = len(merged)
        for k in range(m):
            owner[(merged[k], merged[(k + 1) % m])] = fa
        removed += 1

    logger.debug(
        "Hertel-Mehlhorn: %d triangles, %d diagonals removed, %d parts",
        len(triangles), removed, len(faces),
    )
    return [[contour[pos] for pos in face] for face in faces.values()]
