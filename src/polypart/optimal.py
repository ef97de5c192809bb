"""
Minimum convex partition of a simple polygon (Keil-Snoeyink).

Dynamic program over the diagonals of the polygon. State (i, k), i < k, describes
the sub-polygon bounded by the chain i..k and the segment i-k:

  weight[i, k]  minimum number of diagonals needed inside the sub-polygon
  pairs[i][k]   narrowest (i-neighbour, k-neighbour) pairs of the convex piece
                that touches i-k, for every optimal solution worth keeping

Only diagonals with a reflex endpoint can be part of a minimum partition, so
states are filled for a non-convex i (type A) or a convex i with a reflex k
(type B). Tables are filled by increasing gap k - i, then the partition is read
back from the pair lists.

Time O(n^3), memory O(n^3) in the worst case.
"""

import logging
from collections import deque

import numpy as np

from .classify import is_convex_polygon
from .errors import DegenerateGeometryError
from .predicates import DEFAULT_EPS, is_reflex
from .visibility import visibility_table

logger = logging.getLogger(__name__)

_UNSOLVED = 2 ** 31 - 1


class _Table:
    def __init__(self, coords, eps):
        n = len(coords)
        self.n = n
        self.coords = coords
        self.eps = eps
        # Straight vertices are not notches
        self.convex = [
            not is_reflex(coords[(i - 1) % n], coords[i], coords[(i + 1) % n], eps)
            for i in range(n)
        ]
        self.visible = np.zeros((n, n), dtype=bool)
        self.weight = np.full((n, n), _UNSOLVED, dtype=np.int64)
        self.pairs = [[deque() for _ in range(n)] for _ in range(n)]

    def reflex(self, a, b, c):
        return is_reflex(self.coords[a], self.coords[b], self.coords[c], self.eps)

    def update(self, a, b, w, i, j):
        """Offer the pair (i, j) with weight w to state (a, b)."""
        if w >= _UNSOLVED:
            return
        w2 = int(self.weight[a, b])
        if w > w2:
            return
        pairs = self.pairs[a][b]
        if w < w2:
            pairs.clear()
            pairs.appendleft((i, j))
            self.weight[a, b] = w
            return
        # Equal weight: keep the list ordered and free of dominated pairs
        if pairs and i <= pairs[0][0]:
            return
        while pairs and pairs[0][1] >= j:
            pairs.popleft()
        pairs.appendleft((i, j))

    def type_a(self, i, j, k):
        """Piece on i-k has j as the neighbour of k."""
        if not self.visible[i, j]:
            return
        top = j
        w = int(self.weight[i, j])
        if k - j > 1:
            if not self.visible[j, k]:
                return
            w += int(self.weight[j, k]) + 1
        if j - i > 1:
            last = None
            for pair in reversed(self.pairs[i][j]):
                if self.reflex(pair[1], j, k):
                    break
                last = pair
            if last is None:
                w += 1
            elif self.reflex(k, i, last[0]):
                w += 1
            else:
                top = last[0]
        self.update(i, k, w, top, j)

    def type_b(self, i, j, k):
        """Piece on i-k has j as the neighbour of i."""
        if not self.visible[j, k]:
            return
        top = j
        w = int(self.weight[j, k])
        if j - i > 1:
            if not self.visible[i, j]:
                return
            w += int(self.weight[i, j]) + 1
        if k - j > 1:
            last = None
            for pair in self.pairs[j][k]:
                if self.reflex(i, j, pair[0]):
                    break
                last = pair
            if last is None:
                w += 1
            elif self.reflex(last[1], k, i):
                w += 1
            else:
                top = last[1]
        self.update(i, k, w, j, top)

    def solve(self, points, contour):
        n = self.n
        self.visible[:, :] = visibility_table(points, contour, self.eps)
        for i in range(n - 1):
            self.weight[i, i + 1] = 0
        # The closing edge is the root of the recursion
        self.visible[0, n - 1] = True

        for i in range(n - 2):
            if self.visible[i, i + 2]:
                self.weight[i, i + 2] = 0
                self.pairs[i][i + 2].append((i + 1, i + 1))

        # Treating vertex 0 as reflex makes the root a type A state
        self.convex[0] = False

        for gap in range(3, n):
            for i in range(n - gap):
                if self.convex[i]:
                    continue
                k = i + gap
                if not self.visible[i, k]:
                    continue
                if not self.convex[k]:
                    for j in range(i + 1, k):
                        self.type_a(i, j, k)
                else:
                    for j in range(i + 1, k - 1):
                        if not self.convex[j]:
                            self.type_a(i, j, k)
                    self.type_a(i, k - 1, k)

            for k in range(gap, n):
                if self.convex[k]:
                    continue
                i = k - gap
                if self.convex[i] and self.visible[i, k]:
                    self.type_b(i, i + 1, k)
                    for j in range(i + 2, k):
                        if not self.convex[j]:
                            self.type_b(i, j, k)

    def pin(self, a, b, side, value):
        """Reduce the pairs of state (a, b) to the one whose side-th entry is value."""
        for pair in self.pairs[a][b]:
            if pair[side] == value:
                self.pairs[a][b] = deque([pair])
                return
        raise DegenerateGeometryError(f"inconsistent pieces on ({a}, {b})")

    def choose(self):
        """
        Walk the chosen solution from the root. Where a piece continues into a
        sub-state, pin that sub-state to the pair the merge was checked with.
        """
        stack = [(0, self.n - 1)]
        while stack:
            i, k = stack.pop()
            if k - i <= 1:
                continue
            pairs = self.pairs[i][k]
            if not pairs:
                raise DegenerateGeometryError(f"no convex piece fits on ({i}, {k})")
            if not self.convex[i]:
                top, j = pairs[-1]
                stack.append((j, k))
                if j - i > 1:
                    if top != j:
                        self.pin(i, j, 0, top)
                    stack.append((i, j))
            else:
                j, top = pairs[0]
                stack.append((i, j))
                if k - j > 1:
                    if top != j:
                        self.pin(j, k, 1, top)
                    stack.append((j, k))

    def pieces(self):
        """Collect the vertex positions of every convex piece."""
        result = []
        real = deque([(0, self.n - 1)])
        while real:
            i, k = real.popleft()
            if k - i <= 1:
                continue
            indices = [i, k]
            same_piece = deque([(i, k)])
            while same_piece:
                a, b = same_piece.popleft()
                if b - a <= 1:
                    continue
                pairs = self.pairs[a][b]
                ab_real = bc_real = True
                if not self.convex[a]:
                    top, j = pairs[-1]
                    ab_real = top == j
                else:
                    j, top = pairs[0]
                    bc_real = top == j
                (real if ab_real else same_piece).append((a, j))
                (real if bc_real else same_piece).append((j, b))
                indices.append(j)
            result.append(sorted(indices))
        return result


def optimal_partition(points, contour, eps=DEFAULT_EPS):
    """
    Minimum-count convex partition of a simple CCW contour.

    points:  sequence of (x, y) coordinates
    contour: list of distinct indices into points
    Returns: list of convex parts, each a CCW list of indices into points
    """
    if is_convex_polygon(points, contour, eps):
        return [list(contour)]

    table = _Table([points[v] for v in contour], eps)
    table.solve(points, contour)
    table.choose()
    parts = [[contour[pos] for pos in piece] for piece in table.pieces()]
    for part in parts:
        if not is_convex_polygon(points, part, eps):
            raise DegenerateGeometryError(f"recovered part {part} is not convex")
    logger.debug(
        "Keil-Snoeyink: %d vertices, %d diagonals, %d parts",
        len(contour), int(table.weight[0, len(contour) - 1]), len(parts),
    )
    return parts
