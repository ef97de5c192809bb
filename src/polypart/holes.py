"""
Hole removal by bridging.

Every hole is spliced into an enclosing contour through a bridge: a segment from
the hole's rightmost vertex to a visible vertex further right, walked once in each
direction. Contours live in an arena of vertex occurrences linked by next/prev
indices, so a bridge just adds two occurrences and relinks four pointers.
"""

import logging
import math

from .errors import UnresolvableHoleError
from .predicates import DEFAULT_EPS
from .visibility import blocks, in_cone

logger = logging.getLogger(__name__)


class VertexArena:
    """Closed loops of point indices stored as linked vertex occurrences."""

    def __init__(self):
        self.point = []
        self.next = []
        self.prev = []

    def add_loop(self, contour):
        """Append a closed loop and return the occurrence of its first vertex."""
        start = len(self.point)
        n = len(contour)
        for k, v in enumerate(contour):
            self.point.append(v)
            self.next.append(start + (k + 1) % n)
            self.prev.append(start + (k - 1) % n)
        return start

    def _copy(self, occ):
        self.point.append(self.point[occ])
        self.next.append(-1)
        self.prev.append(-1)
        return len(self.point) - 1

    def walk(self, head):
        """Yield the occurrences of the loop starting at head."""
        occ = head
        while True:
            yield occ
            occ = self.next[occ]
            if occ == head:
                return

    def loop(self, head):
        return [self.point[occ] for occ in self.walk(head)]

    def splice(self, outer, hole):
        """
        Join the loop through hole into the loop through outer with a bridge:
        ... outer -> hole -> (hole loop) -> hole' -> outer' -> ...
        """
        outer_copy = self._copy(outer)
        hole_copy = self._copy(hole)
        after_outer = self.next[outer]
        before_hole = self.prev[hole]

        self.next[outer] = hole
        self.prev[hole] = outer

        self.next[before_hole] = hole_copy
        self.prev[hole_copy] = before_hole

        self.next[hole_copy] = outer_copy
        self.prev[outer_copy] = hole_copy

        self.next[outer_copy] = after_outer
        self.prev[after_outer] = outer_copy


def _rightmost(arena, points, hole_heads):
    """The hole occurrence with the largest x (first one on ties)."""
    best_head = best_occ = None
    for head in hole_heads:
        for occ in arena.walk(head):
            if best_occ is None or points[arena.point[occ]][0] > points[arena.point[best_occ]][0]:
                best_head, best_occ = head, occ
    return best_head, best_occ


def _bridge_target(arena, points, outer_heads, all_heads, hole_point, eps):
    """Outer occurrence to connect hole_point to, or None."""
    edges = [
        (points[arena.point[occ]], points[arena.point[arena.next[occ]]])
        for head in all_heads
        for occ in arena.walk(head)
    ]

    best = None
    best_dir = None
    for head in outer_heads:
        for occ in arena.walk(head):
            p = points[arena.point[occ]]
            if p[0] <= hole_point[0]:
                continue
            prev = points[arena.point[arena.prev[occ]]]
            nxt = points[arena.point[arena.next[occ]]]
            if not in_cone(prev, p, nxt, hole_point, eps):
                continue
            # Prefer the candidate whose direction from the hole is closest to +x
            dx, dy = p[0] - hole_point[0], p[1] - hole_point[1]
            direction = dx / math.hypot(dx, dy)
            if best_dir is not None and best_dir > direction:
                continue
            if any(blocks(hole_point, p, c, d, eps) for c, d in edges):
                continue
            best, best_dir = occ, direction
    return best


def remove_holes(points, outer_contours, hole_contours, eps=DEFAULT_EPS):
    """
    Merge every hole into an enclosing contour.

    points:         sequence of (x, y) coordinates
    outer_contours: CCW contours (lists of indices into points)
    hole_contours:  CW contours inside the outer ones
    Returns: list of CCW contours, one per outer contour, with bridged holes
    Raises UnresolvableHoleError if a hole has no visible enclosing vertex.
    """
    arena = VertexArena()
    outer_heads = [arena.add_loop(c) for c in outer_contours]
    hole_heads = [arena.add_loop(c) for c in hole_contours]

    while hole_heads:
        head, hole_occ = _rightmost(arena, points, hole_heads)
        hole_point = points[arena.point[hole_occ]]
        target = _bridge_target(
            arena, points, outer_heads, outer_heads + hole_heads, hole_point, eps
        )
        if target is None:
            raise UnresolvableHoleError(
                f"hole vertex {arena.point[hole_occ]} at {tuple(hole_point)} "
                "sees no enclosing contour vertex"
            )
        logger.debug(
            "Bridging hole vertex %d to contour vertex %d",
            arena.point[hole_occ], arena.point[target],
        )
        arena.splice(target, hole_occ)
        hole_heads.remove(head)

    return [arena.loop(head) for head in outer_heads]
