"""Convex / reflex classification of contour vertices."""

from enum import Enum

from .predicates import DEFAULT_EPS, Turn, orientation


class VertexKind(Enum):
    CONVEX = "convex"
    REFLEX = "reflex"


def vertex_kind(prev, curr, nxt, ccw=True, eps=DEFAULT_EPS):
    """
    Kind of the vertex curr between prev and nxt on a contour wound CCW (or CW if
    ccw is False). A straight angle counts as convex.
    """
    turn = orientation(prev, curr, nxt, eps)
    reflex_turn = Turn.RIGHT if ccw else Turn.LEFT
    return VertexKind.REFLEX if turn == reflex_turn else VertexKind.CONVEX


def classify(points, contour, ccw=True, eps=DEFAULT_EPS):
    """Return the VertexKind of every position of the contour."""
    n = len(contour)
    return [
        vertex_kind(
            points[contour[(i - 1) % n]],
            points[contour[i]],
            points[contour[(i + 1) % n]],
            ccw,
            eps,
        )
        for i in range(n)
    ]


def reflex_positions(points, contour, ccw=True, eps=DEFAULT_EPS):
    kinds = classify(points, contour, ccw, eps)
    return [i for i, kind in enumerate(kinds) if kind is VertexKind.REFLEX]


def is_convex_polygon(points, contour, eps=DEFAULT_EPS):
    """True if the CCW contour has no reflex vertex."""
    return not reflex_positions(points, contour, True, eps)
