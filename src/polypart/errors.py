"""Exceptions raised by the partition algorithms.

The public ``apply_*`` entry points turn every ``PartitionError`` into a ``False``
return value; the algorithm modules raise them directly.
"""


class PartitionError(Exception):
    """Base class for all partition failures."""


class InvalidPolygonError(PartitionError):
    """Input is not a usable polygon (too few vertices, not simple, wrong winding)."""


class UnresolvableHoleError(PartitionError):
    """A hole has no bridging diagonal to any enclosing contour."""


class DegenerateGeometryError(PartitionError):
    """Collinear or coincident points left an algorithm without a valid choice."""
