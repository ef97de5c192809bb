"""Convex partition of planar polygons, with or without holes."""

from .errors import (
    DegenerateGeometryError,
    InvalidPolygonError,
    PartitionError,
    UnresolvableHoleError,
)
from .partition import PolygonPartition, apply, apply_hm, apply_opt

__version__ = "0.1.0"

__all__ = [
    "PolygonPartition",
    "apply",
    "apply_hm",
    "apply_opt",
    "PartitionError",
    "InvalidPolygonError",
    "UnresolvableHoleError",
    "DegenerateGeometryError",
]
