# ============================================================================
# Planimetry - Geometry Package
#
# Purpose: Planar figures behind a common Figure contract
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from Planimetry.geometry import Point, Triangle, ConvexQuadrilateral
#
# Changelog:
#   2026-03-02: Initial geometry package
# ============================================================================

from Planimetry.geometry.base import Figure, cross, is_convex, triangle_area, validate_vertex_count
from Planimetry.geometry.figures import ConvexQuadrilateral, Triangle
from Planimetry.geometry.point import Point

__all__ = [
    "Point",
    "Figure",
    "Triangle",
    "ConvexQuadrilateral",
    "cross",
    "is_convex",
    "triangle_area",
    "validate_vertex_count",
]
