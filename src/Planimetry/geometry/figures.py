# ============================================================================
# Planimetry - Concrete Figures
#
# Purpose: Triangle and ConvexQuadrilateral implementations of Figure
# Inputs: Exactly 3 or 4 points
# Outputs: Validated figures with area computation
# Dependencies: geometry.base, errors, logging_utils
# Usage: Triangle((0, 0), (3, 0), (0, 4)).area()  # 6.0
#
# Changelog:
#   2026-03-02: Initial Triangle and ConvexQuadrilateral
#   2026-03-05: Wrong vertex counts are rejected exactly (previously only too few)
# ============================================================================

from typing import Iterable, Tuple

from Planimetry.errors import NotConvexError
from Planimetry.geometry.base import Figure, PointLike, is_convex, triangle_area, validate_vertex_count
from Planimetry.geometry.point import Point
from Planimetry.logging_utils import get_logger

logger = get_logger(__name__)


class Triangle(Figure):
    """Triangle given by three vertices."""

    name = "Triangle"
    _vertices: Tuple[Point, ...] = ()

    def __init__(self, *points: PointLike):
        self.set_vertices(points)
        logger.debug(f"Triangle created: {self!r}")

    @property
    def vertex_count(self) -> int:
        return 3

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return self._vertices

    def set_vertices(self, points: Iterable[PointLike]) -> None:
        self._vertices = validate_vertex_count(points, self.vertex_count, self.name)

    def area(self) -> float:
        a, b, c = self._vertices
        return triangle_area(a, b, c)


class ConvexQuadrilateral(Figure):
    """
    Convex quadrilateral given by four vertices in winding order.

    The area splits the figure along the v0-v2 diagonal, which is only valid
    for convex input; ``set_vertices`` enforces that before storing.
    """

    name = "Convex quadrilateral"
    _vertices: Tuple[Point, ...] = ()

    def __init__(self, *points: PointLike):
        self.set_vertices(points)
        logger.debug(f"ConvexQuadrilateral created: {self!r}")

    @property
    def vertex_count(self) -> int:
        return 4

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return self._vertices

    def set_vertices(self, points: Iterable[PointLike]) -> None:
        vertices = validate_vertex_count(points, self.vertex_count, self.name)
        if not is_convex(vertices):
            logger.debug(f"Rejected non-convex quadrilateral: {', '.join(str(p) for p in vertices)}")
            raise NotConvexError(
                "Quadrilateral is not convex",
                details=f"vertices in order: {', '.join(str(p) for p in vertices)}",
            )
        self._vertices = vertices

    def area(self) -> float:
        v0, v1, v2, v3 = self._vertices
        return triangle_area(v0, v1, v2) + triangle_area(v0, v2, v3)
