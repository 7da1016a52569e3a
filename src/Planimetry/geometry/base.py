# ============================================================================
# Planimetry - Figure Contract and Shared Geometry Helpers
#
# Purpose: Abstract figure interface plus the pure helpers every variant uses
# Inputs: Point sequences
# Outputs: Validated vertex tuples, areas, convexity decisions, display lines
# Dependencies: abc, geometry.point, errors
# Usage: class Pentagon(Figure): ...
#
# Changelog:
#   2026-03-02: Initial Figure interface
#   2026-03-05: Moved vertex-count validation into a free helper; variants
#               now own their vertex tuple instead of inheriting it
# ============================================================================

from abc import ABC, abstractmethod
from typing import Iterable, List, Sequence, Tuple, Union

from Planimetry.errors import WrongVertexCountError
from Planimetry.geometry.point import Point

PointLike = Union[Point, Sequence[float]]

UNSET_VERTICES_LINE = "Vertices not set."


class Figure(ABC):
    """
    Abstract planar figure with a fixed number of vertices.

    Implementations keep their vertices in a tuple that is only replaced
    wholesale by ``set_vertices``; a rejected update leaves it untouched.
    """

    name: str = "Figure"

    @property
    @abstractmethod
    def vertex_count(self) -> int:
        """Number of vertices the figure requires."""
        pass

    @property
    @abstractmethod
    def vertices(self) -> Tuple[Point, ...]:
        """Current vertices in input order."""
        pass

    @abstractmethod
    def set_vertices(self, points: Iterable[PointLike]) -> None:
        """
        Replace the whole vertex set.

        Raises:
            FigureValidationError: If the points are rejected; the previous
                vertices are kept
        """
        pass

    @abstractmethod
    def area(self) -> float:
        """Non-negative area of the figure."""
        pass

    def display(self) -> List[str]:
        """One line per vertex, or a single diagnostic line when unset."""
        return format_vertices(self.vertices, self.vertex_count)

    def describe(self) -> str:
        """Header line naming the figure and its vertex count."""
        return f"--- Figure: {self.name} ({self.vertex_count} vertices) ---"

    def __repr__(self) -> str:
        points = ", ".join(str(p) for p in self.vertices)
        return f"{type(self).__name__}({points})"


def validate_vertex_count(points: Iterable[PointLike], expected: int, figure: str = "Figure") -> Tuple[Point, ...]:
    """
    Coerce points and check there are exactly ``expected`` of them.

    Returns:
        Tuple of Points in input order

    Raises:
        WrongVertexCountError: If the count differs from ``expected``
    """
    vertices = tuple(Point.of(p) for p in points)
    if len(vertices) != expected:
        raise WrongVertexCountError(expected=expected, actual=len(vertices), figure=figure)
    return vertices


def cross(o: Point, a: Point, b: Point) -> float:
    """Z component of (a - o) x (b - a)."""
    first = a - o
    second = b - a
    return first.x * second.y - first.y * second.x


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Shoelace area of a triangle; 0.0 for collinear points."""
    return 0.5 * abs(a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))


def is_convex(points: Sequence[Point]) -> bool:
    """
    Check that the polygon taken in input order is convex.

    Every non-zero turn must have the same sign as the first non-zero turn.
    Collinear triples are skipped, so a fully degenerate polygon counts as
    convex.
    """
    n = len(points)
    sign = 0
    for i in range(n):
        turn = cross(points[i], points[(i + 1) % n], points[(i + 2) % n])
        if turn == 0:
            continue
        current = 1 if turn > 0 else -1
        if sign == 0:
            sign = current
        elif sign != current:
            return False
    return True


def format_vertices(vertices: Sequence[Point], expected: int) -> List[str]:
    """Render ``Vertex <i>: (x, y)`` lines, 1-based."""
    if len(vertices) != expected:
        return [UNSET_VERTICES_LINE]
    return [f"Vertex {i}: {point}" for i, point in enumerate(vertices, start=1)]
