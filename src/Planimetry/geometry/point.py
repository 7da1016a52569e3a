# ============================================================================
# Planimetry - Point
#
# Purpose: Immutable 2D coordinate value type
# Inputs: x, y numbers or (x, y) pairs
# Outputs: Point values
# Dependencies: dataclasses
# Usage: p = Point(0, 4); q = Point.of((3, 0))
#
# Changelog:
#   2026-03-02: Initial Point value type
#   2026-03-14: Reject NaN and infinite coordinates
# ============================================================================

import math
from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True)
class Point:
    """
    Immutable planar point.

    Coordinates are stored as finite floats; equal coordinates mean equal points.
    """

    x: float
    y: float

    def __post_init__(self):
        # frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Point coordinates must be finite, got ({self.x}, {self.y})")

    @classmethod
    def of(cls, value: Union["Point", Sequence[float]]) -> "Point":
        """
        Coerce a Point or an (x, y) pair into a Point.

        Raises:
            TypeError: If value is neither a Point nor a pair of numbers
        """
        if isinstance(value, Point):
            return value
        try:
            x, y = value
        except (TypeError, ValueError) as e:
            raise TypeError(f"Expected a Point or an (x, y) pair, got {value!r}") from e
        return cls(x, y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"
