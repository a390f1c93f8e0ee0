"""Point type and domain membership predicates for the unit domain."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Shape(str, Enum):
    """Domains a point set can fill."""
    CIRCLE = "circle"
    SQUARE = "square"


@dataclass(frozen=True)
class Point:
    """A 2-D point in normalized domain space.

    ``valid`` separates real points from the empty value stored in grid
    slots that were never written.
    """

    x: float = 0.0
    y: float = 0.0
    valid: bool = True

    @classmethod
    def empty(cls) -> "Point":
        """The 'never written' point."""
        return cls(0.0, 0.0, valid=False)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class GridPoint:
    """Integer cell coordinate of a point in a spatial grid."""

    column: int
    row: int


def is_in_square(p: Point) -> bool:
    """True if both coordinates lie in [0, 1]."""
    return 0.0 <= p.x <= 1.0 and 0.0 <= p.y <= 1.0


def is_in_circle(p: Point) -> bool:
    """True if the point lies in the disk of radius 0.5 centred at (0.5, 0.5)."""
    fx = p.x - 0.5
    fy = p.y - 0.5
    return fx * fx + fy * fy <= 0.25


def contains(shape: Shape, p: Point) -> bool:
    """Domain membership test for the given shape."""
    if Shape(shape) is Shape.CIRCLE:
        return is_in_circle(p)
    return is_in_square(p)


def get_distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def point_to_grid(p: Point, cell_size: float) -> GridPoint:
    """Project a point onto the grid cell that contains it."""
    return GridPoint(math.floor(p.x / cell_size), math.floor(p.y / cell_size))
