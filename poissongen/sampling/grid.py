"""Uniform acceleration grid for minimum-distance rejection tests."""

import math
from typing import Optional

import numpy as np

from poissongen.core.exceptions import GridConfigurationError
from poissongen.sampling.geometry import Point, point_to_grid

# Cells scanned in each direction around a query cell. Two is the smallest
# radius that sees every point closer than min_distance when
# cell_size == min_distance / sqrt(2).
DEFAULT_SEARCH_RADIUS = 5

# Slack for floating point error when comparing cell sizes.
_CELL_SIZE_TOLERANCE = 1e-9


class SpatialGrid:
    """Grid over the unit domain holding at most one point per cell.

    With ``cell_size <= min_distance / sqrt(2)`` a cell's diagonal is no
    longer than the minimum distance, so two accepted points can never share
    a cell and a single slot per cell is enough.
    """

    def __init__(
        self,
        min_distance: float,
        cell_size: Optional[float] = None,
        search_radius: int = DEFAULT_SEARCH_RADIUS,
    ):
        """Initialize grid.

        Args:
            min_distance: Minimum distance the grid is queried with
            cell_size: Cell edge length (defaults to min_distance / sqrt(2))
            search_radius: Half-width of the neighbourhood window in cells

        Raises:
            GridConfigurationError: If the configuration would let neighbour
                queries miss points closer than min_distance
        """
        if min_distance <= 0:
            raise GridConfigurationError(
                "min_distance must be positive", min_distance=min_distance
            )

        max_cell_size = min_distance / math.sqrt(2.0)
        if cell_size is None:
            cell_size = max_cell_size
        if cell_size <= 0:
            raise GridConfigurationError("cell_size must be positive", cell_size=cell_size)
        if cell_size > max_cell_size * (1 + _CELL_SIZE_TOLERANCE):
            raise GridConfigurationError(
                f"cell_size {cell_size:g} exceeds min_distance / sqrt(2) = "
                f"{max_cell_size:g}; a cell could hold two points",
                cell_size=cell_size,
                min_distance=min_distance,
            )

        required_radius = math.ceil(min_distance / cell_size * (1 - _CELL_SIZE_TOLERANCE))
        if search_radius < required_radius:
            raise GridConfigurationError(
                f"search_radius {search_radius} is smaller than the {required_radius} "
                "cells a min_distance disk can span",
                search_radius=search_radius,
                required_radius=required_radius,
            )

        self.min_distance = min_distance
        self.cell_size = cell_size
        self.search_radius = search_radius
        self.width = math.ceil(1.0 / cell_size)
        self.height = self.width

        self._coords = np.zeros((self.width, self.height, 2), dtype=np.float64)
        self._occupied = np.zeros((self.width, self.height), dtype=bool)

    def insert(self, point: Point) -> None:
        """Store a point in its cell, replacing any previous occupant.

        Args:
            point: Point inside the unit domain

        Raises:
            ValueError: If the point's cell lies outside the grid
        """
        g = point_to_grid(point, self.cell_size)
        # Coordinates of exactly 1.0 land one past the last cell.
        column = min(g.column, self.width - 1)
        row = min(g.row, self.height - 1)
        if column < 0 or row < 0:
            raise ValueError(f"Point ({point.x}, {point.y}) is outside the grid")

        self._coords[column, row] = (point.x, point.y)
        self._occupied[column, row] = True

    def has_neighbor_within(
        self,
        point: Point,
        min_distance: Optional[float] = None,
    ) -> bool:
        """Check whether any stored point is strictly closer than min_distance.

        Args:
            point: Query point
            min_distance: Distance threshold (defaults to the grid's)

        Returns:
            True if a neighbour closer than min_distance exists

        Raises:
            GridConfigurationError: If min_distance spans more cells than
                the search window covers
        """
        if min_distance is None:
            min_distance = self.min_distance
        else:
            required_radius = math.ceil(
                min_distance / self.cell_size * (1 - _CELL_SIZE_TOLERANCE)
            )
            if required_radius > self.search_radius:
                raise GridConfigurationError(
                    f"min_distance {min_distance:g} spans {required_radius} cells, "
                    f"beyond search_radius {self.search_radius}",
                    search_radius=self.search_radius,
                    required_radius=required_radius,
                )

        g = point_to_grid(point, self.cell_size)
        r = self.search_radius
        x0, x1 = max(g.column - r, 0), min(g.column + r + 1, self.width)
        y0, y1 = max(g.row - r, 0), min(g.row + r + 1, self.height)
        if x0 >= x1 or y0 >= y1:
            return False

        occupied = self._occupied[x0:x1, y0:y1]
        if not occupied.any():
            return False

        neighbours = self._coords[x0:x1, y0:y1][occupied]
        distances = np.hypot(neighbours[:, 0] - point.x, neighbours[:, 1] - point.y)
        return bool(np.any(distances < min_distance))

    def cell(self, column: int, row: int) -> Point:
        """Point stored in a cell, or the empty point."""
        if not self._occupied[column, row]:
            return Point.empty()
        x, y = self._coords[column, row]
        return Point(float(x), float(y))

    def __len__(self) -> int:
        return int(self._occupied.sum())

    def __repr__(self) -> str:
        return (
            f"SpatialGrid({self.width}x{self.height}, cell_size={self.cell_size:.6g}, "
            f"search_radius={self.search_radius})"
        )
