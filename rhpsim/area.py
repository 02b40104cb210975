"""Rectangular simulation areas that can be cut into a grid of cells."""

from __future__ import annotations

import random
from dataclasses import dataclass

__all__ = ["SimulationArea"]

Point = tuple[float, float]


@dataclass(frozen=True)
class SimulationArea:
    """An axis-aligned rectangle given by its minimum and maximum corners.

    Corners are ``(x, y)`` pairs.
    """

    min: Point = (0.0, 0.0)
    max: Point = (0.0, 0.0)

    @property
    def min_x(self) -> float:
        return self.min[0]

    @property
    def max_x(self) -> float:
        return self.max[0]

    @property
    def min_y(self) -> float:
        return self.min[1]

    @property
    def max_y(self) -> float:
        return self.max[1]

    @property
    def delta_x(self) -> float:
        return self.max[0] - self.min[0]

    @property
    def delta_y(self) -> float:
        return self.max[1] - self.min[1]

    def as_rectangle(self) -> tuple[float, float, float, float]:
        """Return the bounds as ``(x_min, x_max, y_min, y_max)``."""
        return (self.min_x, self.max_x, self.min_y, self.max_y)

    @staticmethod
    def _strips(low: float, high: float, parts: int) -> list[tuple[float, float]]:
        if parts < 0:
            raise ValueError(f"parts must not be negative, got {parts}")
        if parts == 0:
            return []
        size = (high - low) / parts
        strips = []
        current_min = low
        current_max = low + size
        for _ in range(parts):
            strips.append((current_min, current_max))
            current_min = current_max
            current_max += size
        return strips

    def divide_horizontally(self, parts: int) -> list[SimulationArea]:
        """Cut the area into ``parts`` equal strips along the x axis."""
        return [
            SimulationArea((lo, self.min_y), (hi, self.max_y))
            for lo, hi in self._strips(self.min_x, self.max_x, parts)
        ]

    def divide_vertically(self, parts: int) -> list[SimulationArea]:
        """Cut the area into ``parts`` equal strips along the y axis."""
        return [
            SimulationArea((self.min_x, lo), (self.max_x, hi))
            for lo, hi in self._strips(self.min_y, self.max_y, parts)
        ]

    def split_into_grid(self, x: int, y: int) -> list[SimulationArea]:
        """Split into an ``x`` by ``y`` grid, column strip by column strip."""
        return [
            box
            for stratum in self.divide_horizontally(x)
            for box in stratum.divide_vertically(y)
        ]

    def grid_origin(self) -> tuple[float, float, float, float]:
        """Return ``(min_x, min_y, delta_x, delta_y)`` for laying nodes out on a grid."""
        return (self.min_x, self.min_y, self.delta_x, self.delta_y)

    def random_position(self, rng: random.Random) -> Point:
        """Draw a point uniformly from inside the area."""
        return (rng.uniform(self.min_x, self.max_x), rng.uniform(self.min_y, self.max_y))

    def __str__(self) -> str:
        return (
            f"{{({self.min_x:g},{self.min_y:g}),"
            f"({self.max_x:g},{self.max_y:g})}}"
        )