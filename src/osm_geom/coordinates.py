"""Projected coordinates handed from a projection to a geometry backend."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """A projected (x, y) coordinate pair."""

    x: float
    y: float

    def valid(self) -> bool:
        """Return True if both coordinates are finite numbers."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)
