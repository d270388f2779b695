"""
Oriented planar configuration.
"""

import math
from dataclasses import dataclass

import numpy as np

from .angles import normalize_angle
from .errors import InvalidInputError

__all__ = ["Pose"]


@dataclass(frozen=True)
class Pose:
    """Position ``(x, y)`` and heading in radians, counter-clockwise from +x.

    The heading is stored in ``[0, 2*pi)``.

    Example:
        >>> Pose(1.0, 2.0, -math.pi / 2).heading == 3 * math.pi / 2
        True
    """

    x: float
    y: float
    heading: float = 0.0

    def __post_init__(self):
        for name in ("x", "y", "heading"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidInputError(f"pose {name} must be finite, got {getattr(self, name)}")
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "heading", normalize_angle(self.heading))

    @property
    def position(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def to_array(self) -> np.ndarray:
        """Return ``[x, y, heading]``."""
        return np.array([self.x, self.y, self.heading])

    @classmethod
    def from_array(cls, arr) -> "Pose":
        arr = np.asarray(arr, dtype=float).flatten()
        if arr.shape != (3,):
            raise InvalidInputError(f"pose array must have 3 elements, got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def reversed(self) -> "Pose":
        """Same position, facing the opposite way."""
        return Pose(self.x, self.y, self.heading + math.pi)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.heading
