"""
Numeric tolerances used by the word solver and path selector.

All solver tolerances are in normalized units (lengths divided by the turning
radius, angles in radians).
"""

from dataclasses import dataclass

__all__ = [
    "SQRT_TOLERANCE",
    "ACOS_TOLERANCE",
    "ARC_TOLERANCE",
    "TIE_TOLERANCE",
    "DISTANCE_TOLERANCE",
    "GOAL_TOLERANCE",
    "Tolerances",
    "DEFAULT_TOLERANCES",
]

SQRT_TOLERANCE = 1e-9  # Negative radicand still clamped to 0
ACOS_TOLERANCE = 1e-9  # Overshoot of |cos| past 1 still clamped
ARC_TOLERANCE = 1e-9  # Arcs this close to 2*pi fold to 0
TIE_TOLERANCE = 1e-9  # Lengths this close are treated as equal
DISTANCE_TOLERANCE = 1e-12  # Separation treated as coincident poses
GOAL_TOLERANCE = 1e-6  # Endpoint miss, relative to problem scale


@dataclass(frozen=True)
class Tolerances:
    """Bundle of numeric tolerances passed through the planner."""

    sqrt: float = SQRT_TOLERANCE
    acos: float = ACOS_TOLERANCE
    arc: float = ARC_TOLERANCE
    tie: float = TIE_TOLERANCE
    distance: float = DISTANCE_TOLERANCE
    goal: float = GOAL_TOLERANCE

    def __post_init__(self):
        for name in ("sqrt", "acos", "arc", "tie", "distance", "goal"):
            value = getattr(self, name)
            # NaN fails this comparison too
            if not value >= 0.0:
                raise ValueError(f"tolerance '{name}' must be non-negative, got {value}")


DEFAULT_TOLERANCES = Tolerances()
