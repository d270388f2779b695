"""
Geometry utilities shared by the solver and the sampler.

The word formulas never see absolute coordinates: :func:`normalize_problem`
rotates and scales the start/goal pair into the dimensionless triple
``(d, alpha, beta)``, where ``d`` is the separation in turning radii and
``alpha``/``beta`` are the start/goal headings measured from the
start-to-goal line.
"""

import math
from dataclasses import dataclass, field

import numpy as np

from .angles import TWO_PI, angle_diff, mod2pi, normalize_angle, wrap_angle
from .errors import InvalidInputError
from .pose import Pose
from .tolerances import DEFAULT_TOLERANCES, Tolerances
from .types import SegmentType

__all__ = [
    "TWO_PI",
    "mod2pi",
    "normalize_angle",
    "wrap_angle",
    "angle_diff",
    "check_radius",
    "distance",
    "turn_center",
    "advance",
    "DubinsProblem",
    "normalize_problem",
]


def check_radius(radius: float) -> float:
    """Return ``radius`` as float or raise if it is not finite and positive."""
    if not (math.isfinite(radius) and radius > 0.0):
        raise InvalidInputError(f"turning radius must be finite and positive, got {radius}")
    return float(radius)


def distance(a: Pose, b: Pose) -> float:
    """Euclidean distance between the positions of two poses."""
    return math.hypot(b.x - a.x, b.y - a.y)


def turn_center(pose: Pose, segment_type: SegmentType, radius: float) -> np.ndarray:
    """Center of the turning circle for a left or right turn starting at ``pose``."""
    if not segment_type.is_arc:
        raise ValueError("a straight segment has no turning center")
    k = segment_type.value
    return np.array(
        [
            pose.x - k * radius * math.sin(pose.heading),
            pose.y + k * radius * math.cos(pose.heading),
        ]
    )


def advance(pose: Pose, segment_type: SegmentType, length: float, radius: float) -> Pose:
    """
    Move along one segment for a physical ``length``.

    Arcs rotate about the turning center by ``length / radius`` in the
    segment's direction; straights translate along the current heading.
    """
    psi = pose.heading
    if segment_type is SegmentType.STRAIGHT:
        return Pose(pose.x + length * math.cos(psi), pose.y + length * math.sin(psi), psi)
    k = segment_type.value
    dpsi = k * length / radius
    x = pose.x + k * radius * (math.sin(psi + dpsi) - math.sin(psi))
    y = pose.y - k * radius * (math.cos(psi + dpsi) - math.cos(psi))
    return Pose(x, y, psi + dpsi)


@dataclass(frozen=True)
class DubinsProblem:
    """Dimensionless start/goal geometry consumed by the word formulas."""

    d: float
    alpha: float
    beta: float
    sa: float = field(init=False, repr=False)
    sb: float = field(init=False, repr=False)
    ca: float = field(init=False, repr=False)
    cb: float = field(init=False, repr=False)
    c_ab: float = field(init=False, repr=False)
    d_sq: float = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "sa", math.sin(self.alpha))
        object.__setattr__(self, "sb", math.sin(self.beta))
        object.__setattr__(self, "ca", math.cos(self.alpha))
        object.__setattr__(self, "cb", math.cos(self.beta))
        object.__setattr__(self, "c_ab", math.cos(self.alpha - self.beta))
        object.__setattr__(self, "d_sq", self.d * self.d)


def normalize_problem(
    start: Pose,
    goal: Pose,
    radius: float,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> DubinsProblem:
    """Reduce ``(start, goal, radius)`` to ``(d, alpha, beta)``.

    When the poses coincide the start heading is used as the reference
    direction, so that ``alpha == 0`` and an unchanged heading yields a
    zero-length path instead of a full loop.
    """
    radius = check_radius(radius)
    dx = goal.x - start.x
    dy = goal.y - start.y
    d = math.hypot(dx, dy) / radius
    if d > tolerances.distance:
        theta = math.atan2(dy, dx)
    else:
        theta = start.heading
    return DubinsProblem(
        d=d,
        alpha=mod2pi(start.heading - theta),
        beta=mod2pi(goal.heading - theta),
    )
