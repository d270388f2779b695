"""
Dubins Path Selector
====================

Forward-only, 2D, fixed turn radius planner.

Usage:
    >>> import math
    >>> from dubins_path import Pose, shortest_path
    >>> path = shortest_path(Pose(0, 0, 0), Pose(10, 10, math.pi / 2), 5.0)
    >>> end = path.pose_at(path.length)
    >>> round(end.x, 6), round(end.y, 6)
    (10.0, 10.0)
"""

import math
import warnings
from typing import Optional

from .errors import DubinsInternalError, ReachabilityWarning
from .geometry import angle_diff, check_radius, distance, normalize_problem
from .path import DubinsPath
from .pose import Pose
from .tolerances import DEFAULT_TOLERANCES, Tolerances
from .types import DubinsWord
from .words import solve_all, solve_word

__all__ = ["shortest_path", "word_path", "candidate_paths"]


def _check_reached(path: DubinsPath, goal: Pose, tolerances: Tolerances) -> None:
    end = path.endpoint
    scale = max(1.0, path.radius, distance(path.start, goal))
    pos_err = distance(end, goal)
    head_err = abs(angle_diff(end.heading, goal.heading))
    if pos_err > tolerances.goal * scale or head_err > tolerances.goal:
        warnings.warn(
            f"{path.word} path misses goal by {pos_err:.3e} (position), "
            f"{head_err:.3e} rad (heading)",
            ReachabilityWarning,
            stacklevel=3,
        )


def shortest_path(
    start: Pose,
    goal: Pose,
    radius: float,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> DubinsPath:
    """
    Shortest Dubins path from ``start`` to ``goal``.

    All six words are evaluated; a later word only replaces the current best
    when it is shorter by more than ``tolerances.tie``, so equal-length words
    resolve in the order LSL, RSR, LSR, RSL, RLR, LRL.

    Args:
        start: Start pose
        goal: Goal pose
        radius: Minimum turning radius, finite and > 0
        tolerances: Numeric tolerances for clamping and tie-breaking

    Returns:
        The selected path

    Raises:
        InvalidInputError: radius is not finite and positive
        DubinsInternalError: no word was feasible
    """
    radius = check_radius(radius)
    problem = normalize_problem(start, goal, radius, tolerances)

    best_word = None
    best_params = None
    best_cost = math.inf
    for word, params in solve_all(problem, tolerances).items():
        if params is None:
            continue
        cost = params.total
        if cost < best_cost - tolerances.tie:
            best_word, best_params, best_cost = word, params, cost

    if best_word is None:
        raise DubinsInternalError(
            f"no feasible Dubins word for d={problem.d}, alpha={problem.alpha}, beta={problem.beta}"
        )

    path = DubinsPath.from_normalized(start, radius, best_word, best_params)
    _check_reached(path, goal, tolerances)
    return path


def word_path(
    start: Pose,
    goal: Pose,
    radius: float,
    word: DubinsWord,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> Optional[DubinsPath]:
    """Path of one specific word, or None if that word cannot connect the poses."""
    radius = check_radius(radius)
    params = solve_word(normalize_problem(start, goal, radius, tolerances), word, tolerances)
    if params is None:
        return None
    return DubinsPath.from_normalized(start, radius, word, params)


def candidate_paths(
    start: Pose,
    goal: Pose,
    radius: float,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> list[DubinsPath]:
    """All feasible paths, shortest first; equal lengths keep canonical word order."""
    radius = check_radius(radius)
    problem = normalize_problem(start, goal, radius, tolerances)
    paths = [
        DubinsPath.from_normalized(start, radius, word, params)
        for word, params in solve_all(problem, tolerances).items()
        if params is not None
    ]
    # sorted() is stable, so canonical order survives for equal lengths
    return sorted(paths, key=lambda p: p.length)
