"""
Dubins Word Solver
==================

Closed-form segment parameters for the six canonical words.

Each solver takes the normalized problem ``(d, alpha, beta)`` and returns the
three segment parameters ``(t, p, q)`` in units of the turning radius: arcs as
turned angles in radians, the straight as a length divided by the radius.
A solver returns ``None`` when its tangent construction does not exist for the
given geometry.

Reference:
    Shkel, Lumelsky, 'Classification of the Dubins set', 2001
    https://doi.org/10.1016/S0921-8890(00)00127-5
"""

import math
from collections.abc import Callable
from typing import Optional

from .angles import TWO_PI, mod2pi
from .geometry import DubinsProblem
from .tolerances import DEFAULT_TOLERANCES, Tolerances
from .types import DubinsWord, SegmentLengths

__all__ = ["solve_word", "solve_all", "WORD_SOLVERS"]


# ==============================================================================
# Domain Guards
# ==============================================================================


def _sqrt_or_none(p_sq: float, tol: Tolerances) -> Optional[float]:
    """Square root that clamps round-off negatives and rejects real ones."""
    if p_sq < -tol.sqrt:
        return None
    return math.sqrt(max(p_sq, 0.0))


def _acos_or_none(c: float, tol: Tolerances) -> Optional[float]:
    """Arc cosine that clamps round-off overshoot and rejects real ones."""
    if abs(c) > 1.0 + tol.acos:
        return None
    return math.acos(max(-1.0, min(1.0, c)))


def _arc(theta: float, tol: Tolerances) -> float:
    """Arc angle in [0, 2*pi), with near-full loops folded to zero."""
    theta = mod2pi(theta)
    if TWO_PI - theta < tol.arc:
        return 0.0
    return theta


def _result(t: float, p: float, q: float) -> Optional[SegmentLengths]:
    for v in (t, p, q):
        if not (math.isfinite(v) and v >= 0.0):
            return None
    return SegmentLengths(t, p, q)


# ==============================================================================
# CSC Words
# ==============================================================================


def _lsl(pr: DubinsProblem, tol: Tolerances) -> Optional[SegmentLengths]:
    p_sq = 2.0 + pr.d_sq - 2.0 * pr.c_ab + 2.0 * pr.d * (pr.sa - pr.sb)
    p = _sqrt_or_none(p_sq, tol)
    if p is None:
        return None
    phi = math.atan2(pr.cb - pr.ca, pr.d + pr.sa - pr.sb)
    return _result(_arc(phi - pr.alpha, tol), p, _arc(pr.beta - phi, tol))


def _rsr(pr: DubinsProblem, tol: Tolerances) -> Optional[SegmentLengths]:
    p_sq = 2.0 + pr.d_sq - 2.0 * pr.c_ab + 2.0 * pr.d * (pr.sb - pr.sa)
    p = _sqrt_or_none(p_sq, tol)
    if p is None:
        return None
    phi = math.atan2(pr.ca - pr.cb, pr.d - pr.sa + pr.sb)
    return _result(_arc(pr.alpha - phi, tol), p, _arc(phi - pr.beta, tol))


def _lsr(pr: DubinsProblem, tol: Tolerances) -> Optional[SegmentLengths]:
    # inner tangent; needs the turning circles to be at least 2R apart
    p_sq = -2.0 + pr.d_sq + 2.0 * pr.c_ab + 2.0 * pr.d * (pr.sa + pr.sb)
    p = _sqrt_or_none(p_sq, tol)
    if p is None:
        return None
    phi = math.atan2(-pr.ca - pr.cb, pr.d + pr.sa + pr.sb) - math.atan2(-2.0, p)
    return _result(_arc(phi - pr.alpha, tol), p, _arc(phi - pr.beta, tol))


def _rsl(pr: DubinsProblem, tol: Tolerances) -> Optional[SegmentLengths]:
    p_sq = -2.0 + pr.d_sq + 2.0 * pr.c_ab - 2.0 * pr.d * (pr.sa + pr.sb)
    p = _sqrt_or_none(p_sq, tol)
    if p is None:
        return None
    phi = math.atan2(pr.ca + pr.cb, pr.d - pr.sa - pr.sb) - math.atan2(2.0, p)
    return _result(_arc(pr.alpha - phi, tol), p, _arc(pr.beta - phi, tol))


# ==============================================================================
# CCC Words
# ==============================================================================


def _rlr(pr: DubinsProblem, tol: Tolerances) -> Optional[SegmentLengths]:
    # middle circle touches both end circles; needs them within 4R
    c = (6.0 - pr.d_sq + 2.0 * pr.c_ab + 2.0 * pr.d * (pr.sa - pr.sb)) / 8.0
    a = _acos_or_none(c, tol)
    if a is None:
        return None
    phi = math.atan2(pr.ca - pr.cb, pr.d - pr.sa + pr.sb)
    p_raw = mod2pi(TWO_PI - a)
    t = _arc(pr.alpha - phi + p_raw / 2.0, tol)
    q = _arc(pr.alpha - pr.beta - t + p_raw, tol)
    p = _arc(p_raw, tol)
    return _result(t, p, q)


def _lrl(pr: DubinsProblem, tol: Tolerances) -> Optional[SegmentLengths]:
    c = (6.0 - pr.d_sq + 2.0 * pr.c_ab + 2.0 * pr.d * (pr.sb - pr.sa)) / 8.0
    a = _acos_or_none(c, tol)
    if a is None:
        return None
    phi = math.atan2(pr.ca - pr.cb, pr.d + pr.sa - pr.sb)
    p_raw = mod2pi(TWO_PI - a)
    t = _arc(-pr.alpha - phi + p_raw / 2.0, tol)
    q = _arc(pr.beta - pr.alpha - t + p_raw, tol)
    p = _arc(p_raw, tol)
    return _result(t, p, q)


# ==============================================================================
# Main API
# ==============================================================================


WORD_SOLVERS: dict[DubinsWord, Callable[[DubinsProblem, Tolerances], Optional[SegmentLengths]]] = {
    DubinsWord.LSL: _lsl,
    DubinsWord.RSR: _rsr,
    DubinsWord.LSR: _lsr,
    DubinsWord.RSL: _rsl,
    DubinsWord.RLR: _rlr,
    DubinsWord.LRL: _lrl,
}


def solve_word(
    problem: DubinsProblem,
    word: DubinsWord,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> Optional[SegmentLengths]:
    """
    Segment parameters of ``word`` for a normalized problem.

    Args:
        problem: Output of :func:`~dubins_path.geometry.normalize_problem`
        word: Which of the six words to evaluate
        tolerances: Clamping thresholds for the domain guards

    Returns:
        SegmentLengths in turning-radius units, or None if the word is infeasible
    """
    return WORD_SOLVERS[word](problem, tolerances)


def solve_all(
    problem: DubinsProblem,
    tolerances: Tolerances = DEFAULT_TOLERANCES,
) -> dict[DubinsWord, Optional[SegmentLengths]]:
    """Evaluate every word, in canonical order."""
    return {word: solve_word(problem, word, tolerances) for word in DubinsWord}
