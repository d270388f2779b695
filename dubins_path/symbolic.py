"""
CasADi Path Evaluator
=====================

Branch-free symbolic evaluation of a Dubins path, for embedding a planned
path in CasADi expressions (optimal control costs, reference tracking) or for
evaluating many samples at once.

Usage:
    >>> from dubins_path import Pose, shortest_path
    >>> from dubins_path.symbolic import derive_dubins_eval, path_arguments
    >>> path = shortest_path(Pose(0, 0, 0), Pose(4, 4, 0), 1.0)
    >>> eval_fn = derive_dubins_eval()
    >>> x, y, psi = eval_fn(path.length, *path_arguments(path))
    >>> round(float(x), 6), round(float(y), 6)
    (4.0, 4.0)
"""

import casadi as ca
import numpy as np

from .angles import mod2pi
from .path import DubinsPath

__all__ = ["derive_dubins_eval", "path_arguments", "sample_array"]


def _advance(x, y, psi, k, length, R):
    """One segment of signed curvature k (+1 left, -1 right, 0 straight)."""
    dpsi = k * length / R
    x_arc = x + k * R * (ca.sin(psi + dpsi) - ca.sin(psi))
    y_arc = y - k * R * (ca.cos(psi + dpsi) - ca.cos(psi))
    x_line = x + length * ca.cos(psi)
    y_line = y + length * ca.sin(psi)
    straight = k == 0
    return (
        ca.if_else(straight, x_line, x_arc),
        ca.if_else(straight, y_line, y_arc),
        psi + dpsi,
    )


def derive_dubins_eval():
    """
    Create a CasADi function for evaluating a Dubins path.

    Returns:
        dubins_eval: Evaluator function
            Inputs: t, x0, y0, psi0, kappa[3], lengths[3], R
            Outputs: x, y, psi

    ``t`` is the distance travelled, ``kappa`` holds the signed curvature of
    each segment and ``lengths`` the physical segment lengths. Distances
    outside the path are clamped to its ends. ``psi`` is not wrapped.
    """
    t = ca.SX.sym("t")
    x0 = ca.SX.sym("x0")
    y0 = ca.SX.sym("y0")
    psi0 = ca.SX.sym("psi0")
    kappa = ca.SX.sym("kappa", 3)
    lengths = ca.SX.sym("lengths", 3)
    R = ca.SX.sym("R")

    x, y, psi = x0, y0, psi0
    travelled = 0
    for i in range(3):
        seg = ca.fmin(ca.fmax(t - travelled, 0), lengths[i])
        x, y, psi = _advance(x, y, psi, kappa[i], seg, R)
        travelled = travelled + lengths[i]

    return ca.Function(
        "dubins_eval",
        [t, x0, y0, psi0, kappa, lengths, R],
        [x, y, psi],
        ["t", "x0", "y0", "psi0", "kappa", "lengths", "R"],
        ["x", "y", "psi"],
    )


def path_arguments(path: DubinsPath) -> tuple:
    """Numeric arguments of ``dubins_eval`` (everything after ``t``) for a path."""
    return (
        path.start.x,
        path.start.y,
        path.start.heading,
        ca.DM([s.value for s in path.word.segments]),
        ca.DM(list(path.segment_lengths)),
        path.radius,
    )


def sample_array(path: DubinsPath, step_size: float, eval_fn=None) -> np.ndarray:
    """
    Evaluate the path at the distances of ``path.sample(step_size)`` in one call.

    Returns:
        (n, 3) array of [x, y, heading] rows, heading in [0, 2*pi)
    """
    if eval_fn is None:
        eval_fn = derive_dubins_eval()
    t = np.array(path.sample(step_size).distances())
    n = len(t)
    x0, y0, psi0, kappa, lengths, R = path_arguments(path)
    x, y, psi = eval_fn.map(n)(
        ca.DM(t).T,
        ca.repmat(ca.DM(x0), 1, n),
        ca.repmat(ca.DM(y0), 1, n),
        ca.repmat(ca.DM(psi0), 1, n),
        ca.repmat(kappa, 1, n),
        ca.repmat(lengths, 1, n),
        ca.repmat(ca.DM(R), 1, n),
    )
    out = np.vstack([np.array(x).flatten(), np.array(y).flatten(), np.array(psi).flatten()]).T
    out[:, 2] = [mod2pi(float(v)) for v in out[:, 2]]
    return out
