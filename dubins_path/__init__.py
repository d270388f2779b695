"""
dubins_path - Shortest paths for forward-only vehicles with a bounded turning radius

Computes the Dubins path between two oriented planar configurations by
evaluating the six canonical words (LSL, RSR, LSR, RSL, RLR, LRL) in closed
form and keeping the shortest feasible one.
"""

from beartype import BeartypeConf
from beartype.claw import beartype_package

beartype_package(__name__, conf=BeartypeConf(is_pep484_tower=True))

__version__ = "0.1.0"

from .angles import angle_diff, mod2pi, normalize_angle, wrap_angle
from .errors import (
    DubinsError,
    DubinsInternalError,
    InvalidInputError,
    OutOfRangeError,
    ReachabilityWarning,
)
from .geometry import DubinsProblem, normalize_problem
from .path import DubinsPath, PathSamples, PathSegment
from .pose import Pose
from .selector import candidate_paths, shortest_path, word_path
from .symbolic import derive_dubins_eval, sample_array
from .tolerances import DEFAULT_TOLERANCES, Tolerances
from .types import DubinsWord, SegmentLengths, SegmentType
from .words import solve_word

__all__ = [
    "Pose",
    "DubinsWord",
    "SegmentType",
    "SegmentLengths",
    "DubinsPath",
    "PathSegment",
    "PathSamples",
    "DubinsProblem",
    "shortest_path",
    "word_path",
    "candidate_paths",
    "solve_word",
    "normalize_problem",
    "mod2pi",
    "normalize_angle",
    "wrap_angle",
    "angle_diff",
    "Tolerances",
    "DEFAULT_TOLERANCES",
    "DubinsError",
    "InvalidInputError",
    "OutOfRangeError",
    "DubinsInternalError",
    "ReachabilityWarning",
    "derive_dubins_eval",
    "sample_array",
    "__version__",
]
