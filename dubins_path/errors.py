"""
Exceptions and warnings raised by the Dubins planner.
"""

__all__ = [
    "DubinsError",
    "InvalidInputError",
    "OutOfRangeError",
    "DubinsInternalError",
    "ReachabilityWarning",
]


class DubinsError(Exception):
    """Base class for all planner errors."""


class InvalidInputError(DubinsError, ValueError):
    """Radius, pose or sampling argument is not usable (non-positive or non-finite)."""


class OutOfRangeError(DubinsError, ValueError):
    """Requested path distance lies outside [0, length]."""

    def __init__(self, t: float, length: float):
        super().__init__(f"path distance {t} outside [0, {length}]")
        self.t = t
        self.length = length


class DubinsInternalError(DubinsError, RuntimeError):
    """No word was feasible for well-formed input.

    A Dubins path always exists, so this points at a derivation or tolerance bug.
    """


class ReachabilityWarning(UserWarning):
    """The selected path ends further from the goal than the goal tolerance."""
