"""
Angle normalization helpers.

Every angle handed to the word solver goes through :func:`mod2pi`, so the
whole package shares a single ``[0, 2*pi)`` convention.
"""

import math

from .errors import InvalidInputError

__all__ = ["TWO_PI", "mod2pi", "normalize_angle", "wrap_angle", "angle_diff"]

TWO_PI = 2.0 * math.pi


def mod2pi(theta: float) -> float:
    """Reduce ``theta`` into ``[0, 2*pi)``."""
    r = theta % TWO_PI
    # tiny negative inputs round up to exactly 2*pi
    if r >= TWO_PI:
        r -= TWO_PI
    return r


def normalize_angle(theta: float) -> float:
    """Validate ``theta`` and reduce it into ``[0, 2*pi)``."""
    if not math.isfinite(theta):
        raise InvalidInputError(f"angle must be finite, got {theta}")
    return mod2pi(float(theta))


def wrap_angle(theta: float) -> float:
    """Wrap angle to [-pi, pi)."""
    return mod2pi(theta + math.pi) - math.pi


def angle_diff(a: float, b: float) -> float:
    """Signed smallest difference ``a - b`` in [-pi, pi)."""
    return wrap_angle(a - b)
