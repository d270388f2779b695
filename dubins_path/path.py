"""
Dubins path result type and sampler.

A :class:`DubinsPath` is the word, its three segment parameters, the start
pose and the turning radius. Everything else (length, intermediate poses,
turning circles) is derived on demand by walking the segments from the start.
"""

import math
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .errors import InvalidInputError, OutOfRangeError
from .geometry import advance, check_radius, turn_center
from .pose import Pose
from .types import DubinsWord, SegmentLengths, SegmentType

__all__ = ["DubinsPath", "PathSegment", "PathSamples"]


@dataclass(frozen=True)
class PathSegment:
    """Geometry of one segment: where it starts and ends, and the circle it follows."""

    kind: SegmentType
    length: float  # physical length
    start: Pose
    end: Pose
    center: Optional[tuple[float, float]] = None  # turning circle center, None for straights

    @property
    def turned_angle(self) -> float:
        """Signed heading change along the segment."""
        if self.center is None:
            return 0.0
        return self.kind.value * self.length / math.dist(self.start.position, self.center)


@dataclass(frozen=True)
class DubinsPath:
    """
    Shortest-path result between two oriented configurations.

    ``segments`` holds turned angles (radians) for arcs and physical lengths
    for the straight segment.

    Usage:
        >>> from dubins_path import Pose, shortest_path
        >>> path = shortest_path(Pose(0, 0, 0), Pose(10, 0, 0), 1.0)
        >>> round(path.length, 6)
        10.0
        >>> [round(p.x, 3) for p in path.sample(5.0)]
        [0.0, 5.0, 10.0]
    """

    start: Pose
    radius: float
    word: DubinsWord
    segments: SegmentLengths

    def __post_init__(self):
        object.__setattr__(self, "radius", check_radius(self.radius))
        for i, v in enumerate(self.segments):
            if not (math.isfinite(v) and v >= 0.0):
                raise InvalidInputError(f"segment {i} of {self.word} must be finite and >= 0, got {v}")

    @classmethod
    def from_normalized(
        cls, start: Pose, radius: float, word: DubinsWord, params: SegmentLengths
    ) -> "DubinsPath":
        """Build a path from solver output, where straights are in turning radii."""
        scaled = [v if kind.is_arc else v * radius for kind, v in zip(word.segments, params)]
        return cls(start=start, radius=radius, word=word, segments=SegmentLengths(*scaled))

    # --------------------------------------------------------------------------
    # Lengths
    # --------------------------------------------------------------------------

    def segment_length(self, i: int) -> float:
        """Physical length of segment ``i`` (0, 1 or 2)."""
        if not 0 <= i <= 2:
            raise IndexError(f"segment index out of range: {i}")
        v = self.segments[i]
        return v * self.radius if self.word.segments[i].is_arc else v

    @property
    def segment_lengths(self) -> tuple[float, float, float]:
        return (self.segment_length(0), self.segment_length(1), self.segment_length(2))

    @property
    def length(self) -> float:
        """Total physical length."""
        return sum(self.segment_lengths)

    # --------------------------------------------------------------------------
    # Sampling
    # --------------------------------------------------------------------------

    def pose_at(self, t: float) -> Pose:
        """
        Pose after travelling ``t`` along the path.

        Args:
            t: Path distance, 0 <= t <= length

        Raises:
            OutOfRangeError: if t is outside [0, length] or not finite
        """
        length = self.length
        if not (math.isfinite(t) and 0.0 <= t <= length):
            raise OutOfRangeError(t, length)
        pose = self.start
        remaining = t
        for kind, seg_len in zip(self.word.segments, self.segment_lengths):
            step = min(remaining, seg_len)
            pose = advance(pose, kind, step, self.radius)
            remaining -= step
            if remaining <= 0.0:
                break
        return pose

    @property
    def endpoint(self) -> Pose:
        return self.pose_at(self.length)

    def sample(self, step_size: float) -> "PathSamples":
        """Poses every ``step_size`` along the path, always ending at the endpoint."""
        return PathSamples(self, step_size)

    # --------------------------------------------------------------------------
    # Geometry
    # --------------------------------------------------------------------------

    def segment_geometry(self) -> tuple[PathSegment, PathSegment, PathSegment]:
        """Start/end poses and turning circle centers of the three segments."""
        out = []
        pose = self.start
        for kind, seg_len in zip(self.word.segments, self.segment_lengths):
            end = advance(pose, kind, seg_len, self.radius)
            center = None
            if kind.is_arc:
                cx, cy = turn_center(pose, kind, self.radius)
                center = (float(cx), float(cy))
            out.append(PathSegment(kind=kind, length=seg_len, start=pose, end=end, center=center))
            pose = end
        return tuple(out)

    def subpath(self, t: float) -> "DubinsPath":
        """The first ``t`` units of this path, as a path of the same word."""
        length = self.length
        if not (math.isfinite(t) and 0.0 <= t <= length):
            raise OutOfRangeError(t, length)
        remaining = t
        params = []
        for kind, v in zip(self.word.segments, self.segments):
            seg_len = v * self.radius if kind.is_arc else v
            used = min(remaining, seg_len)
            remaining -= used
            params.append(used / self.radius if kind.is_arc else used)
        return DubinsPath(self.start, self.radius, self.word, SegmentLengths(*params))

    def __repr__(self) -> str:
        params = ", ".join(f"{v:.4f}" for v in self.segments)
        return f"DubinsPath(word={self.word}, segments=[{params}], length={self.length:.4f}, radius={self.radius})"


@dataclass(frozen=True)
class PathSamples:
    """
    Lazy fixed-step samples of a path.

    Each iteration recomputes the poses from scratch, so the sequence can be
    iterated any number of times. The grid is ``0, h, 2h, ...`` strictly below
    the path length, followed by the pose at exactly the path length.
    """

    path: DubinsPath
    step_size: float

    def __post_init__(self):
        if not (math.isfinite(self.step_size) and self.step_size > 0.0):
            raise InvalidInputError(f"step size must be finite and positive, got {self.step_size}")
        n_steps = self.path.length / self.step_size
        # the sample count has to fit in a Python sequence length
        if not (math.isfinite(n_steps) and n_steps < sys.maxsize // 2):
            raise InvalidInputError(
                f"step size {self.step_size} is too small for a path of length {self.path.length}"
            )

    def _grid(self) -> Iterator[float]:
        length = self.path.length
        i = 0
        while i * self.step_size < length:
            yield i * self.step_size
            i += 1
        yield length

    def distances(self) -> list[float]:
        return list(self._grid())

    def __iter__(self) -> Iterator[Pose]:
        for t in self._grid():
            yield self.path.pose_at(t)

    def __len__(self) -> int:
        length = self.path.length
        n = math.ceil(length / self.step_size)
        # match the grid test exactly, ceil can be off by one after rounding
        while n > 0 and (n - 1) * self.step_size >= length:
            n -= 1
        while n * self.step_size < length:
            n += 1
        return n + 1

    def to_array(self) -> np.ndarray:
        """Samples as an ``(n, 3)`` array of ``[x, y, heading]`` rows."""
        return np.array([p.to_array() for p in self])
