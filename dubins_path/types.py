"""
Type definitions for Dubins words and their segments.
"""

from dataclasses import dataclass
from enum import Enum


class SegmentType(Enum):
    """Kind of a path segment; the value is the signed curvature."""

    LEFT = 1  # Counter-clockwise arc
    STRAIGHT = 0  # Straight line
    RIGHT = -1  # Clockwise arc

    @property
    def is_arc(self) -> bool:
        return self is not SegmentType.STRAIGHT

    @property
    def letter(self) -> str:
        return self.name[0]


_L = SegmentType.LEFT
_S = SegmentType.STRAIGHT
_R = SegmentType.RIGHT


class DubinsWord(Enum):
    """The six canonical Dubins words.

    Declaration order is the tie-break priority used when two words have the
    same length.
    """

    LSL = (_L, _S, _L)  # Left-Straight-Left
    RSR = (_R, _S, _R)  # Right-Straight-Right
    LSR = (_L, _S, _R)  # Left-Straight-Right
    RSL = (_R, _S, _L)  # Right-Straight-Left
    RLR = (_R, _L, _R)  # Right-Left-Right
    LRL = (_L, _R, _L)  # Left-Right-Left

    @property
    def segments(self) -> tuple[SegmentType, SegmentType, SegmentType]:
        return self.value

    @property
    def is_ccc(self) -> bool:
        """True for the three-arc words (RLR, LRL)."""
        return all(s.is_arc for s in self.value)

    @classmethod
    def from_name(cls, name: str) -> "DubinsWord":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"unknown Dubins word '{name}'") from None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SegmentLengths:
    """Ordered parameters of a word's three segments.

    Arc entries are turned angles in radians. Straight entries are lengths,
    in turning radii for solver output and in physical units inside a path.
    """

    first: float
    second: float
    third: float

    def __iter__(self):
        yield self.first
        yield self.second
        yield self.third

    def __getitem__(self, i: int) -> float:
        return (self.first, self.second, self.third)[i]

    def __len__(self) -> int:
        return 3

    @property
    def total(self) -> float:
        return self.first + self.second + self.third
