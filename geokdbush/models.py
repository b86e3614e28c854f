"""Queue entries used by the best-first search: scored points and pending index ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .bounds import WHOLE_EARTH, BoundingBox


@dataclass(frozen=True)
class PointCandidate:
    """One payload item with its exact distance (km) to the query."""

    item: Any
    distance: float

    @property
    def priority(self) -> float:
        return self.distance

    @property
    def is_point(self) -> bool:
        return True


@dataclass(frozen=True)
class RangeCandidate:
    """A not-yet-expanded k-d tree range `[left, right]` with a lower-bound distance.

    `axis` is the split axis for this range (0 = longitude, 1 = latitude) and
    `box` encloses every point whose permutation index falls in the range.
    """

    left: int
    right: int
    axis: int
    box: BoundingBox
    bound: float

    def __post_init__(self) -> None:
        """Reject axis values outside the two coordinate dimensions."""
        if self.axis not in (0, 1):
            raise ValueError(f"axis must be 0 (longitude) or 1 (latitude), got {self.axis!r}")

    @staticmethod
    def whole_index(n_points: int) -> "RangeCandidate":
        """Seed range covering the full index, the whole Earth and a zero bound."""
        return RangeCandidate(left=0, right=n_points - 1, axis=0, box=WHOLE_EARTH, bound=0.0)

    @property
    def priority(self) -> float:
        return self.bound

    @property
    def is_point(self) -> bool:
        return False

    @property
    def span(self) -> int:
        """Return `right - left`; negative for an empty range."""
        return self.right - self.left

    def is_leaf(self, node_size: int) -> bool:
        """Return True when the range is scanned directly instead of split."""
        return self.span <= node_size

    @property
    def median(self) -> int:
        return (self.left + self.right) >> 1

    @property
    def next_axis(self) -> int:
        return (self.axis + 1) % 2


Candidate = Union[PointCandidate, RangeCandidate]
