from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, NamedTuple, Sequence

import numpy as np

from .config import DEFAULT_REFERENCE
from .errors import InvalidFrontier
from .hypervolume import frontier_hypervolume

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    """A point in objective space; both coordinates are maximized."""
    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    """
    Linear piece of the frontier from `start` (upper left) to `end` (lower right).
    A segment whose start equals its end is degenerate: a single point with no extent.
    """
    start: Point
    end: Point

    @classmethod
    def from_coords(cls, u1: float, u2: float, v1: float, v2: float) -> "Segment":
        return cls(Point(float(u1), float(u2)), Point(float(v1), float(v2)))

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end

    @property
    def is_sorted(self) -> bool:
        return self.end.x > self.start.x and self.end.y < self.start.y

    @property
    def slope(self) -> float:
        return (self.end.y - self.start.y) / (self.end.x - self.start.x)

    def y_at(self, x: float) -> float:
        if x == self.start.x:
            return self.start.y
        if x == self.end.x:
            return self.end.y
        return self.start.y + self.slope * (x - self.start.x)

    def split(self, p: Point) -> tuple["Segment", "Segment"]:
        """Return the two new pieces start->p and p->end; self is left untouched."""
        return Segment(self.start, p), Segment(p, self.end)


@dataclass(frozen=True)
class Frontier:
    """
    Validated, read-only chain of segments plus the reference corner.
    Build it with `build`; one instance can be shared by any number of runs.
    """
    segments: tuple[Segment, ...]
    reference: Point

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def first(self) -> Point:
        return self.segments[0].start

    @property
    def last(self) -> Point:
        return self.segments[-1].end

    def as_array(self) -> np.ndarray:
        """(m, 4) array of rows [S.x, S.y, E.x, E.y]."""
        return np.array(
            [(s.start.x, s.start.y, s.end.x, s.end.y) for s in self.segments],
            dtype=float,
        )

    @cached_property
    def hv_max(self) -> float:
        """Area dominated by the continuous curve relative to the reference corner."""
        hv = frontier_hypervolume(self.as_array(), self.reference)
        logger.debug(f"hv_max = {hv} over {len(self)} segment(s)")
        return hv


def _as_segment(item) -> Segment:
    if isinstance(item, Segment):
        return item
    u1, u2, v1, v2 = item
    return Segment.from_coords(u1, u2, v1, v2)


def _resolve_reference(reference, segments: Sequence[Segment]) -> Point:
    if reference is None:
        return Point(*(float(v) for v in DEFAULT_REFERENCE))
    if isinstance(reference, str):
        if reference != "nadir":
            raise InvalidFrontier(f"unknown reference mode {reference!r}")
        return Point(segments[0].start.x, segments[-1].end.y)
    rx, ry = reference
    return Point(float(rx), float(ry))


def validate_segments(segments: Sequence[Segment]) -> None:
    """
    Check the chain is non-empty, finite, each piece sorted and consecutive
    pieces do not cross. Raises InvalidFrontier on the first violation.

    A single zero-length segment is accepted as a frontier on its own; it has
    nothing to select. Anywhere in a longer chain it would hold area no point
    can reach, so it is rejected there.
    """
    if len(segments) == 0:
        raise InvalidFrontier("at least one segment is required")

    for i, s in enumerate(segments):
        if not all(math.isfinite(v) for v in (*s.start, *s.end)):
            raise InvalidFrontier(f"non-finite coordinate in {s}", position=i)
        if s.is_degenerate and len(segments) > 1:
            raise InvalidFrontier(f"{s} has zero length", position=i)
        if not (s.is_sorted or s.is_degenerate):
            raise InvalidFrontier(
                f"{s} needs start.x < end.x and start.y > end.y", position=i
            )

    for i in range(1, len(segments)):
        prev, cur = segments[i - 1], segments[i]
        if cur.start.x < prev.end.x or cur.start.y > prev.end.y:
            raise InvalidFrontier(
                f"starts at {tuple(cur.start)} which crosses the previous end {tuple(prev.end)}",
                position=i,
            )


def build(segments: Iterable, reference=None) -> Frontier:
    """
    Validate `segments` (Segment values or u1 u2 v1 v2 quadruples) and wrap them.

    `reference` is None for the default corner, "nadir" for
    (leftmost x, lowest y) of the chain, or an explicit (x, y) pair that every
    frontier point must weakly dominate.
    """
    segs = tuple(_as_segment(s) for s in segments)
    validate_segments(segs)

    ref = _resolve_reference(reference, segs)
    if not (math.isfinite(ref.x) and math.isfinite(ref.y)):
        raise InvalidFrontier(f"reference {tuple(ref)} must be finite")
    if ref.x > segs[0].start.x or ref.y > segs[-1].end.y:
        raise InvalidFrontier(
            f"reference {tuple(ref)} is not dominated by the frontier "
            f"(needs x <= {segs[0].start.x} and y <= {segs[-1].end.y})"
        )

    frontier = Frontier(segments=segs, reference=ref)
    logger.info(f"Frontier built: {len(segs)} segment(s), reference {tuple(ref)}")
    return frontier
