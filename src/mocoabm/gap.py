from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Sequence

from .frontier import Point, Segment


class Location(Enum):
    """Where a candidate sits on its owning piece."""
    START = "start"
    MIDDLE = "middle"
    END = "end"


class Candidate(NamedTuple):
    point: Point
    contribution: float
    piece: int
    location: Location


def _better(delta: float, x: float, best_delta: float, best_x: float) -> bool:
    # larger contribution wins, ties go to the smaller x
    return delta > best_delta or (delta == best_delta and x < best_x)


def piece_candidate(piece: Segment, lx: float, rx: float, ry: float) -> Optional[tuple[Point, float]]:
    """
    Best point on `piece` for a gap whose dominated corner is (lx, ry) and whose
    right boundary sits at rx.

    The contribution of a point at x is
      delta(x) = (x - lx) * (y(x) - ry)
    which is a concave quadratic on a piece with negative slope. Its maximizer is
    the midpoint between lx and the x where the piece's line drops to ry; it is
    clipped to the piece's domain and compared against both domain ends.
    """
    if piece.is_degenerate:
        return None

    x0 = max(piece.start.x, lx)
    x1 = min(piece.end.x, rx)
    if x1 < x0:
        return None

    m = piece.slope
    if m < 0:
        x_r = piece.start.x + (ry - piece.start.y) / m
        x_star = min(max((lx + x_r) / 2.0, x0), x1)
    else:
        # sub-pieces can flatten out under rounding; delta then grows with x
        x_star = x1

    best = None
    best_delta = 0.0
    for x in (x0, x_star, x1):
        y = piece.y_at(x)
        delta = (x - lx) * (y - ry)
        if best is None or _better(delta, x, best_delta, best.x):
            best, best_delta = Point(x, y), delta
    return best, best_delta


def best_candidate(pieces: Sequence[Segment], left: Point, right: Point) -> Optional[Candidate]:
    """Best candidate across all pieces of a gap, or None when the gap is sterile."""
    if left.x >= right.x:
        return None

    best = None
    for i, piece in enumerate(pieces):
        found = piece_candidate(piece, left.x, right.x, right.y)
        if found is None:
            continue
        point, delta = found
        if best is None or _better(delta, point.x, best.contribution, best.point.x):
            if point.x == piece.start.x:
                loc = Location.START
            elif point.x == piece.end.x:
                loc = Location.END
            else:
                loc = Location.MIDDLE
            best = Candidate(point, delta, i, loc)
    return best


@dataclass(frozen=True)
class Gap:
    """
    Unsubdivided interval of the frontier between two fixed points.

    `left` and `right` are the boundary points, `pieces` the segments strictly
    owned by this gap and `seq` its creation order. The best candidate is
    computed once at creation and never changes.
    """
    left: Point
    right: Point
    pieces: tuple[Segment, ...]
    seq: int
    best: Optional[Candidate]

    @classmethod
    def create(cls, left: Point, right: Point, pieces: Sequence[Segment], seq: int) -> "Gap":
        pieces = tuple(pieces)
        return cls(left, right, pieces, seq, best_candidate(pieces, left, right))

    @property
    def contribution(self) -> float:
        if self.best is None:
            return 0.0
        return self.best.contribution

    @property
    def sterile(self) -> bool:
        return self.contribution <= 0.0

    def sort_key(self) -> tuple[float, float, int]:
        x = self.left.x if self.best is None else self.best.point.x
        return (-self.contribution, x, self.seq)

    def split(self, next_seq: int) -> tuple["Gap", "Gap"]:
        """
        Split at the cached candidate into (left, p) and (p, right).

        Pieces before the owning piece go left, pieces after go right. The owning
        piece goes whole to one side when p is one of its ends, otherwise it is
        divided into two new segments.
        """
        if self.best is None:
            raise ValueError("cannot split a sterile gap")

        p, i, loc = self.best.point, self.best.piece, self.best.location
        owner = self.pieces[i]
        left_pieces = list(self.pieces[:i])
        right_pieces = list(self.pieces[i + 1:])

        if loc is Location.START:
            right_pieces.insert(0, owner)
        elif loc is Location.END:
            left_pieces.append(owner)
        else:
            head, tail = owner.split(p)
            left_pieces.append(head)
            right_pieces.insert(0, tail)

        return (
            Gap.create(self.left, p, left_pieces, next_seq),
            Gap.create(p, self.right, right_pieces, next_seq + 1),
        )
