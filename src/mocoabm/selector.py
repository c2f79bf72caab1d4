from __future__ import annotations
import heapq
import logging
import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from .config import DEFAULT_REL_TOLERANCE
from .errors import Exhausted, InvalidCount
from .frontier import Frontier, Point
from .gap import Gap
from .hypervolume import EmissionRecord, HypervolumeTracker

logger = logging.getLogger(__name__)


class Phase(Enum):
    READY = "ready"
    RUNNING = "running"
    DONE = "done"
    EXHAUSTED = "exhausted"


class GapIndex:
    """
    Max-ordered heap of live gaps keyed by cached contribution.
    Ties go to the smaller candidate x, then to the older gap.
    """

    def __init__(self):
        self._heap: list[tuple[tuple[float, float, int], Gap]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, gap: Gap) -> None:
        heapq.heappush(self._heap, (gap.sort_key(), gap))

    def peek(self) -> Optional[Gap]:
        return self._heap[0][1] if self._heap else None

    def extract_best(self, tolerance: float = 0.0) -> Gap:
        """
        Remove and return the gap with the largest contribution.
        Raises Exhausted when nothing left contributes more than `tolerance`.
        """
        best = self.peek()
        if best is None or best.sterile or best.contribution <= tolerance:
            raise Exhausted()
        heapq.heappop(self._heap)
        return best


@dataclass
class RunState:
    """All mutable state of one run; the frontier itself is shared and read-only."""
    frontier: Frontier
    index: GapIndex
    tracker: HypervolumeTracker
    tolerance: float
    phase: Phase = Phase.READY
    next_seq: int = 0
    records: list[EmissionRecord] = field(default_factory=list)


def root_gap(frontier: Frontier) -> Gap:
    """Gap spanning the whole curve, bounded by the reference corner's axes."""
    ref = frontier.reference
    left = Point(ref.x, frontier.first.y)
    right = Point(frontier.last.x, ref.y)
    return Gap.create(left, right, frontier.segments, seq=0)


def start(frontier: Frontier, rel_tolerance: Optional[float] = None) -> RunState:
    if rel_tolerance is None:
        rel_tolerance = DEFAULT_REL_TOLERANCE
    hv_max = frontier.hv_max

    state = RunState(
        frontier=frontier,
        index=GapIndex(),
        tracker=HypervolumeTracker(hv_max=hv_max),
        tolerance=rel_tolerance * hv_max,
        next_seq=1,
    )
    state.index.push(root_gap(frontier))
    return state


def emit_next(state: RunState) -> EmissionRecord:
    """
    Take the best gap, emit its candidate, and replace the gap by its two children.
    Raises Exhausted (and marks the run EXHAUSTED) once the curve is covered.
    """
    if state.phase is Phase.EXHAUSTED:
        raise Exhausted(state.tracker.count)
    state.phase = Phase.RUNNING

    try:
        gap = state.index.extract_best(state.tolerance)
    except Exhausted:
        state.phase = Phase.EXHAUSTED
        raise Exhausted(state.tracker.count) from None

    left, right = gap.split(state.next_seq)
    state.next_seq += 2
    state.index.push(left)
    state.index.push(right)

    record = state.tracker.record(gap.best.point, gap.best.contribution)
    state.records.append(record)
    logger.debug(
        f"#{record.index}: point {record.point} delta={record.contribution:.6g} "
        f"from gap {gap.seq}; {len(state.index)} live gap(s)"
    )
    return record


def check_count(n) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n <= 0:
        raise InvalidCount(n)
    return int(n)


def run(frontier: Frontier, n: int, rel_tolerance: Optional[float] = None) -> list[EmissionRecord]:
    """
    Emit up to `n` points; every prefix of the result greedily maximizes hypervolume.
    Stops early, without error, when the frontier is fully covered.
    """
    n = check_count(n)
    state = start(frontier, rel_tolerance=rel_tolerance)

    for _ in range(n):
        try:
            emit_next(state)
        except Exhausted as e:
            logger.info(f"Stopped early: {e}")
            break
    else:
        state.phase = Phase.DONE

    logger.info(
        f"Run {state.phase.value}: {len(state.records)}/{n} point(s), "
        f"hv_relative={state.tracker.relative():.6f}"
    )
    return state.records


def iter_emissions(frontier: Frontier, rel_tolerance: Optional[float] = None) -> Iterator[EmissionRecord]:
    """Yield records one at a time until the frontier is covered; the caller bounds the count."""
    state = start(frontier, rel_tolerance=rel_tolerance)
    while True:
        try:
            yield emit_next(state)
        except Exhausted:
            return
