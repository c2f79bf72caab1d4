from __future__ import annotations
from dataclasses import dataclass

import numpy as np


def frontier_hypervolume(coords: np.ndarray, reference) -> float:
    """
    Area dominated by a continuous piecewise-linear frontier (both objectives maximized).

    coords rows are [S.x, S.y, E.x, E.y], sorted along the chain. The area is:
      HV = sum over segments: (S.x - prev_x) * (S.y - ref_y)            (step up to S)
                            + (E.x - S.x) * (S.y + E.y - 2 ref_y) / 2   (trapezoid under S->E)
    with prev_x = ref_x for the first segment and the previous E.x afterwards.
    """
    if coords.size == 0:
        return 0.0

    ref_x, ref_y = float(reference[0]), float(reference[1])
    sx, sy, ex, ey = coords[:, 0], coords[:, 1], coords[:, 2], coords[:, 3]

    prev_x = np.concatenate(([ref_x], ex[:-1]))
    steps = (sx - prev_x) * (sy - ref_y)
    trapezoids = (ex - sx) * (sy + ey - 2.0 * ref_y) / 2.0
    return float(steps.sum() + trapezoids.sum())


def pareto_front_2d_max(points: np.ndarray) -> np.ndarray:
    """
    Compute Pareto front for 2D points where both coordinates are maximized.

    Returns Pareto points sorted by decreasing x (so increasing y).
    """
    if points.size == 0:
        return points.reshape(0, 2)

    # descending x, then descending y among equal x
    pts = points[np.lexsort((-points[:, 1], -points[:, 0]))]
    pareto = []
    best_y = -np.inf
    for x, y in pts:
        if y > best_y:
            pareto.append((x, y))
            best_y = y
    return np.array(pareto, dtype=float)


def hypervolume_2d_max(points: np.ndarray, ref_x: float, ref_y: float) -> float:
    """
    2D hypervolume of a point set, both objectives maximized.

    Uses a simple rectangle integration over the Pareto points sorted by decreasing x:
      HV = sum over points: (x_i - ref_x) * (y_i - y_{i-1}),  y_0 = ref_y

    Points that do not dominate the reference corner contribute nothing.
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    pareto = pareto_front_2d_max(pts)
    if pareto.size == 0:
        return 0.0

    hv = 0.0
    prev_y = ref_y
    for x, y in pareto:
        width = x - ref_x
        height = y - prev_y
        if width > 0 and height > 0:
            hv += width * height
            prev_y = y
    return float(hv)


@dataclass(frozen=True)
class EmissionRecord:
    index: int
    point: tuple[float, float]
    contribution: float
    hv_current: float
    hv_relative: float


@dataclass
class HypervolumeTracker:
    """Running totals over the emitted points of one run."""
    hv_max: float
    hv_current: float = 0.0
    count: int = 0

    def record(self, point, contribution: float) -> EmissionRecord:
        self.hv_current += contribution
        self.count += 1
        return EmissionRecord(
            index=self.count,
            point=(float(point[0]), float(point[1])),
            contribution=float(contribution),
            hv_current=self.hv_current,
            hv_relative=self.relative(),
        )

    def relative(self) -> float:
        if self.hv_max <= 0:
            return 0.0
        return self.hv_current / self.hv_max
