import numpy as np
import pytest

from mocoabm.hypervolume import (
    HypervolumeTracker,
    frontier_hypervolume,
    hypervolume_2d_max,
    pareto_front_2d_max,
)


def test_frontier_hypervolume_empty():
    assert frontier_hypervolume(np.empty((0, 4)), (0.0, 0.0)) == 0.0


def test_frontier_hypervolume_triangle():
    coords = np.array([[0.0, 1.0, 1.0, 0.0]])
    assert frontier_hypervolume(coords, (0.0, 0.0)) == pytest.approx(0.5)


def test_pareto_front_drops_dominated_points():
    pts = np.array([[0.5, 0.5], [0.4, 0.4], [0.25, 0.75], [0.5, 0.2]])
    front = pareto_front_2d_max(pts)
    assert front.tolist() == [[0.5, 0.5], [0.25, 0.75]]


def test_hypervolume_two_point_regression():
    # union of [0,0.5]x[0,0.5] and [0,0.25]x[0,0.75]
    points = [(0.5, 0.5), (0.25, 0.75)]
    assert hypervolume_2d_max(np.array(points), 0.0, 0.0) == pytest.approx(0.3125)


def test_hypervolume_ignores_points_below_reference():
    points = np.array([(0.5, 0.5), (-1.0, 2.0)])
    assert hypervolume_2d_max(points, 0.0, 0.0) == pytest.approx(0.25)


def test_tracker_accumulates():
    t = HypervolumeTracker(hv_max=0.5)
    r1 = t.record((0.5, 0.5), 0.25)
    r2 = t.record((0.25, 0.75), 0.0625)
    assert (r1.index, r2.index) == (1, 2)
    assert r1.hv_relative == pytest.approx(0.5)
    assert r2.hv_current == pytest.approx(0.3125)
    assert r2.hv_relative == pytest.approx(0.625)
    assert t.count == 2


def test_tracker_zero_hv_max():
    assert HypervolumeTracker(hv_max=0.0).relative() == 0.0
