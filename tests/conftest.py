from __future__ import annotations
import pytest

from mocoabm.frontier import Segment, build


@pytest.fixture
def single_segment():
    return build([Segment.from_coords(0.0, 1.0, 1.0, 0.0)])


@pytest.fixture
def two_segments():
    return build([(0.0, 1.0, 0.7, 0.7), (0.7, 0.7, 1.0, 0.0)])


@pytest.fixture
def staircase():
    """Chained and disjoint pieces of a concave-ish curve, x in [1, 10]."""
    return build([
        (1.0, 10.0, 2.0, 9.5),
        (2.0, 9.5, 4.0, 8.0),
        (4.0, 8.0, 5.0, 6.5),
        (6.0, 5.0, 8.0, 3.0),
        (8.0, 3.0, 10.0, 0.5),
    ])
