import cv2
import numpy as np
import pytest

from handtrack.core.utils import Point
from handtrack.solver.coverage import coverage
from handtrack.solver.search import SearchMode, look_around

from conftest import FRAME_SHAPE


@pytest.fixture
def blobs_mask():
    mask = np.zeros(FRAME_SHAPE, dtype=np.uint8)
    cv2.circle(mask, (150, 150), 50, 255, -1)
    cv2.ellipse(mask, (400, 300), (40, 120), 0, 0, 360, 255, -1)
    cv2.rectangle(mask, (520, 40), (600, 90), 255, -1)
    return mask


def test_offset_tables():
    assert len(SearchMode.FREE_SEARCH.offsets) == 8
    assert len(set(SearchMode.FREE_SEARCH.offsets)) == 8
    assert (0, 0) not in SearchMode.FREE_SEARCH.offsets
    for mode in (SearchMode.SEARCH_UP, SearchMode.SEARCH_DOWN,
                 SearchMode.SEARCH_LEFT, SearchMode.SEARCH_RIGHT):
        assert len(mode.offsets) == 5

    assert all(dy <= 0 for _, dy in SearchMode.SEARCH_UP.offsets)
    assert all(dy >= 0 for _, dy in SearchMode.SEARCH_DOWN.offsets)
    # subject's left is image right
    assert all(dx >= 0 for dx, _ in SearchMode.SEARCH_LEFT.offsets)
    assert all(dx <= 0 for dx, _ in SearchMode.SEARCH_RIGHT.offsets)


def test_ties_follow_offset_order(full_mask):
    result = look_around((320, 240), full_mask, 5, 3, 10, SearchMode.FREE_SEARCH)
    assert result == Point(335, 255)


def test_left_bias_moves_towards_image_right(empty_mask):
    empty_mask[:, 360:] = 255
    result = look_around((360, 240), empty_mask, 10, 3, 10, SearchMode.SEARCH_LEFT)
    assert result.x > 360


def test_right_bias_never_moves_towards_image_right(empty_mask):
    empty_mask[:, 360:] = 255
    result = look_around((360, 240), empty_mask, 10, 3, 10, SearchMode.SEARCH_RIGHT)
    assert result.x <= 360


@pytest.mark.parametrize('mode', list(SearchMode))
def test_coverage_never_decreases(blobs_mask, mode):
    radius = 25
    for x in range(20, 640, 60):
        for y in range(20, 480, 60):
            result = look_around((x, y), blobs_mask, 10, 4, radius, mode)
            assert coverage(result, blobs_mask, radius) >= coverage((x, y), blobs_mask, radius) - 1e-9


@pytest.mark.parametrize('mode', list(SearchMode))
def test_iterations_are_capped_and_points_unique(full_mask, mode):
    result, trace = look_around((320, 240), full_mask, 7, 3, 10, mode, return_trace=True)
    assert len(trace) - 1 <= 7
    assert len(set(trace)) == len(trace)
    assert trace[0] == Point(320, 240)
    assert trace[-1] == result


def test_stops_at_local_maximum():
    mask = np.zeros(FRAME_SHAPE, dtype=np.uint8)
    cv2.circle(mask, (300, 200), 40, 255, -1)
    result, trace = look_around((300, 200), mask, 20, 3, 40, SearchMode.FREE_SEARCH, return_trace=True)
    assert len(trace) - 1 < 20
    assert result == Point(300, 200)


def test_result_stays_in_frame(full_mask):
    for mode in SearchMode:
        result = look_around((0, 0), full_mask, 10, 4, 20, mode)
        assert 0 <= result.x < FRAME_SHAPE[1]
        assert 0 <= result.y < FRAME_SHAPE[0]
