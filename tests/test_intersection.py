import pytest

from handtrack.core.utils import Point
from handtrack.solver import intersection
from handtrack.solver.blob import BlobType
from handtrack.solver.hand import HandRole
from handtrack.solver.search import SearchMode

from conftest import box_blob, disc_mask


@pytest.fixture
def searches(monkeypatch):
    calls = []

    def fake_improve(hand, skin_mask, search_mode, max_iterations):
        calls.append((hand.role, search_mode, max_iterations))

    monkeypatch.setattr(intersection, 'improve_by_coverage', fake_improve)
    return calls


def test_same_position_intersects_both_hands(make_hand, full_mask, searches):
    left = make_hand(HandRole.LEFT)
    right = make_hand(HandRole.RIGHT)
    left.position = right.position = Point(200, 200)

    assert left.handle_intersection(right.position, full_mask) is True
    assert right.handle_intersection(Point(200, 200), full_mask) is True
    assert left.intersecting and right.intersecting
    assert searches == [
        (HandRole.LEFT, SearchMode.SEARCH_LEFT, 20),
        (HandRole.RIGHT, SearchMode.SEARCH_RIGHT, 20),
    ]
    assert left.metrics.get('intersections') == 1


def test_close_hands_get_nudged(make_hand, full_mask, searches):
    hand = make_hand(HandRole.LEFT)
    hand.position = Point(200, 200)

    # 8 cm = 40 px, 60 px is inside the 16 cm band
    assert hand.handle_intersection(Point(260, 200), full_mask) is False
    assert searches == [(HandRole.LEFT, SearchMode.SEARCH_LEFT, 5)]


def test_distant_hands_are_left_alone(make_hand, full_mask, searches):
    hand = make_hand(HandRole.RIGHT)
    hand.position = Point(200, 200)

    assert hand.handle_intersection(Point(400, 200), full_mask) is False
    assert searches == []


def test_missing_hand_never_intersects(make_hand, full_mask, searches):
    hand = make_hand()
    hand.position = Point(200, 200)
    hand.intersecting = True
    hand.frame.ignore_intersect = True

    assert hand.handle_intersection(None, full_mask) is False
    assert searches == []
    assert hand.frame.ignore_intersect is False


def test_head_level_estimate_overrides_intersection(make_hand, full_mask, searches):
    hand = make_hand()
    hand.set_estimate((200, 200), box_blob(150, 150, 250, 250, BlobType.HIGH))
    assert hand.frame.ignore_intersect is True
    hand.position = Point(200, 200)

    assert hand.handle_intersection(Point(200, 200), full_mask) is False
    assert hand.intersecting is False
    assert hand.frame.ignore_intersect is False
    # the push away still happens
    assert searches == [(HandRole.LEFT, SearchMode.SEARCH_LEFT, 20)]


def test_forced_estimate_overrides_intersection(make_hand, full_mask, searches):
    hand = make_hand()
    hand.set_estimate((200, 200), box_blob(150, 150, 250, 250), ignore_intersection=True)
    hand.position = Point(200, 200)

    assert hand.handle_intersection(Point(205, 200), full_mask) is False


def test_intersection_search_keeps_coverage(make_hand):
    mask = disc_mask((200, 200), 60)
    hand = make_hand(HandRole.RIGHT)
    hand.position = Point(200, 200)

    hand.handle_intersection(Point(200, 200), mask)
    assert hand.intersecting is True
    assert hand.position.x <= 200
