import numpy as np

from handtrack.core.utils import Point
from handtrack.solver.hand import HandRole
from handtrack.solver.visualization import draw_debug_overlay, draw_hand, draw_trace


def blank():
    return np.zeros((480, 640, 3), dtype=np.uint8)


def test_missing_hand_notice(make_hand):
    canvas = blank()
    draw_hand(canvas, make_hand(HandRole.RIGHT))
    assert canvas[40:70, 20:300].any()


def test_marker_drawn_at_position(make_hand):
    hand = make_hand()
    hand.position = Point(320, 240)
    canvas = draw_hand(blank(), hand, show_trace=False)
    # circle outline of radius 25
    assert canvas[240, 320 + 25].any()


def test_trace_skips_unset_points(make_hand):
    hand = make_hand()
    for x in (100, 150, 200, 250):
        hand.position_history.push(Point(x, 100))

    canvas = draw_trace(blank(), hand.position_history, (0, 255, 0))
    assert canvas[100, 175].any()
    assert not canvas[300:].any()


def test_debug_overlay(make_hand):
    canvas = draw_debug_overlay(blank(), [make_hand(HandRole.LEFT), make_hand(HandRole.RIGHT)])
    assert canvas.shape == (480, 640, 3)
    assert canvas[440:480].any()
