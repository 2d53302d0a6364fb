"""
Drawing of solved hand positions
"""
import cv2
import numpy as np

from ..core.config import HAND_MARKER_RADIUS, LEFT_HAND_COLOR, RIGHT_HAND_COLOR
from ..core.utils import draw_text_with_background
from .hand import HandRole


def hand_color(hand):
    return LEFT_HAND_COLOR if hand.role is HandRole.LEFT else RIGHT_HAND_COLOR


def draw_trace(canvas, history, color):
    """
    Draw the position history from oldest to newest, fading in

    Args:
        canvas: BGR image to draw on
        history: HistoryBuffer of positions
        color: (B, G, R) color of the newest segment

    Returns:
        Modified canvas
    """
    points = history.oldest_first()
    steps = float(len(points))

    trace_map = np.zeros_like(canvas)
    trace_mask = np.zeros_like(canvas)

    # n points give n - 1 segments
    for i in range(len(points) - 1):
        p1, p2 = points[i], points[i + 1]
        if p1 is None or p2 is None:
            continue
        fade = i / steps
        segment_color = tuple(int(c * fade) for c in color)
        mask_value = int(255 * fade)
        cv2.line(trace_map, tuple(p1), tuple(p2), segment_color, 2, cv2.LINE_AA)
        cv2.line(trace_mask, tuple(p1), tuple(p2), (mask_value,) * 3, 2, cv2.LINE_AA)

    # cut the trace out of the canvas and blend the faded line in
    cv2.subtract(canvas, trace_mask, canvas)
    cv2.addWeighted(canvas, 1, trace_map, 1, 0, canvas)
    return canvas


def draw_hand(canvas, hand, show_trace=True):
    """
    Draw the hand marker, or a notice when the hand is missing

    Args:
        canvas: BGR image to draw on
        hand: Hand to draw
        show_trace: Also draw the position history

    Returns:
        Modified canvas
    """
    color = hand_color(hand)
    is_left = hand.role is HandRole.LEFT

    if hand.position is None:
        text = "Left hand missing." if is_left else "Right hand missing."
        cv2.putText(canvas, text, (20, 30) if is_left else (20, 60),
                    cv2.FONT_HERSHEY_SIMPLEX, 1, color, 2)
        return canvas

    if show_trace:
        draw_trace(canvas, hand.position_history, color)

    position = tuple(hand.position)
    cv2.circle(canvas, position, HAND_MARKER_RADIUS, color, 2)
    cv2.putText(canvas, hand.role.label, position,
                cv2.FONT_HERSHEY_SIMPLEX, 0.8, color, 3)
    return canvas


def draw_debug_overlay(canvas, hands):
    """
    Draw per-hand solver metrics in the bottom left corner

    Args:
        canvas: BGR image to draw on
        hands: Iterable of Hand

    Returns:
        Modified canvas
    """
    y = canvas.shape[0] - 15
    for hand in hands:
        metrics = hand.metrics
        text = (f"{hand.role.label}: {metrics.detection_rate():.0f}% "
                f"area {metrics.get('area_searches')} "
                f"pred {metrics.get('predictions_used')} "
                f"isect {metrics.get('intersections')}")
        draw_text_with_background(canvas, text, (10, y), font_scale=0.45,
                                  text_color=hand_color(hand), thickness=1, padding=3)
        y -= 25
    return canvas
