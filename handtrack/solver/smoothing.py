"""
Temporal smoothing of the solved position
"""
from ..core.config import (
    HISTORY_AVERAGE, MOTION_RADIUS, MOTION_TIERS,
    COVERAGE_SEARCH_STEP, COVERAGE_SEARCH_RADIUS_CM
)
from ..core.utils import Point
from .coverage import point_quality
from .search import look_around


def improve_by_coverage(hand, skin_mask, search_mode, max_iterations):
    """Walk over the blob to centre the hand disc in it"""
    radius = int(COVERAGE_SEARCH_RADIUS_CM * hand.cm_in_pixels)
    hand.position = look_around(hand.position, skin_mask, max_iterations,
                                COVERAGE_SEARCH_STEP, radius, search_mode)


def history_average(history, count=HISTORY_AVERAGE):
    """
    Mean of the newest history points

    Returns:
        (x, y) floats, or None if any of the points is not yet set
    """
    points = history.recent(count)
    if any(p is None for p in points):
        return None
    return (sum(p.x for p in points) / len(points),
            sum(p.y for p in points) / len(points))


def history_weight(motion_coverage):
    """Weight of the history average for a given amount of motion"""
    for upper_bound, weight in MOTION_TIERS:
        if motion_coverage < upper_bound:
            return weight
    return 0.0


def improve_using_history(hand, motion_mask):
    """
    Blend the position with the recent average, depending on local motion

    No motion: mostly the average. Some motion: weighted mix.
    A lot of motion: the fresh position as is.

    Args:
        hand: Hand being solved, position must be set
        motion_mask: Motion intensity mask
    """
    average = history_average(hand.position_history)
    if average is None:
        return

    motion_coverage = point_quality(hand.position, motion_mask, MOTION_RADIUS)
    weight = history_weight(motion_coverage)
    if weight == 0.0:
        return

    x = weight * average[0] + (1 - weight) * hand.position.x
    y = weight * average[1] + (1 - weight) * hand.position.y
    hand.position = Point(int(round(x)), int(round(y)))


def update_last_point(history):
    """
    Replace the second newest point by the midpoint of its neighbours

    Takes the corners out of the trajectory. Skipped until three points exist.
    """
    p0_index = history.index
    p1_index = history.previous_index(p0_index)
    p2_index = history.previous_index(p1_index)

    p0, p2 = history[p0_index], history[p2_index]
    if p0 is None or p2 is None:
        return

    history[p1_index] = Point(int(round(0.5 * (p0.x + p2.x))),
                              int(round(0.5 * (p0.y + p2.y))))
