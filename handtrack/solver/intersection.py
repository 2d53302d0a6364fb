"""
Keep the two hand estimates from collapsing onto the same blob
"""
from ..core.config import (
    INTERSECTION_DISTANCE_CM, INTERSECTION_ITERATIONS, INTERSECTION_NUDGE_ITERATIONS
)
from ..core.logger import get_logger
from ..core.utils import get_distance
from .smoothing import improve_by_coverage

logger = get_logger(__name__)


def handle_intersection(hand, other_position, skin_mask):
    """
    Push a hand towards its own side when it gets close to the other hand

    Closer than 8 cm the hand is marked as intersecting (which skips the
    recovery search next frame) and searched hard towards its side; closer
    than 16 cm it only gets a gentle nudge.

    Args:
        hand: Hand to correct
        other_position: Position of the other hand (Point or None)
        skin_mask: Binary skin mask

    Returns:
        bool: the hand's intersecting flag
    """
    hand.intersecting = False

    if hand.position is not None and other_position is not None:
        minimal_distance = INTERSECTION_DISTANCE_CM * hand.cm_in_pixels
        distance = max(1.0, get_distance(hand.position, other_position))
        search_mode = hand.role.intersection_mode

        if distance < minimal_distance:
            logger.debug(f"{hand.role.name}: intersecting at {distance:.1f} px, searching {search_mode.name}")
            hand.intersecting = True
            hand.metrics.increment('intersections')
            improve_by_coverage(hand, skin_mask, search_mode, INTERSECTION_ITERATIONS)
        elif distance < 2 * minimal_distance:
            improve_by_coverage(hand, skin_mask, search_mode, INTERSECTION_NUDGE_ITERATIONS)

    if hand.frame.ignore_intersect:
        hand.intersecting = False
    hand.frame.end_intersection()
    return hand.intersecting
