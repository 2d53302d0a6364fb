"""
Recovery strategies for frames where the blob estimate is missing or implausible
"""
import math

from ..core.config import (
    QUALITY_THRESHOLD,
    AREA_SEARCH_ITERATIONS, AREA_SEARCH_STEP, AREA_SEARCH_RADIUS_CM
)
from ..core.logger import get_logger
from ..core.utils import Point, clamp_point, get_distance
from .coverage import point_quality
from .search import SearchMode, look_around

logger = get_logger(__name__)


def max_frame_displacement(hand):
    """Largest plausible movement between two frames, in pixels"""
    return 2 * hand.max_velocity * hand.cm_in_pixels / hand.fps


def improve_by_area_search(hand, skin_mask, reference):
    """
    Search the surrounding 8.5 cm of a reference point for the hand blob

    Only runs when the current position jumped further than the hand can
    move in one frame, or when no estimate arrived this frame.

    Args:
        hand: Hand being solved
        skin_mask: Binary skin mask
        reference: (x, y) point to search from, usually the last position

    Returns:
        bool: True if a search was performed and the position replaced
    """
    if hand.position is None:
        distance = math.inf
    else:
        distance = get_distance(reference, hand.position)

    if distance <= max_frame_displacement(hand) and hand.frame.estimate_updated:
        return False

    quality = point_quality(reference, skin_mask, cm_in_pixels=hand.cm_in_pixels)
    # the reference has to sit on a reasonable amount of skin to be worth searching from
    if quality <= QUALITY_THRESHOLD:
        logger.debug(f"{hand.role.name}: area search skipped at {tuple(reference)}, quality {quality:.2f}")
        return False

    radius = int(AREA_SEARCH_RADIUS_CM * hand.cm_in_pixels)
    hand.position = look_around(reference, skin_mask, AREA_SEARCH_ITERATIONS,
                                AREA_SEARCH_STEP, radius, SearchMode.FREE_SEARCH)
    hand.metrics.increment('area_searches')
    return True


def predicted_position(hand, skin_mask):
    """
    Extrapolate the next position from the last three history points

    Two candidates are scored: a linear step from the last displacement and
    a step along the average of the last two displacements.

    Args:
        hand: Hand being solved
        skin_mask: Binary skin mask

    Returns:
        Point, or None if there is no usable prediction
    """
    p1, p2, p3 = hand.position_history.recent(3)
    if p1 is None or p2 is None or p3 is None:
        return None

    dx1, dy1 = p1.x - p2.x, p1.y - p2.y
    dx2, dy2 = p2.x - p3.x, p2.y - p3.y

    linear = clamp_point((p1.x + dx1, p1.y + dy1), skin_mask.shape)
    velocity = clamp_point((p1.x + int((dx1 + dx2) / 2), p1.y + int((dy1 + dy2) / 2)),
                           skin_mask.shape)

    linear_quality = point_quality(linear, skin_mask, cm_in_pixels=hand.cm_in_pixels)
    velocity_quality = point_quality(velocity, skin_mask, cm_in_pixels=hand.cm_in_pixels)

    if velocity_quality > linear_quality:
        best, quality = velocity, velocity_quality
    else:
        best, quality = linear, linear_quality

    if quality > QUALITY_THRESHOLD:
        return Point(*best)

    logger.debug(f"{hand.role.name}: no usable prediction "
                 f"(linear {linear_quality:.2f}, velocity {velocity_quality:.2f})")
    return None


def recover_position(hand, skin_mask):
    """
    Re-acquire the hand from its last position, falling back to a prediction

    Args:
        hand: Hand being solved
        skin_mask: Binary skin mask
    """
    last_position = hand.position_history.latest
    if last_position is None or hand.intersecting:
        return

    if improve_by_area_search(hand, skin_mask, last_position):
        return

    prediction = predicted_position(hand, skin_mask)
    if prediction is not None:
        hand.metrics.increment('predictions_used')
        improve_by_area_search(hand, skin_mask, prediction)
