"""
Greedy local search ("look-around") over the coverage objective

A bounded, non-backtracking hill climb: starting from a point it keeps
stepping to the best unvisited neighbour as long as coverage does not drop.
The search mode decides which neighbours are considered, which lets the
walker drift along long blobs in a preferred direction.
"""
from enum import Enum

from ..core.logger import get_logger
from ..core.utils import Point, get_search_window
from .coverage import coverage

logger = get_logger(__name__)


class SearchMode(Enum):
    """
    Directional bias of the local search.

    Each value is the ordered table of unit (dx, dy) offsets tried every
    iteration; ties go to the earliest offset. LEFT and RIGHT are the
    subject's sides, so SEARCH_RIGHT moves towards decreasing image x.
    """
    FREE_SEARCH = ((1, 1), (1, -1), (1, 0), (-1, 1), (-1, -1), (-1, 0), (0, 1), (0, -1))
    SEARCH_UP = ((-1, 0), (1, 0), (1, -1), (-1, -1), (0, -1))
    SEARCH_DOWN = ((-1, 0), (1, 0), (1, 1), (-1, 1), (0, 1))
    SEARCH_LEFT = ((0, 1), (0, -1), (1, 1), (1, -1), (1, 0))
    SEARCH_RIGHT = ((0, 1), (0, -1), (-1, 1), (-1, -1), (-1, 0))

    @property
    def offsets(self):
        return self.value


def look_around(start, mask, max_iterations, step_size, radius, search_mode=SearchMode.FREE_SEARCH,
                return_trace=False):
    """
    Walk from a start point towards the locally best covered position

    Args:
        start: (x, y) start point in frame coordinates
        mask: Single channel mask
        max_iterations: Maximum number of moves
        step_size: Move length in pixels
        radius: Coverage disc radius in pixels
        search_mode: SearchMode giving the allowed moves
        return_trace: If True, also return the visited path (frame coordinates)

    Returns:
        Point, or (Point, list of Points) when return_trace is set
    """
    # Window large enough to hold every disc the walk can reach
    window = get_search_window(mask, start, radius + max_iterations * step_size)

    current = window.to_window(start)
    max_value = coverage(current, window.mat, radius)
    visited = {current}
    trace = [current]

    for _ in range(max_iterations):
        best_pos = None
        best_value = 0.0
        for dx, dy in search_mode.offsets:
            candidate = Point(current.x + dx * step_size, current.y + dy * step_size)
            if candidate in visited or not window.contains(candidate):
                continue
            value = coverage(candidate, window.mat, radius)
            if best_pos is None or value > best_value:
                best_pos = candidate
                best_value = value

        # local maximum reached (or boxed in)
        if best_pos is None or best_value < max_value:
            break

        max_value = best_value
        current = best_pos
        visited.add(current)
        trace.append(current)

    result = window.from_window(current)
    logger.debug(f"{search_mode.name}: {tuple(start)} -> {tuple(result)} "
                 f"in {len(trace) - 1} steps, coverage {max_value:.3f}")

    if return_trace:
        return result, [window.from_window(p) for p in trace]
    return result
