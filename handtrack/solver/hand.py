"""
Single hand position solver

Each frame the solver starts from the blob estimate (if one was accepted),
re-acquires the hand around its last position when the estimate is missing
or implausible, walks the position onto the best covered spot of the skin
blob and finally smooths it with the recent history.
"""
from enum import Enum

from ..core.config import COMPACT_BLOB_HEIGHT_CM, TALL_BLOB_HEIGHT_CM, COVERAGE_SEARCH_ITERATIONS
from ..core.logger import get_logger
from ..core.utils import Point, clamp_point
from .blob import BlobType, Condition
from .config_loader import load_solver_params
from .history import HistoryBuffer
from .intersection import handle_intersection
from .recovery import recover_position
from .search import SearchMode
from .smoothing import improve_by_coverage, improve_using_history, update_last_point
from .state import FrameContext, SolverMetrics

logger = get_logger(__name__)


class HandRole(Enum):
    """Which of the subject's hands is tracked"""
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def intersection_mode(self):
        """Search bias that moves the hand towards its own side"""
        return SearchMode.SEARCH_LEFT if self is HandRole.LEFT else SearchMode.SEARCH_RIGHT

    @property
    def label(self):
        return 'L' if self is HandRole.LEFT else 'R'


class Hand:
    """Tracks the position of one hand across frames"""

    def __init__(self, role, params=None, **overrides):
        """
        Args:
            role: HandRole of this hand
            params: Dict of solver parameters (default: load_solver_params())
            **overrides: Individual parameters overriding params
        """
        params = dict(load_solver_params() if params is None else params)
        params.update(overrides)

        self.role = role
        self.cm_in_pixels = float(params['cm_in_pixels'])
        self.max_velocity = float(params['max_velocity'])
        self.fps = float(params['fps'])
        self.face_coverage_threshold = params['face_coverage_threshold']
        history_size = int(params['history_size'])

        for name in ('cm_in_pixels', 'max_velocity', 'fps'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

        self.position = None
        self.position_history = HistoryBuffer(history_size)
        self.blob_history = HistoryBuffer(history_size)
        self.intersecting = False
        self.frame = FrameContext()
        self.metrics = SolverMetrics()

    @property
    def detected(self):
        return self.position is not None

    def set_estimate(self, estimate, blob, ignore_intersection=False, condition=Condition.NORMAL):
        """
        Offer a blob based position estimate for the current frame

        A head-level blob, or ignore_intersection, exempts the hand from
        intersection handling this frame. When only the head is visible the
        estimate is only taken if the hand was already up at face level.

        Args:
            estimate: (x, y) estimated position
            blob: BlobInformation the estimate came from
            ignore_intersection: Accept even if the other hand is close
            condition: Condition of the scene
        """
        if blob.blob_type is BlobType.HIGH or ignore_intersection:
            self.frame.ignore_intersect = True

        if condition is Condition.ONLY_HEAD:
            if self.position is None or self.position.y > self.face_coverage_threshold:
                logger.debug(f"{self.role.name}: rejected head-only estimate {tuple(estimate)}")
                self.metrics.increment('estimates_rejected')
                return

        self.frame.blob_estimate = Point(*estimate)
        self.blob_history.push(blob)
        self.frame.estimate_updated = True
        self.metrics.increment('estimates_accepted')

    def search_mode_from_blobs(self, blobs):
        """
        Choose the search bias from the blob the hand sits in

        Compact blobs are searched freely. Tall blobs are merged with the
        torso (search down) or with the head (search up).
        """
        if self.position is None:
            return SearchMode.FREE_SEARCH

        for blob in blobs:
            if not blob.contains(self.position):
                continue

            height = blob.height
            if height < COMPACT_BLOB_HEIGHT_CM * self.cm_in_pixels:
                return SearchMode.FREE_SEARCH
            if blob.blob_type is BlobType.LOW:
                return SearchMode.SEARCH_DOWN
            if blob.blob_type is BlobType.MEDIUM:
                if height > TALL_BLOB_HEIGHT_CM * self.cm_in_pixels:
                    return SearchMode.SEARCH_DOWN
                return SearchMode.FREE_SEARCH
            if blob.blob_type is BlobType.HIGH:
                return SearchMode.SEARCH_UP
            return SearchMode.FREE_SEARCH

        return SearchMode.FREE_SEARCH

    def solve(self, skin_mask, blobs, motion_mask):
        """
        Find the best position for this frame

        Args:
            skin_mask: Binary skin mask (uint8, 0/255)
            blobs: List of BlobInformation for this frame
            motion_mask: Motion intensity mask (uint8)

        Returns:
            Point or None if the hand is not tracked
        """
        self.metrics.increment('frames')

        # the estimate is the fallback if none of the improvements succeed
        if self.frame.estimate_updated:
            self.position = clamp_point(self.frame.blob_estimate, skin_mask.shape)

        recover_position(self, skin_mask)

        if self.position is not None:
            search_mode = self.search_mode_from_blobs(blobs)
            improve_by_coverage(self, skin_mask, search_mode, COVERAGE_SEARCH_ITERATIONS)
            improve_using_history(self, motion_mask)

            self.position_history.push(self.position)
            update_last_point(self.position_history)
        else:
            self.metrics.increment('lost_frames')

        self.frame.end_solve()
        return self.position

    def handle_intersection(self, other_position, skin_mask):
        """Resolve proximity to the other hand, see intersection.handle_intersection"""
        return handle_intersection(self, other_position, skin_mask)

    def reset(self):
        """Forget all tracking state"""
        self.position = None
        self.position_history.clear()
        self.blob_history.clear()
        self.intersecting = False
        self.frame = FrameContext()
        self.metrics.clear()

    def __repr__(self):
        return f"Hand({self.role.name}, position={self.position}, intersecting={self.intersecting})"
