"""
Two hand orchestration: solve both hands, then keep them apart
"""
from ..core.logger import get_logger
from .config_loader import load_solver_params
from .hand import Hand, HandRole
from .visualization import draw_hand, draw_debug_overlay

logger = get_logger(__name__)


class HandPair:
    """Owns the left and right hand solvers and runs them per frame"""

    def __init__(self, params=None, show_debug=False):
        params = load_solver_params() if params is None else params
        self.left = Hand(HandRole.LEFT, params)
        self.right = Hand(HandRole.RIGHT, params)
        self.show_debug_overlay = show_debug

    @property
    def hands(self):
        return (self.left, self.right)

    def process_frame(self, skin_mask, blobs, motion_mask):
        """
        Solve both hands for one frame

        Estimates for this frame must have been offered with
        Hand.set_estimate before calling this.

        Args:
            skin_mask: Binary skin mask
            blobs: List of BlobInformation
            motion_mask: Motion intensity mask

        Returns:
            dict with keys:
                - 'left', 'right': Point or None
                - 'left_detected', 'right_detected': bool
                - 'intersecting': bool, either hand was pushed apart
        """
        self.left.solve(skin_mask, blobs, motion_mask)
        self.right.solve(skin_mask, blobs, motion_mask)

        # both hands resolve against the positions from before either moved
        left_position, right_position = self.left.position, self.right.position
        left_hit = self.left.handle_intersection(right_position, skin_mask)
        right_hit = self.right.handle_intersection(left_position, skin_mask)

        if left_hit or right_hit:
            logger.debug(f"Hands intersecting: left={self.left.position} right={self.right.position}")

        return {
            'left': self.left.position,
            'right': self.right.position,
            'left_detected': self.left.detected,
            'right_detected': self.right.detected,
            'intersecting': left_hit or right_hit,
        }

    def draw(self, canvas, show_trace=True):
        """Draw both hands (and the metrics panel in debug mode) onto a BGR canvas"""
        for hand in self.hands:
            draw_hand(canvas, hand, show_trace)
        if self.show_debug_overlay:
            draw_debug_overlay(canvas, self.hands)
        return canvas

    def reset(self):
        for hand in self.hands:
            hand.reset()
