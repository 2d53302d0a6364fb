"""
Per-frame scratch state and debug metrics for a tracked hand
"""


class FrameContext:
    """
    Scratch state that only lives for one frame.

    Estimate fusion fills it before `solve`, `solve` consumes the estimate and
    the intersection resolver consumes the intersection exemption.
    """

    def __init__(self):
        self.blob_estimate = None
        self.estimate_updated = False
        self.ignore_intersect = False

    def end_solve(self):
        """Drop the consumed estimate, keep the exemption for the resolver"""
        self.blob_estimate = None
        self.estimate_updated = False

    def end_intersection(self):
        self.ignore_intersect = False

    def __repr__(self):
        return (f"FrameContext(estimate={self.blob_estimate}, "
                f"updated={self.estimate_updated}, ignore_intersect={self.ignore_intersect})")


class SolverMetrics:
    """Debug counters for one hand"""

    def __init__(self):
        self.debug_metrics = {}
        self.clear()

    def clear(self):
        self.debug_metrics = {
            'frames': 0,
            'estimates_accepted': 0,
            'estimates_rejected': 0,
            'area_searches': 0,
            'predictions_used': 0,
            'intersections': 0,
            'lost_frames': 0,
        }

    def increment(self, key, amount=1):
        self.debug_metrics[key] += amount

    def get(self, key):
        return self.debug_metrics.get(key, 0)

    def detection_rate(self):
        """Share of solved frames that produced a position, in percent"""
        frames = self.debug_metrics['frames']
        if frames == 0:
            return 0.0
        return 100.0 * (frames - self.debug_metrics['lost_frames']) / frames
