"""
Coverage of a circular neighbourhood in a mask

This is the objective for every search step and every quality gate.
"""
from functools import lru_cache

import cv2
import numpy as np

from ..core.config import CM_IN_PIXELS, QUALITY_RADIUS_CM
from ..core.utils import get_search_window


@lru_cache(maxsize=32)
def _disc_stamp(radius):
    """Filled disc of the given radius and its pixel count"""
    size = 2 * radius + 1
    stamp = np.zeros((size, size), dtype=np.uint8)
    cv2.circle(stamp, (radius, radius), radius, 1, -1)
    stamp.setflags(write=False)
    return stamp, int(np.count_nonzero(stamp))


def coverage(point, mask, radius):
    """
    Fraction of a disc around a point that is "on" in a mask

    The disc is rasterized with OpenCV; its pixel count is the normalizer, so
    a fully set mask yields exactly 1. Parts of the disc that fall outside the
    mask count as off.

    Args:
        point: (x, y) centre in mask coordinates
        mask: Single channel uint8 mask (0..255)
        radius: Disc radius in pixels

    Returns:
        float in [0, 1]
    """
    if mask.ndim != 2:
        raise ValueError(f"Coverage needs a single channel mask, got shape {mask.shape}")
    radius = int(radius)
    if radius < 1:
        raise ValueError(f"Coverage radius must be at least 1 px, got {radius}")

    stamp, area = _disc_stamp(radius)
    h, w = mask.shape
    x, y = int(point[0]), int(point[1])

    # Disc bounding box, clipped to the mask
    x0, y0 = x - radius, y - radius
    cx0, cy0 = max(x0, 0), max(y0, 0)
    cx1, cy1 = min(x + radius + 1, w), min(y + radius + 1, h)
    if cx0 >= cx1 or cy0 >= cy1:
        return 0.0

    patch = mask[cy0:cy1, cx0:cx1]
    inside = stamp[cy0 - y0:cy1 - y0, cx0 - x0:cx1 - x0] > 0
    total = float(patch[inside].sum(dtype=np.float64))
    return total / (area * 255.0)


def point_quality(point, mask, radius=None, cm_in_pixels=CM_IN_PIXELS):
    """
    Coverage around a point, evaluated on a small window instead of the full frame

    Args:
        point: (x, y) in frame coordinates
        mask: Single channel mask
        radius: Disc radius in pixels (default 5 cm)
        cm_in_pixels: Scale used for the default radius

    Returns:
        float in [0, 1]
    """
    if radius is None:
        radius = int(QUALITY_RADIUS_CM * cm_in_pixels)
    window = get_search_window(mask, point, 2 * radius)
    return coverage(window.to_window(point), window.mat, radius)
