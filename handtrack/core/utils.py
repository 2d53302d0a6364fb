"""
Geometry and drawing utilities for the hand position solver
"""
import math
from collections import namedtuple

import cv2


Point = namedtuple('Point', ['x', 'y'])


def get_distance(p1, p2):
    """
    Euclidean distance between two points

    Args:
        p1, p2: (x, y) points

    Returns:
        Distance in pixels
    """
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def clamp_point(point, shape):
    """
    Clamp a point into the bounds of an image

    Args:
        point: (x, y) point
        shape: Image shape (rows, cols, ...)

    Returns:
        Point inside the image
    """
    h, w = shape[:2]
    return Point(min(max(int(point[0]), 0), w - 1),
                 min(max(int(point[1]), 0), h - 1))


class SearchWindow(namedtuple('SearchWindow', ['mat', 'x', 'y'])):
    """
    Bounded view into a mask with the window origin in frame coordinates.
    The view shares memory with the mask and must not be written to.
    """
    __slots__ = ()

    def to_window(self, point):
        """Translate a frame point into window coordinates"""
        return Point(point[0] - self.x, point[1] - self.y)

    def from_window(self, point):
        """Translate a window point back into frame coordinates"""
        return Point(point[0] + self.x, point[1] + self.y)

    def contains(self, point):
        """Check whether a window point lies inside the window"""
        h, w = self.mat.shape[:2]
        return 0 <= point[0] < w and 0 <= point[1] < h


def get_search_window(mask, center, half_size):
    """
    Cut a square window around a point out of a mask, clamped to the mask

    Args:
        mask: Single channel image
        center: (x, y) centre in frame coordinates
        half_size: Half the side length of the window in pixels

    Returns:
        SearchWindow
    """
    h, w = mask.shape[:2]
    half_size = int(math.ceil(half_size))
    x0 = min(max(int(center[0]) - half_size, 0), w - 1)
    y0 = min(max(int(center[1]) - half_size, 0), h - 1)
    x1 = min(max(int(center[0]) + half_size + 1, x0 + 1), w)
    y1 = min(max(int(center[1]) + half_size + 1, y0 + 1), h)
    return SearchWindow(mask[y0:y1, x0:x1], x0, y0)


def draw_text_with_background(frame, text, position, font=cv2.FONT_HERSHEY_SIMPLEX,
                              font_scale=1, text_color=(255, 255, 255),
                              bg_color=(0, 0, 0), thickness=2, padding=5):
    """
    Draw text with a background rectangle for better visibility

    Args:
        frame: Image to draw on
        text: Text to draw
        position: (x, y) tuple for text position
        font: OpenCV font type
        font_scale: Font scale
        text_color: Text color (B, G, R)
        bg_color: Background color (B, G, R)
        thickness: Text thickness
        padding: Padding around text in pixels
    """
    x, y = position
    (text_w, text_h), _ = cv2.getTextSize(text, font, font_scale, thickness)

    cv2.rectangle(frame,
                  (x - padding, y - text_h - padding),
                  (x + text_w + padding, y + padding),
                  bg_color, -1)

    cv2.putText(frame, text, (x, y), font, font_scale, text_color, thickness)
