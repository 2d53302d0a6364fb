"""
Blob records handed over by the blob extraction stage
"""
from enum import Enum

from ..core.utils import Point


class BlobType(Enum):
    """Vertical position category of a skin blob"""
    LOW = 'low'         # torso / lap level
    MEDIUM = 'medium'
    HIGH = 'high'       # head / face level


class Condition(Enum):
    """Scene condition reported together with a blob estimate"""
    NORMAL = 'normal'
    ONLY_HEAD = 'only_head'


class BlobInformation:
    """Bounding extremes and vertical category of one connected skin region"""

    def __init__(self, left, right, top, bottom, blob_type=BlobType.MEDIUM):
        self.left = Point(*left)
        self.right = Point(*right)
        self.top = Point(*top)
        self.bottom = Point(*bottom)
        self.blob_type = blob_type

    @classmethod
    def from_contour(cls, contour, blob_type=BlobType.MEDIUM):
        """
        Build a blob record from an OpenCV contour

        Args:
            contour: Contour as returned by cv2.findContours
            blob_type: Vertical category of the blob

        Returns:
            BlobInformation
        """
        pts = contour.reshape(-1, 2)
        left = pts[pts[:, 0].argmin()]
        right = pts[pts[:, 0].argmax()]
        top = pts[pts[:, 1].argmin()]
        bottom = pts[pts[:, 1].argmax()]
        return cls(
            (int(left[0]), int(left[1])),
            (int(right[0]), int(right[1])),
            (int(top[0]), int(top[1])),
            (int(bottom[0]), int(bottom[1])),
            blob_type
        )

    @property
    def height(self):
        return self.bottom.y - self.top.y

    def contains(self, point):
        """Check whether a point lies inside the blob's bounding box (inclusive)"""
        return (self.left.x <= point[0] <= self.right.x and
                self.top.y <= point[1] <= self.bottom.y)

    def __repr__(self):
        return (f"BlobInformation(x={self.left.x}..{self.right.x}, "
                f"y={self.top.y}..{self.bottom.y}, type={self.blob_type.name})")
