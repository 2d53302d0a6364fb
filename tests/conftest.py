"""
Shared fixtures for the hand solver tests
"""
import cv2
import numpy as np
import pytest

from handtrack.solver.blob import BlobInformation, BlobType
from handtrack.solver.hand import Hand, HandRole

FRAME_SHAPE = (480, 640)

TEST_PARAMS = {
    'cm_in_pixels': 5.0,
    'max_velocity': 150.0,
    'fps': 30,
    'history_size': 10,
    'face_coverage_threshold': 160,
}


def disc_mask(center, radius, shape=FRAME_SHAPE):
    """Skin mask with a single filled disc"""
    mask = np.zeros(shape, dtype=np.uint8)
    cv2.circle(mask, tuple(center), radius, 255, -1)
    return mask


def box_blob(x0, y0, x1, y1, blob_type=BlobType.MEDIUM):
    """Blob record for an axis aligned box"""
    cx, cy = (x0 + x1) // 2, (y0 + y1) // 2
    return BlobInformation((x0, cy), (x1, cy), (cx, y0), (cx, y1), blob_type)


@pytest.fixture
def empty_mask():
    return np.zeros(FRAME_SHAPE, dtype=np.uint8)


@pytest.fixture
def full_mask():
    return np.full(FRAME_SHAPE, 255, dtype=np.uint8)


@pytest.fixture
def make_hand():
    def _make(role=HandRole.LEFT, **overrides):
        return Hand(role, TEST_PARAMS, **overrides)
    return _make
