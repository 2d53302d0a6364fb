"""Hand position tracking - Core package"""
from .solver import Hand, HandRole, HandPair, BlobInformation, BlobType, Condition, SearchMode
from .core.config import *
from .core.utils import Point, get_distance

__version__ = "1.0.0"
