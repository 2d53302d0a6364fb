"""
Hand position solver
Split into logical components: coverage objective, local search,
recovery, smoothing and intersection handling
"""
from .blob import BlobInformation, BlobType, Condition
from .hand import Hand, HandRole
from .hand_pair import HandPair
from .search import SearchMode

__all__ = ['BlobInformation', 'BlobType', 'Condition', 'Hand', 'HandRole', 'HandPair', 'SearchMode']
