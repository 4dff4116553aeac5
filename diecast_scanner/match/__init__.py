"""
Match module for fuzzy lookup of scanned boxes in a collection.
"""

from .search import CollectionMatcher

__all__ = [
    "CollectionMatcher",
]
