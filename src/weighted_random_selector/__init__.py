"""Package initialization for weighted-random-selector.

Weighted random selection of one or many values using an integer
cumulative-weight index and binary search.
"""

from weighted_random_selector.errors import (
    EmptyCollectionError,
    InsufficientItemsError,
    InvalidCountError,
    InvalidWeightError,
    SelectorError,
)
from weighted_random_selector.item import WeightedItem
from weighted_random_selector.options import DEFAULT_OPTIONS, SelectorOptions
from weighted_random_selector.selector import CacheState, WeightedRandomSelector

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_OPTIONS",
    "CacheState",
    "EmptyCollectionError",
    "InsufficientItemsError",
    "InvalidCountError",
    "InvalidWeightError",
    "SelectorError",
    "SelectorOptions",
    "WeightedItem",
    "WeightedRandomSelector",
]
