"""Integer cumulative-weight index and the binary search over it.

Weights are floats, but lookups run on integers so that a draw can be matched
exactly against the running totals. Every weight is multiplied by
``10 ** decimal_places`` and truncated; anything past that precision is lost.
"""

import sys
from bisect import bisect_left
from collections.abc import Iterable, Sequence

from weighted_random_selector.item import WeightedItem


def scale_factor(decimal_places: int) -> int:
    """Return the integer factor weights are multiplied by."""
    if isinstance(decimal_places, bool) or not isinstance(decimal_places, int):
        raise TypeError(
            f"decimal_places must be an int, got {type(decimal_places).__name__}"
        )
    if decimal_places < 0:
        raise ValueError(f"decimal_places must be >= 0, got {decimal_places}")
    if decimal_places > sys.float_info.max_10_exp:
        raise ValueError(
            f"decimal_places must be <= {sys.float_info.max_10_exp}, "
            f"got {decimal_places}"
        )
    return 10**decimal_places


def scaled_weight(weight: float, factor: int) -> int:
    return int(weight * factor)


def total_scaled_weight(items: Iterable[WeightedItem], factor: int) -> int:
    """Sum of the truncated scaled weights of ``items``.

    Always equal to the last entry ``build_cumulative`` would produce for the
    same items, so a draw bounded by it can never search past the end.
    """
    return sum(scaled_weight(item.weight, factor) for item in items)


def build_cumulative(
    items: Sequence[WeightedItem], factor: int
) -> tuple[list[int], int]:
    """Build the cumulative-weight list for ``items``.

    ``cumulative[i]`` is the sum of the scaled weights of ``items[0..i]``
    inclusive, so the list is non-decreasing and has one entry per item.
    Returns the list together with the overall total (0 when empty).
    """
    cumulative: list[int] = []
    running = 0
    for item in items:
        running += scaled_weight(item.weight, factor)
        cumulative.append(running)
    return cumulative, running


def find_index(cumulative: Sequence[int], roll: int) -> int:
    """Return the smallest index whose cumulative weight is >= ``roll``.

    An exact match resolves to that entry; otherwise this is the position
    ``roll`` would be inserted at to keep ``cumulative`` sorted. Rolls are
    drawn from ``[1, total]`` so the result is always a valid index, and a
    zero-width item (equal to its predecessor) is never chosen.
    """
    return bisect_left(cumulative, roll)


def remove_entry(cumulative: list[int], index: int) -> int:
    """Delete ``index`` from a cumulative list, keeping it a prefix sum.

    Every later entry is reduced by the removed item's own weight so the list
    stays exact for the remaining items. Returns that weight.
    """
    previous = cumulative[index - 1] if index > 0 else 0
    removed = cumulative[index] - previous
    del cumulative[index]
    for i in range(index, len(cumulative)):
        cumulative[i] -= removed
    return removed
