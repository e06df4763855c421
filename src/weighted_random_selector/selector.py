"""The weighted random selector container."""

import decimal
import enum
import logging
import math
import numbers
import random
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from weighted_random_selector.cumulative import (
    build_cumulative,
    find_index,
    remove_entry,
    scale_factor,
    total_scaled_weight,
)
from weighted_random_selector.errors import (
    EmptyCollectionError,
    InsufficientItemsError,
    InvalidCountError,
    InvalidWeightError,
)
from weighted_random_selector.item import WeightedItem
from weighted_random_selector.options import DEFAULT_OPTIONS, SelectorOptions

T = TypeVar("T")

logger = logging.getLogger(__name__)

_MISSING: Any = object()

_NUMBER_TYPES = (numbers.Real, decimal.Decimal)


def _is_finite(number: Any) -> bool:
    # Exact ints and fractions beyond float range are still finite
    try:
        return math.isfinite(number)
    except OverflowError:
        return True


class CacheState(enum.Enum):
    """Whether the cumulative index matches the current items."""

    CLEAN = "clean"
    DIRTY = "dirty"


def _draw_index(
    items: Sequence[WeightedItem],
    cumulative: Sequence[int],
    total: int,
    rng: random.Random,
) -> int:
    """Pick an index into ``items`` with probability proportional to weight.

    When every weight truncated to zero there is nothing to weigh by, so the
    pick is uniform over the items instead.
    """
    if len(items) == 1:
        return 0
    if total <= 0:
        logger.debug(
            "Total weight is zero, picking uniformly from %d items", len(items)
        )
        return rng.randrange(len(items))
    return find_index(cumulative, rng.randrange(1, total + 1))


class WeightedRandomSelector(Generic[T]):
    """Selects values with probability proportional to their weight.

    Items are kept in insertion order. The integer cumulative-weight index is
    rebuilt lazily: mutations only mark it dirty, and the next selection (or
    an explicit ``build()``) recomputes it.

    Not safe for concurrent use; callers sharing a selector across threads
    must lock around it.
    """

    def __init__(
        self,
        items: Iterable[WeightedItem[T] | tuple[T, float]] | None = None,
        options: SelectorOptions = DEFAULT_OPTIONS,
        decimal_places: int = 2,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self._options = options
        self._decimal_places = decimal_places
        self._integer_factor = scale_factor(decimal_places)
        self._rng = rng if rng is not None else random.Random(seed)
        self._items: list[WeightedItem[T]] = []
        self._cumulative: list[int] = []
        self._cumulative_working: list[int] | None = None
        self._total = 0
        self._state = CacheState.DIRTY
        if items is not None:
            self.add_many(items)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    @property
    def options(self) -> SelectorOptions:
        return self._options

    @property
    def allow_duplicates(self) -> bool:
        return SelectorOptions.ALLOW_DUPLICATES in self._options

    @property
    def ignore_zero_weight(self) -> bool:
        return SelectorOptions.IGNORE_ZERO_WEIGHT in self._options

    @property
    def decimal_places(self) -> int:
        return self._decimal_places

    @property
    def integer_factor(self) -> int:
        return self._integer_factor

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def items(self) -> tuple[WeightedItem[T], ...]:
        return tuple(self._items)

    @property
    def cumulative_weights(self) -> tuple[int, ...]:
        """The cumulative-weight index, rebuilt first if stale."""
        self.build()
        return tuple(self._cumulative)

    @property
    def total_weight(self) -> int:
        """Sum of all scaled weights, rebuilt first if stale."""
        self.build()
        return self._total

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[WeightedItem[T]]:
        return iter(tuple(self._items))

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._items!r}, options={self._options!r}, "
            f"decimal_places={self._decimal_places})"
        )

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add(self, item: Any, weight: float = _MISSING) -> None:
        """Add an item.

        Accepts either a ``WeightedItem`` or a value and its weight. Weights
        <= 0 are silently dropped when ``IGNORE_ZERO_WEIGHT`` is set and
        rejected with ``InvalidWeightError`` otherwise. Non-finite weights are
        always rejected.
        """
        if weight is not _MISSING:
            item = WeightedItem(item, weight)
        elif not isinstance(item, WeightedItem):
            raise TypeError(
                f"Expected a WeightedItem or a value and a weight, got {item!r}"
            )

        weight = item.weight
        if isinstance(weight, bool) or not isinstance(weight, _NUMBER_TYPES):
            raise InvalidWeightError(f"Weight must be a number, got {weight!r}")
        if not _is_finite(weight):
            raise InvalidWeightError(f"Weight must be finite, got {weight}")
        if weight <= 0:
            if self.ignore_zero_weight:
                logger.debug("Ignoring %r with non-positive weight", item)
                return
            raise InvalidWeightError(f"Weight must be > 0, got {weight}")
        if not _is_finite(weight * self._integer_factor):
            raise InvalidWeightError(
                f"Weight {weight} overflows at {self._decimal_places} decimal places"
            )

        self._items.append(item)
        self._state = CacheState.DIRTY

    def add_many(self, items: Iterable[WeightedItem[T] | tuple[T, float]]) -> None:
        """Add each item in order.

        Stops at the first invalid item; items added before it stay added.
        """
        for item in items:
            if isinstance(item, WeightedItem):
                self.add(item)
            else:
                value, weight = item
                self.add(value, weight)

    def remove(self, item: WeightedItem[T]) -> bool:
        """Remove the first item equal to ``item``, if there is one."""
        self._state = CacheState.DIRTY
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._state = CacheState.DIRTY
        self._items.clear()

    def build(self) -> None:
        """Recompute the cumulative-weight index if any mutation staled it."""
        if self._state is CacheState.CLEAN:
            return

        self._cumulative, self._total = build_cumulative(
            self._items, self._integer_factor
        )
        # select_many without duplicates deletes from a copy of this list
        if self.allow_duplicates:
            self._cumulative_working = None
        else:
            self._cumulative_working = list(self._cumulative)
        self._state = CacheState.CLEAN
        logger.debug(
            "Rebuilt cumulative index: %d items, total weight %d",
            len(self._items),
            self._total,
        )

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def select(self) -> T:
        """Return one value, chosen with probability proportional to weight."""
        if not self._items:
            raise EmptyCollectionError("There are no items to select from")
        self.build()
        index = _draw_index(self._items, self._cumulative, self._total, self._rng)
        return self._items[index].value

    def select_many(self, count: int) -> list[T]:
        """Return ``count`` values.

        With ``ALLOW_DUPLICATES`` every draw is independent and a value may
        repeat. Without it, each drawn item is taken out of the running so
        the result holds ``count`` distinct items; the selector itself is
        left unchanged.
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, got {type(count).__name__}")
        if count <= 0:
            raise InvalidCountError(f"count must be > 0, got {count}")
        if not self._items:
            raise EmptyCollectionError("There are no items to select from")
        if not self.allow_duplicates and count > len(self._items):
            raise InsufficientItemsError(
                f"Cannot take {count} distinct items from {len(self._items)}"
            )

        self.build()

        if self.allow_duplicates:
            return [
                self._items[
                    _draw_index(self._items, self._cumulative, self._total, self._rng)
                ].value
                for _ in range(count)
            ]

        items = list(self._items)
        cumulative = list(
            self._cumulative
            if self._cumulative_working is None
            else self._cumulative_working
        )
        result: list[T] = []
        for _ in range(count):
            if not items:
                break
            total = total_scaled_weight(items, self._integer_factor)
            index = _draw_index(items, cumulative, total, self._rng)
            result.append(items.pop(index).value)
            remove_entry(cumulative, index)
        return result
