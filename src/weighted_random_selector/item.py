"""The value/weight pair stored by a selector."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class WeightedItem(Generic[T]):
    """A value together with its relative selection weight.

    Items compare equal when both the value and the weight are equal, which
    is what ``WeightedRandomSelector.remove`` matches on. An item unpacks
    into ``(value, weight)``.
    """

    value: T
    weight: float

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.weight
