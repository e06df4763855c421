"""Shared fixtures for the selector tests."""

import random
from collections.abc import Callable, Iterable

import pytest


class ScriptedRandom(random.Random):
    """A ``random.Random`` whose ``randrange`` replays preset results.

    Every call's arguments are recorded so tests can check the draw range.
    """

    def __init__(self, rolls: Iterable[int]) -> None:
        super().__init__(0)
        self.rolls = list(rolls)
        self.calls: list[tuple[int, ...]] = []

    def randrange(self, *args: int, **kwargs: int) -> int:  # type: ignore[override]
        self.calls.append(args)
        return self.rolls.pop(0)


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    def make(*rolls: int) -> ScriptedRandom:
        return ScriptedRandom(rolls)

    return make


@pytest.fixture
def scenario_items() -> list[tuple[str, float]]:
    """Five items whose scaled weights are 80, 1500, 6221, 3250 and 7000."""
    return [("A", 0.8), ("B", 15.0), ("C", 62.21), ("D", 32.5), ("E", 70.0)]
