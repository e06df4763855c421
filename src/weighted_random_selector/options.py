"""Behaviour flags for a selector."""

import enum


class SelectorOptions(enum.Flag):
    """Combinable flags controlling how a selector treats its items."""

    NONE = 0
    #: A value may be returned more than once by ``select_many``.
    ALLOW_DUPLICATES = enum.auto()
    #: Items with weight <= 0 are dropped on add instead of rejected.
    IGNORE_ZERO_WEIGHT = enum.auto()


DEFAULT_OPTIONS = SelectorOptions.ALLOW_DUPLICATES | SelectorOptions.IGNORE_ZERO_WEIGHT
