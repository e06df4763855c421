"""Exceptions raised by the selector."""


class SelectorError(ValueError):
    """Base class for all selector precondition failures."""


class EmptyCollectionError(SelectorError, IndexError):
    """A selection was requested from a selector with no items."""


class InvalidWeightError(SelectorError):
    """An item's weight is not a finite positive number."""


class InvalidCountError(SelectorError):
    """``select_many`` was asked for a non-positive number of values."""


class InsufficientItemsError(SelectorError):
    """More distinct values were requested than there are items."""
