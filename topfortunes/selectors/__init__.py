"""Interchangeable bounded top-K selection strategies."""

from .base import BoundedSelector, SelectorFinalized
from .full_sort import SortSelector
from .heap import HeapSelector
from .ordered import OrderedSelector

STRATEGIES = {
    HeapSelector.name: HeapSelector,
    OrderedSelector.name: OrderedSelector,
    SortSelector.name: SortSelector,
}


def make_selector(strategy: str, k: int) -> BoundedSelector:
    """Build the selector registered under ``strategy`` with capacity ``k``."""
    try:
        cls = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"unknown strategy {strategy!r}; choose from {', '.join(STRATEGIES)}"
        ) from None
    return cls(k)


__all__ = [
    "BoundedSelector", "SelectorFinalized", "HeapSelector", "OrderedSelector",
    "SortSelector", "STRATEGIES", "make_selector",
]
