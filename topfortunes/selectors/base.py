"""BoundedSelector ABC."""

import itertools
from abc import ABC, abstractmethod

from ..candidate import Candidate


class SelectorFinalized(RuntimeError):
    """Raised when a selector is used after finalize()."""


class BoundedSelector(ABC):
    """Keeps the K most preferred Candidates offered to it.

    Subclasses store entries ordered by ``(rank_key(candidate), seq)`` where
    ``seq`` is the offer sequence number, so equivalent candidates keep their
    offer order and every strategy finalizes to the same list.
    """

    name: str = "unknown"

    def __init__(self, k: int):
        if isinstance(k, bool) or not isinstance(k, int) or k < 1:
            raise ValueError(f"capacity must be a positive integer, got {k!r}")
        self.k = k
        self._seq = itertools.count()
        self._finalized = False

    def offer(self, candidate: Candidate):
        """Feed one candidate; it replaces the current worst if it ranks better."""
        if self._finalized:
            raise SelectorFinalized(f"{self.name} selector already finalized")
        self._offer(candidate, next(self._seq))

    def finalize(self) -> list[Candidate]:
        """Return the retained candidates best-first. Callable once."""
        if self._finalized:
            raise SelectorFinalized(f"{self.name} selector already finalized")
        self._finalized = True
        return self._finalize()

    @abstractmethod
    def _offer(self, candidate: Candidate, seq: int):
        ...

    @abstractmethod
    def _finalize(self) -> list[Candidate]:
        ...

    @abstractmethod
    def __len__(self) -> int:
        """Number of candidates finalize() would return right now."""
        ...
