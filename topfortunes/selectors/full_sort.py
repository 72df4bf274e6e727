"""Buffer-everything baseline. Not memory bounded; used to cross-check."""

from ..candidate import Candidate, rank_key
from .base import BoundedSelector


class SortSelector(BoundedSelector):
    name = "sort"

    def __init__(self, k: int):
        super().__init__(k)
        self._buffer: list[Candidate] = []

    def _offer(self, candidate: Candidate, seq: int):
        self._buffer.append(candidate)

    def _finalize(self) -> list[Candidate]:
        buffer, self._buffer = self._buffer, []
        # sort() is stable, so equivalent candidates keep offer order
        buffer.sort(key=rank_key)
        del buffer[self.k:]
        return buffer

    def __len__(self) -> int:
        return min(len(self._buffer), self.k)
