"""Order-statistics selector backed by a sorted list.

``sortedcontainers.SortedList`` gives O(log K) insertion and O(log K)
removal of the last (worst) element, and keeps the working set in final
order, so finalize is a plain walk.
"""

from sortedcontainers import SortedList

from ..candidate import Candidate, rank_key
from .base import BoundedSelector


class OrderedSelector(BoundedSelector):
    name = "ordered"

    def __init__(self, k: int):
        super().__init__(k)
        # (rank_key, seq, candidate); seq is unique so candidates never compare
        self._entries = SortedList()

    def _offer(self, candidate: Candidate, seq: int):
        entry = (rank_key(candidate), seq, candidate)
        if len(self._entries) < self.k:
            self._entries.add(entry)
        elif entry < self._entries[-1]:
            self._entries.pop()
            self._entries.add(entry)

    def _finalize(self) -> list[Candidate]:
        entries, self._entries = self._entries, SortedList()
        return [candidate for _, _, candidate in entries]

    def __len__(self) -> int:
        return len(self._entries)
