"""Bounded max-heap selector: the worst retained candidate sits at the root."""

import heapq

from ..candidate import Candidate, rank_key
from .base import BoundedSelector


class _Slot:
    """Heap entry with inverted ordering, turning heapq into a max-heap."""

    __slots__ = ("key", "candidate")

    def __init__(self, key: tuple, candidate: Candidate):
        self.key = key
        self.candidate = candidate

    def __lt__(self, other: "_Slot") -> bool:
        return self.key > other.key


class HeapSelector(BoundedSelector):
    name = "heap"

    def __init__(self, k: int):
        super().__init__(k)
        self._heap: list[_Slot] = []

    def _offer(self, candidate: Candidate, seq: int):
        slot = _Slot((rank_key(candidate), seq), candidate)
        if len(self._heap) < self.k:
            heapq.heappush(self._heap, slot)
        elif slot.key < self._heap[0].key:
            heapq.heapreplace(self._heap, slot)

    def _finalize(self) -> list[Candidate]:
        heap, self._heap = self._heap, []
        heap.sort(key=lambda s: s.key)
        return [s.candidate for s in heap]

    def __len__(self) -> int:
        return len(self._heap)
