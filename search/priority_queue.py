from __future__ import annotations
import heapq
from typing import Any, Callable, Iterator, List, Tuple

class PriorityQueue:
    """Min-heap; equal priorities come out in insertion order (FIFO)."""

    def __init__(self) -> None:
        self._h: List[Tuple[float, int, Any]] = []
        self._tiebreak = 0

    def push(self, priority: float, item: Any) -> None:
        self._tiebreak += 1
        heapq.heappush(self._h, (priority, self._tiebreak, item))

    def pop(self) -> Any:
        return heapq.heappop(self._h)[2]

    def peek(self) -> Any:
        return self._h[0][2]

    def purge(self, pred: Callable[[Any], bool]) -> int:
        """Drops every queued item matching pred; returns how many were removed."""
        kept = [e for e in self._h if not pred(e[2])]
        removed = len(self._h) - len(kept)
        if removed:
            heapq.heapify(kept)
            self._h = kept
        return removed

    def __iter__(self) -> Iterator[Any]:
        """Queued items in heap order, not priority order."""
        return (e[2] for e in self._h)

    def __len__(self) -> int:
        return len(self._h)
