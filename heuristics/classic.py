from __future__ import annotations
from typing import Optional

from pushbox_core.grid import Tile


# ---- helpers

def manhattan(a: Tile, b: Tile) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def manhattan_weighted(box: Tile, finish: Tile) -> int:
    """Box-to-finish distance with the vertical component counted twice."""
    return abs(finish.x - box.x) + abs(finish.y - box.y) * 2


# ---- node heuristic

def h_push(agent: Tile, target: Optional[Tile], box: Tile, finish: Tile) -> int:
    """Agent distance to its push target plus weighted box distance to the finish.

    Not admissible in general (the vertical term is doubled), so the
    search is best-first rather than strictly optimal.
    """
    if target is None:
        return 0
    return manhattan(agent, target) + manhattan_weighted(box, finish)
