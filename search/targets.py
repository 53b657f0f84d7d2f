from __future__ import annotations
from typing import List, Optional

from pushbox_core.grid import Grid, Tile, LEFT, RIGHT, UP, DOWN, opposite
from pushbox_core.deadlocks import is_corner_deadlock, is_enclosed

# approach sides of the box, in the order targets are produced
APPROACH_ORDER = (RIGHT, LEFT, DOWN, UP)


def _viable(grid: Grid, approach: Optional[Tile], landing: Optional[Tile],
            box: Tile, agent: Tile, finish: Tile) -> bool:
    if approach is None or not approach.passable:
        return False
    # a solved box gets no further pushes
    if landing is None or not landing.passable or box == finish:
        return False
    if is_corner_deadlock(grid, landing) and landing != finish:
        return False
    # an enclosed approach is unreachable unless the agent already stands there
    return not is_enclosed(grid, approach, box) or approach == agent


def push_targets(grid: Grid, box: Tile, agent: Tile, finish: Tile) -> List[Tile]:
    """Tiles next to the box from which a push is worth trying.

    For each side d of the box the agent stands on the neighbour in d
    and the box lands on the neighbour in the opposite direction.
    Landings in a corner (other than the finish) are dropped.
    """
    out: List[Tile] = []
    for d in APPROACH_ORDER:
        approach = grid.neighbor(box, d)
        landing = grid.neighbor(box, opposite(d))
        if _viable(grid, approach, landing, box, agent, finish):
            out.append(approach)  # type: ignore[arg-type]
    return out
