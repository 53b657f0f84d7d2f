from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from pushbox_core.grid import Tile
from heuristics.classic import h_push

__all__ = [
    "WALK",
    "PUSH",
    "TERMINAL",
    "WalkSession",
    "SearchNode",
]

# node phases
WALK = "walk"
PUSH = "push"
TERMINAL = "terminal"


class WalkSession:
    """
    Visited tiles of one push-target lineage.

    Created together with a root node and shared by reference with every
    walk node descending from it, so the walk toward a target behaves like
    one breadth search no matter which node the frontier hands out first.
    Tiles are marked when a node standing on them is expanded.
    """

    __slots__ = ("target", "visited")

    def __init__(self, target: Tile, size: int) -> None:
        self.target = target
        self.visited = np.zeros((size, size), dtype=bool)

    def mark(self, tile: Tile) -> None:
        self.visited[tile.y, tile.x] = True

    def is_visited(self, tile: Tile) -> bool:
        return bool(self.visited[tile.y, tile.x])

    def visited_count(self) -> int:
        return int(self.visited.sum())


@dataclass(frozen=True, slots=True, eq=False)
class SearchNode:
    """One frontier entry: agent and box tiles, the push target and the path so far."""

    target: Optional[Tile]
    parent: Optional["SearchNode"]
    session: Optional[WalkSession]
    agent: Tile
    box: Tile
    g_cost: int
    step: Optional[str]
    f_cost: int

    @classmethod
    def create(cls, target: Tile, parent: Optional["SearchNode"], session: WalkSession,
               agent: Tile, box: Tile, g_cost: int, step: Optional[str], finish: Tile) -> "SearchNode":
        f = g_cost + h_push(agent, target, box, finish)
        return cls(target, parent, session, agent, box, g_cost, step, f)

    @classmethod
    def terminal(cls, parent: Optional["SearchNode"], step: Optional[str],
                 agent: Tile, box: Tile, g_cost: int) -> "SearchNode":
        """Box is on the finish: no target, no session."""
        return cls(None, parent, None, agent, box, g_cost, step, g_cost)

    # ---- derived
    @property
    def h_cost(self) -> int:
        return self.f_cost - self.g_cost

    @property
    def phase(self) -> str:
        if self.target is None:
            return TERMINAL
        if self.agent == self.target:
            return PUSH
        return WALK

    def key(self) -> Tuple[Tile, Tile, Tile]:
        """Dedup key of a root: (box, push target, agent)."""
        if self.target is None:
            raise ValueError("terminal node has no state key")
        return (self.box, self.target, self.agent)

    # ---- path
    def path(self) -> List["SearchNode"]:
        out: List[SearchNode] = []
        cur: Optional[SearchNode] = self
        while cur is not None:
            out.append(cur)
            cur = cur.parent
        out.reverse()
        return out

    def actions(self) -> List[str]:
        return [n.step for n in self.path() if n.step is not None]
