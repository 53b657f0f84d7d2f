from __future__ import annotations
from typing import Set, Tuple

from pushbox_core.grid import Tile

from .node import SearchNode

StateKey = Tuple[Tile, Tile, Tile]


class VisitedStates:
    """Remember which (box, push target, agent) roots were already queued."""
    def __init__(self) -> None:
        self.keys: Set[StateKey] = set()

    def seen(self, node: SearchNode) -> bool:
        return node.key() in self.keys

    def add(self, node: SearchNode) -> bool:
        """Records the node's key; False if it was already there."""
        key = node.key()
        if key in self.keys:
            return False
        self.keys.add(key)
        return True

    def __len__(self) -> int:
        return len(self.keys)
