from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

__all__ = [
    "Tile",
    "Grid",
    "Direction",
    "LEFT",
    "RIGHT",
    "UP",
    "DOWN",
    "DIRECTIONS",
    "opposite",
]

# (dx, dy); y grows downwards
Direction = Tuple[int, int]

LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
UP: Direction = (0, -1)
DOWN: Direction = (0, 1)

# order in which walks and pushes are tried
DIRECTIONS: Tuple[Direction, ...] = (LEFT, RIGHT, UP, DOWN)


def opposite(d: Direction) -> Direction:
    return (-d[0], -d[1])


@dataclass(frozen=True, slots=True)
class Tile:
    """One grid cell. Two tiles are equal when they share a position."""

    x: int
    y: int
    passable: bool = field(default=True, compare=False)

    def offset(self, d: Direction) -> Tuple[int, int]:
        return (self.x + d[0], self.y + d[1])


class Grid:
    """
    Immutable square grid of tiles.

    Passability is kept in a read-only boolean matrix indexed [y, x].
    Lookups always return the canonical Tile of a position, so the
    search may compare tiles freely.
    """

    def __init__(self, passable: np.ndarray) -> None:
        mask = np.array(passable, dtype=bool)
        if mask.ndim != 2 or mask.shape[0] != mask.shape[1] or mask.shape[0] == 0:
            raise ValueError(f"grid must be a non-empty square, got shape {mask.shape}")
        mask.flags.writeable = False
        self._passable = mask
        self._size = int(mask.shape[0])
        self._tiles: Tuple[Tuple[Tile, ...], ...] = tuple(
            tuple(Tile(x, y, bool(mask[y, x])) for x in range(self._size))
            for y in range(self._size)
        )

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[bool]]) -> "Grid":
        return cls(np.array([list(r) for r in rows], dtype=bool))

    # ---- properties
    @property
    def size(self) -> int:
        return self._size

    @property
    def passable(self) -> np.ndarray:
        return self._passable

    # ---- lookups
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._size and 0 <= y < self._size

    def tile(self, x: int, y: int) -> Optional[Tile]:
        """Canonical tile at (x, y), None if off-grid."""
        if not self.in_bounds(x, y):
            return None
        return self._tiles[y][x]

    def neighbor(self, tile: Tile, d: Direction) -> Optional[Tile]:
        nx, ny = tile.offset(d)
        return self.tile(nx, ny)

    def neighbors(self, tile: Tile) -> Iterator[Tuple[Direction, Optional[Tile]]]:
        """4-neighborhood in DIRECTIONS order, None at the edge."""
        for d in DIRECTIONS:
            yield d, self.neighbor(tile, d)

    def is_passable(self, tile: Optional[Tile]) -> bool:
        if tile is None or not self.in_bounds(tile.x, tile.y):
            return False
        return bool(self._passable[tile.y, tile.x])

    def tiles(self) -> Iterator[Tile]:
        for row in self._tiles:
            yield from row

    def __contains__(self, tile: object) -> bool:
        return isinstance(tile, Tile) and self.in_bounds(tile.x, tile.y)

    def __repr__(self) -> str:
        return f"Grid(size={self._size}, passable={int(self._passable.sum())})"
