from __future__ import annotations
from typing import Optional

from .grid import Grid, Tile, Direction, LEFT, RIGHT, UP, DOWN

# --- low-level helpers -------------------------------------------------------

def _is_wall_like(grid: Grid, tile: Tile, d: Direction) -> bool:
    """Treat outside the grid as a wall."""
    return not grid.is_passable(grid.neighbor(tile, d))


def _is_wall_or_box(grid: Grid, tile: Tile, d: Direction, box: Optional[Tile]) -> bool:
    nb = grid.neighbor(tile, d)
    return not grid.is_passable(nb) or (box is not None and nb == box)

# --- deadlock rules ----------------------------------------------------------

def is_corner_deadlock(grid: Grid, tile: Tile) -> bool:
    """Tile has two perpendicular walls/edges next to it.

    A box pushed onto such a tile can never leave it again, so callers
    only accept it when it is the finish.
    """
    top = _is_wall_like(grid, tile, UP)
    right = _is_wall_like(grid, tile, RIGHT)
    if top and right:
        return True
    bottom = _is_wall_like(grid, tile, DOWN)
    if right and bottom:
        return True
    left = _is_wall_like(grid, tile, LEFT)
    return (bottom and left) or (left and top)


def is_enclosed(grid: Grid, tile: Tile, box: Optional[Tile]) -> bool:
    """Every side of the tile is a wall, the edge of the grid or the box."""
    return all(_is_wall_or_box(grid, tile, d, box) for d in (UP, RIGHT, DOWN, LEFT))
