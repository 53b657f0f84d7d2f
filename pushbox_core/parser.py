from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .errors import MapFormatError
from .grid import Grid, Tile

TOK_WALL = "X"
TOK_FLOOR = "-"
TOK_AGENT = "S"
TOK_BOX = "B"
TOK_FINISH = "F"

MARKERS = (TOK_AGENT, TOK_BOX, TOK_FINISH)


@dataclass(frozen=True)
class Level:
    """Grid plus the three designated positions (any of them may be missing)."""

    grid: Grid
    agent: Optional[Tile]
    box: Optional[Tile]
    finish: Optional[Tile]

    def is_complete(self) -> bool:
        return self.agent is not None and self.box is not None and self.finish is not None


def parse_map_str(map_str: str) -> Level:
    """Parses a map into a Level.

    Format:
      first line: size N
      then N rows of N characters:
        'X': blocked
        '-': floor
        'S': agent start (floor)
        'B': box start (floor)
        'F': finish (floor)
    Any other character is a MapFormatError.
    """
    lines = [line.strip() for line in map_str.splitlines() if line.strip() != ""]
    if not lines:
        raise MapFormatError("Empty map")
    try:
        size = int(lines[0])
    except ValueError:
        raise MapFormatError(f"First line must be the map size, got {lines[0]!r}") from None
    if size <= 0:
        raise MapFormatError(f"Map size must be positive, got {size}")

    rows = lines[1:]
    if len(rows) > size:
        raise MapFormatError(f"Map too large: {len(rows)} rows for size {size}")
    if len(rows) < size:
        raise MapFormatError(f"Map too small: {len(rows)} rows for size {size}")

    passable = np.zeros((size, size), dtype=bool)
    found = {}
    for y, row in enumerate(rows):
        if len(row) > size:
            raise MapFormatError(f"Map too large: row {y} has {len(row)} cells for size {size}")
        if len(row) < size:
            raise MapFormatError(f"Map too small: row {y} has {len(row)} cells for size {size}")
        for x, ch in enumerate(row):
            if ch == TOK_WALL:
                continue
            if ch == TOK_FLOOR:
                passable[y, x] = True
            elif ch in MARKERS:
                if ch in found:
                    raise MapFormatError(f"Duplicate {ch!r} at ({x}, {y}), first at {found[ch]}")
                found[ch] = (x, y)
                passable[y, x] = True
            else:
                raise MapFormatError(f"Invalid character in map: {ch!r} at ({x}, {y})")

    grid = Grid(passable)

    def marker(tok: str) -> Optional[Tile]:
        if tok not in found:
            return None
        return grid.tile(*found[tok])

    return Level(grid=grid, agent=marker(TOK_AGENT), box=marker(TOK_BOX), finish=marker(TOK_FINISH))


def parse_map_file(path: str) -> Level:
    with open(path, "r", encoding="utf-8") as f:
        return parse_map_str(f.read())
