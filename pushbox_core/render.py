from typing import Optional

from .grid import Grid, Tile
from .parser import Level


def render_ascii(grid: Grid, agent: Optional[Tile] = None, box: Optional[Tile] = None,
                 finish: Optional[Tile] = None, target: Optional[Tile] = None) -> str:
    """ASCII visualization: S agent, B box, F finish, D push target, - floor, X wall."""
    out_lines = []
    for y in range(grid.size):
        row_chars = []
        for x in range(grid.size):
            t = grid.tile(x, y)
            if t == agent:
                row_chars.append('S')
            elif t == box:
                row_chars.append('B')
            elif t == finish:
                row_chars.append('F')
            elif t == target:
                row_chars.append('D')
            elif grid.is_passable(t):
                row_chars.append('-')
            else:
                row_chars.append('X')
        out_lines.append(''.join(row_chars))
    return "\n".join(out_lines)


def render_level(level: Level) -> str:
    return render_ascii(level.grid, level.agent, level.box, level.finish)
