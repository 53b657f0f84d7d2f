from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import IllegalMoveError
from .grid import Grid, Tile, Direction, LEFT, RIGHT, UP, DOWN
from .parser import Level

# ---- action tokens

ACTION_WALK_LEFT = "WALK_LEFT"
ACTION_WALK_RIGHT = "WALK_RIGHT"
ACTION_WALK_UP = "WALK_UP"
ACTION_WALK_DOWN = "WALK_DOWN"
ACTION_PUSH_LEFT = "PUSH_LEFT"
ACTION_PUSH_RIGHT = "PUSH_RIGHT"
ACTION_PUSH_UP = "PUSH_UP"
ACTION_PUSH_DOWN = "PUSH_DOWN"

WALK_ACTIONS: Dict[Direction, str] = {
    LEFT: ACTION_WALK_LEFT,
    RIGHT: ACTION_WALK_RIGHT,
    UP: ACTION_WALK_UP,
    DOWN: ACTION_WALK_DOWN,
}
PUSH_ACTIONS: Dict[Direction, str] = {
    LEFT: ACTION_PUSH_LEFT,
    RIGHT: ACTION_PUSH_RIGHT,
    UP: ACTION_PUSH_UP,
    DOWN: ACTION_PUSH_DOWN,
}

# token -> (is_push, direction)
_DECODE: Dict[str, Tuple[bool, Direction]] = {
    **{tok: (False, d) for d, tok in WALK_ACTIONS.items()},
    **{tok: (True, d) for d, tok in PUSH_ACTIONS.items()},
}

SEPARATOR = " "
NO_SOLUTION = "There is no solution"


def format_actions(actions: Iterable[str]) -> str:
    """Each token followed by the separator, e.g. 'WALK_UP PUSH_LEFT '."""
    return "".join(a + SEPARATOR for a in actions)


def parse_actions(text: str) -> List[str]:
    """Splits a result string back into tokens."""
    if text.strip() == NO_SOLUTION:
        raise ValueError("result has no actions: there is no solution")
    tokens = text.split()
    for tok in tokens:
        if tok not in _DECODE:
            raise ValueError(f"unknown action: {tok!r}")
    return tokens


def apply_action(grid: Grid, agent: Tile, box: Tile, action: str) -> Tuple[Tile, Tile]:
    """Returns (agent, box) after one action.

    A walk may only enter passable tiles other than the box.
    A push needs the box right next to the agent in the push direction
    and a passable tile behind it; the agent takes the box's old tile.
    """
    try:
        is_push, d = _DECODE[action]
    except KeyError:
        raise IllegalMoveError(f"unknown action: {action!r}") from None

    nxt: Optional[Tile] = grid.neighbor(agent, d)
    if not is_push:
        if not grid.is_passable(nxt):
            raise IllegalMoveError(f"{action}: {agent} -> blocked")
        if nxt == box:
            raise IllegalMoveError(f"{action}: walking into the box at {box}")
        return nxt, box  # type: ignore[return-value]

    if nxt != box:
        raise IllegalMoveError(f"{action}: box {box} is not next to agent {agent}")
    landing = grid.neighbor(box, d)
    if not grid.is_passable(landing):
        raise IllegalMoveError(f"{action}: nothing behind the box at {box}")
    return box, landing  # type: ignore[return-value]


def replay(level: Level, actions: Iterable[str]) -> List[Tuple[Tile, Tile]]:
    """Applies actions from the level's start; returns every (agent, box) pair, start included."""
    if level.agent is None or level.box is None:
        raise IllegalMoveError("level has no agent or box to replay from")
    agent, box = level.agent, level.box
    trace = [(agent, box)]
    for a in actions:
        agent, box = apply_action(level.grid, agent, box, a)
        trace.append((agent, box))
    return trace
