from __future__ import annotations
from typing import Dict, List, Optional
import time

from pushbox_core.errors import ConfigurationError
from pushbox_core.grid import Grid, Tile, DIRECTIONS
from pushbox_core.moves import WALK_ACTIONS, PUSH_ACTIONS, NO_SOLUTION, format_actions
from pushbox_core.parser import Level
from .config import SolverConfig
from .node import SearchNode, WalkSession, WALK, PUSH
from .priority_queue import PriorityQueue
from .targets import push_targets
from .transposition import VisitedStates

Result = Dict[str, object]


class PushBoxSolver:
    """
    Best-first search that walks the agent to a push target, pushes, repeats.

    Outer level: one root node per (box, push target, agent) state, deduplicated
    through VisitedStates. Inner level: walk nodes toward the target, sharing the
    root's WalkSession so each tile is expanded at most once per lineage.
    """

    def __init__(self, grid: Grid, finish: Optional[Tile], config: Optional[SolverConfig] = None) -> None:
        self.grid = grid
        self.finish = finish
        self.config = config or SolverConfig()
        self._reset()

    def _reset(self) -> None:
        self.frontier = PriorityQueue()
        self.visited = VisitedStates()
        self.final_node: Optional[SearchNode] = None
        self.nodes_expanded = 0
        self.roots_enqueued = 0
        self.runtime = 0.0

    # ---- public API
    def solve(self, agent: Optional[Tile], box: Optional[Tile]) -> None:
        if agent is None or box is None or self.finish is None:
            raise ConfigurationError("Some required positions are missing: agent, box and finish must be set.")
        self._reset()
        t0 = time.time()

        if box == self.finish:
            self.final_node = SearchNode.terminal(None, None, agent, box, 0)
            self.runtime = time.time() - t0
            return

        for target in push_targets(self.grid, box, agent, self.finish):
            self._enqueue_root(target, None, agent, box, 0, None)

        while len(self.frontier) > 0 and self.final_node is None:
            node: SearchNode = self.frontier.pop()
            self.nodes_expanded += 1
            self._visit(node)

        self.runtime = time.time() - t0

    @property
    def solved(self) -> bool:
        return self.final_node is not None

    def actions(self) -> List[str]:
        if self.final_node is None:
            return []
        return self.final_node.actions()

    def result(self) -> str:
        """Tokens in order, each followed by a space, or the no-solution sentinel."""
        if self.final_node is None:
            return NO_SOLUTION
        return format_actions(self.final_node.actions())

    # ---- search steps
    def _enqueue_root(self, target: Tile, parent: Optional[SearchNode], agent: Tile, box: Tile,
                      g_cost: int, step: Optional[str]) -> None:
        node = SearchNode.create(target, parent, WalkSession(target, self.grid.size),
                                 agent, box, g_cost, step, self.finish)  # type: ignore[arg-type]
        if self.visited.add(node):
            self.frontier.push(node.f_cost, node)
            self.roots_enqueued += 1

    def _visit(self, node: SearchNode) -> None:
        if node.phase == PUSH:
            self._push(node)
        elif node.phase == WALK:
            self._walk(node)

    def _walk(self, node: SearchNode) -> None:
        # walk nodes always carry their lineage's session
        session: WalkSession = node.session  # type: ignore[assignment]
        session.mark(node.agent)
        for d in DIRECTIONS:
            nb = self.grid.neighbor(node.agent, d)
            if nb is None or not nb.passable or nb == node.box:
                continue
            if session.is_visited(nb):
                continue
            child = SearchNode.create(node.target, node, session, nb, node.box,  # type: ignore[arg-type]
                                      node.g_cost + self.config.walk_weight,
                                      WALK_ACTIONS[d], self.finish)  # type: ignore[arg-type]
            self.frontier.push(child.f_cost, child)

    def _push(self, node: SearchNode) -> None:
        for d in DIRECTIONS:
            if self.grid.neighbor(node.agent, d) != node.box:
                continue
            new_box = self.grid.neighbor(node.box, d)
            if new_box is not None:
                self._push_with_action(node, new_box, node.box, PUSH_ACTIONS[d])
            break

        # the push for this (target, box) is decided; other walks toward it are stale
        self.frontier.purge(lambda n: n.target == node.target and n.box == node.box)

    def _push_with_action(self, parent: SearchNode, new_box: Tile, new_agent: Tile, action: str) -> None:
        g = parent.g_cost + self.config.push_weight
        if new_box == self.finish:
            self.final_node = SearchNode.terminal(parent, action, new_agent, new_box, g)
            return
        for target in push_targets(self.grid, new_box, new_agent, self.finish):  # type: ignore[arg-type]
            self._enqueue_root(target, parent, new_agent, new_box, g, action)


def solve_level(level: Level, config: Optional[SolverConfig] = None) -> Result:
    solver = PushBoxSolver(level.grid, level.finish, config)
    solver.solve(level.agent, level.box)
    if not solver.solved:
        return {"success": False, "nodes": solver.nodes_expanded, "runtime": solver.runtime,
                "result": solver.result()}
    actions = solver.actions()
    return {
        "success": True,
        "nodes": solver.nodes_expanded,
        "runtime": solver.runtime,
        "solution_len": len(actions),
        "cost": solver.final_node.g_cost,  # type: ignore[union-attr]
        "actions": actions,
        "result": solver.result(),
    }
