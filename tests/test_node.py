import dataclasses

import pytest

from pushbox_core.grid import Tile
from heuristics.classic import h_push
from search.node import SearchNode, WalkSession, WALK, PUSH, TERMINAL
from search.transposition import VisitedStates

FINISH = Tile(4, 4)


def _root(agent=Tile(0, 0), target=Tile(2, 1), box=Tile(2, 2)):
    return SearchNode.create(target, None, WalkSession(target, 5), agent, box, 0, None, FINISH)


def test_f_cost_is_g_plus_h():
    n = _root()
    assert n.g_cost == 0
    assert n.f_cost == h_push(n.agent, n.target, n.box, FINISH)
    assert n.h_cost == n.f_cost - n.g_cost


def test_node_is_frozen():
    n = _root()
    with pytest.raises(dataclasses.FrozenInstanceError):
        n.f_cost = 0  # type: ignore[misc]


def test_phases():
    assert _root().phase == WALK
    assert _root(agent=Tile(2, 1)).phase == PUSH
    t = SearchNode.terminal(_root(), "PUSH_DOWN", Tile(2, 2), Tile(2, 3), 5)
    assert t.phase == TERMINAL
    assert t.session is None and t.target is None
    assert t.f_cost == t.g_cost == 5


def test_walk_children_share_the_session():
    root = _root()
    child = SearchNode.create(root.target, root, root.session, Tile(1, 0), root.box, 1, "WALK_RIGHT", FINISH)
    root.session.mark(root.agent)
    assert child.session is root.session
    assert child.session.is_visited(Tile(0, 0))
    assert not child.session.is_visited(Tile(1, 0))
    assert child.session.visited_count() == 1
    assert child.session.target == child.target


def test_path_and_actions():
    root = _root()
    a = SearchNode.create(root.target, root, root.session, Tile(1, 0), root.box, 1, "WALK_RIGHT", FINISH)
    b = SearchNode.create(root.target, a, root.session, Tile(1, 1), root.box, 2, "WALK_DOWN", FINISH)
    assert b.path() == [root, a, b]
    assert b.actions() == ["WALK_RIGHT", "WALK_DOWN"]


def test_state_key_and_dedup():
    seen = VisitedStates()
    a = _root()
    b = _root()
    assert a.key() == (Tile(2, 2), Tile(2, 1), Tile(0, 0))
    assert seen.add(a)
    assert seen.seen(b)
    assert not seen.add(b)
    assert len(seen) == 1
    # two-digit coordinates stay distinct
    c = _root(agent=Tile(1, 10), target=Tile(11, 0), box=Tile(1, 1))
    d = _root(agent=Tile(11, 0), target=Tile(1, 10), box=Tile(1, 1))
    assert c.key() != d.key()


def test_terminal_has_no_key():
    t = SearchNode.terminal(None, None, Tile(0, 0), FINISH, 0)
    with pytest.raises(ValueError):
        t.key()
