from pushbox_core.parser import parse_map_str
from pushbox_core.deadlocks import is_corner_deadlock, is_enclosed
from pushbox_core.grid import opposite
from search.targets import push_targets, APPROACH_ORDER

CORRIDOR = """
3
XXX
SBF
XXX
"""

OPEN = """
5
-----
-----
--B--
-----
S---F
"""


def _xy(tiles):
    return [(t.x, t.y) for t in tiles]


def test_open_floor_gives_all_sides_in_order():
    lvl = parse_map_str(OPEN)
    targets = push_targets(lvl.grid, lvl.box, lvl.agent, lvl.finish)
    # right, left, bottom, top
    assert _xy(targets) == [(3, 2), (1, 2), (2, 3), (2, 1)]


def test_corridor_single_target_behind_box():
    lvl = parse_map_str(CORRIDOR)
    targets = push_targets(lvl.grid, lvl.box, lvl.agent, lvl.finish)
    # landing (0,1) is a corner; landing (2,1) is a corner but the finish;
    # approach (0,1) is enclosed but the agent is on it
    assert _xy(targets) == [(0, 1)]


def test_enclosed_approach_dropped_when_agent_elsewhere():
    lvl = parse_map_str(CORRIDOR)
    other = lvl.grid.tile(2, 1)
    assert push_targets(lvl.grid, lvl.box, other, lvl.finish) == []


def test_box_on_finish_has_no_targets():
    lvl = parse_map_str(OPEN)
    assert push_targets(lvl.grid, lvl.box, lvl.agent, lvl.box) == []


def test_box_against_edge_between_corners():
    lvl = parse_map_str("""
3
-B-
---
S-F
""")
    assert push_targets(lvl.grid, lvl.box, lvl.agent, lvl.finish) == []


def test_targets_never_land_in_dead_cells():
    lvl = parse_map_str("""
6
------
-XX-X-
-B--X-
-X--XF
---S--
XX----
""")
    g = lvl.grid
    for box in g.tiles():
        if not box.passable:
            continue
        for agent in g.tiles():
            if not agent.passable or agent == box:
                continue
            for t in push_targets(g, box, agent, lvl.finish):
                d = (t.x - box.x, t.y - box.y)
                assert d in APPROACH_ORDER
                landing = g.neighbor(box, opposite(d))
                assert g.is_passable(landing)
                assert not is_corner_deadlock(g, landing) or landing == lvl.finish
                assert not is_enclosed(g, t, box) or t == agent
