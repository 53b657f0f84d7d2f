from __future__ import annotations
import argparse

from pushbox_core.parser import parse_map_file, parse_map_str
from pushbox_core.render import render_ascii, render_level
from pushbox_core.moves import replay
from search.astar import solve_level
from search.config import load_config

MAP = """
7
-----XX
X---B-X
XX----X
S------
---XX--
---XX--
------F
"""

def main():
    p = argparse.ArgumentParser()
    p.add_argument("--map", type=str, default="inline", help="path to .txt map or 'inline'")
    p.add_argument("--config", type=str, default=None, help="YAML file with a 'solver' section")
    p.add_argument("--show", action="store_true", help="print the map after every action")
    args = p.parse_args()

    if args.map == "inline":
        level = parse_map_str(MAP)
    else:
        level = parse_map_file(args.map)

    cfg = load_config(args.config)
    print(render_level(level))

    res = solve_level(level, cfg)
    print("Result:", {k: v for k, v in res.items() if k not in ("actions", "result")})
    print(res["result"])
    if res.get("success") and args.show:
        trace = replay(level, res["actions"])  # type: ignore[arg-type]
        for i, ((agent, box), action) in enumerate(zip(trace[1:], res["actions"]), 1):  # type: ignore[arg-type]
            print(f"\n-- step {i}: {action} --\n{render_ascii(level.grid, agent, box, level.finish)}")

if __name__ == "__main__":
    main()
