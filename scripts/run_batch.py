from __future__ import annotations
import argparse, csv, os, time
from typing import List, Optional

from tqdm import tqdm

from pushbox_core.errors import ConfigurationError, MapFormatError
from pushbox_core.levels.io import iterate_map_files
from pushbox_core.parser import parse_map_str
from search.astar import solve_level
from search.config import SolverConfig, maps_section, read_yaml

FIELDS = ["map", "size", "success", "nodes", "runtime", "solution_len", "cost", "error"]


def run_one(path: str, text: str, cfg: SolverConfig) -> dict:
    level = parse_map_str(text)
    res = solve_level(level, cfg)
    return {
        "map": path,
        "size": level.grid.size,
        "success": bool(res.get("success", False)),
        "nodes": int(res.get("nodes", 0)),
        "runtime": float(res.get("runtime", 0.0)),
        "solution_len": int(res.get("solution_len", -1)),
        "cost": int(res.get("cost", -1)),
        "error": "",
    }


def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Solve every map under the configured directories → CSV")
    p.add_argument("--config", default="configs/solver.yaml")
    p.add_argument("--out", default="results/batch.csv", help="output CSV path")
    args = p.parse_args(argv)

    cfg_all = read_yaml(args.config)
    cfg = SolverConfig.from_dict(cfg_all.get("solver"))
    maps_cfg = maps_section(cfg_all)
    root = maps_cfg["root_dir"]
    rels = maps_cfg["sources"]

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    maps = list(iterate_map_files(root, rels))
    started = time.time()
    rows: List[dict] = []
    for path, text in tqdm(maps, desc="Solving maps", unit="map"):
        try:
            r = run_one(path, text, cfg)
        except (MapFormatError, ConfigurationError) as e:
            tqdm.write(f"[skip] {path}: {e}")
            r = {"map": path, "size": 0, "success": False, "nodes": 0, "runtime": 0.0,
                 "solution_len": -1, "cost": -1, "error": str(e)}
        rows.append(r)

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    solved = sum(1 for r in rows if r["success"])
    print(f"done: {solved}/{len(rows)} solved → {args.out}; total_time={time.time()-started:.2f}s")


if __name__ == "__main__":
    main()
