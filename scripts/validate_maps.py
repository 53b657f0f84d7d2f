from __future__ import annotations
import argparse
from typing import List, Optional

from pushbox_core.levels.io import iterate_map_files, is_valid_map
from search.config import maps_section, read_yaml


def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/solver.yaml")
    args = p.parse_args(argv)

    cfg = read_yaml(args.config)
    maps = maps_section(cfg)
    root = maps["root_dir"]
    rels = maps["sources"]
    max_size = maps.get("max_size")

    ok = 0
    bad = 0
    for path, s in iterate_map_files(root, rels):
        if is_valid_map(s, max_size=max_size):
            ok += 1
        else:
            bad += 1
            print(f"[skip] {path}")
    print(f"valid: {ok}, skipped: {bad}")
    return ok, bad

if __name__ == "__main__":
    main()
