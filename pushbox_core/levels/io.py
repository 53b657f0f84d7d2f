from __future__ import annotations
from typing import Iterator, List, Optional, Tuple
import os

from pushbox_core.errors import MapFormatError
from pushbox_core.parser import parse_map_str


def iterate_map_files(root_dir: str, rel_dirs: List[str]) -> Iterator[Tuple[str, str]]:
    """Iterate over all .txt in the given subfolders and return (path, map string)."""
    for rel in rel_dirs:
        abs_dir = os.path.join(root_dir, rel)
        if not os.path.isdir(abs_dir):
            continue
        for fname in sorted(os.listdir(abs_dir)):
            if not fname.endswith(".txt"):
                continue
            fpath = os.path.join(abs_dir, fname)
            with open(fpath, "r", encoding="utf-8") as f:
                content = f.read()
            if content.strip() == "":
                continue
            yield fpath, content


def is_valid_map(map_str: str, *, max_size: Optional[int] = None) -> bool:
    """Parses, has agent, box and finish, and is not bigger than max_size."""
    try:
        level = parse_map_str(map_str)
    except MapFormatError:
        return False
    if max_size is not None and level.grid.size > max_size:
        return False
    return level.is_complete()
