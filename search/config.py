from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from pushbox_core.errors import ConfigurationError


@dataclass(frozen=True)
class SolverConfig:
    """Action weights; raising one makes the solver prefer the other kind of action."""

    walk_weight: int = 1
    push_weight: int = 1

    def __post_init__(self) -> None:
        for name in ("walk_weight", "push_weight"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int) or v < 0:
                raise ConfigurationError(f"{name} must be a non-negative integer, got {v!r}")

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> "SolverConfig":
        d = d or {}
        return cls(
            walk_weight=d.get("walk_weight", cls.walk_weight),
            push_weight=d.get("push_weight", cls.push_weight),
        )


def read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    return cfg or {}


def load_config(path: Optional[str]) -> SolverConfig:
    """Reads the `solver` section of a YAML file; None gives the defaults."""
    if path is None:
        return SolverConfig()
    return SolverConfig.from_dict(read_yaml(path).get("solver"))


def maps_section(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """The `maps` section with its required keys."""
    maps = cfg.get("maps")
    if not isinstance(maps, dict):
        raise ConfigurationError("config has no 'maps' section")
    for key in ("root_dir", "sources"):
        if key not in maps:
            raise ConfigurationError(f"config 'maps' section has no {key!r}")
    return maps
