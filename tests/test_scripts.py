import csv
import os

import pytest

from scripts.run_batch import main as batch_main
from scripts.validate_maps import main as validate_main
from pushbox_core.errors import ConfigurationError

LEVELS = os.path.join(os.path.dirname(__file__), "..", "pushbox_core", "levels")


def _config(tmp_path, push_weight=1):
    (tmp_path / "maps").mkdir()
    (tmp_path / "maps" / "a.txt").write_text("3\nXXX\nSBF\nXXX\n", encoding="utf-8")
    (tmp_path / "maps" / "b.txt").write_text("3\nXXX\nSB?\nXXX\n", encoding="utf-8")
    cfg = tmp_path / "solver.yaml"
    cfg.write_text(
        "solver:\n  walk_weight: 1\n"
        f"  push_weight: {push_weight}\n"
        f"maps:\n  root_dir: {tmp_path}\n  sources: [maps]\n  max_size: 10\n",
        encoding="utf-8",
    )
    return str(cfg)


def test_validate_maps(tmp_path, capsys):
    ok, bad = validate_main(["--config", _config(tmp_path)])
    assert (ok, bad) == (1, 1)
    assert "[skip]" in capsys.readouterr().out


def test_run_batch_writes_csv(tmp_path):
    out = tmp_path / "out" / "batch.csv"
    batch_main(["--config", _config(tmp_path), "--out", str(out)])
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["success"] == "True"
    assert rows[0]["solution_len"] == "1"
    assert rows[1]["success"] == "False"
    assert rows[1]["error"] != ""


def test_config_without_maps_section(tmp_path):
    cfg = tmp_path / "solver.yaml"
    cfg.write_text("solver:\n  walk_weight: 1\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        validate_main(["--config", str(cfg)])
    with pytest.raises(ConfigurationError):
        batch_main(["--config", str(cfg), "--out", str(tmp_path / "batch.csv")])


def test_run_batch_uses_solver_weights(tmp_path):
    out = tmp_path / "weighted.csv"
    batch_main(["--config", _config(tmp_path, push_weight=4), "--out", str(out)])
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["cost"] == "4"
