"""
Batch mode: temp directory with a few scenario files (one broken, one inverted);
run batch and assert index.csv rows and per-case coverage.json.
"""

from __future__ import annotations

import csv
import json
import tempfile
from pathlib import Path

import pytest

from camcover.core.batch import run_batch


def _write(path: Path, data: object) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def test_batch_from_dir_produces_index_csv() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        sc_dir = root / "scenarios"
        sc_dir.mkdir()
        _write(sc_dir / "a_split.json", {"required": [0, 10, 0, 10], "cameras": [[0, 10, 0, 5], [0, 10, 5, 10]]})
        _write(sc_dir / "b_gap.json", {"required": [0, 10, 0, 10], "cameras": [[0, 10, 0, 4], [0, 10, 6, 10]]})
        _write(sc_dir / "c_inverted.json", {"required": [0, 10, 10, 0], "cameras": []})
        (sc_dir / "d_broken.json").write_text("{", encoding="utf-8")

        report_dir = run_batch(run_name="test_batch", batch_dir=sc_dir, repo_root=root)
        index_csv = report_dir / "index.csv"
        assert index_csv.exists()
        with open(index_csv, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [r["outcome"] for r in rows] == ["covered", "light_gap", "invalid_range", "scenario_load_failed"]
        assert rows[0]["covered"] == "True"
        assert rows[1]["covered"] == "False"
        assert rows[0]["scenario_source"] == str(Path("scenarios") / "a_split.json")
        cases_dir = report_dir / "cases"
        assert (cases_dir / "case_0000_a_split" / "coverage.json").exists()
        assert not (cases_dir / "case_0002_c_inverted").exists()
        assert (report_dir / "run_metadata.json").exists()


def test_batch_limit(tmp_path: Path) -> None:
    sc_dir = tmp_path / "sc"
    sc_dir.mkdir()
    for i in range(3):
        _write(sc_dir / f"s{i}.json", {"required": [0, 1, 0, 1], "cameras": [[0, 1, 0, 1]]})
    report_dir = run_batch(run_name="lim", batch_dir=sc_dir, repo_root=tmp_path, limit=2)
    lines = (report_dir / "index.csv").read_text(encoding="utf-8").strip().split("\n")
    assert len(lines) == 3  # header + 2 cases


def test_batch_missing_dir(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        run_batch(run_name="x", batch_dir=tmp_path / "missing", repo_root=tmp_path)
