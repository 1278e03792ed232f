"""
Validate CoverageReport serializes to the coverage.json shape; required keys exist.
Also runs the bundled reference scenarios end to end.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from camcover.core.config import REPORT_SCHEMA_VERSION, SCENARIOS_DIR
from camcover.core.coverage import evaluate_coverage
from camcover.core.io import load_scenario
from camcover.core.reporting import (
    coverage_to_dict,
    ensure_report_dir,
    write_coverage_json,
    write_run_metadata_json,
)
from camcover.core.types import Camera, CoverageReport, Envelope

REPO_ROOT = Path(__file__).resolve().parent.parent


def _minimal_report() -> CoverageReport:
    return evaluate_coverage(
        Envelope(0.0, 10.0, 0.0, 10.0),
        [Camera(0.0, 10.0, 0.0, 5.0, name="low"), Camera(0.0, 10.0, 5.0, 10.0, name="high")],
        scenario_source="inline",
    )


REQUIRED_KEYS = [
    "schema_version",
    ("input", "scenario_source"),
    ("required", "d_min"),
    ("required", "l_max"),
    ("result", "covered"),
    ("result", "outcome"),
    ("metrics", "n_cameras"),
    ("metrics", "n_clipped"),
    ("metrics", "n_slabs"),
    ("settings", "eps"),
    ("settings", "degenerate_policy"),
    "cameras",
]


def test_coverage_schema_required_keys_exist() -> None:
    data = coverage_to_dict(_minimal_report())
    for key in REQUIRED_KEYS:
        if isinstance(key, tuple):
            obj = data
            for k in key:
                assert k in obj, f"Missing key: {key}"
                obj = obj[k]
        else:
            assert key in data, f"Missing key: {key}"
    assert data["schema_version"] == REPORT_SCHEMA_VERSION
    assert data["cameras"][0]["name"] == "low"


def test_write_coverage_and_metadata(tmp_path: Path) -> None:
    report_dir = ensure_report_dir(tmp_path, "contract")
    cov = write_coverage_json(report_dir, _minimal_report())
    meta = write_run_metadata_json(report_dir, "contract", "inline", 1e-12, "covered")
    loaded = json.loads(cov.read_text(encoding="utf-8"))
    assert loaded["result"]["covered"] is True
    assert loaded["metrics"]["n_clipped"] == 2
    md = json.loads(meta.read_text(encoding="utf-8"))
    assert md["run_name"] == "contract"
    assert "COVERAGE_EPS" in md["config"]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("reference_covered", True),
        ("reference_gap", False),
        ("partial_distance", False),
        ("distance_joined", True),
        ("degenerate_required", True),
    ],
)
def test_bundled_scenarios(name: str, expected: bool) -> None:
    path = REPO_ROOT / SCENARIOS_DIR / f"{name}.json"
    if not path.exists():
        pytest.skip(f"Scenario not found: {path}")
    sc = load_scenario(path)
    assert evaluate_coverage(sc.required, sc.cameras).covered is expected
