# camcover/core/reporting.py
"""
Create reports/<run_name>/ and write coverage.json (fixed schema) and run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from camcover.core.config import (
    COVERAGE_EPS,
    DEGENERATE_POLICY,
    REPORT_SCHEMA_VERSION,
    REPORTS_DIR,
    SEED,
)
from camcover.core.io import envelope_to_dict
from camcover.core.types import CoverageReport


def coverage_to_dict(report: CoverageReport) -> dict:
    """Exact structure for coverage.json."""
    return {
        "schema_version": REPORT_SCHEMA_VERSION,
        "input": {
            "scenario_source": report.scenario_source,
        },
        "required": envelope_to_dict(report.required),
        "cameras": [envelope_to_dict(c) for c in report.cameras],
        "result": {
            "covered": report.covered,
            "outcome": report.outcome,
        },
        "metrics": {
            "n_cameras": report.n_cameras,
            "n_clipped": report.n_clipped,
            "n_slabs": report.n_slabs,
        },
        "settings": {
            "eps": report.eps,
            "degenerate_policy": report.degenerate_policy,
        },
    }


def run_metadata_dict(
    run_name: str,
    scenario_path: str,
    eps: float,
    degenerate_policy: str,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "scenario_path": scenario_path,
        "eps": eps,
        "degenerate_policy": degenerate_policy,
        "config": {
            "COVERAGE_EPS": COVERAGE_EPS,
            "DEGENERATE_POLICY": DEGENERATE_POLICY,
            "REPORT_SCHEMA_VERSION": REPORT_SCHEMA_VERSION,
            "SEED": SEED,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_coverage_json(report_dir: Path, report: CoverageReport) -> Path:
    """Write coverage.json to report_dir. Returns path to file."""
    path = report_dir / "coverage.json"
    path.write_text(json.dumps(coverage_to_dict(report), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    scenario_path: str,
    eps: float,
    degenerate_policy: str,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, scenario_path, eps, degenerate_policy)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
