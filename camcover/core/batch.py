# camcover/core/batch.py
"""
Batch mode: decide coverage for every scenario .json in a directory.
Output: reports/batch_<run_name>/index.csv and cases/<case_id>/coverage.json (+ scenario.png).
"""

from __future__ import annotations

import csv
import logging
import time
from pathlib import Path

from camcover.core.config import COVERAGE_EPS, DEGENERATE_POLICY, REPORTS_DIR
from camcover.core.coverage import evaluate_coverage
from camcover.core.error_codes import INVALID_RANGE, SCENARIO_LOAD_FAILED, InvalidRangeError
from camcover.core.io import load_scenario
from camcover.core.reporting import ensure_report_dir, write_coverage_json, write_run_metadata_json

logger = logging.getLogger(__name__)

INDEX_FIELDS: tuple[str, ...] = (
    "case_id",
    "scenario_source",
    "n_cameras",
    "n_clipped",
    "covered",
    "outcome",
    "duration_ms",
)


def _error_row(case_id: str, source: str, outcome: str, t0: float) -> dict:
    return {
        "case_id": case_id, "scenario_source": source, "n_cameras": "", "n_clipped": "",
        "covered": "", "outcome": outcome,
        "duration_ms": int((time.perf_counter() - t0) * 1000),
    }


def run_batch(
    run_name: str,
    batch_dir: Path,
    limit: int | None = None,
    repo_root: Path | None = None,
    output_dir: str = REPORTS_DIR,
    eps: float = COVERAGE_EPS,
    degenerate_policy: str = DEGENERATE_POLICY,
    render: bool = False,
) -> Path:
    """
    Run every *.json scenario in batch_dir (sorted, at most `limit`).
    A case that fails to load or has an invalid range becomes an error row;
    the batch continues. Returns the batch report dir containing index.csv.
    """
    root = (repo_root or Path.cwd()).resolve()
    if not batch_dir.is_absolute():
        batch_dir = root / batch_dir
    batch_dir = batch_dir.resolve()
    if not batch_dir.is_dir():
        raise ValueError(f"Batch directory not found: {batch_dir}")

    out_dir = ensure_report_dir(root, f"batch_{run_name}", output_dir=output_dir)
    cases_dir = out_dir / "cases"
    cases_dir.mkdir(parents=True, exist_ok=True)
    files = sorted(batch_dir.glob("*.json"))
    if limit is not None:
        files = files[:limit]

    rows: list[dict] = []
    for i, path in enumerate(files):
        case_id = f"case_{i:04d}_{path.stem}"
        source = str(path.relative_to(root)) if root in path.parents else str(path)
        t0 = time.perf_counter()
        try:
            scenario = load_scenario(path)
        except InvalidRangeError as e:
            logger.warning("%s: %s", case_id, e)
            rows.append(_error_row(case_id, source, INVALID_RANGE, t0))
            continue
        except (OSError, ValueError) as e:
            logger.warning("%s: %s", case_id, e)
            rows.append(_error_row(case_id, source, SCENARIO_LOAD_FAILED, t0))
            continue

        report = evaluate_coverage(
            scenario.required,
            scenario.cameras,
            eps=eps,
            degenerate_policy=degenerate_policy,
            scenario_source=source,
        )
        duration_ms = int((time.perf_counter() - t0) * 1000)

        case_dir = cases_dir / case_id
        case_dir.mkdir(parents=True, exist_ok=True)
        write_coverage_json(case_dir, report)
        if render:
            from camcover.core.render import render_scenario
            render_scenario(report, case_dir / "scenario.png")
        rows.append({
            "case_id": case_id, "scenario_source": source,
            "n_cameras": report.n_cameras, "n_clipped": report.n_clipped,
            "covered": report.covered, "outcome": report.outcome,
            "duration_ms": duration_ms,
        })

    write_run_metadata_json(out_dir, run_name, str(batch_dir), eps, degenerate_policy)
    index_path = out_dir / "index.csv"
    with open(index_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(INDEX_FIELDS))
        w.writeheader()
        w.writerows(rows)
    n_covered = sum(1 for r in rows if r["covered"] is True)
    logger.info("batch %s: %d case(s), %d covered", run_name, len(rows), n_covered)
    return out_dir
