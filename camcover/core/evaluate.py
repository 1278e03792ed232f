# camcover/core/evaluate.py
"""
Evaluation runner: random integer-grid scenarios decided by the distance sweep
and by the shapely union-covers oracle. Saves evaluation_results.csv and
evaluation_summary.json under reports/<run_name>/.
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from camcover.core.config import (
    EVAL_GRID_MAX,
    EVAL_MAX_CAMERAS,
    EVAL_N_SCENARIOS,
    LOG_LEVEL,
    REPORTS_DIR,
    SEED,
)
from camcover.core.coverage import evaluate_coverage
from camcover.core.geometry import union_covers
from camcover.core.reporting import ensure_report_dir
from camcover.core.types import Camera, Envelope, Scenario

logger = logging.getLogger(__name__)


def _random_span(rng: np.random.Generator, grid_max: int, positive: bool) -> tuple[float, float]:
    """Sorted integer pair in [0, grid_max]; strictly increasing when positive."""
    while True:
        a, b = sorted(int(v) for v in rng.integers(0, grid_max + 1, size=2))
        if not positive or a < b:
            return float(a), float(b)


def random_scenario(
    rng: np.random.Generator,
    grid_max: int = EVAL_GRID_MAX,
    max_cameras: int = EVAL_MAX_CAMERAS,
) -> Scenario:
    """
    Non-degenerate required envelope plus 0..max_cameras cameras. Half of the
    scenarios start from a two-camera light split of the required envelope so
    covered and uncovered cases both show up.
    """
    rd = _random_span(rng, grid_max, positive=True)
    rl = _random_span(rng, grid_max, positive=True)
    required = Envelope(rd[0], rd[1], rl[0], rl[1])
    cameras: list[Camera] = []
    if rng.random() < 0.5 and rl[1] - rl[0] >= 2:
        cut = float(rng.integers(int(rl[0]) + 1, int(rl[1])))
        cameras.append(Camera(rd[0], rd[1], rl[0], cut, name="split_lo"))
        cameras.append(Camera(rd[0], rd[1], cut, rl[1], name="split_hi"))
        if rng.random() < 0.5:
            # One-unit light gap below the cut; extra cameras may close it
            lo = cameras[0]
            cameras[0] = Camera(lo.d_min, lo.d_max, lo.l_min, max(lo.l_min, lo.l_max - 1.0), name=lo.name)
    n_extra = int(rng.integers(0, max_cameras + 1))
    for i in range(n_extra):
        d = _random_span(rng, grid_max, positive=False)
        lt = _random_span(rng, grid_max, positive=False)
        cameras.append(Camera(d[0], d[1], lt[0], lt[1], name=f"cam{i}"))
    return Scenario(required=required, cameras=cameras, source="random")


def run_evaluation(
    run_name: str,
    n_scenarios: int = EVAL_N_SCENARIOS,
    seed: int | None = SEED,
    repo_root: Path | None = None,
    grid_max: int = EVAL_GRID_MAX,
    max_cameras: int = EVAL_MAX_CAMERAS,
) -> Path:
    """
    Decide n_scenarios random scenarios with both methods. Returns the report dir.
    Summary keys: n_scenarios, agreement_rate, covered_rate, mismatches.
    """
    root = (repo_root or Path.cwd()).resolve()
    report_dir = ensure_report_dir(root, run_name, output_dir=REPORTS_DIR)
    rng = np.random.default_rng(seed)

    rows: list[dict] = []
    for i in range(n_scenarios):
        scenario = random_scenario(rng, grid_max=grid_max, max_cameras=max_cameras)
        report = evaluate_coverage(scenario.required, scenario.cameras)
        oracle = union_covers(scenario.required, scenario.cameras)
        rows.append({
            "case_id": f"eval_{i:04d}",
            "n_cameras": report.n_cameras,
            "n_clipped": report.n_clipped,
            "sweep_covered": report.covered,
            "oracle_covered": oracle,
            "agree": report.covered == oracle,
            "outcome": report.outcome,
        })
        if report.covered != oracle:
            logger.warning("eval_%04d: sweep=%s oracle=%s %s", i, report.covered, oracle, scenario)

    csv_path = report_dir / "evaluation_results.csv"
    if rows:
        with open(csv_path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            w.writeheader()
            w.writerows(rows)

    n = len(rows)
    summary = {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "seed": seed,
        "n_scenarios": n,
        "agreement_rate": sum(r["agree"] for r in rows) / n if n else 1.0,
        "covered_rate": sum(r["sweep_covered"] for r in rows) / n if n else 0.0,
        "mismatches": [r["case_id"] for r in rows if not r["agree"]],
    }
    (report_dir / "evaluation_summary.json").write_text(json.dumps(summary, indent=2), encoding="utf-8")
    logger.info("evaluation %s: %d scenarios, agreement %.3f", run_name, n, summary["agreement_rate"])
    return report_dir


def main() -> None:
    p = argparse.ArgumentParser(description="Cross-check the coverage sweep against the shapely oracle.")
    p.add_argument("--run-name", type=str, default="eval", dest="run_name")
    p.add_argument("--n", type=int, default=EVAL_N_SCENARIOS, help="Number of random scenarios")
    p.add_argument("--seed", type=int, default=SEED, help="Random seed")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root")
    args = p.parse_args()
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    repo_root = Path(args.repo_root).resolve() if args.repo_root else None
    out = run_evaluation(args.run_name, n_scenarios=args.n, seed=args.seed, repo_root=repo_root)
    print(out / "evaluation_summary.json")


if __name__ == "__main__":
    main()
