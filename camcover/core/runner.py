# camcover/core/runner.py
"""
CLI entrypoint: load a scenario, decide coverage, write coverage.json,
run_metadata.json and scenario.png. Default scenario:
docs/assets/scenarios/reference_covered.json (repo-relative).
Exit status: 0 covered, 1 not covered, 2 invalid input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from camcover.core.config import (
    COVERAGE_EPS,
    DEFAULT_SCENARIO_PATH,
    DEGENERATE_POLICIES,
    DEGENERATE_POLICY,
    LOG_LEVEL,
    REPORTS_DIR,
)
from camcover.core.coverage import evaluate_coverage
from camcover.core.error_codes import INVALID_RANGE, NOT_COVERED, InvalidRangeError, user_message
from camcover.core.io import load_scenario
from camcover.core.reporting import (
    ensure_report_dir,
    write_coverage_json,
    write_run_metadata_json,
)

logger = logging.getLogger(__name__)

EXIT_COVERED = 0
EXIT_NOT_COVERED = 1
EXIT_INVALID_INPUT = 2


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Check whether camera envelopes cover a required envelope.")
    p.add_argument("--scenario", type=str, default=DEFAULT_SCENARIO_PATH, help="Scenario JSON path (repo-relative)")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--eps", type=float, default=COVERAGE_EPS, help="Coordinate tolerance")
    p.add_argument(
        "--degenerate-policy",
        type=str,
        default=DEGENERATE_POLICY,
        choices=DEGENERATE_POLICIES,
        dest="degenerate_policy",
        help="Answer for a zero-area required envelope",
    )
    p.add_argument("--no-render", action="store_true", dest="no_render", help="Skip scenario.png")
    p.add_argument("--batch-dir", type=str, default=None, dest="batch_dir", help="Batch mode: directory of scenario .json files")
    p.add_argument("--batch-limit", type=int, default=None, dest="batch_limit", help="Max cases in batch")
    return p.parse_args(argv)


def _resolve_scenario_path(repo_root: Path, path_arg: str) -> Path:
    """Resolve path: if relative, from repo root; else as-is then resolve."""
    p = Path(path_arg)
    if not p.is_absolute():
        p = repo_root / p
    return p.resolve()


def run(argv: list[str] | None = None) -> int:
    """Run the CLI and return the exit status."""
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    if args.batch_dir:
        from camcover.core.batch import run_batch
        out = run_batch(
            run_name=args.run_name,
            batch_dir=Path(args.batch_dir),
            limit=args.batch_limit,
            repo_root=repo_root,
            output_dir=args.output_dir,
            eps=args.eps,
            degenerate_policy=args.degenerate_policy,
            render=not args.no_render,
        )
        print(out / "index.csv")
        return EXIT_COVERED

    scenario_path = _resolve_scenario_path(repo_root, args.scenario)
    try:
        scenario = load_scenario(scenario_path)
        report = evaluate_coverage(
            scenario.required,
            scenario.cameras,
            eps=args.eps,
            degenerate_policy=args.degenerate_policy,
            scenario_source=args.scenario,
        )
    except InvalidRangeError as e:
        logger.error("%s", e)
        print(user_message(INVALID_RANGE), file=sys.stderr)
        return EXIT_INVALID_INPUT

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    paths = [
        write_coverage_json(report_dir, report),
        write_run_metadata_json(report_dir, args.run_name, args.scenario, args.eps, args.degenerate_policy),
    ]
    if not args.no_render:
        from camcover.core.render import render_scenario
        png_path = report_dir / "scenario.png"
        render_scenario(report, png_path)
        paths.append(png_path)

    for p in paths:
        print(p)
    print("Covered:", report.covered)
    if not report.covered:
        logger.info("%s (%s)", user_message(NOT_COVERED), report.outcome)
    return EXIT_COVERED if report.covered else EXIT_NOT_COVERED


def main() -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    sys.exit(run())


if __name__ == "__main__":
    main()
