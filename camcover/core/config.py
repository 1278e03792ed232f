# camcover/core/config.py
"""
Central configuration for camera envelope coverage.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
DEFAULT_SCENARIO_PATH: str = "docs/assets/scenarios/reference_covered.json"
SCENARIOS_DIR: str = "docs/assets/scenarios"
REPORTS_DIR: str = "reports"

# ----- Tolerance -----
COVERAGE_EPS: float = 1e-12
"""
Absolute tolerance for every coordinate comparison (clipping, slab width,
coordinate dedup, interval touch/gap). Assumes coordinates near unit scale
(roughly 1e-3 .. 1e3); pass eps= explicitly for much larger magnitudes.
"""

# ----- Degenerate required envelope -----
DEGENERATE_COVERED: str = "covered"
DEGENERATE_NOT_COVERED: str = "not_covered"
DEGENERATE_POLICIES: tuple[str, ...] = (DEGENERATE_COVERED, DEGENERATE_NOT_COVERED)

DEGENERATE_POLICY: str = DEGENERATE_COVERED
"""Answer for a zero-width (either axis) required envelope: vacuously covered by default."""

# ----- Rendering -----
RENDER_WIDTH_PX: int = 800
RENDER_HEIGHT_PX: int = 600
RENDER_PAD_FRAC: float = 0.08
CAMERA_FACE_ALPHA: float = 0.25
REQUIRED_EDGE_COLOR: str = "crimson"
CAMERA_EDGE_COLOR: str = "navy"

# ----- Determinism -----
SEED: int | None = 42
"""Random seed for evaluation and scenario generation; None for non-deterministic."""

# ----- Evaluation (random integer-grid scenarios) -----
EVAL_N_SCENARIOS: int = 200
"""Number of random scenarios per evaluation run."""

EVAL_GRID_MAX: int = 10
"""Scenario coordinates are integers in [0, EVAL_GRID_MAX]."""

EVAL_MAX_CAMERAS: int = 6
"""Each random scenario draws between 0 and EVAL_MAX_CAMERAS cameras."""

# ----- Report schema -----
REPORT_SCHEMA_VERSION: str = "1.0"

# ----- Debug / logging -----
SWEEP_DEBUG: bool = os.environ.get("SWEEP_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every slab and its active intervals. Set env SWEEP_DEBUG=1 to enable."""

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Root log level for the CLI entry points (e.g. LOG_LEVEL=DEBUG)."""
