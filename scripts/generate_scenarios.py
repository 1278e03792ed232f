#!/usr/bin/env python3
"""
Generate example coverage scenarios (JSON) for camcover.

Fixed cases:
  reference_covered     light split at 5, touching halves
  reference_gap         light gap (4, 6)
  partial_distance      tele camera too dim for the far slab
  distance_joined       third camera closes the far slab
  degenerate_required   zero-width required envelope, no cameras
Random cases:
  random_NNN            integer-grid scenarios (numpy rng, fixed seed)
"""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from camcover.core.config import EVAL_GRID_MAX, EVAL_MAX_CAMERAS, SCENARIOS_DIR, SEED
from camcover.core.evaluate import random_scenario
from camcover.core.io import write_scenario_json
from camcover.core.types import Camera, Envelope, Scenario

# Output directory
OUTPUT_DIR = Path(__file__).parent.parent / SCENARIOS_DIR

UNIT = Envelope(0.0, 10.0, 0.0, 10.0)
OUTDOOR = Envelope(0.5, 30.0, 10.0, 1000.0)

WIDE = Camera(0.3, 12.0, 5.0, 2000.0, name="wide")
TELE_DIM = Camera(8.0, 40.0, 10.0, 200.0, name="tele_dim")
TELE_BRIGHT = Camera(12.0, 35.0, 150.0, 1200.0, name="tele_bright")


def fixed_scenarios() -> dict[str, Scenario]:
    return {
        "reference_covered": Scenario(UNIT, [
            Camera(0.0, 10.0, 0.0, 5.0, name="low_light"),
            Camera(0.0, 10.0, 5.0, 10.0, name="high_light"),
        ]),
        "reference_gap": Scenario(UNIT, [
            Camera(0.0, 10.0, 0.0, 4.0, name="low_light"),
            Camera(0.0, 10.0, 6.0, 10.0, name="high_light"),
        ]),
        "partial_distance": Scenario(OUTDOOR, [WIDE, TELE_DIM]),
        "distance_joined": Scenario(OUTDOOR, [WIDE, TELE_DIM, TELE_BRIGHT]),
        "degenerate_required": Scenario(Envelope(5.0, 5.0, 0.0, 10.0), []),
    }


def main() -> None:
    p = argparse.ArgumentParser(description="Write example scenario JSON files.")
    p.add_argument("--n-random", type=int, default=20, dest="n_random", help="Number of random scenarios")
    p.add_argument("--seed", type=int, default=SEED)
    p.add_argument("--output-dir", type=str, default=str(OUTPUT_DIR), dest="output_dir")
    args = p.parse_args()

    out_dir = Path(args.output_dir)
    for name, scenario in fixed_scenarios().items():
        path = write_scenario_json(out_dir / f"{name}.json", scenario)
        print(f"Created: {path.name}")

    rng = np.random.default_rng(args.seed)
    for i in range(args.n_random):
        scenario = random_scenario(rng, grid_max=EVAL_GRID_MAX, max_cameras=EVAL_MAX_CAMERAS)
        path = write_scenario_json(out_dir / f"random_{i:03d}.json", scenario)
        print(f"Created: {path.name}")


if __name__ == "__main__":
    main()
