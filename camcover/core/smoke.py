# camcover/core/smoke.py
"""
Single entrypoint to verify the coverage check end-to-end on the two reference
camera sets (required [0, 10] x [0, 10]). Does not run on import.
"""

from __future__ import annotations

import logging

from camcover.core.config import LOG_LEVEL
from camcover.core.coverage import cameras_suffice
from camcover.core.types import Camera

logger = logging.getLogger(__name__)

REQUIRED_BOUNDS: tuple[float, float, float, float] = (0.0, 10.0, 0.0, 10.0)

# Light split at 5: touching halves cover
SPLIT_CAMERAS: list[Camera] = [
    Camera(0, 10, 0, 5, name="low_light"),
    Camera(0, 10, 5, 10, name="high_light"),
]

# Light gap (4, 6)
GAP_CAMERAS: list[Camera] = [
    Camera(0, 10, 0, 4, name="low_light"),
    Camera(0, 10, 6, 10, name="high_light"),
]


def run_smoke() -> tuple[bool, bool]:
    """Return (split result, gap result); expected (True, False)."""
    split = cameras_suffice(*REQUIRED_BOUNDS, SPLIT_CAMERAS)
    gap = cameras_suffice(*REQUIRED_BOUNDS, GAP_CAMERAS)
    logger.info("split cameras cover: %s", split)
    logger.info("gap cameras cover: %s", gap)
    return split, gap


def main() -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    split, gap = run_smoke()
    print(split)
    print(gap)


if __name__ == "__main__":
    main()
