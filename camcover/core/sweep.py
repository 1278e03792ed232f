# camcover/core/sweep.py
"""
Distance sweep: walk the maximal half-open slabs [x, next) of the required
distance range, track which clipped rects are active, and check light coverage
per slab with intervals.covers_fully.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from camcover.core.config import COVERAGE_EPS, SWEEP_DEBUG
from camcover.core.intervals import covers_fully
from camcover.core.types import BoundaryEvent, ClippedRect, CoverageOutcome, Envelope, LightInterval

logger = logging.getLogger(__name__)

# Secondary sort key: deactivations first at equal x
_KIND_ORDER: dict[str, int] = {"deactivate": 0, "activate": 1}


@dataclass
class SweepResult:
    covered: bool
    outcome: CoverageOutcome
    n_slabs: int


def unique_sorted(values: Iterable[float], eps: float = COVERAGE_EPS) -> list[float]:
    """Sort ascending; a value within eps of the last kept value is merged into it."""
    out: list[float] = []
    for v in sorted(values):
        if not out or abs(v - out[-1]) > eps:
            out.append(v)
    return out


def build_events(clipped: list[ClippedRect]) -> list[BoundaryEvent]:
    """Two events per clipped rect: activate at d_min, deactivate at d_max."""
    events: list[BoundaryEvent] = []
    for rect_id, rect in enumerate(clipped):
        events.append(BoundaryEvent(rect.d_min, "activate", rect_id))
        events.append(BoundaryEvent(rect.d_max, "deactivate", rect_id))
    return events


def event_sort_key(event: BoundaryEvent) -> tuple[float, int]:
    """(x, kind order): a rect ending at x is inactive for the slab starting at x."""
    return (event.x, _KIND_ORDER[event.kind])


def sweep_coordinates(
    required: Envelope,
    clipped: list[ClippedRect],
    eps: float = COVERAGE_EPS,
) -> list[float]:
    """Required distance bounds plus every clipped d_min/d_max, sorted and deduplicated."""
    coords = [required.d_min, required.d_max]
    for rect in clipped:
        coords.append(rect.d_min)
        coords.append(rect.d_max)
    return unique_sorted(coords, eps)


def iter_slabs(coords: list[float], eps: float = COVERAGE_EPS) -> Iterator[tuple[float, float]]:
    """Yield (x, next) for consecutive coords, skipping spans no wider than eps."""
    for x, nxt in zip(coords, coords[1:]):
        if x + eps < nxt:
            yield x, nxt


def run_sweep(
    required: Envelope,
    clipped: list[ClippedRect],
    eps: float = COVERAGE_EPS,
) -> SweepResult:
    """
    Single forward pass over sorted coordinates. The active set is a per-call
    bool list indexed by position in `clipped`; events are applied before the
    slab that starts at their coordinate. Fails on the first slab with no
    active rect or with a light gap.
    """
    coords = sweep_coordinates(required, clipped, eps)
    events = sorted(build_events(clipped), key=event_sort_key)
    active = [False] * len(clipped)
    ptr = 0
    n_slabs = 0

    for x, nxt in iter_slabs(coords, eps):
        # Events merged into x by dedup sit within eps of it
        while ptr < len(events) and events[ptr].x <= x + eps:
            ev = events[ptr]
            active[ev.rect_id] = ev.is_activation
            ptr += 1
        n_slabs += 1

        intervals: list[LightInterval] = [
            clipped[i].light_interval for i, on in enumerate(active) if on
        ]
        if SWEEP_DEBUG:
            logger.debug("slab [%r, %r): %d active %s", x, nxt, len(intervals), intervals)
        if not intervals:
            logger.debug("no active camera on slab [%r, %r)", x, nxt)
            return SweepResult(False, "uncovered_slab", n_slabs)
        if not covers_fully(required.l_min, required.l_max, intervals, eps):
            logger.debug("light gap on slab [%r, %r)", x, nxt)
            return SweepResult(False, "light_gap", n_slabs)

    return SweepResult(True, "covered", n_slabs)


def sweep_covers(
    required: Envelope,
    clipped: list[ClippedRect],
    eps: float = COVERAGE_EPS,
) -> bool:
    """True if every slab of the required distance range is fully light-covered."""
    return run_sweep(required, clipped, eps).covered
