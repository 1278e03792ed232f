# camcover/core/coverage.py
"""
Top-level decision: do the camera envelopes jointly cover the required envelope?
Clip -> distance sweep -> per-slab light coverage.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Union

from camcover.core.clip import clip_cameras
from camcover.core.config import (
    COVERAGE_EPS,
    DEGENERATE_COVERED,
    DEGENERATE_POLICIES,
    DEGENERATE_POLICY,
)
from camcover.core.error_codes import InvalidRangeError
from camcover.core.sweep import run_sweep
from camcover.core.types import Camera, CoverageReport, Envelope

logger = logging.getLogger(__name__)

CameraLike = Union[Envelope, Sequence[float]]


def as_camera(value: CameraLike, name: str = "") -> Camera:
    """Accept a Camera/Envelope or a (d_min, d_max, l_min, l_max) sequence; validate on construction."""
    if isinstance(value, Camera):
        return value
    if isinstance(value, Envelope):
        return Camera(value.d_min, value.d_max, value.l_min, value.l_max, name=name)
    if len(value) != 4:
        raise ValueError(f"Camera needs 4 bounds (d_min, d_max, l_min, l_max), got {len(value)}")
    d_min, d_max, l_min, l_max = (float(v) for v in value)
    return Camera(d_min, d_max, l_min, l_max, name=name)


def validate_required(required: Envelope) -> None:
    """Re-check the required ranges at call time (Envelope also checks on construction)."""
    if not required.d_min <= required.d_max:
        raise InvalidRangeError(f"required d_min > d_max ({required.d_min!r} > {required.d_max!r})")
    if not required.l_min <= required.l_max:
        raise InvalidRangeError(f"required l_min > l_max ({required.l_min!r} > {required.l_max!r})")


def _check_settings(eps: float, degenerate_policy: str) -> None:
    if not eps >= 0:
        raise ValueError(f"eps must be >= 0, got {eps!r}")
    if degenerate_policy not in DEGENERATE_POLICIES:
        raise ValueError(f"Unknown degenerate_policy {degenerate_policy!r}; expected one of {DEGENERATE_POLICIES}")


def evaluate_coverage(
    required: Envelope,
    cameras: Iterable[CameraLike],
    eps: float = COVERAGE_EPS,
    degenerate_policy: str = DEGENERATE_POLICY,
    scenario_source: str = "",
) -> CoverageReport:
    """
    Run the full decision and return a CoverageReport (answer plus counts).
    All validation happens before any clipping. Raises InvalidRangeError on bad ranges.
    """
    _check_settings(eps, degenerate_policy)
    validate_required(required)
    cams = [as_camera(c) for c in cameras]

    def _report(covered: bool, outcome, n_clipped: int = 0, n_slabs: int = 0) -> CoverageReport:
        return CoverageReport(
            required=required,
            cameras=cams,
            covered=covered,
            outcome=outcome,
            n_clipped=n_clipped,
            n_slabs=n_slabs,
            eps=eps,
            degenerate_policy=degenerate_policy,
            scenario_source=scenario_source,
        )

    if required.is_degenerate(eps):
        covered = degenerate_policy == DEGENERATE_COVERED
        logger.debug("required envelope is degenerate; policy %s -> %s", degenerate_policy, covered)
        return _report(covered, "degenerate_required")

    clipped = clip_cameras(required, cams, eps=eps)
    if not clipped:
        logger.debug("no camera overlaps the required envelope with positive area")
        return _report(False, "no_contributing_camera")

    result = run_sweep(required, clipped, eps=eps)
    return _report(result.covered, result.outcome, len(clipped), result.n_slabs)


def suffices(
    required: Envelope,
    cameras: Iterable[CameraLike],
    eps: float = COVERAGE_EPS,
    degenerate_policy: str = DEGENERATE_POLICY,
) -> bool:
    """True if the union of camera envelopes covers `required` with no gap."""
    return evaluate_coverage(required, cameras, eps=eps, degenerate_policy=degenerate_policy).covered


def cameras_suffice(
    req_d_min: float,
    req_d_max: float,
    req_l_min: float,
    req_l_max: float,
    cameras: Iterable[CameraLike],
    eps: float = COVERAGE_EPS,
    degenerate_policy: str = DEGENERATE_POLICY,
) -> bool:
    """Scalar form of suffices(): required envelope given as four bounds."""
    if not req_d_min <= req_d_max:
        raise InvalidRangeError(f"required d_min > d_max ({req_d_min!r} > {req_d_max!r})")
    if not req_l_min <= req_l_max:
        raise InvalidRangeError(f"required l_min > l_max ({req_l_min!r} > {req_l_max!r})")
    required = Envelope(req_d_min, req_d_max, req_l_min, req_l_max)
    return suffices(required, cameras, eps=eps, degenerate_policy=degenerate_policy)
