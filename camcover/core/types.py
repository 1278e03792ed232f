# camcover/core/types.py
"""
Dataclasses for envelopes, clipped rectangles, sweep events and coverage reports.
Report schema aligns with reporting.coverage_to_dict.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Literal

from camcover.core.error_codes import InvalidRangeError


EventKind = Literal["deactivate", "activate"]

CoverageOutcome = Literal[
    "covered",
    "degenerate_required",
    "no_contributing_camera",
    "uncovered_slab",
    "light_gap",
]

LightInterval = tuple[float, float]
"""Closed (start, end) on the light axis."""


def _check_range(lo: float, hi: float, axis: str) -> None:
    # `not lo <= hi` also rejects NaN bounds
    if not lo <= hi:
        raise InvalidRangeError(f"{axis}_min > {axis}_max ({lo!r} > {hi!r})")


@dataclass(frozen=True)
class Envelope:
    """
    Axis-aligned rectangle: [d_min, d_max] on the distance axis, [l_min, l_max] on the light axis.
    Raises InvalidRangeError on construction if min > max on either axis.
    """
    d_min: float
    d_max: float
    l_min: float
    l_max: float

    def __post_init__(self) -> None:
        _check_range(self.d_min, self.d_max, "d")
        _check_range(self.l_min, self.l_max, "l")

    @property
    def distance_span(self) -> float:
        return self.d_max - self.d_min

    @property
    def light_span(self) -> float:
        return self.l_max - self.l_min

    def is_degenerate(self, eps: float) -> bool:
        """True if the envelope has zero width on either axis (within eps)."""
        return math.isclose(self.d_min, self.d_max, rel_tol=0.0, abs_tol=eps) or math.isclose(
            self.l_min, self.l_max, rel_tol=0.0, abs_tol=eps
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.d_min, self.d_max, self.l_min, self.l_max)


@dataclass(frozen=True)
class Camera(Envelope):
    """A hardware camera operating envelope. `name` is for reports and plots only."""
    name: str = ""

    def __str__(self) -> str:
        label = self.name or "Camera"
        return f"{label}[d=({self.d_min},{self.d_max}), l=({self.l_min},{self.l_max})]"


@dataclass(frozen=True)
class ClippedRect:
    """Camera intersected with the required envelope. source_index points back into the camera list."""
    d_min: float
    d_max: float
    l_min: float
    l_max: float
    source_index: int

    @property
    def light_interval(self) -> LightInterval:
        return (self.l_min, self.l_max)


@dataclass(frozen=True)
class BoundaryEvent:
    """Distance coordinate where clipped rect `rect_id` becomes active or inactive."""
    x: float
    kind: EventKind
    rect_id: int

    @property
    def is_activation(self) -> bool:
        return self.kind == "activate"


@dataclass
class Scenario:
    """A required envelope plus the candidate cameras, as loaded from a scenario file."""
    required: Envelope
    cameras: list[Camera] = field(default_factory=list)
    source: str = ""


@dataclass
class CoverageReport:
    """
    Summary of one coverage decision. Serializes to coverage.json.
    `outcome` names why the answer came out the way it did; it never locates the gap.
    """
    required: Envelope
    cameras: list[Camera]
    covered: bool
    outcome: CoverageOutcome
    n_clipped: int
    n_slabs: int
    eps: float
    degenerate_policy: str
    scenario_source: str = ""

    @property
    def n_cameras(self) -> int:
        return len(self.cameras)
