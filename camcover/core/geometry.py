# camcover/core/geometry.py
"""
Shapely helpers: envelopes as boxes, camera union, and an independent
union-covers oracle used by evaluation and tests to cross-check the sweep.
"""

from __future__ import annotations

from typing import Iterable

from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from camcover.core.types import Envelope


def envelope_to_box(env: Envelope) -> Polygon:
    """Distance on x, light on y."""
    return box(env.d_min, env.l_min, env.d_max, env.l_max)


def envelopes_bounds(envs: Iterable[Envelope]) -> tuple[float, float, float, float]:
    """Return (min_d, min_l, max_d, max_l) over all envelopes; zeros if none."""
    envs = list(envs)
    if not envs:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        min(e.d_min for e in envs),
        min(e.l_min for e in envs),
        max(e.d_max for e in envs),
        max(e.l_max for e in envs),
    )


def cameras_union(cameras: Iterable[Envelope]) -> BaseGeometry:
    """Union of all camera boxes with positive area; empty Polygon if none."""
    boxes = [envelope_to_box(c) for c in cameras]
    boxes = [b for b in boxes if b.area > 0]
    if not boxes:
        return Polygon()
    return unary_union(boxes)


def union_covers(required: Envelope, cameras: Iterable[Envelope]) -> bool:
    """
    Oracle: True if the union of camera boxes covers the required box.
    Only meaningful for a required envelope with positive area.
    """
    union = cameras_union(cameras)
    if union.is_empty:
        return False
    return bool(union.covers(envelope_to_box(required)))
