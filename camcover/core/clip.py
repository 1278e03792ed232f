# camcover/core/clip.py
"""
Clip camera envelopes to the required envelope; drop empty or degenerate intersections.
"""

from __future__ import annotations

from typing import Iterable

from camcover.core.config import COVERAGE_EPS
from camcover.core.types import ClippedRect, Envelope


def clip_camera(
    required: Envelope,
    camera: Envelope,
    source_index: int = 0,
    eps: float = COVERAGE_EPS,
) -> ClippedRect | None:
    """
    Intersection of camera with required, or None when it has no positive area
    on both axes (edge or corner contact only counts as nothing).
    """
    d1 = max(required.d_min, camera.d_min)
    d2 = min(required.d_max, camera.d_max)
    l1 = max(required.l_min, camera.l_min)
    l2 = min(required.l_max, camera.l_max)
    if d1 + eps < d2 and l1 + eps < l2:
        return ClippedRect(d1, d2, l1, l2, source_index)
    return None


def clip_cameras(
    required: Envelope,
    cameras: Iterable[Envelope],
    eps: float = COVERAGE_EPS,
) -> list[ClippedRect]:
    """
    Clip every camera to required. Position in the returned list is the
    per-call rect id used by the sweep.
    """
    out: list[ClippedRect] = []
    for i, cam in enumerate(cameras):
        clipped = clip_camera(required, cam, source_index=i, eps=eps)
        if clipped is not None:
            out.append(clipped)
    return out
