# camcover/core/intervals.py
"""
One-dimensional interval-union coverage: does a set of closed intervals span
[req_min, req_max] with no gap? Touching endpoints (within eps) are contiguous.
"""

from __future__ import annotations

from typing import Iterable

from camcover.core.config import COVERAGE_EPS
from camcover.core.types import LightInterval


def covers_fully(
    req_min: float,
    req_max: float,
    intervals: Iterable[LightInterval],
    eps: float = COVERAGE_EPS,
) -> bool:
    """
    Classic merge sweep over intervals sorted by start.
    Returns as soon as coverage reaches req_max or a gap is found.
    """
    covered_until = req_min
    for start, end in sorted(intervals, key=lambda iv: iv[0]):
        if end <= covered_until + eps:
            continue
        if start > covered_until + eps:
            return False
        covered_until = max(covered_until, end)
        if covered_until >= req_max - eps:
            return True
    return covered_until >= req_max - eps
