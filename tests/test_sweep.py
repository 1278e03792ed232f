"""
Distance sweep: coordinate dedup, event ordering (deactivate before activate), slab iteration, per-slab failure.
"""

from __future__ import annotations

from camcover.core.clip import clip_cameras
from camcover.core.sweep import (
    build_events,
    event_sort_key,
    iter_slabs,
    run_sweep,
    sweep_coordinates,
    sweep_covers,
    unique_sorted,
)
from camcover.core.types import BoundaryEvent, Camera, ClippedRect, Envelope

REQUIRED = Envelope(0.0, 10.0, 0.0, 10.0)


def test_unique_sorted_merges_within_eps() -> None:
    out = unique_sorted([5.0, 0.0, 5.0 + 1e-13, 10.0, 0.0])
    assert out == [0.0, 5.0, 10.0]


def test_unique_sorted_keeps_distinct() -> None:
    assert unique_sorted([3.0, 1.0, 2.0]) == [1.0, 2.0, 3.0]


def test_build_events_two_per_rect() -> None:
    clipped = [ClippedRect(0.0, 5.0, 0.0, 10.0, 0), ClippedRect(5.0, 10.0, 0.0, 10.0, 1)]
    events = build_events(clipped)
    assert len(events) == 4
    assert BoundaryEvent(0.0, "activate", 0) in events
    assert BoundaryEvent(5.0, "deactivate", 0) in events
    assert BoundaryEvent(5.0, "activate", 1) in events
    assert BoundaryEvent(10.0, "deactivate", 1) in events


def test_event_sort_deactivation_first_at_equal_x() -> None:
    events = [
        BoundaryEvent(5.0, "activate", 1),
        BoundaryEvent(5.0, "deactivate", 0),
        BoundaryEvent(0.0, "activate", 0),
    ]
    ordered = sorted(events, key=event_sort_key)
    assert [(e.x, e.kind) for e in ordered] == [
        (0.0, "activate"),
        (5.0, "deactivate"),
        (5.0, "activate"),
    ]


def test_sweep_coordinates_include_required_bounds() -> None:
    clipped = [ClippedRect(2.0, 4.0, 0.0, 10.0, 0)]
    assert sweep_coordinates(REQUIRED, clipped) == [0.0, 2.0, 4.0, 10.0]


def test_iter_slabs_skips_zero_width() -> None:
    slabs = list(iter_slabs([0.0, 2.0, 2.0, 5.0]))
    assert slabs == [(0.0, 2.0), (2.0, 5.0)]


def test_abutting_rects_cover_in_distance() -> None:
    clipped = clip_cameras(REQUIRED, [Camera(0.0, 5.0, 0.0, 10.0), Camera(5.0, 10.0, 0.0, 10.0)])
    result = run_sweep(REQUIRED, clipped)
    assert result.covered is True
    assert result.outcome == "covered"
    assert result.n_slabs == 2


def test_rect_ending_at_boundary_not_active_after_it() -> None:
    # Full-light camera ends at 5; second camera only covers half the light range after 5
    clipped = clip_cameras(REQUIRED, [Camera(0.0, 5.0, 0.0, 10.0), Camera(5.0, 10.0, 0.0, 6.0)])
    result = run_sweep(REQUIRED, clipped)
    assert result.covered is False
    assert result.outcome == "light_gap"


def test_uncovered_distance_slab() -> None:
    clipped = clip_cameras(REQUIRED, [Camera(0.0, 4.0, 0.0, 10.0), Camera(6.0, 10.0, 0.0, 10.0)])
    result = run_sweep(REQUIRED, clipped)
    assert result.covered is False
    assert result.outcome == "uncovered_slab"
    assert sweep_covers(REQUIRED, clipped) is False


def test_required_start_not_reached() -> None:
    clipped = clip_cameras(REQUIRED, [Camera(1.0, 10.0, 0.0, 10.0)])
    assert sweep_covers(REQUIRED, clipped) is False


def test_overlapping_staggered_rects() -> None:
    cams = [
        Camera(0.0, 6.0, 0.0, 6.0),
        Camera(0.0, 6.0, 5.0, 10.0),
        Camera(4.0, 10.0, 0.0, 10.0),
    ]
    assert sweep_covers(REQUIRED, clip_cameras(REQUIRED, cams)) is True


def test_boundaries_within_eps_are_merged() -> None:
    cams = [Camera(0.0, 5.0, 0.0, 10.0), Camera(5.0 + 1e-13, 10.0, 0.0, 10.0)]
    clipped = clip_cameras(REQUIRED, cams)
    result = run_sweep(REQUIRED, clipped)
    assert result.covered is True
    assert result.n_slabs == 2
