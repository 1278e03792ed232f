# camcover/core/render.py
"""
Matplotlib PNG rendering of a scenario: camera envelopes, required envelope, verdict.
"""

from __future__ import annotations

import warnings
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from shapely.geometry import Polygon

from camcover.core.config import (
    CAMERA_EDGE_COLOR,
    CAMERA_FACE_ALPHA,
    RENDER_HEIGHT_PX,
    RENDER_PAD_FRAC,
    RENDER_WIDTH_PX,
    REQUIRED_EDGE_COLOR,
)
from camcover.core.geometry import envelope_to_box, envelopes_bounds
from camcover.core.types import CoverageReport, Envelope


def set_axes_to_envelopes(ax: plt.Axes, envs: list[Envelope], pad_frac: float = RENDER_PAD_FRAC) -> None:
    """Set xlim/ylim from envelope bounds with margin."""
    if not envs:
        return
    min_d, min_l, max_d, max_l = envelopes_bounds(envs)
    dx = max(1.0, (max_d - min_d) * pad_frac)
    dy = max(1.0, (max_l - min_l) * pad_frac)
    ax.set_xlim(min_d - dx, max_d + dx)
    ax.set_ylim(min_l - dy, max_l + dy)


def _draw_box(ax: plt.Axes, poly: Polygon, **kwargs) -> None:
    xy = np.array(poly.exterior.coords)
    if len(xy) == 0:
        return
    ax.fill(xy[:, 0], xy[:, 1], **kwargs)


def render_scenario(
    report: CoverageReport,
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    scale: int = 1,
) -> None:
    """Render cameras (filled) over the required envelope (dashed). scale multiplies resolution."""
    w, h = width_px * scale, height_px * scale
    fig = plt.figure(figsize=(w / 100.0, h / 100.0), dpi=100, constrained_layout=False)
    ax = fig.add_axes([0.1, 0.1, 0.85, 0.8])

    for cam in report.cameras:
        _draw_box(
            ax,
            envelope_to_box(cam),
            facecolor=CAMERA_EDGE_COLOR,
            edgecolor=CAMERA_EDGE_COLOR,
            linewidth=1,
            alpha=CAMERA_FACE_ALPHA,
        )
        if cam.name:
            ax.text(
                (cam.d_min + cam.d_max) / 2.0,
                (cam.l_min + cam.l_max) / 2.0,
                cam.name,
                ha="center", va="center",
                fontsize=8,
                color=CAMERA_EDGE_COLOR,
            )

    req_xy = np.array(envelope_to_box(report.required).exterior.coords)
    if len(req_xy):
        ax.plot(req_xy[:, 0], req_xy[:, 1], linestyle="--", linewidth=2, color=REQUIRED_EDGE_COLOR, label="required")

    verdict = "covered" if report.covered else f"not covered ({report.outcome})"
    ax.set_title(f"{len(report.cameras)} camera(s): {verdict}")
    ax.set_xlabel("distance")
    ax.set_ylabel("light")
    set_axes_to_envelopes(ax, [report.required, *report.cameras])
    ax.legend(loc="upper right", fontsize=8)
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=100, facecolor="white")
    plt.close(fig)
