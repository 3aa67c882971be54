from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

# Matplotlib is only needed for figures; the engine itself never imports this module.
import matplotlib
matplotlib.use("Agg", force=True)  # headless
import matplotlib.pyplot as plt

AU = 1.496e11  # meters
RASTER_FORMATS = ("png", "jpg", "jpeg")


@dataclass(frozen=True)
class FigureConfig:
    fmt: str = "png"          # "pdf", "png", "svg"
    dpi: int = 200            # raster formats only
    fontsize: float = 10.0
    tight: bool = True
    pad_inches: float = 0.02
    figsize: Tuple[float, float] = (4.0, 4.0)
    # axis unit for orbit plots, in meters
    length_unit: float = AU
    length_label: str = "AU"


def set_paper_style(cfg: FigureConfig) -> None:
    """Compact rcParams for orbit figures."""
    small = max(6.0, cfg.fontsize - 2.0)
    plt.rcParams.update({
        "figure.figsize": cfg.figsize,
        "savefig.dpi": cfg.dpi,
        "font.size": cfg.fontsize,
        "axes.labelsize": cfg.fontsize,
        "axes.titlesize": cfg.fontsize,
        "legend.fontsize": small,
        "xtick.labelsize": small,
        "ytick.labelsize": small,
        "xtick.direction": "in",
        "ytick.direction": "in",
        "legend.frameon": False,
        "lines.linewidth": 1.0,
    })


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def savefig(fig: plt.Figure, path: str, cfg: FigureConfig) -> str:
    """Save an orbit figure in `cfg.fmt` and return the written path.

    `path` without an extension gets `.{cfg.fmt}`; an explicit extension wins.
    """
    root, ext = os.path.splitext(path)
    fmt = ext[1:].lower() if ext else cfg.fmt.lower()
    if not ext:
        path = f"{root}.{fmt}"
    kwargs = {"format": fmt}
    if cfg.tight:
        kwargs["bbox_inches"] = "tight"
        kwargs["pad_inches"] = cfg.pad_inches
    if fmt in RASTER_FORMATS:
        kwargs["dpi"] = cfg.dpi
    fig.savefig(path, **kwargs)
    return path


def plot_orbits(result: dict,
                cfg: FigureConfig = FigureConfig(),
                colors: Optional[list[str]] = None,
                title: Optional[str] = None) -> plt.Figure:
    """Plot every body's path in the xy-plane from a recorded run.

    3D runs are projected onto xy; the final position is marked with a dot.
    """
    R = np.asarray(result["positions"], dtype=float) / cfg.length_unit
    names = result.get("names") or result["ids"]

    fig, ax = plt.subplots(figsize=cfg.figsize)
    for i, name in enumerate(names):
        c = colors[i] if colors is not None and i < len(colors) else None
        line, = ax.plot(R[:, i, 0], R[:, i, 1], label=name, color=c)
        ax.plot(R[-1, i, 0], R[-1, i, 1], "o", color=line.get_color(), markersize=3)

    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel(f"x [{cfg.length_label}]")
    ax.set_ylabel(f"y [{cfg.length_label}]")
    if title:
        ax.set_title(title)
    ax.legend(loc="best")
    return fig
