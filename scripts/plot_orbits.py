#!/usr/bin/env python
from __future__ import annotations

import os
import argparse

import numpy as np
import pandas as pd

from astro_engine.plotting import FigureConfig, set_paper_style, savefig, ensure_dir, plot_orbits


def _result_from_csv(path: str) -> dict:
    """Rebuild the (T, positions) part of a recorded run from trajectory.csv."""
    df = pd.read_csv(path)
    axes = [c for c in ("x", "y", "z") if c in df.columns]
    ids = list(dict.fromkeys(df["id"]))
    names = [df.loc[df["id"] == i, "name"].iloc[0] for i in ids]
    T = np.sort(df["t"].unique())

    R = np.empty((len(T), len(ids), len(axes)), dtype=float)
    for k, body_id in enumerate(ids):
        g = df[df["id"] == body_id].sort_values("t")
        R[:, k, :] = g[axes].to_numpy(dtype=float)
    return {"T": T, "positions": R, "ids": ids, "names": names}


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--trajectory_csv", required=True)
    ap.add_argument("--out_dir", default=None)
    ap.add_argument("--fmt", default="png")
    ap.add_argument("--title", default=None)
    args = ap.parse_args()

    cfg = FigureConfig(fmt=args.fmt)
    set_paper_style(cfg)

    out_dir = args.out_dir or os.path.join(os.path.dirname(args.trajectory_csv), "figures")
    ensure_dir(out_dir)

    res = _result_from_csv(args.trajectory_csv)
    fig = plot_orbits(res, cfg, title=args.title)
    path = savefig(fig, os.path.join(out_dir, "orbits"), cfg)
    print("Saved:", path)


if __name__ == "__main__":
    main()
