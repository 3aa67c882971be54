#!/usr/bin/env python
from __future__ import annotations

import argparse
import numpy as np
import pandas as pd


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--trajectory_csv", required=True)
    ap.add_argument("--center", default=None, help="Body id to measure distances from (default: origin)")
    args = ap.parse_args()

    df = pd.read_csv(args.trajectory_csv)
    axes = [c for c in ("x", "y", "z") if c in df.columns]
    print("n samples:", df["t"].nunique(), " n bodies:", df["id"].nunique())

    if args.center is not None:
        ref = df[df["id"] == args.center].set_index("t")[axes]
        if ref.empty:
            raise ValueError(f"body {args.center!r} not in {args.trajectory_csv}")
        df = df.join(ref, on="t", rsuffix="_ref")
        for ax in axes:
            df[ax] = df[ax] - df[f"{ax}_ref"]

    df["r"] = np.sqrt(sum(df[ax]**2 for ax in axes))
    df["speed"] = np.sqrt(sum(df[f"v{ax}"]**2 for ax in axes))

    print("\nPer-body distance / speed ranges:")
    summary = df.groupby("name").agg(
        r_min=("r", "min"),
        r_max=("r", "max"),
        speed_min=("speed", "min"),
        speed_max=("speed", "max"),
    )
    print(summary)


if __name__ == "__main__":
    main()
