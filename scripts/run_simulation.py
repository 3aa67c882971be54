#!/usr/bin/env python
from __future__ import annotations

import os
import csv
import json
import argparse

from astro_engine.config import load_scenario_config, build_simulation
from astro_engine.logging_config import setup_logging
from astro_engine.trajectory import run_recorded, trajectory_columns, trajectory_rows


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", required=True, help="Path to scenario JSON config")
    ap.add_argument("--steps", type=int, default=None, help="Override sim.steps")
    ap.add_argument("--log_level", default="INFO")
    args = ap.parse_args()

    setup_logging(level=args.log_level)

    cfg = load_scenario_config(args.config)
    out_dir = cfg.output.out_dir
    os.makedirs(out_dir, exist_ok=True)

    # save config snapshot
    with open(args.config, "r", encoding="utf-8") as f:
        cfg_raw = json.load(f)
    with open(os.path.join(out_dir, "config_used.json"), "w", encoding="utf-8") as f:
        json.dump(cfg_raw, f, indent=2)

    sim = build_simulation(cfg)
    steps = args.steps if args.steps is not None else cfg.sim.steps
    res = run_recorded(sim, steps,
                       record_every=cfg.sim.record_every,
                       max_store_points=cfg.sim.max_store_points,
                       decimate_to=cfg.sim.decimate_to,
                       progress=cfg.output.progress)

    out_csv = os.path.join(out_dir, "trajectory.csv")
    tmp_csv = out_csv + ".tmp"
    rows = trajectory_rows(res)
    with open(tmp_csv, "w", newline="", encoding="utf-8") as f:
        # header from the run itself, so a run without bodies still gets one
        writer = csv.DictWriter(f, fieldnames=trajectory_columns(res))
        writer.writeheader()
        writer.writerows(rows)
    os.replace(tmp_csv, out_csv)

    summary = {
        "n_bodies": len(res["ids"]),
        "steps": int(steps),
        "t_end": float(res["T"][-1]),
        "E0": res["E0"],
        "E_end": res["E_end"],
        "dE_rel": res["dE_rel"],
        "n_collision_samples": len(res["collisions"]),
        "runtime_sec": res["runtime_sec"],
    }
    if "L0" in res:
        summary["L0"] = res["L0"].tolist()
        summary["L_end"] = res["L_end"].tolist()
    with open(os.path.join(out_dir, "summary.json"), "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)

    print("Saved:", out_csv)
    print("Energy drift: {:.3e}".format(res["dE_rel"]))


if __name__ == "__main__":
    main()
