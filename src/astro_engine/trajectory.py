from __future__ import annotations

import logging
import time

import numpy as np
from numpy.typing import NDArray
from tqdm import tqdm

from .collisions import find_collisions
from .diagnostics import relative_drift
from .simulation import PhysicsSimulation, PhysicsSimulation3D

logger = logging.getLogger(__name__)


def _sample(sim: PhysicsSimulation) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    # (n_bodies, dim), also when there are no bodies
    shape = (len(sim.bodies), sim.dimension)
    r = np.array([b.position.to_array() for b in sim.bodies], dtype=np.float64).reshape(shape)
    v = np.array([b.velocity.to_array() for b in sim.bodies], dtype=np.float64).reshape(shape)
    return r, v


def run_recorded(sim: PhysicsSimulation,
                 steps: int,
                 record_every: int = 1,
                 max_store_points: int = 20000,
                 decimate_to: int = 5000,
                 progress: bool = False) -> dict:
    """Step the driver `steps` times and keep a sampled trajectory.

    Returns a dict with sample times `T`, `positions` and `velocities` of
    shape (n_samples, n_bodies, dim), body `ids`, energy at both ends and
    its relative drift, angular momentum at both ends for 3D drivers, and
    every collision detected at a sampled step as (time, id_a, id_b).

    The body set must not change while recording. Collisions are only
    reported; bodies keep moving through each other.
    """
    record_every = max(1, int(record_every))
    ids = [b.id for b in sim.bodies]
    is_3d = isinstance(sim, PhysicsSimulation3D)

    E0 = sim.get_total_energy()
    L0 = sim.get_total_angular_momentum() if is_3d else None

    r, v = _sample(sim)
    t_list: list[float] = [sim.time]
    r_list: list[NDArray[np.float64]] = [r]
    v_list: list[NDArray[np.float64]] = [v]
    collisions: list[tuple[float, str, str]] = []
    seen_pairs: set[tuple[str, str]] = set()

    start = time.time()
    it = range(1, int(steps) + 1)
    for k in (tqdm(it, desc="steps") if progress else it):
        sim.step()
        if k % record_every != 0 and k != steps:
            continue

        r, v = _sample(sim)
        if not (np.all(np.isfinite(r)) and np.all(np.isfinite(v))):
            logger.warning("non-finite state at t=%g (step %d); stopping", sim.time, k)
            t_list.append(sim.time); r_list.append(r); v_list.append(v)
            break
        t_list.append(sim.time)
        r_list.append(r)
        v_list.append(v)

        for pair in find_collisions(sim.bodies):
            collisions.append((float(sim.time), pair[0], pair[1]))
            if pair not in seen_pairs:
                seen_pairs.add(pair)
                logger.warning("collision detected between %s and %s at t=%g", pair[0], pair[1], sim.time)

        # memory guard
        if len(t_list) > max_store_points:
            idx = np.linspace(0, len(t_list)-1, decimate_to).astype(int)
            t_list = [t_list[i] for i in idx]
            r_list = [r_list[i] for i in idx]
            v_list = [v_list[i] for i in idx]

    E_end = sim.get_total_energy()
    out = {
        "T": np.array(t_list, dtype=float),
        "positions": np.stack(r_list, axis=0),
        "velocities": np.stack(v_list, axis=0),
        "ids": ids,
        "names": [b.name for b in sim.bodies],
        "E0": float(E0),
        "E_end": float(E_end),
        "dE_rel": float(relative_drift(E0, E_end)),
        "collisions": collisions,
        "runtime_sec": float(time.time() - start),
    }
    if is_3d:
        L_end = sim.get_total_angular_momentum()
        out["L0"] = L0.to_array()
        out["L_end"] = L_end.to_array()
    return out


def trajectory_columns(result: dict) -> list[str]:
    """Column names of `trajectory_rows` for this run's dimension."""
    axes = "xyz"[:result["positions"].shape[2]]
    return ["t", "id", "name"] + list(axes) + [f"v{ax}" for ax in axes]


def trajectory_rows(result: dict) -> list[dict]:
    """Flatten a recorded run to one row per (sample, body) for tabular storage."""
    T = result["T"]
    R = result["positions"]
    V = result["velocities"]
    axes = "xyz"[:R.shape[2]]

    rows = []
    for s in range(len(T)):
        for i, body_id in enumerate(result["ids"]):
            row = {"t": float(T[s]), "id": body_id, "name": result["names"][i]}
            for a, ax in enumerate(axes):
                row[ax] = float(R[s, i, a])
            for a, ax in enumerate(axes):
                row[f"v{ax}"] = float(V[s, i, a])
            rows.append(row)
    return rows
