from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Optional, Tuple
import json

from .bodies import create_celestial_body, create_celestial_body_3d
from .forces import GRAVITATIONAL_CONSTANT
from .presets import get_preset
from .runner import SimulationRunner
from .simulation import DEFAULT_DT, PhysicsSimulation, PhysicsSimulation3D, SimulationState
from .vector import Vector2D, Vector3D


@dataclass(frozen=True)
class Units:
    # SI by default; demos often rescale G instead of the masses
    G: float = GRAVITATIONAL_CONSTANT


@dataclass(frozen=True)
class SimParams:
    dt: float = DEFAULT_DT  # seconds per step
    steps: int = 1000

    # recorded runs: keep every N-th step
    record_every: int = 1

    # storage control
    max_store_points: int = 20000
    decimate_to: int = 5000


@dataclass(frozen=True)
class RunnerParams:
    # seconds between frames of the real-time runner
    interval: float = 1.0 / 60.0


@dataclass(frozen=True)
class OutputParams:
    out_dir: str = "out_runs"
    progress: bool = True


@dataclass(frozen=True)
class ScenarioConfig:
    dimension: int = 2
    # named body set from presets.py, added before `bodies`
    preset: Optional[str] = None
    # raw body records: id, name, mass, optional position/velocity/radius/color/inclination
    bodies: Tuple[Dict[str, Any], ...] = ()

    units: Units = Units()
    sim: SimParams = SimParams()
    runner: RunnerParams = RunnerParams()
    output: OutputParams = OutputParams()


def _dataclass_from_dict(cls, d: Dict[str, Any]):
    # allow passing dict for nested dataclasses
    kwargs = {}
    for f in cls.__dataclass_fields__.values():  # type: ignore
        if f.name not in d:
            continue
        val = d[f.name]
        if hasattr(f.type, "__dataclass_fields__") and isinstance(val, dict):
            kwargs[f.name] = _dataclass_from_dict(f.type, val)
        else:
            kwargs[f.name] = val
    return cls(**kwargs)  # type: ignore


def scenario_from_dict(d: Dict[str, Any]) -> ScenarioConfig:
    d = dict(d)
    if "units" in d:
        d["units"] = _dataclass_from_dict(Units, d["units"])
    if "sim" in d:
        d["sim"] = _dataclass_from_dict(SimParams, d["sim"])
    if "runner" in d:
        d["runner"] = _dataclass_from_dict(RunnerParams, d["runner"])
    if "output" in d:
        d["output"] = _dataclass_from_dict(OutputParams, d["output"])
    if "bodies" in d:
        d["bodies"] = tuple(d["bodies"])
    cfg = _dataclass_from_dict(ScenarioConfig, d)
    if cfg.dimension not in (2, 3):
        raise ValueError(f"dimension must be 2 or 3, got {cfg.dimension}")
    return cfg


def load_scenario_config(path: str) -> ScenarioConfig:
    with open(path, "r", encoding="utf-8") as f:
        d = json.load(f)
    return scenario_from_dict(d)


def _vector(values, dimension: int, what: str):
    if len(values) != dimension:
        raise ValueError(f"{what} needs {dimension} components, got {len(values)}")
    if dimension == 3:
        return Vector3D.from_array(values)
    return Vector2D.from_array(values)


def body_from_dict(d: Dict[str, Any], dimension: int = 2):
    missing = [k for k in ("id", "name", "mass") if k not in d]
    if missing:
        raise ValueError(f"body record missing {missing}: {d}")

    params: Dict[str, Any] = {}
    for key in ("position", "velocity"):
        if key in d:
            params[key] = _vector(d[key], dimension, f"body {d['id']!r} {key}")
    if "radius" in d:
        params["radius"] = float(d["radius"])
    if "color" in d:
        params["color"] = str(d["color"])

    if dimension == 3:
        if "inclination" in d:
            params["inclination"] = float(d["inclination"])
        return create_celestial_body_3d(str(d["id"]), str(d["name"]), float(d["mass"]), **params)
    return create_celestial_body(str(d["id"]), str(d["name"]), float(d["mass"]), **params)


def build_simulation(cfg: ScenarioConfig) -> PhysicsSimulation:
    bodies = []
    if cfg.preset:
        bodies.extend(get_preset(cfg.preset, cfg.dimension))
    bodies.extend(body_from_dict(b, cfg.dimension) for b in cfg.bodies)

    cls = PhysicsSimulation3D if cfg.dimension == 3 else PhysicsSimulation
    return cls(bodies, G=cfg.units.G, dt=cfg.sim.dt)


def build_runner(cfg: ScenarioConfig,
                 simulation: PhysicsSimulation,
                 on_update: Optional[Callable[[SimulationState], Any]] = None,
                 scheduler: Optional[Any] = None) -> SimulationRunner:
    """Real-time runner for `simulation`, paced by `cfg.runner.interval`."""
    return SimulationRunner(simulation, on_update,
                            interval=cfg.runner.interval,
                            scheduler=scheduler)


def to_json(obj: Any, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(obj), f, indent=2)
