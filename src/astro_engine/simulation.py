from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional

from .bodies import CelestialBody3D
from .diagnostics import total_angular_momentum, total_energy
from .forces import GRAVITATIONAL_CONSTANT, Body, total_force_on_body
from .integrate import update_body_euler
from .vector import Vector2D, Vector3D

logger = logging.getLogger(__name__)

DEFAULT_DT = 1000.0  # seconds


@dataclass
class SimulationState:
    """Snapshot of a driver: independent body copies plus the parameters."""
    bodies: List[Body]
    time: float
    G: float
    dt: float
    # seconds since the previous runner frame; only set by SimulationRunner
    frame_time: Optional[float] = None


class PhysicsSimulation:
    """Direct-summation N-body driver in the plane.

    Each `step()` is two-phase: forces for every body are computed from the
    pre-step positions and stored by id, then every body is integrated with
    its stored force. Cost is O(n^2) per step.
    """

    dimension = 2
    zero_vector = Vector2D.zero

    def __init__(self,
                 bodies: Optional[Iterable[Body]] = None,
                 G: float = GRAVITATIONAL_CONSTANT,
                 dt: float = DEFAULT_DT):
        self.bodies: List[Body] = list(bodies) if bodies is not None else []
        self.G = G
        self.dt = dt
        self.time = 0.0
        self.is_running = False

    def add_body(self, body: Body) -> None:
        self.bodies.append(body)
        logger.debug("added body id=%s name=%s (n=%d)", body.id, body.name, len(self.bodies))

    def remove_body(self, id: str) -> bool:
        """Remove the first body with this id. Returns whether one was removed."""
        for i, body in enumerate(self.bodies):
            if body.id == id:
                del self.bodies[i]
                logger.debug("removed body id=%s (n=%d)", id, len(self.bodies))
                return True
        return False

    def compute_forces(self) -> Dict[str, Any]:
        """Total force per body id from the current positions.

        Duplicate ids overwrite each other (last one wins).
        """
        forces = {}
        for body in self.bodies:
            forces[body.id] = total_force_on_body(body, self.bodies, self.G)
        return forces

    def step(self) -> None:
        forces = self.compute_forces()
        for body in self.bodies:
            force = forces.get(body.id)
            if force is None:
                force = self.zero_vector()
            update_body_euler(body, force, self.dt)
        self.time += self.dt

    def simulate(self, steps: int) -> None:
        for _ in range(steps):
            self.step()

    def _snapshot_body(self, body: Body) -> Body:
        return replace(body, position=body.position.clone(), velocity=body.velocity.clone())

    def get_state(self) -> SimulationState:
        return SimulationState(
            bodies=[self._snapshot_body(b) for b in self.bodies],
            time=self.time,
            G=self.G,
            dt=self.dt,
        )

    def get_total_energy(self) -> float:
        """Kinetic plus pair potential energy (J), recomputed on each call.

        Raises ZeroDivisionError if two bodies share a position.
        """
        return total_energy(self.bodies, self.G)

    def reset(self) -> None:
        """Zero the clock and clear the running flag.

        Body positions and velocities are left untouched; rebuild the bodies
        for a full restart.
        """
        self.time = 0.0
        self.is_running = False
        logger.debug("simulation reset (bodies kept: %d)", len(self.bodies))


class PhysicsSimulation3D(PhysicsSimulation):
    """Same driver in three dimensions, with angular momentum diagnostics."""

    dimension = 3
    zero_vector = Vector3D.zero

    def _snapshot_body(self, body: CelestialBody3D) -> CelestialBody3D:
        L = body.angular_momentum.clone() if body.angular_momentum is not None else None
        return replace(body,
                       position=body.position.clone(),
                       velocity=body.velocity.clone(),
                       angular_momentum=L)

    def get_total_angular_momentum(self) -> Vector3D:
        return total_angular_momentum(self.bodies)
