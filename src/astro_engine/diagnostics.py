from __future__ import annotations

from typing import Sequence

from .bodies import CelestialBody3D
from .forces import GRAVITATIONAL_CONSTANT, Body
from .vector import Vector3D


def kinetic_energy(bodies: Sequence[Body]) -> float:
    KE = 0.0
    for body in bodies:
        speed = body.velocity.magnitude()
        KE += 0.5 * body.mass * speed**2
    return KE


def potential_energy(bodies: Sequence[Body], G: float = GRAVITATIONAL_CONSTANT) -> float:
    """Newtonian pair potential, each unordered pair (i<j) counted once."""
    PE = 0.0
    n = len(bodies)
    for i in range(n):
        for j in range(i+1, n):
            b1, b2 = bodies[i], bodies[j]
            distance = b1.position.distance_to(b2.position)
            if distance == 0:
                raise ZeroDivisionError("Distance cannot be zero")
            PE -= (G * b1.mass * b2.mass) / distance
    return PE


def total_energy(bodies: Sequence[Body], G: float = GRAVITATIONAL_CONSTANT) -> float:
    return kinetic_energy(bodies) + potential_energy(bodies, G)


def total_angular_momentum(bodies: Sequence[CelestialBody3D]) -> Vector3D:
    """L = sum r x (m v) about the origin."""
    L = Vector3D.zero()
    for body in bodies:
        momentum = body.velocity.mul(body.mass)
        L = L.add(body.position.cross(momentum))
    return L


def relative_drift(initial: float, final: float) -> float:
    """|final - initial| / |initial|; nan when initial is exactly zero."""
    if initial == 0:
        return float("nan")
    return abs((final - initial) / initial)
