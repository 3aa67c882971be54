from __future__ import annotations

from typing import Iterable, TypeVar, Union

from scipy import constants

from .bodies import CelestialBody, CelestialBody3D
from .vector import Vector2D, Vector3D

# CODATA value, 6.67430e-11 m^3 kg^-1 s^-2
GRAVITATIONAL_CONSTANT: float = float(constants.G)

V = TypeVar("V", Vector2D, Vector3D)
Body = Union[CelestialBody, CelestialBody3D]


def gravitational_force(m1: float, m2: float, distance: float,
                        G: float = GRAVITATIONAL_CONSTANT) -> float:
    """Newton's law F = G m1 m2 / r^2 (scalar, Newtons)."""
    if distance == 0:
        raise ZeroDivisionError("Distance cannot be zero")
    return (G * m1 * m2) / (distance * distance)


def gravitational_force_vector(m1: float, pos1: V, m2: float, pos2: V,
                               G: float = GRAVITATIONAL_CONSTANT) -> V:
    """Force on the mass at pos1 due to the mass at pos2 (points toward pos2).

    Coincident positions give the zero vector rather than an error, unlike
    `gravitational_force`.
    """
    displacement = pos2.sub(pos1)
    distance = displacement.magnitude()
    if distance == 0:
        return displacement.zero()

    magnitude = gravitational_force(m1, m2, distance, G)
    return displacement.normalize().mul(magnitude)


def force_between_bodies(body1: Body, body2: Body,
                         G: float = GRAVITATIONAL_CONSTANT):
    """Force experienced by body1 due to body2."""
    return gravitational_force_vector(body1.mass, body1.position,
                                      body2.mass, body2.position, G)


def total_force_on_body(target: Body, bodies: Iterable[Body],
                        G: float = GRAVITATIONAL_CONSTANT):
    """Sum of pairwise forces on `target` from every body with a different id.

    Self-exclusion compares ids, so any other record sharing the target's id
    contributes nothing either.
    """
    total = target.position.zero()
    for other in bodies:
        if other.id == target.id:
            continue
        total = total.add(force_between_bodies(target, other, G))
    return total
