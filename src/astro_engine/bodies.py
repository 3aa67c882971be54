from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .vector import Vector2D, Vector3D

DEFAULT_RADIUS = 1000.0  # meters
DEFAULT_COLOR = "#ffffff"


@dataclass
class CelestialBody:
    """Point mass with a finite radius used only for collision tests.

    Units are SI: kg, m, m/s. `position` and `velocity` are replaced with new
    vectors every step; the record itself is updated in place.
    """
    id: str
    name: str
    mass: float
    position: Vector2D = field(default_factory=Vector2D.zero)
    velocity: Vector2D = field(default_factory=Vector2D.zero)
    radius: float = DEFAULT_RADIUS
    color: str = DEFAULT_COLOR


@dataclass
class CelestialBody3D:
    id: str
    name: str
    mass: float
    position: Vector3D = field(default_factory=Vector3D.zero)
    velocity: Vector3D = field(default_factory=Vector3D.zero)
    radius: float = DEFAULT_RADIUS
    color: str = DEFAULT_COLOR
    # orbital inclination in radians; cosmetic, not used by the dynamics
    inclination: float = 0.0
    # cached per-body value, never read by the driver
    angular_momentum: Optional[Vector3D] = None


def create_celestial_body(id: str, name: str, mass: float, **params) -> CelestialBody:
    """Build a 2D body, filling position/velocity (origin, at rest),
    radius (1 km) and color (white) when they are not given."""
    return CelestialBody(id=id, name=name, mass=mass, **params)


def create_celestial_body_3d(id: str, name: str, mass: float, **params) -> CelestialBody3D:
    return CelestialBody3D(id=id, name=name, mass=mass, **params)
