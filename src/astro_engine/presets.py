from __future__ import annotations

from typing import Callable, Dict, List, Optional

from .bodies import CelestialBody, CelestialBody3D, create_celestial_body, create_celestial_body_3d
from .vector import Vector2D, Vector3D

# Approximate solar-system values (SI units)
SUN_MASS = 1.989e30
SUN_RADIUS = 6.96e8
EARTH_MASS = 5.972e24
EARTH_RADIUS = 6.371e6
EARTH_ORBIT = 1.496e11
EARTH_SPEED = 29780.0
MOON_MASS = 7.342e22
MOON_RADIUS = 1.737e6
MOON_ORBIT = 3.844e8
MOON_SPEED = 1022.0  # relative to Earth


# --- planar ---------------------------------------------------------------

def make_sun(id: str = "sun", position: Optional[Vector2D] = None) -> CelestialBody:
    return create_celestial_body(
        id, "Sun", SUN_MASS,
        position=position if position is not None else Vector2D(0.0, 0.0),
        velocity=Vector2D(0.0, 0.0),
        radius=SUN_RADIUS,
        color="#FDB813",
    )


def make_earth(id: str = "earth", position: Optional[Vector2D] = None) -> CelestialBody:
    return create_celestial_body(
        id, "Earth", EARTH_MASS,
        position=position if position is not None else Vector2D(EARTH_ORBIT, 0.0),
        velocity=Vector2D(0.0, EARTH_SPEED),
        radius=EARTH_RADIUS,
        color="#6B93D6",
    )


def make_moon(id: str = "moon", earth_position: Optional[Vector2D] = None) -> CelestialBody:
    """Moon placed one lunar distance beyond Earth along +x, moving with Earth."""
    if earth_position is None:
        earth_position = Vector2D(EARTH_ORBIT, 0.0)
    return create_celestial_body(
        id, "Moon", MOON_MASS,
        position=earth_position.add(Vector2D(MOON_ORBIT, 0.0)),
        velocity=Vector2D(0.0, EARTH_SPEED + MOON_SPEED),
        radius=MOON_RADIUS,
        color="#C0C0C0",
    )


# --- 3D -------------------------------------------------------------------

def make_sun_3d(id: str = "sun", position: Optional[Vector3D] = None) -> CelestialBody3D:
    return create_celestial_body_3d(
        id, "Sun", SUN_MASS,
        position=position if position is not None else Vector3D(0.0, 0.0, 0.0),
        velocity=Vector3D(0.0, 0.0, 0.0),
        radius=SUN_RADIUS,
        color="#FDB813",
        inclination=0.0,
    )


def make_earth_3d(id: str = "earth", position: Optional[Vector3D] = None) -> CelestialBody3D:
    # Earth's inclination is zero by definition (ecliptic reference plane)
    return create_celestial_body_3d(
        id, "Earth", EARTH_MASS,
        position=position if position is not None else Vector3D(EARTH_ORBIT, 0.0, 0.0),
        velocity=Vector3D(0.0, EARTH_SPEED, 0.0),
        radius=EARTH_RADIUS,
        color="#6B93D6",
        inclination=0.0,
    )


def make_moon_3d(id: str = "moon", earth_position: Optional[Vector3D] = None) -> CelestialBody3D:
    if earth_position is None:
        earth_position = Vector3D(EARTH_ORBIT, 0.0, 0.0)
    return create_celestial_body_3d(
        id, "Moon", MOON_MASS,
        position=earth_position.add(Vector3D(MOON_ORBIT, 0.0, 0.0)),
        velocity=Vector3D(0.0, EARTH_SPEED + MOON_SPEED, 0.0),
        radius=MOON_RADIUS,
        color="#C0C0C0",
        inclination=0.089,  # ~5.1 deg
    )


def make_mars_3d(id: str = "mars", position: Optional[Vector3D] = None) -> CelestialBody3D:
    return create_celestial_body_3d(
        id, "Mars", 6.39e23,
        position=position if position is not None else Vector3D(2.279e11, 0.0, 0.0),
        velocity=Vector3D(0.0, 24077.0, 0.0),
        radius=3.39e6,
        color="#CD5C5C",
        inclination=0.0323,  # ~1.85 deg
    )


def make_jupiter_3d(id: str = "jupiter", position: Optional[Vector3D] = None) -> CelestialBody3D:
    return create_celestial_body_3d(
        id, "Jupiter", 1.898e27,
        position=position if position is not None else Vector3D(7.786e11, 0.0, 0.0),
        velocity=Vector3D(0.0, 13070.0, 0.0),
        radius=6.99e7,
        color="#D2691E",
        inclination=0.0227,  # ~1.3 deg
    )


def make_comet_3d(id: str = "comet", position: Optional[Vector3D] = None) -> CelestialBody3D:
    return create_celestial_body_3d(
        id, "Comet", 1e13,
        position=position if position is not None else Vector3D(5e11, 0.0, 2e11),
        velocity=Vector3D(-10000.0, 20000.0, 5000.0),
        radius=5e3,
        color="#87CEEB",
        inclination=0.785,  # 45 deg
    )


def make_solar_system_3d() -> List[CelestialBody3D]:
    """Sun, Earth, Mars and Jupiter."""
    return [make_sun_3d(), make_earth_3d(), make_mars_3d(), make_jupiter_3d()]


PRESETS_2D: Dict[str, Callable[[], list]] = {
    "sun_earth": lambda: [make_sun(), make_earth()],
    "sun_earth_moon": lambda: [make_sun(), make_earth(), make_moon()],
}

PRESETS_3D: Dict[str, Callable[[], list]] = {
    "sun_earth": lambda: [make_sun_3d(), make_earth_3d()],
    "sun_earth_moon": lambda: [make_sun_3d(), make_earth_3d(), make_moon_3d()],
    "solar_system": make_solar_system_3d,
}


def get_preset(name: str, dimension: int = 2) -> list:
    """Fresh body list for a named scenario."""
    table = {2: PRESETS_2D, 3: PRESETS_3D}.get(dimension)
    if table is None:
        raise ValueError(f"dimension must be 2 or 3, got {dimension}")
    if name not in table:
        raise ValueError(f"unknown {dimension}D preset {name!r}; choose from {sorted(table)}")
    return table[name]()
