import numpy as np
import pytest

from astro_engine.bodies import create_celestial_body, create_celestial_body_3d
from astro_engine.forces import (
    GRAVITATIONAL_CONSTANT,
    force_between_bodies,
    gravitational_force,
    gravitational_force_vector,
    total_force_on_body,
)
from astro_engine.vector import Vector2D, Vector3D


def make_body(id, mass, x, y, vx=0.0, vy=0.0):
    return create_celestial_body(id, id.upper(), mass, position=Vector2D(x, y), velocity=Vector2D(vx, vy))


def test_default_gravitational_constant():
    assert GRAVITATIONAL_CONSTANT == 6.67430e-11


def test_scalar_force():
    assert gravitational_force(2.0, 3.0, 2.0, G=1.0) == 1.5
    F = gravitational_force(1.989e30, 5.972e24, 1.496e11)
    assert F == pytest.approx(3.54e22, rel=1e-2), f"Sun-Earth force off: {F}"


def test_scalar_force_rejects_zero_distance():
    with pytest.raises(ZeroDivisionError):
        gravitational_force(1.0, 1.0, 0.0)


def test_vector_force_points_toward_other_mass():
    F = gravitational_force_vector(5.0, Vector2D(0.0, 0.0), 2.0, Vector2D(10.0, 0.0), G=1.0)
    assert F.x == pytest.approx(0.1)
    assert F.y == 0.0


def test_vector_force_coincident_positions_is_zero():
    # the scalar form raises here; the vector form returns zero
    F = gravitational_force_vector(1.0, Vector2D(1.0, 1.0), 1.0, Vector2D(1.0, 1.0))
    assert F == Vector2D(0.0, 0.0)
    F3 = gravitational_force_vector(1.0, Vector3D(1.0, 1.0, 1.0), 1.0, Vector3D(1.0, 1.0, 1.0))
    assert F3 == Vector3D(0.0, 0.0, 0.0)


def test_newtons_third_law():
    rng = np.random.default_rng(3)
    for _ in range(25):
        m = rng.uniform(1e20, 1e30, size=2)
        p = rng.normal(size=(2, 3)) * 1e11
        a = create_celestial_body_3d("a", "A", m[0], position=Vector3D.from_array(p[0]))
        b = create_celestial_body_3d("b", "B", m[1], position=Vector3D.from_array(p[1]))
        fab = force_between_bodies(a, b)
        fba = force_between_bodies(b, a)
        np.testing.assert_allclose(fab.to_array(), -fba.to_array(), rtol=1e-12, atol=0.0)


def test_total_force_excludes_self():
    a = make_body("a", 1e24, 1.0, 2.0)
    assert total_force_on_body(a, [a]) == Vector2D(0.0, 0.0)


def test_total_force_skips_every_body_sharing_the_id():
    a = make_body("a", 1.0, 0.0, 0.0)
    twin = make_body("a", 1.0, 5.0, 0.0)
    assert total_force_on_body(a, [a, twin], G=1.0) == Vector2D(0.0, 0.0)


def test_total_force_is_sum_of_pairs():
    a = make_body("a", 1.0, 0.0, 0.0)
    b = make_body("b", 2.0, 3.0, 0.0)
    c = make_body("c", 4.0, 0.0, -2.0)
    total = total_force_on_body(a, [a, b, c], G=1.0)
    expected = force_between_bodies(a, b, 1.0).add(force_between_bodies(a, c, 1.0))
    assert total.x == pytest.approx(expected.x)
    assert total.y == pytest.approx(expected.y)
    assert total.x == pytest.approx(2.0 / 9.0)
    assert total.y == pytest.approx(-1.0)


def test_total_force_keeps_vector_dimension():
    a = create_celestial_body_3d("a", "A", 1.0)
    b = create_celestial_body_3d("b", "B", 1.0, position=Vector3D(0.0, 0.0, 2.0))
    F = total_force_on_body(a, [a, b], G=1.0)
    assert isinstance(F, Vector3D)
    assert F == Vector3D(0.0, 0.0, 0.25)
