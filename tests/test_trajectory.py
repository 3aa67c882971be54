import logging

import numpy as np
import pytest

from astro_engine.bodies import create_celestial_body, create_celestial_body_3d
from astro_engine.logging_config import setup_logging
from astro_engine.plotting import FigureConfig, plot_orbits, savefig
from astro_engine.presets import get_preset
from astro_engine.simulation import PhysicsSimulation, PhysicsSimulation3D
from astro_engine.trajectory import run_recorded, trajectory_columns, trajectory_rows
from astro_engine.vector import Vector2D, Vector3D


def test_recorded_run_shapes():
    sim = PhysicsSimulation(get_preset("sun_earth"), dt=86400.0)
    res = run_recorded(sim, 10, record_every=3)
    # t = 0, 3, 6, 9 days plus the final step
    assert res["T"].shape == (5,)
    np.testing.assert_allclose(res["T"], np.array([0, 3, 6, 9, 10]) * 86400.0)
    assert res["positions"].shape == (5, 2, 2)
    assert res["velocities"].shape == (5, 2, 2)
    assert res["ids"] == ["sun", "earth"]
    assert res["dE_rel"] < 1e-2
    assert res["collisions"] == []
    assert "L0" not in res
    np.testing.assert_allclose(res["positions"][-1, 1], sim.bodies[1].position.to_array())


def test_recorded_run_3d_has_angular_momentum():
    sim = PhysicsSimulation3D(get_preset("sun_earth", dimension=3), dt=86400.0)
    res = run_recorded(sim, 20, record_every=5)
    assert res["positions"].shape == (5, 2, 3)
    np.testing.assert_allclose(res["L_end"], res["L0"], rtol=1e-9)


def test_collisions_are_reported_not_resolved(caplog):
    a = create_celestial_body_3d("a", "A", 1.0, position=Vector3D(0.0, 0.0, 0.0), radius=1.0)
    b = create_celestial_body_3d("b", "B", 1.0, position=Vector3D(10.0, 0.0, 0.0),
                                 velocity=Vector3D(-2.0, 0.0, 0.0), radius=1.0)
    sim = PhysicsSimulation3D([a, b], G=0.0, dt=1.0)
    with caplog.at_level(logging.WARNING, logger="astro_engine.trajectory"):
        res = run_recorded(sim, 10)
    times = [t for t, _, _ in res["collisions"]]
    # gap closes at 2 m/s; overlap while |10 - 2t| <= 2
    assert times == [4.0, 5.0, 6.0]
    assert {(i, j) for _, i, j in res["collisions"]} == {("a", "b")}
    assert sum("collision detected" in r.message for r in caplog.records) == 1
    # bodies pass through each other
    assert b.position.x == pytest.approx(-10.0)


def test_decimation_caps_samples():
    sim = PhysicsSimulation(get_preset("sun_earth"), dt=3600.0)
    res = run_recorded(sim, 50, max_store_points=10, decimate_to=6)
    assert len(res["T"]) <= 10
    assert res["T"][0] == 0.0
    assert res["T"][-1] == pytest.approx(50 * 3600.0)
    assert res["positions"].shape[0] == len(res["T"])


def test_trajectory_rows():
    sim = PhysicsSimulation([
        create_celestial_body("a", "A", 1.0, position=Vector2D(0.0, 0.0)),
        create_celestial_body("b", "B", 1.0, position=Vector2D(1.0, 0.0)),
    ], G=1.0, dt=0.1)
    res = run_recorded(sim, 3)
    rows = trajectory_rows(res)
    assert len(rows) == 4 * 2
    assert set(rows[0]) == {"t", "id", "name", "x", "y", "vx", "vy"}
    assert rows[1]["id"] == "b" and rows[1]["x"] == 1.0


def test_run_without_bodies_keeps_array_shape():
    res = run_recorded(PhysicsSimulation(dt=1.0), 2)
    assert res["positions"].shape == (3, 0, 2)
    assert res["velocities"].shape == (3, 0, 2)
    assert trajectory_rows(res) == []
    assert trajectory_columns(res) == ["t", "id", "name", "x", "y", "vx", "vy"]

    res3 = run_recorded(PhysicsSimulation3D(dt=1.0), 1)
    assert res3["positions"].shape == (2, 0, 3)
    assert trajectory_rows(res3) == []
    assert trajectory_columns(res3)[-3:] == ["vx", "vy", "vz"]


def test_plot_orbits_draws_each_body():
    sim = PhysicsSimulation(get_preset("sun_earth_moon"), dt=86400.0)
    res = run_recorded(sim, 5)
    fig = plot_orbits(res, FigureConfig(), title="test")
    ax = fig.axes[0]
    # one path and one end marker per body
    assert len(ax.lines) == 6
    assert [t.get_text() for t in ax.get_legend().get_texts()] == ["Sun", "Earth", "Moon"]


def test_setup_logging_does_not_duplicate_console_handlers(tmp_path):
    log = setup_logging("astro_engine.test_logging", level="DEBUG")
    setup_logging("astro_engine.test_logging", level="DEBUG")
    console = [h for h in log.handlers
               if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)]
    assert len(console) == 1
    log_file = tmp_path / "logs" / "run.log"
    setup_logging("astro_engine.test_logging_file", level="INFO", log_file=log_file)
    assert log_file.parent.is_dir()


def test_savefig_uses_configured_format(tmp_path):
    sim = PhysicsSimulation(get_preset("sun_earth"), dt=86400.0)
    res = run_recorded(sim, 3)

    fig = plot_orbits(res, FigureConfig(fmt="svg"))
    path = savefig(fig, str(tmp_path / "orbits"), FigureConfig(fmt="svg"))
    assert path == str(tmp_path / "orbits.svg")
    assert "<svg" in (tmp_path / "orbits.svg").read_text(encoding="utf-8")

    # an explicit extension overrides cfg.fmt
    path = savefig(fig, str(tmp_path / "orbits.png"), FigureConfig(fmt="svg", dpi=50))
    assert path == str(tmp_path / "orbits.png")
    assert (tmp_path / "orbits.png").read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
