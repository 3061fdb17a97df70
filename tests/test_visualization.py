"""
Tests for JSON export and the static plotly snapshot.
"""
import json
import logging

import pytest

from solar_orbit.core.constants import J2000_JD
from solar_orbit.objects.body import Body
from solar_orbit.objects.catalog import SUN
from solar_orbit.physics.orbit import OrbitalElements
from solar_orbit.simulation.engine import Engine, SimulationLog
from solar_orbit.simulation.scenario import SolarSystem
from solar_orbit.simulation.systems.state_recorder import StateRecorderSystem
from solar_orbit.visualization.export_log import export_log_to_json, export_orbit_bundle
from solar_orbit.visualization.plotly_viewer import build_static_figure, render_static_scene


@pytest.fixture
def system():
    return SolarSystem.from_catalog()


@pytest.fixture
def log(system):
    engine = Engine(dt_days=10.0, systems=[StateRecorderSystem(center="Earth")])
    return engine.run(system, J2000_JD, J2000_JD + 30.0)


def test_export_log_to_json(tmp_path, log):
    out = export_log_to_json(log, str(tmp_path / "positions.json"))
    data = json.loads((tmp_path / "positions.json").read_text(encoding="utf-8"))

    assert out.endswith("positions.json")
    assert data["center"] == "Earth"
    assert len(data["body_positions"]["Mars"]) == 4
    assert data["body_positions"]["Earth"][0] == {"jd": J2000_JD, "r": [0.0, 0.0, 0.0]}


def test_export_orbit_bundle(tmp_path, system, log):
    path = tmp_path / "nested" / "bundle.json"
    export_orbit_bundle(system, log, str(path), segment_count=12)
    data = json.loads(path.read_text(encoding="utf-8"))

    assert data["julian_days"] == [J2000_JD, J2000_JD + 10.0, J2000_JD + 20.0, J2000_JD + 30.0]
    assert set(data["positions"]) == set(system.bodies)
    assert all(len(v) == 4 for v in data["positions"].values())

    mars = data["bodies"]["Mars"]
    assert len(mars["path"]) == 13
    assert mars["path"][0] == mars["path"][-1]
    assert len(mars["perihelion"]) == 3
    assert data["bodies"]["Sun"]["perihelion"] == [0.0, 0.0, 0.0]


def test_export_bundle_requires_positions(tmp_path, system):
    with pytest.raises(ValueError, match="No body positions"):
        export_orbit_bundle(system, SimulationLog(), str(tmp_path / "x.json"))


def test_export_bundle_rejects_ragged_log(tmp_path, system):
    log = SimulationLog()
    log.record_position("Earth", J2000_JD, (1.0, 0.0, 0.0))
    log.record_position("Earth", J2000_JD + 1.0, (1.0, 0.0, 0.0))
    log.record_position("Mars", J2000_JD, (2.0, 0.0, 0.0))
    with pytest.raises(ValueError, match="length mismatch"):
        export_orbit_bundle(system, log, str(tmp_path / "x.json"))


def test_build_static_figure_traces(system):
    fig = build_static_figure(system, J2000_JD, segment_count=16)
    names = [trace.name for trace in fig.data]

    # Sun marker + (orbit, perihelion, marker) per planet
    assert len(fig.data) == 1 + 3 * 8
    assert "Earth orbit" in names
    assert "Mars perihelion" in names
    assert "Sun orbit" not in names
    assert len(next(t for t in fig.data if t.name == "Earth orbit").x) == 17


def test_build_static_figure_without_perihelia(system):
    fig = build_static_figure(system, J2000_JD, show_perihelia=False)
    assert len(fig.data) == 1 + 2 * 8


def test_build_static_figure_skips_malformed_orbit(caplog):
    comet = Body(
        name="Comet",
        elements=OrbitalElements(a_au=3.0, e=2.0, inc_deg=10.0, raan_deg=0.0,
                                 argp_deg=0.0, M0_deg=0.0, period_days=1900.0),
    )
    system = SolarSystem(name="Broken")
    system.add_body(SUN)
    system.add_body(comet)

    with caplog.at_level(logging.WARNING, logger="solar_orbit"):
        fig = build_static_figure(system, J2000_JD, segment_count=8)

    names = [trace.name for trace in fig.data]
    assert names == ["Sun", "Comet"]
    comet_marker = fig.data[1]
    assert (comet_marker.x[0], comet_marker.y[0], comet_marker.z[0]) == (0.0, 0.0, 0.0)
    assert any("skipping orbit of Comet" in rec.getMessage() for rec in caplog.records)


def test_render_static_scene_writes_html(tmp_path, system):
    out = render_static_scene(system, J2000_JD, str(tmp_path / "scene" / "solar.html"), segment_count=8)
    assert (tmp_path / "scene" / "solar.html").exists()
    assert out.endswith("solar.html")
