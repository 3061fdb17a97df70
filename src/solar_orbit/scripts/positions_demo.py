import logging
from datetime import datetime, timezone

from solar_orbit.core.timescale import to_julian_day
from solar_orbit.objects.catalog import moons_of
from solar_orbit.simulation.engine import Engine
from solar_orbit.simulation.scenario import SolarSystem
from solar_orbit.simulation.systems.state_recorder import StateRecorderSystem
from solar_orbit.visualization.export_log import export_orbit_bundle
from solar_orbit.visualization.plotly_viewer import render_static_scene

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("positions_demo")

system = SolarSystem.from_catalog()
jd = to_julian_day(datetime(2024, 3, 20, 3, 6, tzinfo=timezone.utc))

for name, r in system.positions_at(jd).items():
    log.info("%-8s x=%8.3f y=%8.3f z=%8.3f", name, r[0], r[1], r[2])

jupiter = system.find_body("Jupiter")
for moon in moons_of("Jupiter"):
    r = moon.position_at(jd, jupiter.position_at(jd))
    log.info("%-8s x=%8.3f y=%8.3f z=%8.3f", moon.name, r[0], r[1], r[2])

engine = Engine(dt_days=5.0, systems=[StateRecorderSystem(center="Earth")])
sim_log = engine.run(system, jd, jd + 365.0)

bundle_path = export_orbit_bundle(system, sim_log, "out/orbit_bundle.json")
html_path = render_static_scene(system, jd, "out/solar_system.html")

log.info("Wrote %s", bundle_path)
log.info("Wrote %s", html_path)
