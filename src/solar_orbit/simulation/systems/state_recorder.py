from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from solar_orbit.core.diagnostics import LoggerLike
from solar_orbit.simulation.engine import SimulationLog
from solar_orbit.simulation.scenario import SolarSystem


@dataclass
class StateRecorderSystem:
    name: str = "state_recorder"
    center: Optional[str] = None
    logger: Optional[LoggerLike] = None

    def on_step(self, julian_day: float, solar_system: SolarSystem, log: SimulationLog) -> None:
        log.center = self.center
        positions = solar_system.positions_at(julian_day, center=self.center, logger=self.logger)
        for name, r in positions.items():
            log.record_position(name, julian_day, r)
