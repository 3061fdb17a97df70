from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Tuple

from solar_orbit.core.frames import Vector3
from solar_orbit.simulation.scenario import SolarSystem


class System(Protocol):
    """
    Plugin interface for simulation systems.
    Each system runs per tick and can write to the log.
    """
    name: str

    def on_step(self, julian_day: float, solar_system: SolarSystem, log: "SimulationLog") -> None:
        ...


@dataclass
class SimulationLog:
    """
    Stores outputs from a simulation run.
    Keep it simple and serializable.
    """
    # Positions: body name -> list of (jd, position)
    body_positions: Dict[str, List[Tuple[float, Vector3]]] = field(default_factory=dict)

    # Body the positions are relative to (None = heliocentric)
    center: Optional[str] = None

    def record_position(self, name: str, julian_day: float, r: Vector3) -> None:
        self.body_positions.setdefault(name, []).append((julian_day, r))


@dataclass
class Engine:
    """
    Fixed-step sampler over Julian Days.
    Deterministic replay: given same system + dt + start/end => same output.
    """
    dt_days: float
    systems: List[System] = field(default_factory=list)

    def run(self, solar_system: SolarSystem, jd_start: float, jd_end: float) -> SimulationLog:
        if self.dt_days <= 0:
            raise ValueError("dt_days must be positive.")
        if jd_end < jd_start:
            raise ValueError("jd_end must be >= jd_start.")

        log = SimulationLog()

        # Ticks are computed from the index so long runs do not accumulate error;
        # inclusive end if it lands exactly
        n_ticks = int((jd_end - jd_start) / self.dt_days + 1e-9) + 1
        for i in range(n_ticks):
            jd = jd_start + i * self.dt_days
            for sys in self.systems:
                sys.on_step(jd, solar_system, log)

        return log
