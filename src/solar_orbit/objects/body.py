from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from solar_orbit.core.constants import DEFAULT_PATH_SEGMENTS, MOON_KM_PER_UNIT
from solar_orbit.core.diagnostics import LoggerLike
from solar_orbit.core.frames import Vector3, add
from solar_orbit.physics.geometry import OrbitalPath, cached_path, cached_perihelion
from solar_orbit.physics.orbit import OrbitalElements, position


@dataclass(frozen=True)
class Body:
    """
    A catalogue body orbiting the central star.
    Purely kinematic: positions are recomputed on every call, never cached.
    """
    name: str
    elements: OrbitalElements
    radius_km: float = 0.0
    color: str = "#FFFFFF"

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Body name cannot be empty or whitespace.")

    @property
    def is_central(self) -> bool:
        return self.elements.is_central

    def position_at(self, julian_day: float, logger: Optional[LoggerLike] = None) -> Vector3:
        """Heliocentric position (fail-safe: origin on error)."""
        return position(self.elements, julian_day, logger=logger)

    def orbital_path(self, segment_count: int = DEFAULT_PATH_SEGMENTS) -> OrbitalPath:
        return cached_path(self.elements, segment_count)

    def perihelion_point(self) -> Vector3:
        return cached_perihelion(self.elements)


@dataclass(frozen=True)
class Moon:
    """
    A satellite of a planet.

    Only distance, eccentricity, inclination and phase are catalogued, so the
    orbit is placed with its node and periapsis on the reference x-axis.
    Distances are stored in km and scaled by km_per_unit into scene units.

    Phase: M0_deg is the mean anomaly at J2000, advanced by the same Kepler
    propagation as the planets, and the orbit lies in the reference x-y
    plane tilted by inc_deg. Older viewers drew a circle in the x-z plane
    with phase (JD mod period) / period, so moon positions do not match
    theirs.
    """
    name: str
    parent: str
    a_km: float
    e: float
    inc_deg: float
    period_days: float
    M0_deg: float = 0.0
    radius_km: float = 0.0
    color: str = "#FFFFFF"

    def elements(self, km_per_unit: float = MOON_KM_PER_UNIT) -> OrbitalElements:
        return OrbitalElements(
            a_au=self.a_km / km_per_unit,
            e=self.e,
            inc_deg=self.inc_deg,
            raan_deg=0.0,
            argp_deg=0.0,
            M0_deg=self.M0_deg,
            period_days=self.period_days,
        )

    def offset_at(self, julian_day: float, km_per_unit: float = MOON_KM_PER_UNIT,
                  logger: Optional[LoggerLike] = None) -> Vector3:
        """Position relative to the parent planet."""
        return position(self.elements(km_per_unit), julian_day, logger=logger)

    def position_at(self, julian_day: float, parent_position: Vector3,
                    km_per_unit: float = MOON_KM_PER_UNIT, logger: Optional[LoggerLike] = None) -> Vector3:
        return add(parent_position, self.offset_at(julian_day, km_per_unit, logger=logger))
