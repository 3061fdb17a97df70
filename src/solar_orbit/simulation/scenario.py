from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from solar_orbit.core.constants import ORIGIN, validate_settings
from solar_orbit.core.diagnostics import LoggerLike
from solar_orbit.core.frames import Vector3, sub
from solar_orbit.objects.body import Body
from solar_orbit.objects.catalog import solar_system_bodies


@dataclass
class SolarSystem:
    """
    Container for the bodies of a run.
    Keep this pure: just data + lookup, no stepping logic.
    """
    name: str
    bodies: Dict[str, Body] = field(default_factory=dict)

    @classmethod
    def from_catalog(cls, name: str = "Solar System") -> "SolarSystem":
        validate_settings()
        system = cls(name=name)
        for body in solar_system_bodies():
            system.add_body(body)
        return system

    def add_body(self, body: Body) -> None:
        if body.name in self.bodies:
            raise ValueError(f"Duplicate body name: {body.name}")
        self.bodies[body.name] = body

    def body_list(self) -> List[Body]:
        return list(self.bodies.values())

    def find_body(self, name: str) -> Optional[Body]:
        return self.bodies.get(name)

    def positions_at(self, julian_day: float, center: Optional[str] = None,
                     logger: Optional[LoggerLike] = None) -> Dict[str, Vector3]:
        """
        Position of every body at julian_day, heliocentric or relative to the
        named center body.
        """
        origin = ORIGIN
        if center is not None:
            center_body = self.find_body(center)
            if center_body is None:
                raise ValueError(f"Unknown center body: {center}")
            origin = center_body.position_at(julian_day, logger=logger)

        return {
            name: sub(body.position_at(julian_day, logger=logger), origin)
            for name, body in self.bodies.items()
        }
