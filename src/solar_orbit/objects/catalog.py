"""
Static catalogue of the Sun, planets and major moons.

Heliocentric elements at J2000. The inner four planets have stretched
semi-major axes (true values in the comments) so their orbits stay visible
next to the Sun in a scene; their periods are the real ones.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from solar_orbit.objects.body import Body, Moon
from solar_orbit.physics.orbit import OrbitalElements

SUN = Body(
    name="Sun",
    elements=OrbitalElements(a_au=0.0, e=0.0, inc_deg=0.0, raan_deg=0.0, argp_deg=0.0, M0_deg=0.0, period_days=0.0),
    radius_km=696340.0,
    color="#FFD700",
)

PLANETS: List[Body] = [
    Body("Mercury", OrbitalElements(0.8, 0.205630, 7.005, 48.331, 29.124, 174.796, 87.969),  # a = 0.387098
         radius_km=2439.7, color="#8C7853"),
    Body("Venus", OrbitalElements(1.2, 0.006772, 3.394, 76.680, 54.884, 50.115, 224.701),  # a = 0.723332
         radius_km=6051.8, color="#FFC649"),
    Body("Earth", OrbitalElements(1.5, 0.016708, 0.000, 348.739, 114.207, 357.517, 365.256),  # a = 1.0
         radius_km=6371.0, color="#6B93D6"),
    Body("Mars", OrbitalElements(2.0, 0.093400, 1.850, 49.558, 286.502, 19.373, 686.980),  # a = 1.523679
         radius_km=3389.5, color="#CD5C5C"),
    Body("Jupiter", OrbitalElements(5.204267, 0.048900, 1.304, 100.464, 273.867, 20.020, 4332.59),
         radius_km=69911.0, color="#D8CA9D"),
    Body("Saturn", OrbitalElements(9.582026, 0.055724, 2.485, 113.665, 339.392, 317.020, 10759.22),
         radius_km=58232.0, color="#FAD5A5"),
    Body("Uranus", OrbitalElements(19.191263, 0.047167, 0.772, 74.006, 96.998, 142.238, 30688.5),
         radius_km=25362.0, color="#4FD0E7"),
    Body("Neptune", OrbitalElements(30.068963, 0.008586, 1.769, 131.784, 273.187, 259.156, 60182.0),
         radius_km=24622.0, color="#4B70DD"),
]


def _moons(parent: str, rows) -> List[Moon]:
    return [
        Moon(name, parent, a_km=a_km, e=e, inc_deg=inc, radius_km=radius, color=color,
             period_days=period, M0_deg=m0)
        for (name, a_km, e, inc, radius, color, period, m0) in rows
    ]


# name, a (km), e, inc (deg), radius (km), color, period (days), M0 (deg)
PLANET_MOONS: Dict[str, List[Moon]] = {
    "Jupiter": _moons("Jupiter", [
        ("Io", 421700, 0.0041, 0.050, 1821.6, "#FFFFCC", 1.77, 0),
        ("Europa", 670900, 0.009, 0.470, 1560.8, "#E6E6FA", 3.55, 120),
        ("Ganymede", 1070400, 0.0013, 0.204, 2634.1, "#D3D3D3", 7.16, 240),
        ("Callisto", 1882700, 0.0074, 0.205, 2410.3, "#8B7355", 16.69, 180),
    ]),
    "Saturn": _moons("Saturn", [
        ("Mimas", 185539, 0.0196, 1.572, 198.2, "#C0C0C0", 0.94, 0),
        ("Enceladus", 238037, 0.0047, 0.009, 252.1, "#F5F5F5", 1.37, 120),
        ("Tethys", 294672, 0.0001, 1.091, 533.0, "#E0E0E0", 1.89, 240),
        ("Dione", 377420, 0.0022, 0.019, 561.4, "#DCDCDC", 2.74, 180),
        ("Rhea", 527068, 0.0013, 0.345, 763.8, "#F0F0F0", 4.52, 300),
        ("Titan", 1221869, 0.0288, 0.348, 2575.5, "#D2691E", 15.95, 60),
        ("Iapetus", 3560820, 0.0283, 7.489, 734.5, "#8B4513", 79.33, 0),
    ]),
    "Uranus": _moons("Uranus", [
        ("Miranda", 129900, 0.0013, 4.232, 235.8, "#DEB887", 1.41, 0),
        ("Ariel", 191020, 0.0012, 0.041, 578.9, "#F0E68C", 2.52, 120),
        ("Umbriel", 266300, 0.0039, 0.128, 584.7, "#696969", 4.14, 240),
        ("Titania", 436300, 0.0011, 0.079, 788.4, "#DDA0DD", 8.71, 180),
        ("Oberon", 583500, 0.0014, 0.068, 761.4, "#8B4513", 13.46, 300),
    ]),
    "Neptune": _moons("Neptune", [
        ("Triton", 354759, 0.000016, 156.885, 1353.4, "#4682B4", 5.88, 0),
    ]),
}


def find_body_by_name(bodies: Sequence[Body], name: str) -> Optional[Body]:
    for body in bodies:
        if body.name == name:
            return body
    return None


def solar_system_bodies() -> List[Body]:
    """Sun first, then the planets in order of distance."""
    return [SUN] + list(PLANETS)


def moons_of(planet_name: str) -> List[Moon]:
    return list(PLANET_MOONS.get(planet_name, []))
