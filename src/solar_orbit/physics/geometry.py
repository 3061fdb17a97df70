"""
Derived orbit geometry: static ellipse polylines, perihelion points and
positions of one body relative to another.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from solar_orbit.core.constants import DEFAULT_PATH_SEGMENTS, MIN_PATH_SEGMENTS, ORIGIN
from solar_orbit.core.diagnostics import LoggerLike
from solar_orbit.core.errors import DegenerateResult, InvalidInput
from solar_orbit.core.frames import Vector3, is_finite_vector, perifocal_to_reference, sub
from solar_orbit.physics.orbit import OrbitalElements, compute_position, position

if TYPE_CHECKING:
    from solar_orbit.objects.body import Body

OrbitalPath = Tuple[Vector3, ...]


@dataclass(frozen=True)
class EllipseParameters:
    a: float
    b: float
    inc_rad: float
    raan_rad: float
    argp_rad: float


def ellipse_parameters(elements: OrbitalElements) -> EllipseParameters:
    """Semi-axes of the orbit ellipse plus its orientation angles in radians."""
    a = elements.a_au
    return EllipseParameters(
        a=a,
        b=a * math.sqrt(1.0 - elements.e * elements.e),
        inc_rad=math.radians(elements.inc_deg),
        raan_rad=math.radians(elements.raan_deg),
        argp_rad=math.radians(elements.argp_deg),
    )


def _place(ellipse: EllipseParameters, x: float, y: float) -> Vector3:
    p = perifocal_to_reference((x, y, 0.0), ellipse.raan_rad, ellipse.inc_rad, ellipse.argp_rad)
    if not is_finite_vector(p):
        raise DegenerateResult(f"Non-finite orbit point {p}")
    return p


def generate_path(elements: OrbitalElements, segment_count: int = DEFAULT_PATH_SEGMENTS) -> OrbitalPath:
    """
    Sample the orbit ellipse as a closed polyline.

    Points are spaced evenly in the parametric angle θ in [0, 2π], with
    (a cos θ, b sin θ) in the orbital plane, then rotated by the argument of
    periapsis, the inclination and the ascending node. This is the static
    shape of the orbit, not a time-sampled trajectory.

    Returns:
        segment_count + 1 points; the last point equals the first.
    """
    if segment_count < MIN_PATH_SEGMENTS:
        raise InvalidInput(f"segment_count must be >= {MIN_PATH_SEGMENTS}. Got: {segment_count}")
    if elements.is_central:
        return tuple(ORIGIN for _ in range(segment_count + 1))
    elements.validate()

    ellipse = ellipse_parameters(elements)
    points: List[Vector3] = []
    for i in range(segment_count):
        theta = 2.0 * math.pi * i / segment_count
        points.append(_place(ellipse, ellipse.a * math.cos(theta), ellipse.b * math.sin(theta)))
    points.append(points[0])
    return tuple(points)


def perihelion(elements: OrbitalElements) -> Vector3:
    """Point of closest approach: (a(1-e), 0, 0) in the orbital plane, rotated."""
    if elements.is_central:
        return ORIGIN
    elements.validate()
    ellipse = ellipse_parameters(elements)
    return _place(ellipse, elements.a_au * (1.0 - elements.e), 0.0)


# Elements never change, so paths are cached per elements value.
@lru_cache(maxsize=256)
def cached_path(elements: OrbitalElements, segment_count: int = DEFAULT_PATH_SEGMENTS) -> OrbitalPath:
    return generate_path(elements, segment_count)


@lru_cache(maxsize=256)
def cached_perihelion(elements: OrbitalElements) -> Vector3:
    return perihelion(elements)


def relative_position(elements_a: OrbitalElements, elements_b: OrbitalElements, julian_day: float,
                      strict: bool = False, logger: Optional[LoggerLike] = None) -> Vector3:
    """
    Position of body B as seen from body A: position(B) - position(A).

    With strict=False each position uses the fail-safe calculator (a failing
    body sits at the origin); with strict=True errors propagate.
    """
    if strict:
        pos_a = compute_position(elements_a, julian_day)
        pos_b = compute_position(elements_b, julian_day)
    else:
        pos_a = position(elements_a, julian_day, logger=logger)
        pos_b = position(elements_b, julian_day, logger=logger)
    return sub(pos_b, pos_a)


def relative_positions(bodies: Sequence["Body"], center: "Body", julian_day: float,
                       strict: bool = False, logger: Optional[LoggerLike] = None) -> List[Tuple["Body", Vector3]]:
    """
    Every body except the center (matched by name), paired with its position
    relative to the center.
    """
    return [
        (body, relative_position(center.elements, body.elements, julian_day, strict=strict, logger=logger))
        for body in bodies
        if body.name != center.name
    ]
