from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Optional

from solar_orbit.core.constants import J2000_JD, KEPLER_TOL, ORIGIN
from solar_orbit.core.diagnostics import LoggerLike, get_logger
from solar_orbit.core.errors import DegenerateResult, InvalidInput, OrbitError, OrbitResult
from solar_orbit.core.frames import Vector3, is_finite_vector, nodal_to_reference
from solar_orbit.physics.kepler import solve_keplers_equation, wrap_to_360


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class OrbitalElements:
    """
    Heliocentric Keplerian elements referred to the J2000 epoch.

    Units:
        a_au: semi-major axis in AU (0 = central body fixed at the origin)
        e: eccentricity (0<=e<1)
        inc_deg: inclination in degrees
        raan_deg: longitude of the ascending node in degrees
        argp_deg: argument of periapsis in degrees
        M0_deg: mean anomaly at J2000 in degrees
        period_days: orbital period in days

    Construction does not validate, so catalogue records with bad values can
    still reach the fail-safe functions. Call validate() for a strict check.
    """
    a_au: float
    e: float
    inc_deg: float
    raan_deg: float
    argp_deg: float
    M0_deg: float
    period_days: float

    @property
    def is_central(self) -> bool:
        return self.a_au == 0

    def validate(self) -> None:
        if self.is_central:
            return
        for name in ("a_au", "e", "inc_deg", "raan_deg", "argp_deg", "M0_deg", "period_days"):
            value = getattr(self, name)
            if not _is_real(value):
                raise InvalidInput(f"{name} must be a real number. Got: {value!r}")
            if not math.isfinite(value):
                raise InvalidInput(f"{name} must be finite. Got: {value}")
        if self.a_au < 0:
            raise InvalidInput(f"Semi-major axis must be non-negative. Got: {self.a_au}")
        if not (0.0 <= self.e < 1.0):
            raise InvalidInput(f"Only elliptic orbits are supported (0 <= e < 1). Got: {self.e}")
        if self.period_days <= 0:
            raise InvalidInput(f"Orbital period must be positive. Got: {self.period_days}")


def mean_anomaly_deg(elements: OrbitalElements, julian_day: float) -> float:
    """M = M0 + 360 * (JD - J2000) / P, wrapped to [0, 360)."""
    return wrap_to_360(elements.M0_deg + 360.0 * (julian_day - J2000_JD) / elements.period_days)


def true_anomaly_rad(E_rad: float, e: float) -> float:
    """ν = 2 atan( sqrt((1+e)/(1-e)) tan(E/2) )"""
    return 2.0 * math.atan(math.sqrt((1.0 + e) / (1.0 - e)) * math.tan(E_rad / 2.0))


def compute_position(elements: OrbitalElements, julian_day: float, tol: float = KEPLER_TOL) -> Vector3:
    """
    Heliocentric position of a body at the given Julian Day.

    Two-body Keplerian prediction: the ellipse is fixed and only the mean
    anomaly advances with time.

    Returns:
        (x, y, z) in the same length unit as a_au

    Raises:
        InvalidInput: invalid elements or non-finite Julian Day
        NonConvergence: Kepler solver failed to converge
        DegenerateResult: non-finite distance or coordinates
    """
    if elements.is_central:
        return ORIGIN

    elements.validate()
    if not (_is_real(julian_day) and math.isfinite(julian_day)):
        raise InvalidInput(f"Julian Day must be finite. Got: {julian_day}")

    a = elements.a_au
    e = elements.e

    M = mean_anomaly_deg(elements, julian_day)
    E = solve_keplers_equation(math.radians(M), e, tol=tol)

    r = a * (1.0 - e * math.cos(E))
    if not (math.isfinite(r) and r >= 0.0):
        raise DegenerateResult(f"Invalid heliocentric distance r={r} (a={a}, e={e}, E={E})")

    nu = true_anomaly_rad(E, e)

    # Argument of latitude
    u = math.radians(elements.argp_deg) + nu

    r_nodal: Vector3 = (r * math.cos(u), r * math.sin(u), 0.0)
    result = nodal_to_reference(r_nodal, math.radians(elements.raan_deg), math.radians(elements.inc_deg))

    if not is_finite_vector(result):
        raise DegenerateResult(f"Non-finite position {result} (r={r}, u={u})")
    return result


def try_position(elements: OrbitalElements, julian_day: float, tol: float = KEPLER_TOL) -> OrbitResult[Vector3]:
    try:
        return OrbitResult.success(compute_position(elements, julian_day, tol=tol))
    except OrbitError as exc:
        return OrbitResult.failure(exc)


def position(elements: OrbitalElements, julian_day: float, logger: Optional[LoggerLike] = None) -> Vector3:
    """
    Fail-safe position for rendering: any failure is logged and the origin
    returned. An origin result therefore does not prove the input was valid.
    """
    log = get_logger(logger, __name__)
    result = try_position(elements, julian_day)
    if not result.ok:
        log.warning("position: %s failure at JD %s: %s", result.kind, julian_day, result.error)
        return ORIGIN
    log.debug("position: JD %s -> %s", julian_day, result.value)
    return result.value  # type: ignore[return-value]
