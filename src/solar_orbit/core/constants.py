from __future__ import annotations

from solar_orbit.core.frames import Vector3

# J2000.0 epoch (2000-01-01T12:00:00 TT) as a Julian Day
J2000_JD: float = 2451545.0

DAYS_PER_JULIAN_CENTURY: float = 36525.0

# Kepler solver defaults
KEPLER_TOL: float = 1e-8
KEPLER_MAX_ITER: int = 50

# Orbital path sampling
DEFAULT_PATH_SEGMENTS: int = 64
MIN_PATH_SEGMENTS: int = 3

# Moon distances are stored in km and drawn at this many km per scene unit
MOON_KM_PER_UNIT: float = 500000.0

ORIGIN: Vector3 = (0.0, 0.0, 0.0)


def validate_settings() -> None:
    if KEPLER_TOL <= 0:
        raise ValueError("KEPLER_TOL must be > 0")
    if KEPLER_MAX_ITER < 1:
        raise ValueError("KEPLER_MAX_ITER must be >= 1")
    if MIN_PATH_SEGMENTS < 3:
        raise ValueError("MIN_PATH_SEGMENTS must be >= 3")
    if DEFAULT_PATH_SEGMENTS < MIN_PATH_SEGMENTS:
        raise ValueError("DEFAULT_PATH_SEGMENTS must be >= MIN_PATH_SEGMENTS")
    if MOON_KM_PER_UNIT <= 0:
        raise ValueError("MOON_KM_PER_UNIT must be > 0")
