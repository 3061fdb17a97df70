# Elliptic Kepler equation

from __future__ import annotations

import math

from solar_orbit.core.constants import KEPLER_MAX_ITER, KEPLER_TOL
from solar_orbit.core.errors import InvalidInput, NonConvergence


def wrap_to_360(angle_deg: float) -> float:
    """Wrap angle to [0, 360)."""
    return angle_deg % 360.0


def solve_keplers_equation(M_rad: float, e: float, tol: float = KEPLER_TOL, max_iter: int = KEPLER_MAX_ITER) -> float:
    """
    Solve Kepler's equation for elliptic orbits:
        M = E - e sin(E)
    using Newton-Raphson starting from E = M.

    f(E) = E - e sin(E) - M is increasing and its root lies in [M - e, M + e].
    The solver keeps that bracket and falls back to bisection whenever a
    Newton step would leave it, so eccentricities close to 1 still converge
    within the iteration cap.

    Args:
        M_rad: Mean anomaly (rad)
        e: eccentricity (0 <= e < 1)
        tol: stop once the step is no larger than this
        max_iter: iteration cap

    Returns:
        E_rad: Eccentric anomaly (rad), not wrapped

    Raises:
        InvalidInput: e outside [0, 1), non-finite M, or bad tol/max_iter
        NonConvergence: no convergence within max_iter steps
    """
    if not (math.isfinite(e) and 0.0 <= e < 1.0):
        raise InvalidInput(f"Elliptic Kepler solver requires 0 <= e < 1. Got: {e}")
    if not math.isfinite(M_rad):
        raise InvalidInput(f"Mean anomaly must be finite. Got: {M_rad}")
    if not tol > 0.0:
        raise InvalidInput(f"Tolerance must be positive. Got: {tol}")
    if max_iter < 1:
        raise InvalidInput(f"max_iter must be >= 1. Got: {max_iter}")

    lo = M_rad - e
    hi = M_rad + e
    E = M_rad
    for _ in range(max_iter):
        f = E - e * math.sin(E) - M_rad
        if f > 0.0:
            hi = E
        else:
            lo = E

        # 1 - e cos(E) >= 1 - e > 0
        E_next = E - f / (1.0 - e * math.cos(E))
        if not (lo <= E_next <= hi):
            E_next = 0.5 * (lo + hi)

        dE = E_next - E
        E = E_next
        if abs(dE) <= tol:
            return E

    raise NonConvergence(f"Kepler solver did not converge within {max_iter} iterations (M={M_rad}, e={e}).")
