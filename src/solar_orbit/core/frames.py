from __future__ import annotations

import math
from typing import Tuple

Vector3 = Tuple[float, float, float]


def rot3(angle_rad: float, v: Vector3) -> Vector3:
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    x, y, z = v
    return (c * x - s * y, s * x + c * y, z)


def rot1(angle_rad: float, v: Vector3) -> Vector3:
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    x, y, z = v
    return (x, c * y - s * z, s * y + c * z)


def add(a: Vector3, b: Vector3) -> Vector3:
    return (a[0]+b[0], a[1]+b[1], a[2]+b[2])


def sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])


def neg(a: Vector3) -> Vector3:
    return (-a[0], -a[1], -a[2])


def dot(a: Vector3, b: Vector3) -> float:
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]


def norm(a: Vector3) -> float:
    return math.sqrt(dot(a, a))


def is_finite_vector(v: Vector3) -> bool:
    return all(math.isfinite(c) for c in v)


def nodal_to_reference(r_nodal: Vector3, raan_rad: float, inc_rad: float) -> Vector3:
    """
    Rotate a vector whose x-axis points at the ascending node (orbital plane
    in x-y) into the reference frame: R3(raan) * R1(inc).
    """
    return rot3(raan_rad, rot1(inc_rad, r_nodal))


def perifocal_to_reference(r_pqw: Vector3, raan_rad: float, inc_rad: float, argp_rad: float) -> Vector3:
    """
    Convert a position from the perifocal (PQW) frame to the heliocentric
    reference frame.

    Rotation sequence applied to the vector: argument of periapsis about z,
    then inclination about x, then longitude of the ascending node about z.

    Args:
        r_pqw: Position in the orbital plane, x toward periapsis
        raan_rad: Longitude of ascending node (radians)
        inc_rad: Inclination (radians)
        argp_rad: Argument of periapsis (radians)

    Returns:
        Position in the reference frame
    """
    return nodal_to_reference(rot3(argp_rad, r_pqw), raan_rad, inc_rad)
