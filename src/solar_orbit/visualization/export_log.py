from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from solar_orbit.core.constants import DEFAULT_PATH_SEGMENTS
from solar_orbit.simulation.engine import SimulationLog
from solar_orbit.simulation.scenario import SolarSystem


def export_log_to_json(log: SimulationLog, out_path: str = "out/positions.json") -> str:
    """
    Export minimal playback data:
      {
        "center": null,
        "body_positions": {
          "Earth": [{"jd":2451545.0,"r":[x,y,z]}, ...],
          ...
        }
      }
    """
    data: Dict[str, Any] = {"center": log.center, "body_positions": {}}

    for name, samples in log.body_positions.items():
        data["body_positions"][name] = [{"jd": jd, "r": [r[0], r[1], r[2]]} for (jd, r) in samples]

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path


def export_orbit_bundle(
    solar_system: SolarSystem,
    log: SimulationLog,
    out_path: str = "out/orbit_bundle.json",
    segment_count: int = DEFAULT_PATH_SEGMENTS,
) -> str:
    """
    Export a bundle for an external viewer:
      - julian_days: global time vector
      - positions: per-body positions aligned to julian_days
      - bodies: metadata, closed orbit path and perihelion per body

    JSON shape:
    {
      "center": null,
      "julian_days": [2451545.0, 2451546.0, ...],
      "positions": { "Earth": [[x,y,z], ...], ... },
      "bodies": { "Earth": {"radius_km":..., "color":"...", "path":[[x,y,z], ...], "perihelion":[x,y,z]}, ...}
    }

    Paths and perihelia are heliocentric even when the log is centered on a body.
    """
    names = sorted(log.body_positions.keys())
    if not names:
        raise ValueError("No body positions found in log.")

    ref_samples = log.body_positions[names[0]]
    julian_days: List[float] = [jd for (jd, _r) in ref_samples]

    data: Dict[str, Any] = {
        "center": log.center,
        "julian_days": julian_days,
        "positions": {},
        "bodies": {},
    }

    for name in names:
        samples = log.body_positions[name]
        if len(samples) != len(julian_days):
            raise ValueError(f"{name} samples length mismatch.")
        data["positions"][name] = [[r[0], r[1], r[2]] for (_jd, r) in samples]

    for name, body in solar_system.bodies.items():
        data["bodies"][name] = {
            "radius_km": body.radius_km,
            "color": body.color,
            "path": [list(p) for p in body.orbital_path(segment_count)],
            "perihelion": list(body.perihelion_point()),
        }

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path
