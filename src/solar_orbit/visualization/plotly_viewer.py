from __future__ import annotations

from pathlib import Path
from typing import Optional

import plotly.graph_objects as go

from solar_orbit.core.constants import DEFAULT_PATH_SEGMENTS
from solar_orbit.core.diagnostics import LoggerLike, get_logger
from solar_orbit.core.errors import OrbitError
from solar_orbit.simulation.scenario import SolarSystem


def build_static_figure(
    solar_system: SolarSystem,
    julian_day: float,
    segment_count: int = DEFAULT_PATH_SEGMENTS,
    show_perihelia: bool = True,
    logger: Optional[LoggerLike] = None,
) -> go.Figure:
    """
    Builds a static 3D snapshot:
      - Orbit path for each orbiting body
      - Position marker for each body at julian_day
      - Perihelion marker for each orbiting body

    A body whose elements cannot produce an ellipse keeps its position marker
    (the fail-safe position) but gets no orbit or perihelion trace.
    """
    log = get_logger(logger, __name__)
    fig = go.Figure()

    for body in solar_system.body_list():
        path = q = None
        if not body.is_central:
            try:
                path = body.orbital_path(segment_count)
                q = body.perihelion_point()
            except OrbitError as exc:
                log.warning("build_static_figure: skipping orbit of %s (%s): %s", body.name, exc.kind, exc)
                path = q = None

        if path is not None:
            fig.add_trace(go.Scatter3d(
                x=[p[0] for p in path],
                y=[p[1] for p in path],
                z=[p[2] for p in path],
                mode="lines",
                name=f"{body.name} orbit",
                line=dict(color=body.color, width=2),
            ))

            if show_perihelia:
                fig.add_trace(go.Scatter3d(
                    x=[q[0]], y=[q[1]], z=[q[2]],
                    mode="markers",
                    name=f"{body.name} perihelion",
                    marker=dict(size=3, color=body.color, symbol="diamond"),
                ))

        r = body.position_at(julian_day, logger=logger)
        fig.add_trace(go.Scatter3d(
            x=[r[0]], y=[r[1]], z=[r[2]],
            mode="markers",
            name=body.name,
            marker=dict(size=8 if body.is_central else 5, color=body.color),
        ))

    fig.update_layout(
        title=f"{solar_system.name} at JD {julian_day:.2f}",
        scene=dict(
            xaxis_title="X (AU)",
            yaxis_title="Y (AU)",
            zaxis_title="Z (AU)",
            aspectmode="data",
        ),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h"),
    )
    return fig


def render_static_scene(
    solar_system: SolarSystem,
    julian_day: float,
    out_html: str = "out/solar_system.html",
    segment_count: int = DEFAULT_PATH_SEGMENTS,
) -> str:
    fig = build_static_figure(solar_system, julian_day, segment_count)

    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html
