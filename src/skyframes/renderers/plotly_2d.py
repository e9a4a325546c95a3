"""Plotly 2D equatorial map renderer.

Plain RA/Dec rectangle in J2000, RA increasing to the left as on the sky.
The galactic equator is drawn by pushing b=0 through the same galactic to
J2000 matrix the converter uses.
"""

import math

import numpy as np
import plotly.graph_objects as go

from skyframes.angles import radians_to_degrees
from skyframes.matrices import GALACTIC_TO_J2000
from skyframes.models import ConversionResult, SkyPosition
from skyframes.transform import transform

_BG = "#050a1a"
_GRID_COLOR = "#1c2a4a"
_PLANE_COLOR = "#7ec8e3"
_TARGET_COLOR = "#ffd166"
_CENTER_COLOR = "#ff6b6b"


def galactic_equator(step_deg: float = 1.0) -> tuple[np.ndarray, np.ndarray]:
    """J2000 RA/Dec (degrees) of the galactic equator.

    A NaN pair breaks the line wherever RA wraps between 360° and 0°.
    """
    ras: list[float] = []
    decs: list[float] = []
    previous: float | None = None
    for l_deg in np.arange(0.0, 360.0 + step_deg, step_deg):
        p = transform(SkyPosition(lon=math.radians(l_deg), lat=0.0), GALACTIC_TO_J2000)
        ra = radians_to_degrees(p.lon)
        if previous is not None and abs(ra - previous) > 180.0:
            ras.append(math.nan)
            decs.append(math.nan)
        ras.append(ra)
        decs.append(radians_to_degrees(p.lat))
        previous = ra
    return np.array(ras), np.array(decs)


def render_plotly_chart(result: ConversionResult, title: str = "") -> go.Figure:
    """Render the converted position on a J2000 equatorial map.

    Args:
        result: Fully computed conversion.
        title: Optional figure title (already translated).

    Returns:
        Plotly Figure object.
    """
    plane_ra, plane_dec = galactic_equator()
    plane_trace = go.Scatter(
        x=plane_ra,
        y=plane_dec,
        mode="lines",
        line=dict(color=_PLANE_COLOR, width=1),
        opacity=0.6,
        hoverinfo="skip",
        name="galactic equator",
    )

    center = transform(SkyPosition(lon=0.0, lat=0.0), GALACTIC_TO_J2000)
    center_trace = go.Scatter(
        x=[radians_to_degrees(center.lon)],
        y=[radians_to_degrees(center.lat)],
        mode="markers",
        marker=dict(size=8, color=_CENTER_COLOR, symbol="x"),
        hoverinfo="skip",
        name="galactic centre",
    )

    target = result.j2000
    target_trace = go.Scatter(
        x=[radians_to_degrees(target.lon)],
        y=[radians_to_degrees(target.lat)],
        mode="markers",
        marker=dict(size=12, color=_TARGET_COLOR, symbol="star"),
        text=[row.text for row in result.rows[:1]],
        hoverinfo="text",
        name="target",
    )

    fig = go.Figure(data=[plane_trace, center_trace, target_trace])
    fig.update_layout(
        title=title or None,
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        font=dict(color="#aaaaaa"),
        showlegend=False,
        margin=dict(l=40, r=10, t=40 if title else 10, b=40),
        width=800,
        height=400,
        xaxis=dict(
            range=[360.0, 0.0],
            autorange=False,
            tickvals=list(range(0, 361, 30)),
            ticktext=[f"{h}h" for h in range(0, 25, 2)],
            gridcolor=_GRID_COLOR,
            zeroline=False,
        ),
        yaxis=dict(
            range=[-90.0, 90.0],
            autorange=False,
            tickvals=list(range(-90, 91, 30)),
            ticksuffix="°",
            gridcolor=_GRID_COLOR,
            zeroline=False,
        ),
    )
    return fig
