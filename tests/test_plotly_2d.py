import numpy as np
import plotly.graph_objects as go
import pytest

from skyframes.compute import run
from skyframes.models import ConversionRequest, CoordinateInput, InputKind
from skyframes.renderers.plotly_2d import galactic_equator, render_plotly_chart


def test_galactic_equator():
    ra, dec = galactic_equator()
    assert ra.shape == dec.shape
    assert np.isnan(ra).sum() >= 1
    assert np.nanmax(np.abs(dec)) < 63.0
    assert np.nanmin(ra) >= 0.0 and np.nanmax(ra) < 360.0


def test_render_plotly_chart():
    request = ConversionRequest(inputs=(CoordinateInput(InputKind.J2000, "12 0 0", "10"),))
    fig = render_plotly_chart(run(request), title="J2000")
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 3
    target = fig.data[2]
    assert target.x[0] == pytest.approx(180.0)
    assert target.y[0] == pytest.approx(10.0)
    assert list(fig.layout.xaxis.range) == [360.0, 0.0]
    assert fig.layout.title.text == "J2000"
