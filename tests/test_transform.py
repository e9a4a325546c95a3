import itertools
import math

import numpy as np
import pytest

from skyframes.matrices import (
    B1950_TO_J2000,
    CONSTANT_MATRICES,
    GALACTIC_TO_J2000,
    J2000_TO_B1950,
    NEW_TO_OLD_GALACTIC,
    precession_matrix,
)
from skyframes.models import SkyPosition
from skyframes.transform import (
    TWO_PI,
    angular_separation,
    approximate_old_galactic,
    from_cartesian,
    to_cartesian,
    transform,
    wrap_longitude,
)

_GRID = [
    SkyPosition(math.radians(lon), math.radians(lat))
    for lon, lat in itertools.product(range(0, 360, 45), (-90, -60, -1, 0, 1, 45, 89.9, 90))
]


def _degrees(position):
    return math.degrees(position.lon), math.degrees(position.lat)


def test_wrap_longitude():
    assert wrap_longitude(-1e-17) == 0.0
    assert wrap_longitude(TWO_PI) == 0.0
    assert wrap_longitude(-math.pi / 2) == pytest.approx(1.5 * math.pi)
    assert wrap_longitude(1.0) == 1.0


def test_exact_pole_vector():
    position = from_cartesian(np.array([0.0, 0.0, 2.0]))
    assert position.lon == 0.0
    assert position.lat == pytest.approx(math.pi / 2)


def test_cartesian_round_trip():
    position = SkyPosition(1.2, -0.4)
    back = from_cartesian(to_cartesian(position))
    assert back.lon == pytest.approx(1.2)
    assert back.lat == pytest.approx(-0.4)


def test_identity_transform():
    position = SkyPosition(2.5, 0.3)
    result = transform(position, np.eye(3))
    assert result.lon == pytest.approx(2.5)
    assert result.lat == pytest.approx(0.3)


_RANGE_MATRICES = {
    **CONSTANT_MATRICES,
    "precess_1_to_2000": precession_matrix(1.0, 2000.0),
    "precess_2000_to_1": precession_matrix(2000.0, 1.0),
    "precess_2000_to_2100": precession_matrix(2000.0, 2100.0),
    "precess_1875_to_1950": precession_matrix(1875.0, 1950.0),
}


@pytest.mark.parametrize("name", sorted(_RANGE_MATRICES))
def test_results_stay_in_range(name):
    for position in _GRID:
        result = transform(position, _RANGE_MATRICES[name])
        assert 0.0 <= result.lon < TWO_PI
        assert -math.pi / 2 <= result.lat <= math.pi / 2


def test_b1950_origin_in_j2000():
    ra, dec = _degrees(transform(SkyPosition(0.0, 0.0), B1950_TO_J2000))
    assert ra == pytest.approx(0.640706, abs=1e-5)
    assert dec == pytest.approx(0.278341, abs=1e-5)


def test_galactic_origin_in_j2000():
    ra, dec = _degrees(transform(SkyPosition(0.0, 0.0), GALACTIC_TO_J2000))
    assert ra == pytest.approx(266.405, abs=1e-3)
    assert dec == pytest.approx(-28.936, abs=1e-3)


def test_new_galactic_reference_points_in_old_system():
    l, b = _degrees(transform(SkyPosition(0.0, 0.0), NEW_TO_OLD_GALACTIC))
    assert (l, b) == (pytest.approx(327.69, abs=0.02), pytest.approx(-1.40, abs=0.01))
    l, b = _degrees(transform(SkyPosition(0.0, math.pi / 2), NEW_TO_OLD_GALACTIC))
    assert (l, b) == (pytest.approx(347.7, abs=0.01), pytest.approx(88.51, abs=0.01))


def test_fk4_fk5_round_trip():
    for position in _GRID:
        back = transform(transform(position, J2000_TO_B1950), B1950_TO_J2000)
        assert angular_separation(position, back) < 2e-6


def test_precession_round_trip():
    forward = precession_matrix(1875.0, 2000.0)
    backward = precession_matrix(2000.0, 1875.0)
    for position in _GRID:
        back = transform(transform(position, forward), backward)
        assert angular_separation(position, back) < 1e-6


def test_approximate_old_galactic_origin():
    l, b = _degrees(approximate_old_galactic(SkyPosition(0.0, 0.0)))
    assert l == pytest.approx(327.7, abs=1e-9)
    assert b == pytest.approx(-1.5 * math.cos(math.radians(20.0)), abs=1e-9)


def test_approximate_old_galactic_tracks_matrix():
    for position in _GRID:
        if abs(position.lat) > math.radians(50):
            continue
        approx = approximate_old_galactic(position)
        exact = transform(position, NEW_TO_OLD_GALACTIC)
        assert angular_separation(approx, exact) < math.radians(0.1)


def test_approximate_old_galactic_near_pole():
    l, b = _degrees(approximate_old_galactic(SkyPosition(math.radians(100.0), math.radians(89.5))))
    assert l == 0.0
    assert b == pytest.approx(89.5 - 1.5 * math.cos(math.radians(80.0)))


def test_approximate_old_galactic_clamps_latitude():
    result = approximate_old_galactic(SkyPosition(math.radians(200.0), math.radians(89.9)))
    assert result.lat == math.pi / 2


def test_angular_separation():
    assert angular_separation(SkyPosition(0.0, 0.0), SkyPosition(math.pi / 2, 0.0)) == (
        pytest.approx(math.pi / 2)
    )
    assert angular_separation(SkyPosition(1.0, 0.5), SkyPosition(1.0, 0.5)) == pytest.approx(0.0)
