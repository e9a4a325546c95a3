import logging
import math

import pytest

from skyframes.compute import (
    ConversionError,
    CoordinateRangeError,
    EpochRangeError,
    InputCountError,
    MissingEpochError,
    convert,
    round_trip_error,
    run,
    to_j2000,
)
from skyframes.formatting import SEPARATOR
from skyframes.i18n import t
from skyframes.models import (
    ConversionRequest,
    CoordinateInput,
    FormattedRow,
    InputKind,
    SkyPosition,
)
from skyframes.transform import angular_separation


def _form(filled: dict[InputKind, tuple[str, str]], user_year="", current_year=""):
    """A full six-row form with only the given rows filled in."""
    inputs = tuple(
        CoordinateInput(kind, *filled.get(kind, ("", ""))) for kind in InputKind
    )
    return ConversionRequest(inputs=inputs, user_year=user_year, current_year=current_year)


def _single(kind, lon, lat, **years):
    return _form({kind: (lon, lat)}, **years)


def _degrees(position):
    return math.degrees(position.lon), math.degrees(position.lat)


def test_b1950_origin_rows():
    result = run(_single(InputKind.B1950, "0 0 0", "0 0 0"))
    assert result.source is InputKind.B1950
    assert result.rows[0].frame == "frame_j2000"
    assert result.rows[0].text.startswith("0h 2m 33.8s  0° 16' 42\"")
    assert angular_separation(result.b1950, SkyPosition(0.0, 0.0)) < 5e-6


def test_j2000_origin_in_b1950():
    result = run(_single(InputKind.J2000, "0 0 0", "0"))
    assert result.rows[0].text.startswith("0h 0m 0.0s  0° 0' 0\"")
    assert result.rows[1].frame == "frame_b1950"
    assert result.rows[1].text.startswith("23h 57m 26.2s  -0° 16' 42\"")


def test_galactic_origin():
    result = run(_single(InputKind.GALACTIC, "0", "0"))
    ra, dec = _degrees(result.j2000)
    assert ra == pytest.approx(266.405, abs=1e-3)
    assert dec == pytest.approx(-28.936, abs=1e-3)
    assert angular_separation(result.galactic, SkyPosition(0.0, 0.0)) < 1e-6


def test_old_galactic_input():
    result = run(_single(InputKind.OLD_GALACTIC, "327.69", "-1.40"))
    assert angular_separation(result.galactic, SkyPosition(0.0, 0.0)) < math.radians(0.02)
    assert angular_separation(result.old_galactic_approx, result.old_galactic) < math.radians(0.1)


def test_north_celestial_pole_in_galactic():
    result = run(_single(InputKind.J2000, "0", "90"))
    l, b = _degrees(result.galactic)
    assert l == pytest.approx(122.93, abs=0.01)
    assert b == pytest.approx(27.128, abs=0.01)


def test_row_order_without_years():
    result = run(_single(InputKind.J2000, "12 0 0", "10"))
    assert [row.frame for row in result.rows] == [
        "frame_j2000",
        "frame_b1950",
        "frame_galactic",
        "frame_old_galactic",
    ]
    assert result.user is None and result.current is None
    assert SEPARATOR in result.rows[-1].text


def test_row_order_with_years():
    result = run(_single(InputKind.J2000, "12 0 0", "10", user_year="1875", current_year="2025.5"))
    assert [(row.frame, row.epoch) for row in result.rows] == [
        ("frame_j2000", None),
        ("frame_b1950", None),
        ("frame_user_epoch", 1875.0),
        ("frame_current_epoch", 2025.5),
        ("frame_galactic", None),
        ("frame_old_galactic", None),
    ]


def test_user_year_output_close_to_b1950():
    result = run(_single(InputKind.J2000, "0 0 0", "0", user_year="1950"))
    assert angular_separation(result.user, result.b1950) < 1e-5


def test_user_epoch_input():
    result = run(_single(InputKind.USER_EPOCH, "0 0 0", "0", user_year="1950"))
    fk4 = run(_single(InputKind.B1950, "0 0 0", "0"))
    assert angular_separation(result.j2000, fk4.j2000) < 1e-5
    assert angular_separation(result.user, SkyPosition(0.0, 0.0)) < 1e-8


def test_current_epoch_input_round_trips():
    result = run(_single(InputKind.CURRENT_EPOCH, "5 35 17", "-5 23 28", current_year="2100"))
    typed = SkyPosition(
        math.radians(15 * (5 + 35 / 60 + 17 / 3600)), -math.radians(5 + 23 / 60 + 28 / 3600)
    )
    assert angular_separation(result.current, typed) < 5e-8
    assert result.current_year == 2100.0


def test_convert_returns_rows():
    rows = convert(_single(InputKind.J2000, "1", "1"))
    assert all(isinstance(row, FormattedRow) for row in rows)
    assert len(rows) == 4


def test_unparseable_text_reads_as_zero():
    result = run(_single(InputKind.J2000, "abc", "xyz"))
    assert result.j2000 == SkyPosition(0.0, 0.0)


def test_half_filled_row_counts():
    result = run(_single(InputKind.J2000, "", "45"))
    assert math.degrees(result.j2000.lat) == pytest.approx(45.0)


@pytest.mark.parametrize(
    "request_",
    [
        _form({}),
        _form({InputKind.J2000: ("1", "1"), InputKind.B1950: ("1", "1")}),
        _form({InputKind.GALACTIC: ("  ", "")}),
    ],
)
def test_input_count(request_):
    with pytest.raises(InputCountError) as excinfo:
        run(request_)
    assert excinfo.value.message == "Need exactly one input row"
    assert excinfo.value.key == "error_input_count"


def test_missing_user_year():
    with pytest.raises(MissingEpochError, match="must supply the year"):
        run(_single(InputKind.USER_EPOCH, "1", "1"))


def test_missing_current_year():
    with pytest.raises(MissingEpochError, match="Need 'current year' value"):
        run(_single(InputKind.CURRENT_EPOCH, "1", "1"))


@pytest.mark.parametrize("year", ["0.5", "2101", "abc", "nan", "-5"])
def test_user_year_range(year):
    with pytest.raises(EpochRangeError, match="User-supplied year out of range"):
        run(_single(InputKind.J2000, "1", "1", user_year=year))


def test_current_year_range():
    with pytest.raises(EpochRangeError, match="'Current' year out of range"):
        run(_single(InputKind.J2000, "1", "1", current_year="3000"))


def test_year_checked_before_coordinates():
    with pytest.raises(EpochRangeError):
        run(_single(InputKind.J2000, "25", "1", user_year="0"))


def test_max_epoch_override():
    result = run(_single(InputKind.J2000, "1", "1", current_year="2500"), max_epoch=3000.0)
    assert result.current_year == 2500.0


def test_max_epoch_from_environment(monkeypatch):
    monkeypatch.setenv("SKYFRAMES_MAX_EPOCH", "1990")
    with pytest.raises(EpochRangeError):
        run(_single(InputKind.J2000, "1", "1", user_year="1995"))


@pytest.mark.parametrize(
    "kind, lon, lat, message, axis",
    [
        (InputKind.J2000, "24 0 0", "0", "J2000 RA out of range", "axis_ra"),
        (InputKind.J2000, "0", "90 0 1", "J2000 Dec out of range", "axis_dec"),
        (InputKind.B1950, "0", "-91", "B1950 Dec out of range", "axis_dec"),
        (InputKind.GALACTIC, "-1", "0", "New Galactic Longitude out of range", "axis_longitude"),
        (InputKind.GALACTIC, "360", "0", "New Galactic Longitude out of range", "axis_longitude"),
        (InputKind.OLD_GALACTIC, "0", "91", "Old Galactic Latitude out of range", "axis_latitude"),
    ],
)
def test_coordinate_range(kind, lon, lat, message, axis):
    with pytest.raises(CoordinateRangeError) as excinfo:
        run(_single(kind, lon, lat))
    assert excinfo.value.message == message
    assert excinfo.value.key == "error_coordinate_range"
    assert excinfo.value.fields["axis"] == axis


def test_epoch_row_range_message():
    with pytest.raises(CoordinateRangeError, match="User Year RA out of range"):
        run(_single(InputKind.USER_EPOCH, "25", "0", user_year="1950"))


@pytest.mark.parametrize("lat", ["90", "-90", "-90 0 0"])
def test_poles_accepted(lat):
    result = run(_single(InputKind.J2000, "0", lat))
    assert abs(result.j2000.lat) == pytest.approx(math.pi / 2)


def test_errors_share_base_class():
    for error in (InputCountError, MissingEpochError, EpochRangeError, CoordinateRangeError):
        assert issubclass(error, ConversionError)


def test_rejection_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="skyframes.compute")
    with pytest.raises(ConversionError):
        run(_form({}))
    assert "Rejected conversion request: Need exactly one input row" in caplog.text


def test_to_j2000_needs_year_for_epoch_rows():
    with pytest.raises(ValueError):
        to_j2000(InputKind.USER_EPOCH, SkyPosition(0.0, 0.0))


def test_range_error_translates_frame_and_axis():
    with pytest.raises(CoordinateRangeError) as excinfo:
        run(_single(InputKind.GALACTIC, "-1", "0"))
    err = excinfo.value
    assert err.fields == {"frame": "name_new_galactic", "axis": "axis_longitude"}
    assert t(err.key, "en", **err.fields) == err.message
    assert t(err.key, "ko", **err.fields) == "신 은하 좌표 경도 값이 범위를 벗어났습니다"


def test_entered_position_is_kept():
    result = run(_single(InputKind.B1950, "6 0 0", "-30"))
    assert _degrees(result.entered) == (pytest.approx(90.0), pytest.approx(-30.0))


@pytest.mark.parametrize(
    "kind, lon, lat, years",
    [
        (InputKind.B1950, "0 0 0", "0 0 0", {}),
        (InputKind.GALACTIC, "120", "-45", {}),
        (InputKind.OLD_GALACTIC, "30", "10", {}),
        (InputKind.USER_EPOCH, "5 35 17", "-5 23 28", {"user_year": "1875"}),
        (InputKind.CURRENT_EPOCH, "18 0 0", "66", {"current_year": "2050"}),
    ],
)
def test_round_trip_error_is_small(kind, lon, lat, years):
    error = round_trip_error(run(_single(kind, lon, lat, **years)))
    assert 0.0 <= error < 1e-5


def test_round_trip_error_zero_for_j2000():
    assert round_trip_error(run(_single(InputKind.J2000, "12 0 0", "10"))) == pytest.approx(0.0)
