"""Conversion layer — validation, routing through J2000, and formatting of every frame."""

import logging
from dataclasses import replace

from skyframes import config
from skyframes.angles import (
    arcseconds_to_radians,
    parse_declination,
    parse_longitude,
    parse_right_ascension,
)
from skyframes.epochs import parse_epoch
from skyframes.formatting import (
    format_equatorial,
    format_galactic,
    format_old_galactic,
)
from skyframes.matrices import (
    B1950_TO_J2000,
    GALACTIC_TO_J2000,
    J2000_TO_B1950,
    J2000_TO_GALACTIC,
    NEW_TO_OLD_GALACTIC,
    OLD_TO_NEW_GALACTIC,
    precession_matrix,
)
from skyframes.models import (
    ConversionRequest,
    ConversionResult,
    CoordinateInput,
    FormattedRow,
    InputKind,
    SkyPosition,
)
from skyframes.transform import angular_separation, approximate_old_galactic, transform

log = logging.getLogger(__name__)

J2000_EPOCH = 2000.0

# English name and i18n key of each frame in range-error messages.
_FRAME_NAMES: dict[InputKind, tuple[str, str]] = {
    InputKind.J2000: ("J2000", "name_j2000"),
    InputKind.B1950: ("B1950", "name_b1950"),
    InputKind.GALACTIC: ("New Galactic", "name_new_galactic"),
    InputKind.OLD_GALACTIC: ("Old Galactic", "name_old_galactic"),
    InputKind.USER_EPOCH: ("User Year", "name_user_year"),
    InputKind.CURRENT_EPOCH: ("Current Year", "name_current_year"),
}

_EQUATORIAL_AXES = (("RA", "axis_ra"), ("Dec", "axis_dec"))
_GALACTIC_AXES = (("Longitude", "axis_longitude"), ("Latitude", "axis_latitude"))


class ConversionError(Exception):
    """A request rejected by validation.

    ``message`` is the English text for display; ``key`` and ``fields`` look
    up the translated text with ``skyframes.i18n.t``.
    """

    def __init__(self, message: str, key: str, **fields: object) -> None:
        super().__init__(message)
        self.message = message
        self.key = key
        self.fields = fields


class InputCountError(ConversionError):
    """Zero or several coordinate rows were filled in."""


class MissingEpochError(ConversionError):
    """An epoch-dependent row was chosen without its equinox year."""


class EpochRangeError(ConversionError):
    """An equinox year is not a number within the accepted range."""


class CoordinateRangeError(ConversionError):
    """RA/longitude or Dec/latitude outside its valid range."""


def _select_input(request: ConversionRequest) -> CoordinateInput:
    populated = [row for row in request.inputs if row.populated]
    if len(populated) != 1:
        raise InputCountError("Need exactly one input row", "error_input_count")
    return populated[0]


def _read_epoch(text: str, upper: float, message: str, key: str) -> float | None:
    try:
        year = parse_epoch(text)
    except ValueError:
        raise EpochRangeError(message, key) from None
    if year is not None and not (config.MIN_EPOCH <= year <= upper):
        raise EpochRangeError(message, key)
    return year


def _range_error(kind: InputKind, axis: tuple[str, str]) -> CoordinateRangeError:
    frame_name, frame_key = _FRAME_NAMES[kind]
    axis_name, axis_key = axis
    return CoordinateRangeError(
        f"{frame_name} {axis_name} out of range",
        "error_coordinate_range",
        frame=frame_key,
        axis=axis_key,
    )


def _parse_position(row: CoordinateInput) -> SkyPosition:
    """Parse one row to radians after range-checking it in arcseconds."""
    if row.kind.is_galactic:
        lon = parse_longitude(row.lon)
        lon_axis, lat_axis = _GALACTIC_AXES
    else:
        lon = parse_right_ascension(row.lon)
        lon_axis, lat_axis = _EQUATORIAL_AXES
    lat = parse_declination(row.lat)

    if not (0.0 <= lon < config.ARCSEC_FULL_CIRCLE):
        raise _range_error(row.kind, lon_axis)
    if not (-config.ARCSEC_QUARTER_CIRCLE <= lat <= config.ARCSEC_QUARTER_CIRCLE):
        raise _range_error(row.kind, lat_axis)
    return SkyPosition(lon=arcseconds_to_radians(lon), lat=arcseconds_to_radians(lat))


def to_j2000(
    kind: InputKind,
    position: SkyPosition,
    user_year: float | None = None,
    current_year: float | None = None,
) -> SkyPosition:
    """Bring a validated position of any input kind into the J2000 frame."""
    if kind is InputKind.J2000:
        return position
    if kind is InputKind.B1950:
        return transform(position, B1950_TO_J2000)
    if kind is InputKind.GALACTIC:
        return transform(position, GALACTIC_TO_J2000)
    if kind is InputKind.OLD_GALACTIC:
        return transform(transform(position, OLD_TO_NEW_GALACTIC), GALACTIC_TO_J2000)

    year = user_year if kind is InputKind.USER_EPOCH else current_year
    if year is None:
        raise ValueError(f"{kind.value} input needs its equinox year")
    return transform(position, precession_matrix(J2000_EPOCH, year))


def _precess_from_j2000(j2000: SkyPosition, year: float | None) -> SkyPosition | None:
    if year is None:
        return None
    return transform(j2000, precession_matrix(year, J2000_EPOCH))


def _format_rows(result: ConversionResult) -> tuple[FormattedRow, ...]:
    rows = [
        FormattedRow("frame_j2000", format_equatorial(result.j2000)),
        FormattedRow("frame_b1950", format_equatorial(result.b1950)),
    ]
    if result.user is not None:
        rows.append(
            FormattedRow(
                "frame_user_epoch", format_equatorial(result.user), result.user_year
            )
        )
    if result.current is not None:
        rows.append(
            FormattedRow(
                "frame_current_epoch",
                format_equatorial(result.current),
                result.current_year,
            )
        )
    rows.append(FormattedRow("frame_galactic", format_galactic(result.galactic)))
    rows.append(
        FormattedRow(
            "frame_old_galactic",
            format_old_galactic(result.old_galactic_approx, result.old_galactic),
        )
    )
    return tuple(rows)


def _run(request: ConversionRequest, upper: float) -> ConversionResult:
    row = _select_input(request)

    user_year = _read_epoch(
        request.user_year, upper, "User-supplied year out of range", "error_user_year_range"
    )
    if user_year is None and row.kind is InputKind.USER_EPOCH:
        raise MissingEpochError(
            "For user-supplied equinox, must supply the year", "error_user_year_missing"
        )
    current_year = _read_epoch(
        request.current_year, upper, "'Current' year out of range", "error_current_year_range"
    )
    if current_year is None and row.kind is InputKind.CURRENT_EPOCH:
        raise MissingEpochError("Need 'current year' value", "error_current_year_missing")

    position = _parse_position(row)
    log.debug("Converting %s input %r %r", row.kind.value, row.lon, row.lat)

    # Every output is derived from J2000, including the frame that was typed in.
    j2000 = to_j2000(row.kind, position, user_year, current_year)
    galactic = transform(j2000, J2000_TO_GALACTIC)
    result = ConversionResult(
        source=row.kind,
        entered=position,
        j2000=j2000,
        b1950=transform(j2000, J2000_TO_B1950),
        galactic=galactic,
        old_galactic_approx=approximate_old_galactic(galactic),
        old_galactic=transform(galactic, NEW_TO_OLD_GALACTIC),
        user_year=user_year,
        user=_precess_from_j2000(j2000, user_year),
        current_year=current_year,
        current=_precess_from_j2000(j2000, current_year),
    )
    return replace(result, rows=_format_rows(result))


def run(request: ConversionRequest, max_epoch: float | None = None) -> ConversionResult:
    """Top-level entry point: takes a ConversionRequest and returns a ConversionResult.

    Args:
        request: Raw user input (six possible rows, two optional years).
        max_epoch: Latest accepted equinox year. Defaults to ``config.max_epoch()``.

    Returns:
        Fully computed ConversionResult, formatted rows included.

    Raises:
        ConversionError: On any validation failure; nothing is computed.
    """
    upper = config.max_epoch() if max_epoch is None else max_epoch
    try:
        return _run(request, upper)
    except ConversionError as err:
        log.info("Rejected conversion request: %s", err.message)
        raise


def convert(
    request: ConversionRequest, max_epoch: float | None = None
) -> tuple[FormattedRow, ...]:
    """String-in/string-out wrapper around ``run``."""
    return run(request, max_epoch).rows


def round_trip_error(result: ConversionResult) -> float:
    """Angle (radians) between the entered position and its conversion back.

    Every input goes to J2000 and is then converted into all frames, the
    entered one included, so the difference shows the numerical precision.
    """
    back = {
        InputKind.J2000: result.j2000,
        InputKind.B1950: result.b1950,
        InputKind.GALACTIC: result.galactic,
        InputKind.OLD_GALACTIC: result.old_galactic,
        InputKind.USER_EPOCH: result.user,
        InputKind.CURRENT_EPOCH: result.current,
    }[result.source]
    return angular_separation(result.entered, back)
