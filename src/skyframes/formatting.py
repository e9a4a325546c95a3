"""Angle and row formatting.

Each formatter rounds once, in integer units of its last printed digit
(``floor(value * scale + 0.5)``), and then splits the integer. Fractional
digits are therefore always zero-padded and a carry never produces "60".
"""

import math

from skyframes.models import SkyPosition

SEPARATOR = "    //    "

_TENTHS_PER_HOUR = 36000
_TENTHS_PER_DAY = 24 * _TENTHS_PER_HOUR
_ARCSEC_PER_DEGREE = 3600
_HUNDREDTHS_ARCMIN_PER_DEGREE = 6000
_TEN_THOUSANDTHS_PER_DEGREE = 10000


def _split_sign(rad: float) -> tuple[str, float]:
    if rad < 0.0:
        return "-", math.degrees(-rad)
    return "", math.degrees(rad)


def _rounded_units(value: float, scale: int) -> int:
    return math.floor(value * scale + 0.5)


def format_hms(rad: float) -> str:
    """Hours, minutes and seconds to a tenth: ``"12h 5m 9.3s"``."""
    hours = math.degrees(rad) / 15.0
    tenths = _rounded_units(hours, _TENTHS_PER_HOUR) % _TENTHS_PER_DAY
    h, rem = divmod(tenths, _TENTHS_PER_HOUR)
    m, rem = divmod(rem, 600)
    s, s10 = divmod(rem, 10)
    return f"{h}h {m}m {s}.{s10}s"


def format_dms(rad: float) -> str:
    """Degrees, minutes and whole seconds: ``"-28° 56' 10\\""``."""
    sign, degrees = _split_sign(rad)
    arcsec = _rounded_units(degrees, _ARCSEC_PER_DEGREE)
    d, rem = divmod(arcsec, _ARCSEC_PER_DEGREE)
    m, s = divmod(rem, 60)
    return f"{sign}{d}° {m}' {s}\""


def format_dm(rad: float) -> str:
    """Degrees and minutes to two decimals: ``"-28° 56.17'"``."""
    sign, degrees = _split_sign(rad)
    units = _rounded_units(degrees, _HUNDREDTHS_ARCMIN_PER_DEGREE)
    d, rem = divmod(units, _HUNDREDTHS_ARCMIN_PER_DEGREE)
    m, frac = divmod(rem, 100)
    return f"{sign}{d}° {m}.{frac:02d}'"


def format_degrees(rad: float) -> str:
    """Decimal degrees to four places: ``"266.4050°"``."""
    sign, degrees = _split_sign(rad)
    units = _rounded_units(degrees, _TEN_THOUSANDTHS_PER_DEGREE)
    d, frac = divmod(units, _TEN_THOUSANDTHS_PER_DEGREE)
    return f"{sign}{d}.{frac:04d}°"


def format_equatorial(position: SkyPosition) -> str:
    """RA/Dec row: sexagesimal, then decimal degrees and degree-minutes."""
    return (
        f"{format_hms(position.lon)}  {format_dms(position.lat)}{SEPARATOR}"
        f"+{format_degrees(position.lon)}  /  {format_dm(position.lat)}  "
        f"{format_degrees(position.lat)}"
    )


def format_galactic(position: SkyPosition) -> str:
    return f"{format_degrees(position.lon)}  {format_degrees(position.lat)}"


def format_old_galactic(approximate: SkyPosition, exact: SkyPosition) -> str:
    """Both old-galactic results side by side so their divergence is visible."""
    return f"{format_galactic(approximate)}{SEPARATOR}{format_galactic(exact)}"
