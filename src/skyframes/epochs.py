"""Equinox-year helpers."""

from skyfield.api import load

_ts = load.timescale()


def current_epoch() -> float:
    """Today as a decimal year, used to pre-fill the "current year" field."""
    return float(_ts.now().J)


def parse_epoch(text: str) -> float | None:
    """Parse an equinox year. Blank text means "not supplied".

    Raises:
        ValueError: If the text is not a number.
    """
    text = text.strip()
    if not text:
        return None
    return float(text)
