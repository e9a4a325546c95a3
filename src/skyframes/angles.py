"""Permissive sexagesimal angle parsing.

Users paste coordinates from catalogues, web pages and old notebooks, so the
parser accepts almost anything: ``12h 34m 56.7s``, ``12 34 56.7``,
``12:34:56.7``, ``+45° 30' 12"``, ``-10 20 30``. Any run of characters that
is not a digit or a decimal point separates two numbers. The first number is
hours (or degrees), the next minutes, the next seconds; further numbers keep
dividing by 60. Text with no numbers at all parses to zero.

All parsers return arcseconds so that range checks stay exact.
"""

import math
import re

_NUMBERISH = frozenset("0123456789.")
_LEADING_DECIMAL = re.compile(r"\d*\.?\d*")
_DEGREE_MARKS = ("°", "º")
_MINUS_SIGNS = ("-", "−")

ARCSEC_PER_DEGREE = 3600.0
ARCSEC_PER_HOUR = 15.0 * ARCSEC_PER_DEGREE
ARCSEC_PER_RADIAN = math.degrees(1.0) * ARCSEC_PER_DEGREE


def _token_value(token: str) -> float:
    """Value of the longest leading decimal prefix ("1.2.3" -> 1.2, "." -> 0)."""
    prefix = _LEADING_DECIMAL.match(token).group()
    if not any(ch.isdigit() for ch in prefix):
        return 0.0
    return float(prefix)


def tokenize(text: str) -> list[float]:
    """Split text into numeric tokens, skipping every other character."""
    tokens: list[float] = []
    current: list[str] = []
    consuming = False
    for ch in text:
        if ch in _NUMBERISH:
            current.append(ch)
            consuming = True
        elif consuming:
            tokens.append(_token_value("".join(current)))
            current.clear()
            consuming = False
    if consuming:
        tokens.append(_token_value("".join(current)))
    return tokens


def _accumulate(tokens: list[float], multiplier: float) -> float:
    total = 0.0
    for token in tokens:
        total += token * multiplier
        multiplier /= 60.0
    return total


def parse_right_ascension(text: str) -> float:
    """Parse right ascension text to arcseconds.

    Hours by default. A leading ``+`` or a degree sign anywhere in the text
    switches to degrees.
    """
    text = text.lstrip()
    multiplier = ARCSEC_PER_HOUR
    if text.startswith("+"):
        multiplier = ARCSEC_PER_DEGREE
        text = text[1:]
    if any(mark in text for mark in _DEGREE_MARKS):
        multiplier = ARCSEC_PER_DEGREE
    return _accumulate(tokenize(text), multiplier)


def parse_declination(text: str) -> float:
    """Parse declination (or any signed degree-based angle) text to arcseconds."""
    text = text.lstrip()
    negative = text.startswith(_MINUS_SIGNS)
    if negative:
        text = text[1:]
    answer = _accumulate(tokenize(text), ARCSEC_PER_DEGREE)
    return -answer if negative else answer


# Galactic longitude is entered in degrees, never hours.
parse_longitude = parse_declination


def arcseconds_to_radians(arcsec: float) -> float:
    return arcsec / ARCSEC_PER_RADIAN


def radians_to_degrees(rad: float) -> float:
    return math.degrees(rad)
