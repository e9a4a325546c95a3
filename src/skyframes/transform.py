"""Spherical coordinate transforms through direction-cosine matrices."""

import math

import numpy as np

from skyframes.models import SkyPosition

TWO_PI = 2.0 * math.pi

# Green, Spherical Astronomy p. 47: new to old galactic, low-order terms.
_OLD_GALACTIC_AMPLITUDE = math.radians(1.5)
_OLD_GALACTIC_PHASE = math.radians(20.0)
_OLD_GALACTIC_OFFSET = math.radians(32.3)
_NEAR_POLE = math.radians(89.0)


def wrap_longitude(lon: float) -> float:
    """Shift a longitude into [0, 2π)."""
    if lon < 0.0:
        lon += TWO_PI
    if lon >= TWO_PI:
        lon -= TWO_PI
    return lon


def to_cartesian(position: SkyPosition) -> np.ndarray:
    cos_lat = math.cos(position.lat)
    return np.array(
        [
            math.cos(position.lon) * cos_lat,
            math.sin(position.lon) * cos_lat,
            math.sin(position.lat),
        ]
    )


def from_cartesian(vector: np.ndarray) -> SkyPosition:
    """Direction of a (not necessarily unit) vector.

    The latitude comes from the arcsine of the normalised z component, so it
    is always within [-π/2, π/2]. At an exact pole the longitude is 0.
    """
    x, y, z = (float(v) for v in vector)
    r = math.sqrt(x * x + y * y + z * z)
    lat = math.asin(max(-1.0, min(1.0, z / r)))
    lon = math.atan2(y, x)
    return SkyPosition(lon=wrap_longitude(lon), lat=lat)


def transform(position: SkyPosition, matrix: np.ndarray) -> SkyPosition:
    """Rotate a spherical position into another frame."""
    return from_cartesian(matrix @ to_cartesian(position))


def approximate_old_galactic(galactic: SkyPosition) -> SkyPosition:
    """Old galactic coordinates from new ones with Green's approximation.

    Poor near the galactic poles: the latitude is clamped to ±90° and the
    longitude is reported as 0 within 1° of either pole.
    """
    l, b = galactic.lon, galactic.lat
    old_b = b - _OLD_GALACTIC_AMPLITUDE * math.cos(l - _OLD_GALACTIC_PHASE)
    old_b = max(-math.pi / 2, min(math.pi / 2, old_b))

    if abs(b) > _NEAR_POLE:
        old_l = 0.0
    else:
        old_l = (
            l
            - _OLD_GALACTIC_OFFSET
            - _OLD_GALACTIC_AMPLITUDE * math.tan(b) * math.sin(l - _OLD_GALACTIC_PHASE)
        )
        old_l = wrap_longitude(old_l)
    return SkyPosition(lon=old_l, lat=old_b)


def angular_separation(a: SkyPosition, b: SkyPosition) -> float:
    """Great-circle distance between two positions, in radians."""
    va, vb = to_cartesian(a), to_cartesian(b)
    return math.atan2(float(np.linalg.norm(np.cross(va, vb))), float(va @ vb))
