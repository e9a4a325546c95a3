"""Direction-cosine matrices between reference frames.

Every matrix acts on a column vector: ``new = M @ old``. The coefficients are
stored row-major exactly as published; do not round or re-derive them.
"""

import logging
import math

import numpy as np

from skyframes.angles import ARCSEC_PER_RADIAN

log = logging.getLogger(__name__)


def _frozen(*coefficients: float) -> np.ndarray:
    matrix = np.array(coefficients, dtype=float).reshape(3, 3)
    matrix.setflags(write=False)
    return matrix


# Explanatory Supplement. Other sources differ in the sixth decimal, e.g. the
# 1989 A&A article gives 0.9999257079523629, -0.0111789381377700,
# -0.0048590038153592 for the first row.
B1950_TO_J2000 = _frozen(
    0.9999256782, -0.0111820611, -0.0048579477,
    0.0111820610, 0.9999374784, -0.0000271765,
    0.0048579479, -0.0000271474, 0.9999881997,
)

# Explanatory Supplement.
J2000_TO_B1950 = _frozen(
    0.9999256795, 0.0111814828, 0.0048590039,
    -0.0111814828, 0.9999374849, -0.0000271771,
    -0.0048590040, -0.0000271557, 0.9999881946,
)

# Green, Spherical Astronomy, eq. 14.55.
J2000_TO_GALACTIC = _frozen(
    -0.054876, -0.873437, -0.483835,
    0.494109, -0.444830, 0.746982,
    -0.867666, -0.198076, 0.455984,
)

# IDL gal_uvw / Murray 1989 (A&A 218, 325), the transpose of the above to
# ten digits.
GALACTIC_TO_J2000 = _frozen(
    -0.0548755604, 0.4941094279, -0.8676661490,
    -0.8734370902, -0.4448296300, -0.1980763734,
    -0.4838350155, 0.7469822445, 0.4559837762,
)

# AJ 64, 195: the new north galactic pole sits at old (347.7°, +88.51°) and
# new (0, 0) at old (327.69°, -1.40°).
NEW_TO_OLD_GALACTIC = _frozen(
    0.844951, 0.534239, 0.025405,
    -0.534284, 0.845286, -0.005539,
    -0.024434, -0.008893, 0.999661,
)

OLD_TO_NEW_GALACTIC = _frozen(
    0.844951, -0.534284, -0.024434,
    0.534239, 0.845286, -0.008893,
    0.025405, -0.005539, 0.999661,
)

CONSTANT_MATRICES: dict[str, np.ndarray] = {
    "B1950_TO_J2000": B1950_TO_J2000,
    "J2000_TO_B1950": J2000_TO_B1950,
    "J2000_TO_GALACTIC": J2000_TO_GALACTIC,
    "GALACTIC_TO_J2000": GALACTIC_TO_J2000,
    "NEW_TO_OLD_GALACTIC": NEW_TO_OLD_GALACTIC,
    "OLD_TO_NEW_GALACTIC": OLD_TO_NEW_GALACTIC,
}


def build_matrix(a: float, b: float, c: float) -> np.ndarray:
    """Direction-cosine matrix from three rotation angles (radians).

    Roll by ``a`` to line up with the old-pole/new-pole great circle, pitch by
    ``b`` onto the new pole, roll by ``c`` onto the new zero point. The sign
    layout below was checked against Green's J2000 to galactic matrix:
    ``build_matrix(57.07°, 62.87°, 192.86°)`` reproduces it.
    """
    ca, sa = math.cos(a), math.sin(a)
    cb, sb = math.cos(b), math.sin(b)
    cc, sc = math.cos(c), math.sin(c)
    return np.array(
        [
            [cc * cb * ca - sc * sa, sc * cb * ca + cc * sa, -sb * ca],
            [-cc * cb * sa - sc * ca, -sc * cb * sa + cc * ca, sb * sa],
            [cc * sb, sc * sb, cb],
        ]
    )


def precession_angles(fixed: float, target: float) -> tuple[float, float, float]:
    """Precession angles zeta, theta, z in arcseconds (Explanatory Supplement p. 104).

    Time is measured in centuries of decimal years, not Julian centuries
    from Julian days.
    """
    big_t = (fixed - 2000.0) / 100.0
    t = (target - fixed) / 100.0
    zeta = (2306.218 + 1.397 * big_t) * t + 1.095 * t * t
    theta = (2004.311 - 0.853 * big_t) * t - 0.427 * t * t
    z = (2306.218 + 1.397 * big_t) * t + 0.302 * t * t
    return zeta, theta, z


def precession_matrix(fixed: float, target: float) -> np.ndarray:
    """Precession matrix for the equinox pair (fixed, target).

    ``precession_matrix(year, 2000.0)`` moves J2000 coordinates to the equinox
    of ``year``; ``precession_matrix(2000.0, year)`` moves them back.
    """
    zeta, theta, z = (
        angle / ARCSEC_PER_RADIAN for angle in precession_angles(fixed, target)
    )
    log.debug(
        "Precession %.3f -> %.3f: zeta=%.6f theta=%.6f z=%.6f rad",
        fixed,
        target,
        zeta,
        theta,
        z,
    )
    # The Supplement's trig table is the three-angle matrix with the first
    # and last angles swapped and the middle one negated.
    matrix = build_matrix(z, -theta, zeta)
    if log.isEnabledFor(logging.DEBUG):
        log.debug(
            "Precession %.3f -> %.3f orthogonal=%s",
            fixed,
            target,
            is_rotation(matrix, atol=1e-12),
        )
    return matrix


def is_rotation(matrix: np.ndarray, atol: float = 1e-5) -> bool:
    """True if matrix is orthogonal with determinant +1 within atol."""
    matrix = np.asarray(matrix, dtype=float)
    return bool(
        np.allclose(matrix.T @ matrix, np.eye(3), atol=atol)
        and math.isclose(float(np.linalg.det(matrix)), 1.0, abs_tol=atol)
    )
