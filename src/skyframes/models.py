"""Data model definitions — explicit boundaries between input, compute, and render layers."""

from dataclasses import dataclass, field
from enum import Enum


class InputKind(str, Enum):
    """The six coordinate rows a user can fill in."""

    J2000 = "j2000"
    B1950 = "b1950"
    GALACTIC = "galactic"
    OLD_GALACTIC = "old_galactic"
    USER_EPOCH = "user_epoch"
    CURRENT_EPOCH = "current_epoch"

    @property
    def is_galactic(self) -> bool:
        return self in (InputKind.GALACTIC, InputKind.OLD_GALACTIC)


@dataclass(frozen=True)
class CoordinateInput:
    """Raw text of one input row. Not yet validated."""

    kind: InputKind
    lon: str  # RA or galactic longitude ("12h 34m 56.7s", "+188.5°", ...)
    lat: str  # Dec or galactic latitude ("-10 20 30")

    @property
    def populated(self) -> bool:
        return bool(self.lon.strip() or self.lat.strip())


@dataclass(frozen=True)
class ConversionRequest:
    """Raw user input. Exactly one populated row is expected."""

    inputs: tuple[CoordinateInput, ...]
    user_year: str = ""  # Equinox year of the USER_EPOCH row / extra output row
    current_year: str = ""  # Equinox year of the CURRENT_EPOCH row / extra output row


@dataclass(frozen=True)
class SkyPosition:
    """Spherical coordinate pair in radians."""

    lon: float  # RA or galactic longitude, [0, 2π) after any transform
    lat: float  # Dec or galactic latitude, [-π/2, π/2]


@dataclass(frozen=True)
class FormattedRow:
    """One display line of a conversion result."""

    frame: str  # i18n key of the frame label ("frame_j2000", ...)
    text: str
    epoch: float | None = None  # Equinox year for user/current rows


@dataclass(frozen=True)
class ConversionResult:
    """The sole input to renderers. Fully computed state."""

    source: InputKind
    entered: SkyPosition  # Parsed input in its own frame
    j2000: SkyPosition
    b1950: SkyPosition
    galactic: SkyPosition
    old_galactic_approx: SkyPosition  # Low-order formula, poor near the galactic poles
    old_galactic: SkyPosition  # Exact matrix transform of `galactic`
    user_year: float | None = None
    user: SkyPosition | None = None
    current_year: float | None = None
    current: SkyPosition | None = None
    rows: tuple[FormattedRow, ...] = field(default=())
