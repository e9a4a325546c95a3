"""CLI entry point for coordinate conversion.

Fill in exactly one coordinate option:

    skyframes --j2000 "12h 30m 49.4s" "+12 23 28"
    skyframes --b1950 "0 0 0" "0 0 0" --user-year 1875
    skyframes --galactic 0 0
    skyframes --current "5 35 17" "-5 23 28" --current-year now
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from skyframes import config
from skyframes.angles import ARCSEC_PER_RADIAN
from skyframes.compute import ConversionError, round_trip_error, run
from skyframes.epochs import current_epoch
from skyframes.i18n import frame_label, t
from skyframes.logging_config import configure_logging
from skyframes.models import ConversionRequest, CoordinateInput, InputKind

_OPTIONS: dict[InputKind, tuple[str, tuple[str, str]]] = {
    InputKind.J2000: ("--j2000", ("RA", "DEC")),
    InputKind.B1950: ("--b1950", ("RA", "DEC")),
    InputKind.GALACTIC: ("--galactic", ("L", "B")),
    InputKind.OLD_GALACTIC: ("--old-galactic", ("L", "B")),
    InputKind.USER_EPOCH: ("--user", ("RA", "DEC")),
    InputKind.CURRENT_EPOCH: ("--current", ("RA", "DEC")),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skyframes",
        description="Convert RA/Dec and galactic coordinates between B1950, "
        "J2000, galactic (old and new) and arbitrary equinoxes.",
    )
    for kind, (flag, metavar) in _OPTIONS.items():
        parser.add_argument(flag, dest=kind.value, nargs=2, metavar=metavar)
    parser.add_argument("--user-year", default="", help="equinox year of --user / extra output row")
    parser.add_argument(
        "--current-year",
        default="",
        help='equinox year of --current / extra output row ("now" for today)',
    )
    parser.add_argument("--lang", default="en", choices=("en", "ko"))
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser


def request_from_args(args: argparse.Namespace) -> ConversionRequest:
    inputs = tuple(
        CoordinateInput(kind=kind, lon=values[0], lat=values[1])
        for kind in InputKind
        if (values := getattr(args, kind.value)) is not None
    )
    current_year = args.current_year
    if current_year.strip().lower() == "now":
        current_year = f"{current_epoch():.2f}"
    return ConversionRequest(
        inputs=inputs, user_year=args.user_year, current_year=current_year
    )


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    level = logging.getLevelName(args.log_level.upper()) if args.log_level else config.log_level()
    configure_logging(level if isinstance(level, int) else logging.INFO)

    try:
        result = run(request_from_args(args))
    except ConversionError as err:
        print(t(err.key, args.lang, **err.fields), file=sys.stderr)
        return 2

    labels = [frame_label(row.frame, row.epoch, args.lang) for row in result.rows]
    width = max(len(label) for label in labels)
    for label, row in zip(labels, result.rows):
        print(f"{label:<{width}}  {row.text}")
    arcsec = round_trip_error(result) * ARCSEC_PER_RADIAN
    print(t("precision_note", args.lang, arcsec=f"{arcsec:.3f}"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
