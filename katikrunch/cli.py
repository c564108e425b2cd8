"""Command line front end.

Filters an HCD file for the presence of ALL given ions and writes the
correlated ETD scans. The HCD scan X and ETD scan X + 1 are assumed to
share a precursor.

Examples
--------
Keep pairs whose HCD scan has 366.14 within 0.1 m/z::

    katikrunch --hcd HCD.txt --etd ETD.txt --mz 366.14 --mzTol 0.1 --out OUT.txt

Require both 366.14 AND 407.16 within 200 ppm::

    katikrunch --hcd HCD.txt --etd ETD.txt --mz 366.14,407.16 --ppmTol 200 --out OUT.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .correlation.engine import CorrelationEngine, KrunchParams
from .errors import KrunchError

logger = logging.getLogger(__name__)


def parse_mz_list(text: str) -> List[float]:
    """Parse ``"366.14,407.16"`` into floats."""
    try:
        return [float(token) for token in text.split(",") if token.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid m/z list: {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="katikrunch",
        description=(
            "Pair HCD scan X with ETD scan X+1, keep pairs whose HCD scan "
            "contains ALL given ions, and write the remaining ETD scans."
        ),
    )
    parser.add_argument('--hcd', required=True, type=Path, metavar='HCDFILENAME',
                        help='HCD file to filter for the given m/z values')
    parser.add_argument('--etd', required=True, type=Path, metavar='ETDFILENAME',
                        help='Correlated ETD file')
    parser.add_argument('--mz', required=True, type=parse_mz_list, metavar='F1,F2,F3',
                        help='Fragments to test for in the HCD file (all must be present)')
    parser.add_argument('--mzTol', type=float, default=0.0, dest='mz_tolerance',
                        metavar='DELTAMZ', help='Absolute m/z tolerance')
    parser.add_argument('--ppmTol', type=float, default=0.0, dest='ppm_tolerance',
                        metavar='PPM', help='Tolerance in parts per million (overrides --mzTol)')
    parser.add_argument('--keepN', type=int, default=0, dest='keep_most_abundant',
                        metavar='NUM', help='Only match among the NUM most abundant HCD peaks')
    parser.add_argument('--out', type=Path, default=None,
                        help='Output file (default: standard output)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log progress to standard error')
    return parser


def validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Reject argument combinations argparse cannot express."""
    if not args.mz:
        parser.error("--mz needs at least one m/z value")
    if not (args.mz_tolerance > 0.0 or args.ppm_tolerance > 0.0):
        parser.error("either --mzTol or --ppmTol must be positive")
    if args.keep_most_abundant < 0:
        parser.error("--keepN must be >= 0")
    for path in (args.hcd, args.etd):
        if not path.is_file():
            parser.error(f"file not found: {path}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    validate_args(parser, args)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    engine = CorrelationEngine(KrunchParams(keep_most_abundant=args.keep_most_abundant))
    try:
        engine.load(args.hcd, args.etd)
        engine.filter_for_ions(args.mz, args.mz_tolerance, args.ppm_tolerance)
    except (KrunchError, FileNotFoundError) as exc:
        logger.error(f"katikrunch failed: {exc}")
        return 1

    engine.write_survivors(args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
