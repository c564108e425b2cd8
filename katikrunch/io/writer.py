"""Serialization of peak lists back to the peak-list text format."""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, TextIO, Union

import numpy as np

from ..constants import BEGIN_MARKER, END_MARKER, OUTPUT_HEADER_KEYS
from ..spectra.peak_list import PeakList

logger = logging.getLogger(__name__)

Destination = Union[str, Path, TextIO, None]


def format_value(value: float) -> str:
    """Shortest round-tripping positional form, e.g. ``1200.0`` or ``366.14``.

    Positional notation keeps rows readable by the peak-line pattern,
    which does not accept exponents.
    """
    return np.format_float_positional(value, trim="0")


def format_record(peak_list: PeakList, all_headers: bool = False) -> str:
    """Render one record including its trailing blank separator line.

    Parameters
    ----------
    peak_list : PeakList
        Scan to render
    all_headers : bool, default=False
        If False, write TITLE, PEPMASS and CHARGE in that order (missing
        ones as empty values). If True, write every header in stored order.

    Examples
    --------
    >>> scan = PeakList({"TITLE": "Scan 2", "PEPMASS": "500.2", "CHARGE": "2+"})
    >>> scan.add_peak(["100", "5"])
    >>> print(format_record(scan), end="")
    BEGIN IONS
    TITLE=Scan 2
    PEPMASS=500.2
    CHARGE=2+
    100.0 5.0
    END IONS
    <BLANKLINE>
    """
    if all_headers:
        header_items = peak_list.headers.items()
    else:
        header_items = ((key, peak_list.headers.get(key, "")) for key in OUTPUT_HEADER_KEYS)

    lines = [BEGIN_MARKER]
    lines.extend(f"{key}={value}" for key, value in header_items)
    lines.extend(" ".join(format_value(v) for v in peak) for peak in peak_list.peaks)
    lines.append(END_MARKER)
    return "\n".join(lines) + "\n\n"


@contextmanager
def open_destination(destination: Destination) -> Iterator[TextIO]:
    """Open a path for writing, or pass through a stream (stdout for None)."""
    if destination is None:
        yield sys.stdout
    elif isinstance(destination, (str, Path)):
        with open(destination, "w") as handle:
            yield handle
    else:
        yield destination


def write_records(
    peak_lists: Iterable[PeakList],
    destination: Destination = None,
    all_headers: bool = False,
) -> int:
    """Write records to ``destination`` and return how many were written."""
    n_written = 0
    with open_destination(destination) as handle:
        for peak_list in peak_lists:
            handle.write(format_record(peak_list, all_headers=all_headers))
            n_written += 1

    name = getattr(destination, "name", destination) if destination is not None else "<stdout>"
    logger.info(f"✓ Wrote {n_written:,} scans to {name}")
    return n_written
