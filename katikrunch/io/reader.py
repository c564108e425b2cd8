"""Streaming reader for peak-list text records.

Lightweight line-based parser for HCD and ETD peak-list files. Supports:
- ``BEGIN IONS`` / ``END IONS`` framed records
- ``KEY=value`` headers (values may contain ``=``)
- Numeric peak rows (m/z, intensity, then any extra fields)

Each line falls into one of four classes (begin marker, header, peak row,
end marker); anything else is skipped. Parse progress lives in an explicit
``ParserState`` so that several streams can be read independently.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Union

from ..constants import BEGIN_MARKER, END_MARKER, HEADER_PATTERN, PEAK_PATTERN
from ..errors import FormatError
from ..spectra.abundance import filter_by_abundance
from ..spectra.peak_list import PeakList

logger = logging.getLogger(__name__)

Source = Union[str, Path, TextIO, Iterable[str]]


@dataclass
class ParserState:
    """Cursor over one input stream.

    Attributes
    ----------
    source : str
        Name used in error messages (file name or ``<stream>``)
    line_number : int
        1-based number of the last consumed line
    record : PeakList or None
        Record being accumulated, None between records
    n_records : int
        Records completed so far
    """

    source: str = "<stream>"
    line_number: int = 0
    record: Optional[PeakList] = None
    n_records: int = 0

    @property
    def in_record(self) -> bool:
        return self.record is not None

    def error(self, message: str) -> FormatError:
        return FormatError(message, source=self.source, line_number=self.line_number)


def consume_line(state: ParserState, line: str) -> Optional[PeakList]:
    """Feed one raw line to the parser.

    Returns the finished ``PeakList`` when ``line`` is an end marker,
    otherwise None. Header and peak lines outside a record are skipped.

    Raises
    ------
    FormatError
        For a non-numeric peak token, a peak row with fewer than two
        fields, a header line with an empty key, or
        a begin marker while a record is still open
    """
    state.line_number += 1

    if BEGIN_MARKER in line:
        if state.in_record:
            raise state.error(f"{BEGIN_MARKER} before {END_MARKER} of previous record")
        state.record = PeakList()
        return None

    if END_MARKER in line:
        if not state.in_record:
            raise state.error(f"{END_MARKER} without {BEGIN_MARKER}")
        record = state.record
        state.record = None
        state.n_records += 1
        return record

    if not state.in_record:
        return None

    if HEADER_PATTERN.search(line):
        key, _, value = line.partition("=")
        key = key.strip()
        if not key:
            raise state.error(f"header line without key: {line.rstrip()!r}")
        state.record.set_header(key, value.rstrip("\r\n"))
    elif PEAK_PATTERN.match(line):
        tokens = line.split()
        if len(tokens) < 2:
            raise state.error(f"peak line needs m/z and intensity: {line.rstrip()!r}")
        try:
            state.record.add_peak(tokens)
        except ValueError as exc:
            raise state.error(f"invalid peak line: {line.rstrip()!r}") from exc

    return None


def parse_records(lines: Iterable[str], source: str = "<stream>") -> Iterator[PeakList]:
    """Yield every complete record found in ``lines``.

    Parameters
    ----------
    lines : Iterable[str]
        Raw text lines, line terminators included or not
    source : str
        Name for error messages

    Raises
    ------
    FormatError
        On malformed lines, or if the stream ends inside a record
    """
    state = ParserState(source=source)
    for line in lines:
        record = consume_line(state, line)
        if record is not None:
            yield record

    if state.in_record:
        raise state.error(f"stream ended before {END_MARKER}")


@contextmanager
def open_source(source: Source) -> Iterator[tuple]:
    """Yield ``(lines, name)`` for a path or an already open text stream.

    Paths are opened here and closed on exit; streams are left open.
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Peak list file not found: {path}")
        with open(path) as handle:
            yield handle, path.name
    else:
        yield source, getattr(source, "name", "<stream>")


def read_hcd_records(source: Source, keep_most_abundant: int = 0) -> Iterator[PeakList]:
    """Yield HCD records, pruned to the most abundant peaks if requested.

    ``keep_most_abundant`` of 0 keeps every peak. See
    ``filter_by_abundance`` for the exact number of peaks retained.
    """
    with open_source(source) as (lines, name):
        logger.info(f"Reading HCD scans: {name}")
        for record in parse_records(lines, source=name):
            yield filter_by_abundance(record, keep_most_abundant)


def read_etd_records(source: Source) -> Iterator[PeakList]:
    """Yield ETD records unchanged."""
    with open_source(source) as (lines, name):
        logger.info(f"Reading ETD scans: {name}")
        yield from parse_records(lines, source=name)
