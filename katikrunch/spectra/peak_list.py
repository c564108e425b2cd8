"""Peak list container for a single MS/MS scan.

A ``PeakList`` holds the ordered header bag of one record plus its peak
rows. Each peak is a tuple of floats whose first two fields are m/z and
intensity; any further fields (charge state, annotations exported as
numbers) are carried through unchanged.

Derived values (scan number, precursor mass, retention time) are parsed
from the headers on access and never cached, so they always reflect the
current header bag.
"""

from typing import Dict, List, Optional, Tuple

import numpy as np

from ..constants import (
    PEPMASS_KEY,
    RETENTION_TIME_PATTERN,
    SCAN_NUMBER_PATTERN,
    TITLE_KEY,
)
from ..errors import FormatError

Peak = Tuple[float, ...]


class PeakList:
    """Headers and peaks of one scan record.

    Attributes
    ----------
    headers : Dict[str, str]
        Raw header values keyed by header name, in file order
    peaks : List[Tuple[float, ...]]
        Peak rows; ``peak[0]`` is m/z and ``peak[1]`` is intensity

    Examples
    --------
    >>> scan = PeakList({"TITLE": "Scan 7 (rt=12.5)", "PEPMASS": "512.3 1e5"})
    >>> scan.add_peak(["366.14", "1200"])
    >>> scan.scan_number, scan.precursor_mass, scan.retention_time
    (7, 512.3, 12.5)
    """

    def __init__(
        self,
        headers: Optional[Dict[str, str]] = None,
        peaks: Optional[List[Peak]] = None,
    ):
        self.headers = dict(headers) if headers else {}
        self.peaks = list(peaks) if peaks else []

    def __len__(self) -> int:
        return len(self.peaks)

    def __repr__(self) -> str:
        title = self.headers.get(TITLE_KEY, "")
        return f"PeakList(title={title!r}, n_peaks={len(self.peaks)})"

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_peak(self, tokens) -> Peak:
        """Append one peak row given its string (or numeric) fields.

        Raises
        ------
        ValueError
            If a token is not a valid float. The record parser wraps this
            into a ``FormatError`` with file position.
        """
        peak = tuple(float(token) for token in tokens)
        self.peaks.append(peak)
        return peak

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    @property
    def is_empty(self) -> bool:
        """True when the scan has no peaks and cannot take part in filtering."""
        return not self.peaks

    # -------------------------------------------------------------------------
    # Array views
    # -------------------------------------------------------------------------

    @property
    def mz(self) -> np.ndarray:
        """m/z values as a float64 array, in current peak order."""
        return np.array([peak[0] for peak in self.peaks], dtype=np.float64)

    @property
    def intensity(self) -> np.ndarray:
        """Intensities as a float64 array, in current peak order."""
        return np.array([peak[1] for peak in self.peaks], dtype=np.float64)

    # -------------------------------------------------------------------------
    # Derived header values
    # -------------------------------------------------------------------------

    @property
    def title(self) -> str:
        return self.headers.get(TITLE_KEY, "")

    @property
    def scan_number(self) -> int:
        """Scan number from the ``Scan <digits>`` part of TITLE.

        Raises
        ------
        FormatError
            If TITLE is missing or holds no scan number
        """
        match = SCAN_NUMBER_PATTERN.search(self.title)
        if match is None:
            raise FormatError(f"no scan number in TITLE {self.title!r}")
        return int(match.group(1))

    @property
    def precursor_mass(self) -> float:
        """First whitespace-delimited token of PEPMASS as a float.

        Trailing tokens (typically precursor intensity) are ignored here
        but stay untouched in ``headers``.
        """
        pepmass = self.headers.get(PEPMASS_KEY)
        if pepmass is None or not pepmass.split():
            raise FormatError(f"missing {PEPMASS_KEY} for {self.title!r}")
        token = pepmass.split()[0]
        try:
            return float(token)
        except ValueError as exc:
            raise FormatError(
                f"invalid {PEPMASS_KEY} value {token!r} for {self.title!r}"
            ) from exc

    @property
    def retention_time(self) -> float:
        """Retention time from the ``(rt=<float>)`` part of TITLE."""
        match = RETENTION_TIME_PATTERN.search(self.title)
        if match is None:
            raise FormatError(f"no retention time in TITLE {self.title!r}")
        try:
            return float(match.group(1))
        except ValueError as exc:
            raise FormatError(
                f"invalid retention time {match.group(1)!r} in TITLE {self.title!r}"
            ) from exc
