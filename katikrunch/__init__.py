"""katikrunch - HCD/ETD scan pairing and diagnostic-ion filtering.

Reads an HCD and an ETD peak-list file acquired in alternation, pairs ETD
scan N with HCD scan N - 1, keeps the pairs whose HCD scan shows ALL of a
set of diagnostic ions, and writes the matching ETD scans.
"""

__version__ = "0.1.0"

from katikrunch import spectra
from katikrunch import search
from katikrunch import io
from katikrunch import correlation

from katikrunch.errors import (
    KrunchError,
    FormatError,
    PairingError,
    EmptyTargetSetError,
)
from katikrunch.spectra import PeakList, filter_by_abundance
from katikrunch.search import matches
from katikrunch.correlation import CorrelationEngine, KrunchParams, ScanPair

__all__ = [
    "spectra",
    "search",
    "io",
    "correlation",
    "KrunchError",
    "FormatError",
    "PairingError",
    "EmptyTargetSetError",
    "PeakList",
    "filter_by_abundance",
    "matches",
    "CorrelationEngine",
    "KrunchParams",
    "ScanPair",
]
