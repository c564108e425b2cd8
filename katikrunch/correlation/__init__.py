"""HCD/ETD scan pairing and diagnostic-ion filtering.

Pairs each ETD scan N with HCD scan N - 1, removes incomplete or
precursor-inconsistent pairs, and keeps pairs whose HCD scan contains
every requested ion.
"""

from .scan_pair import ScanPair
from .engine import CorrelationEngine, KrunchParams

__all__ = [
    'ScanPair',
    'CorrelationEngine',
    'KrunchParams',
]
