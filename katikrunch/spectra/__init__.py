"""Scan containers and peak pruning.

- ``PeakList``: headers and peaks of one peak-list record
- ``filter_by_abundance``: keep only the most intense peaks of a scan
"""

from .peak_list import PeakList, Peak
from .abundance import filter_by_abundance, select_most_abundant

__all__ = [
    'PeakList',
    'Peak',
    'filter_by_abundance',
    'select_most_abundant',
]
