"""Abundance-based peak pruning.

Reduces a scan to its most intense peaks so that ion matching only
considers the top of the spectrum, then restores ascending m/z order.
"""

import logging

import numpy as np

from .peak_list import PeakList

logger = logging.getLogger(__name__)


def select_most_abundant(intensity: np.ndarray, mz: np.ndarray, keep_count: int) -> np.ndarray:
    """Indices of the retained peaks, ordered by ascending m/z.

    Parameters
    ----------
    intensity : np.ndarray
        Peak intensities
    mz : np.ndarray
        Peak m/z values (parallel to ``intensity``)
    keep_count : int
        Requested number of peaks. ``keep_count + 1`` peaks are kept: the
        slice is inclusive of index ``keep_count`` (known boundary quirk,
        kept so earlier result sets reproduce).

    Returns
    -------
    indices : np.ndarray (int64)
        Positions into the input arrays

    Examples
    --------
    >>> intensity = np.array([5.0, 50.0, 1.0, 20.0])
    >>> mz = np.array([100.0, 200.0, 300.0, 400.0])
    >>> select_most_abundant(intensity, mz, 2)
    array([0, 1, 3])
    """
    by_intensity = np.argsort(-intensity, kind="stable")
    kept = by_intensity[: keep_count + 1]
    return kept[np.argsort(mz[kept], kind="stable")]


def filter_by_abundance(peak_list: PeakList, keep_count: int) -> PeakList:
    """Prune ``peak_list`` in place to its most intense peaks.

    No-op when ``keep_count`` is zero or at least the current number of
    peaks. Otherwise keeps ``keep_count + 1`` peaks (see
    ``select_most_abundant``) sorted by m/z. Headers are not touched.

    Returns the same ``PeakList`` for chaining.
    """
    if keep_count < 0:
        raise ValueError(f"keep_count must be >= 0, got {keep_count}")

    n_peaks = len(peak_list.peaks)
    if keep_count == 0 or keep_count >= n_peaks:
        return peak_list

    indices = select_most_abundant(peak_list.intensity, peak_list.mz, keep_count)
    peak_list.peaks = [peak_list.peaks[i] for i in indices]

    logger.debug(f"Pruned {peak_list.title!r}: {n_peaks} -> {len(peak_list.peaks)} peaks")
    return peak_list
