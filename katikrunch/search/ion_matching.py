"""Ion presence testing with an absolute m/z tolerance.

Core predicate used to keep or drop scan pairs: does the HCD scan contain
at least one peak close enough to a diagnostic ion?

Unlike binary-search matching on sorted spectra, the scan here is walked
linearly and stops at the first hit. Peak lists coming out of abundance
pruning are sorted, but unpruned input need not be, so no ordering is
assumed.
"""

from typing import Sequence

import numpy as np
import numba

from ..errors import EmptyTargetSetError
from ..spectra.peak_list import PeakList


# =============================================================================
# Numba Kernel
# =============================================================================

@numba.jit(nopython=True, cache=True)
def has_ion(
    spectrum_mz: np.ndarray,
    target_mz: float,
    tolerance: float,
) -> bool:
    """Check whether any m/z lies strictly within ``tolerance`` of target.

    Parameters
    ----------
    spectrum_mz : np.ndarray (float64)
        Observed m/z values, any order
    target_mz : float
        Diagnostic ion m/z
    tolerance : float
        Absolute tolerance in m/z units. A peak exactly ``tolerance`` away
        does not match.

    Returns
    -------
    bool
        True on the first peak with ``abs(mz - target_mz) < tolerance``

    Examples
    --------
    >>> has_ion(np.array([366.14, 512.2]), 366.14, 0.1)
    True
    >>> has_ion(np.array([366.14, 512.2]), 366.24, 0.1)
    False
    """
    for i in range(len(spectrum_mz)):
        if abs(spectrum_mz[i] - target_mz) < tolerance:
            return True
    return False


def matches(peak_list: PeakList, target_mz: float, tolerance: float) -> bool:
    """True if ``peak_list`` has a peak within ``tolerance`` of ``target_mz``."""
    if peak_list.is_empty:
        return False
    return has_ion(peak_list.mz, float(target_mz), float(tolerance))


# =============================================================================
# Tolerance Resolution
# =============================================================================

def ppm_to_mz(target_mz: float, tol_ppm: float) -> float:
    """Convert a PPM tolerance to an absolute m/z window half-width.

    >>> ppm_to_mz(500.0, 20.0)
    0.01
    """
    return target_mz * tol_ppm / 1e6


def resolve_tolerance(target_mz: float, mz_tolerance: float = 0.0, ppm_tolerance: float = 0.0) -> float:
    """Absolute tolerance for ``target_mz``; PPM wins when positive."""
    if ppm_tolerance > 0.0:
        return ppm_to_mz(target_mz, ppm_tolerance)
    return mz_tolerance


def check_targets(
    target_mzs: Sequence[float],
    mz_tolerance: float = 0.0,
    ppm_tolerance: float = 0.0,
) -> None:
    """Validate a target set before filtering.

    Raises
    ------
    EmptyTargetSetError
        If no target m/z is given or neither tolerance is positive
    """
    if len(target_mzs) == 0:
        raise EmptyTargetSetError("no target m/z values given")
    if not (mz_tolerance > 0.0 or ppm_tolerance > 0.0):
        raise EmptyTargetSetError(
            f"a positive m/z or ppm tolerance is required "
            f"(mz_tolerance={mz_tolerance}, ppm_tolerance={ppm_tolerance})"
        )
