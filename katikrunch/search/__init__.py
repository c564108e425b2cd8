"""Ion presence search over scan peak lists.

Core algorithms:
1. Linear, short-circuiting tolerance test (Numba-compiled)
2. PPM to absolute tolerance conversion
"""

from .ion_matching import (
    has_ion,
    matches,
    ppm_to_mz,
    resolve_tolerance,
    check_targets,
)

__all__ = [
    'has_ion',
    'matches',
    'ppm_to_mz',
    'resolve_tolerance',
    'check_targets',
]
