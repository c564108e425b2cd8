"""HCD/ETD scan pair, the unit kept or removed by filtering."""

from dataclasses import dataclass, field

from ..spectra.peak_list import PeakList


@dataclass
class ScanPair:
    """One HCD scan and the ETD scan acquired right after it.

    ``etd`` starts out empty and is filled when the ETD file is read.
    """

    hcd: PeakList = field(default_factory=PeakList)
    etd: PeakList = field(default_factory=PeakList)

    @property
    def is_complete(self) -> bool:
        """Both scans carry peaks."""
        return not self.hcd.is_empty and not self.etd.is_empty

    @property
    def precursor_delta(self) -> float:
        """Absolute difference between HCD and ETD precursor masses."""
        return abs(self.hcd.precursor_mass - self.etd.precursor_mass)

    def is_consistent(self, max_precursor_delta: float) -> bool:
        """Complete, with precursors no more than ``max_precursor_delta`` apart.

        Precursor masses are only read for complete pairs.
        """
        return self.is_complete and self.precursor_delta <= max_precursor_delta
