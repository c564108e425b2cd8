"""Correlation of HCD and ETD scans and diagnostic-ion filtering.

The engine reads an HCD peak-list file and an ETD peak-list file acquired
in alternation, pairs every ETD scan N with HCD scan N - 1, drops pairs
that are incomplete or whose precursors disagree, and then narrows the
pairs to those whose HCD scan contains ALL requested diagnostic ions.
The ETD scans of the surviving pairs are written back out.

Workflow
--------
1. Load HCD records, one ``ScanPair`` per record (optional abundance pruning)
2. Index pairs by HCD scan number (later duplicates win)
3. Load ETD records into the partner pair's ``etd`` slot
4. Remove pairs failing the completeness / precursor check
5. ``filter_for`` once per target ion (logical AND across calls)
6. ``write_survivors``

Examples
--------
>>> engine = CorrelationEngine()
>>> engine.load("HCD.txt", "ETD.txt", keep_most_abundant=0)
>>> engine.filter_for_ions([366.14, 407.16], mz_tolerance=0.1)
>>> engine.write_survivors("ETD_out.txt")
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..constants import ETD_SCAN_OFFSET, ETD_TITLE_PATTERN, MAX_PRECURSOR_DELTA
from ..errors import PairingError
from ..io.reader import Source, read_etd_records, read_hcd_records
from ..io.writer import Destination, write_records
from ..search.ion_matching import check_targets, matches, resolve_tolerance
from ..spectra.peak_list import PeakList
from .scan_pair import ScanPair

logger = logging.getLogger(__name__)


@dataclass
class KrunchParams:
    """Parameters for loading and pairing scans."""

    # Keep only the N most abundant HCD peaks (0 = keep all)
    keep_most_abundant: int = 0

    # Maximum HCD/ETD precursor mass difference (Da, inclusive)
    max_precursor_delta: float = MAX_PRECURSOR_DELTA

    def __post_init__(self):
        if self.keep_most_abundant < 0:
            raise ValueError(
                f"keep_most_abundant must be >= 0, got {self.keep_most_abundant}"
            )
        if self.max_precursor_delta < 0:
            raise ValueError(
                f"max_precursor_delta must be >= 0, got {self.max_precursor_delta}"
            )


class CorrelationEngine:
    """Paired HCD/ETD scan store with ion-presence filtering.

    Attributes
    ----------
    params : KrunchParams
        Loading and pairing parameters
    pairs : List[ScanPair]
        Working collection, in HCD file order
    index : Dict[int, ScanPair]
        HCD scan number -> pair, built after the HCD file is read.
        Not updated by filtering; use ``pairs`` for the current survivors.
    """

    def __init__(self, params: Optional[KrunchParams] = None):
        self.params = params if params is not None else KrunchParams()
        self.pairs: List[ScanPair] = []
        self.index: Dict[int, ScanPair] = {}

    def __len__(self) -> int:
        return len(self.pairs)

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load(
        self,
        hcd_source: Source,
        etd_source: Source,
        keep_most_abundant: Optional[int] = None,
    ) -> "CorrelationEngine":
        """Read both files, pair the scans and drop inconsistent pairs.

        Parameters
        ----------
        hcd_source, etd_source : str, Path or text stream
            Peak-list inputs. Paths are opened and closed here.
        keep_most_abundant : int, optional
            Overrides ``params.keep_most_abundant`` when given

        Raises
        ------
        FileNotFoundError
            If an input path does not exist
        FormatError
            On a malformed record in either file
        PairingError
            If an ETD scan has no HCD scan one number lower
        """
        if keep_most_abundant is not None:
            self.params = KrunchParams(
                keep_most_abundant=keep_most_abundant,
                max_precursor_delta=self.params.max_precursor_delta,
            )

        self.pairs = []
        self.index = {}

        self._load_hcd(hcd_source)
        self._build_index()
        self._load_etd(etd_source)
        self._remove_inconsistent()
        return self

    def _load_hcd(self, source: Source) -> None:
        for record in read_hcd_records(source, self.params.keep_most_abundant):
            self.pairs.append(ScanPair(hcd=record))
        logger.info(f"✓ Loaded {len(self.pairs):,} HCD scans")

    def _build_index(self) -> None:
        for pair in self.pairs:
            self.index[pair.hcd.scan_number] = pair

        n_duplicates = len(self.pairs) - len(self.index)
        if n_duplicates:
            logger.warning(
                f"{n_duplicates:,} duplicate HCD scan numbers; "
                f"the last scan with each number is used for pairing"
            )

    def _load_etd(self, source: Source) -> None:
        n_etd = 0
        for record in read_etd_records(source):
            pair = self.partner_of(record)
            if pair.etd.headers or pair.etd.peaks:
                # Same partner twice: peaks accumulate, later headers win
                logger.warning(
                    f"ETD scan {record.title!r} merged into an earlier ETD scan "
                    f"for HCD scan {pair.hcd.scan_number}"
                )
                pair.etd.peaks.extend(record.peaks)
                pair.etd.headers = record.headers
            else:
                pair.etd = record
            n_etd += 1
        logger.info(f"✓ Attached {n_etd:,} ETD scans")

    def partner_of(self, etd_record: PeakList) -> ScanPair:
        """Pair whose HCD scan number is one below the ETD scan number.

        Raises
        ------
        PairingError
            If the ETD TITLE does not start with ``Scan <n> `` or no HCD
            scan ``n - 1`` was loaded
        """
        match = ETD_TITLE_PATTERN.match(etd_record.title)
        if match is None:
            raise PairingError(
                f"ETD record has no 'Scan <number> ' title: {etd_record.title!r}"
            )

        etd_scan = int(match.group(1))
        hcd_scan = etd_scan - ETD_SCAN_OFFSET
        pair = self.index.get(hcd_scan)
        if pair is None:
            raise PairingError(
                f"ETD scan {etd_scan} has no partner HCD scan {hcd_scan}",
                etd_scan=etd_scan,
            )
        return pair

    def _remove_inconsistent(self) -> None:
        n_before = len(self.pairs)
        max_delta = self.params.max_precursor_delta
        self.pairs = [pair for pair in self.pairs if pair.is_consistent(max_delta)]
        logger.info(
            f"✓ Kept {len(self.pairs):,} of {n_before:,} scan pairs "
            f"(complete, precursor delta <= {max_delta})"
        )

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------

    def filter_for(self, target_mz: float, tolerance: float) -> int:
        """Keep only pairs whose HCD scan has a peak within ``tolerance``.

        Successive calls narrow the set further, so filtering for several
        ions keeps pairs containing all of them. Returns the number of
        pairs left.
        """
        n_before = len(self.pairs)
        self.pairs = [pair for pair in self.pairs if matches(pair.hcd, target_mz, tolerance)]
        logger.info(
            f"m/z {target_mz} ± {tolerance:g}: kept {len(self.pairs):,} of {n_before:,} pairs"
        )
        return len(self.pairs)

    def filter_for_ions(
        self,
        target_mzs: Sequence[float],
        mz_tolerance: float = 0.0,
        ppm_tolerance: float = 0.0,
    ) -> int:
        """Apply ``filter_for`` for every target ion.

        A positive ``ppm_tolerance`` is converted per target
        (``target_mz * ppm / 1e6``) and takes precedence over
        ``mz_tolerance``.

        Raises
        ------
        EmptyTargetSetError
            If ``target_mzs`` is empty or neither tolerance is positive
        """
        check_targets(target_mzs, mz_tolerance, ppm_tolerance)
        for target_mz in target_mzs:
            tolerance = resolve_tolerance(target_mz, mz_tolerance, ppm_tolerance)
            self.filter_for(target_mz, tolerance)
        return len(self.pairs)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def scan_matches(self) -> List[Tuple[int, Optional[int]]]:
        """``(hcd_scan, etd_scan)`` for every current pair, None if unpaired."""
        result = []
        for pair in self.pairs:
            etd_scan = None if pair.etd.is_empty else pair.etd.scan_number
            result.append((pair.hcd.scan_number, etd_scan))
        return result

    def survivors(self, side: str = "etd") -> List[PeakList]:
        """Scans of the current pairs, ``side`` being ``"etd"`` or ``"hcd"``."""
        if side not in ("etd", "hcd"):
            raise ValueError(f"Unknown side: {side}. Use 'etd' or 'hcd'.")
        return [getattr(pair, side) for pair in self.pairs]

    def write_survivors(
        self,
        destination: Destination = None,
        side: str = "etd",
        all_headers: bool = False,
    ) -> int:
        """Write surviving scans to a path, stream, or stdout (None)."""
        return write_records(self.survivors(side), destination, all_headers=all_headers)
