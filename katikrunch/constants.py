"""Record markers, header keys and pairing constants for peak-list files.

The peak-list text format is line based. Each scan is a record framed by
``BEGIN IONS`` / ``END IONS`` with ``KEY=value`` header lines followed by
whitespace-separated numeric peak rows.

Regular expressions are compiled once here and shared by the parser and
the ``PeakList`` accessors.
"""

import re

# =============================================================================
# Record Framing
# =============================================================================

BEGIN_MARKER = "BEGIN IONS"
END_MARKER = "END IONS"

# Header keys written on output, in this order
TITLE_KEY = "TITLE"
PEPMASS_KEY = "PEPMASS"
CHARGE_KEY = "CHARGE"
OUTPUT_HEADER_KEYS = (TITLE_KEY, PEPMASS_KEY, CHARGE_KEY)

# =============================================================================
# Line Classification
# =============================================================================

# Anywhere in the line, e.g. "TITLE=Scan 12 (rt=3.4)"
HEADER_PATTERN = re.compile(r"\w+=")

# Starts with a digit, then only digits, whitespace and periods
PEAK_PATTERN = re.compile(r"^\d[\s\d.]+$")

# =============================================================================
# TITLE Field Extraction
# =============================================================================

SCAN_NUMBER_PATTERN = re.compile(r"Scan (\d+)")
RETENTION_TIME_PATTERN = re.compile(r"\(rt=([\d.]+)\)")

# ETD partners are located only by a TITLE starting "Scan <digits> "
ETD_TITLE_PATTERN = re.compile(r"^Scan\s(\d+) ")

# =============================================================================
# Pairing
# =============================================================================

# ETD scan N is paired with HCD scan N - 1
ETD_SCAN_OFFSET = 1

# Pairs whose precursors differ by more than this are discarded (Da)
MAX_PRECURSOR_DELTA = 10.0
