"""Pytest configuration for katikrunch tests.

Provides small HCD/ETD peak-list files following the acquisition
convention (ETD scan = HCD scan + 1).
"""

import pytest

from katikrunch.spectra.peak_list import PeakList


HCD_TEXT = """\
BEGIN IONS
TITLE=Scan 1 (rt=10.5) [HCD]
PEPMASS=800.40 12345.6
CHARGE=2+
120.08 300.0
366.12 1500.0
407.20 800.0
END IONS

BEGIN IONS
TITLE=Scan 3 (rt=11.2) [HCD]
PEPMASS=650.30
CHARGE=3+
138.05 900.0
204.09 2500.0
END IONS

"""

ETD_TEXT = """\
BEGIN IONS
TITLE=Scan 2 (rt=10.6) [ETD]
PEPMASS=800.40 12345.6
CHARGE=2+
250.10 100.0 1
530.27 420.0 2
END IONS

BEGIN IONS
TITLE=Scan 4 (rt=11.3) [ETD]
PEPMASS=650.30
CHARGE=3+
310.15 60.0
END IONS

"""


def make_record(scan, pepmass, peaks, kind="HCD", charge="2+"):
    """Render one peak-list record."""
    lines = [
        "BEGIN IONS",
        f"TITLE=Scan {scan} (rt={scan * 0.1:.2f}) [{kind}]",
        f"PEPMASS={pepmass}",
        f"CHARGE={charge}",
    ]
    lines.extend(" ".join(str(v) for v in peak) for peak in peaks)
    lines.extend(["END IONS", ""])
    return "\n".join(lines) + "\n"


@pytest.fixture
def record_factory():
    """Function building record text: (scan, pepmass, peaks, kind, charge)."""
    return make_record


@pytest.fixture
def hcd_file(tmp_path):
    """HCD file with scans 1 and 3; only scan 1 has a peak near 366.14."""
    path = tmp_path / "hcd.txt"
    path.write_text(HCD_TEXT)
    return path


@pytest.fixture
def etd_file(tmp_path):
    """ETD file with scans 2 and 4."""
    path = tmp_path / "etd.txt"
    path.write_text(ETD_TEXT)
    return path


@pytest.fixture
def simple_peak_list():
    """Peak list with four peaks in m/z order."""
    return PeakList(
        headers={"TITLE": "Scan 7 (rt=12.5)", "PEPMASS": "512.3 1e5", "CHARGE": "2+"},
        peaks=[(100.0, 5.0), (200.0, 50.0), (300.0, 1.0), (400.0, 20.0)],
    )
