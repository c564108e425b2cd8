"""Tests for the PeakList container and its derived header values."""

import numpy as np
import pytest

from katikrunch.errors import FormatError
from katikrunch.spectra.peak_list import PeakList


class TestConstruction:
    """Test building peak lists incrementally."""

    def test_add_peak_converts_tokens(self):
        """Test string tokens become a float tuple."""
        scan = PeakList()
        peak = scan.add_peak(["366.14", "1200", "2"])

        assert peak == (366.14, 1200.0, 2.0)
        assert scan.peaks == [(366.14, 1200.0, 2.0)]

    def test_add_peak_rejects_non_numeric(self):
        """Test a bad token raises instead of producing zero."""
        scan = PeakList()
        with pytest.raises(ValueError):
            scan.add_peak(["366.1.4", "10"])
        assert scan.peaks == []

    def test_headers_keep_insertion_order(self):
        """Test header order is preserved."""
        scan = PeakList()
        scan.set_header("TITLE", "Scan 1")
        scan.set_header("RTINSECONDS", "60")
        scan.set_header("PEPMASS", "500.0")

        assert list(scan.headers) == ["TITLE", "RTINSECONDS", "PEPMASS"]

    def test_empty(self):
        """Test a scan without peaks is flagged empty."""
        assert PeakList().is_empty
        assert len(PeakList()) == 0

    def test_constructor_copies_inputs(self):
        """Test the given headers and peaks are not shared."""
        headers = {"TITLE": "Scan 1"}
        peaks = [(1.0, 2.0)]
        scan = PeakList(headers, peaks)
        headers["TITLE"] = "changed"
        peaks.append((3.0, 4.0))

        assert scan.title == "Scan 1"
        assert len(scan) == 1


class TestArrays:
    """Test numpy views of the peaks."""

    def test_mz_and_intensity(self, simple_peak_list):
        np.testing.assert_array_equal(simple_peak_list.mz, [100.0, 200.0, 300.0, 400.0])
        np.testing.assert_array_equal(simple_peak_list.intensity, [5.0, 50.0, 1.0, 20.0])
        assert simple_peak_list.mz.dtype == np.float64

    def test_empty_arrays(self):
        assert PeakList().mz.shape == (0,)


class TestDerivedValues:
    """Test scan number, precursor mass and retention time parsing."""

    def test_scan_number(self, simple_peak_list):
        assert simple_peak_list.scan_number == 7

    def test_scan_number_inside_title(self):
        """Test the scan number is found anywhere in TITLE."""
        scan = PeakList({"TITLE": "File1.raw, Scan 1234 (rt=5.0)"})
        assert scan.scan_number == 1234

    def test_scan_number_missing(self):
        scan = PeakList({"TITLE": "no number here"})
        with pytest.raises(FormatError):
            scan.scan_number

    def test_precursor_mass_first_token(self, simple_peak_list):
        """Test only the first PEPMASS token is used."""
        assert simple_peak_list.precursor_mass == pytest.approx(512.3)
        assert simple_peak_list.headers["PEPMASS"] == "512.3 1e5"

    def test_precursor_mass_missing(self):
        with pytest.raises(FormatError):
            PeakList({"TITLE": "Scan 1"}).precursor_mass

    def test_precursor_mass_invalid(self):
        with pytest.raises(FormatError):
            PeakList({"TITLE": "Scan 1", "PEPMASS": "abc"}).precursor_mass

    def test_retention_time(self, simple_peak_list):
        assert simple_peak_list.retention_time == pytest.approx(12.5)

    def test_retention_time_missing(self):
        with pytest.raises(FormatError):
            PeakList({"TITLE": "Scan 1"}).retention_time
