"""Tests for peak-list serialization."""

import io

import pytest

from katikrunch.io.reader import parse_records
from katikrunch.io.writer import format_record, format_value, write_records
from katikrunch.spectra.peak_list import PeakList


@pytest.fixture
def scan():
    return PeakList(
        headers={
            "TITLE": "Scan 2 (rt=10.6)",
            "RTINSECONDS": "636",
            "PEPMASS": "800.4 12345.6",
            "CHARGE": "2+",
        },
        peaks=[(250.1, 100.0, 1.0), (530.27, 420.0)],
    )


class TestFormatValue:

    def test_positional(self):
        assert format_value(1200.0) == "1200.0"
        assert format_value(366.14) == "366.14"
        assert format_value(1e-05) == "0.00001"


class TestFormatRecord:
    """Test record layout."""

    def test_fixed_header_order(self, scan):
        text = format_record(scan)

        assert text == (
            "BEGIN IONS\n"
            "TITLE=Scan 2 (rt=10.6)\n"
            "PEPMASS=800.4 12345.6\n"
            "CHARGE=2+\n"
            "250.1 100.0 1.0\n"
            "530.27 420.0\n"
            "END IONS\n"
            "\n"
        )

    def test_missing_header_written_empty(self):
        text = format_record(PeakList({"TITLE": "Scan 1"}, [(1.0, 2.0)]))
        assert "PEPMASS=\n" in text
        assert "CHARGE=\n" in text

    def test_all_headers(self, scan):
        text = format_record(scan, all_headers=True)
        assert "RTINSECONDS=636\n" in text
        assert text.index("RTINSECONDS") < text.index("PEPMASS")

    def test_round_trip(self, scan):
        """Test re-parsing reproduces headers and peaks."""
        (parsed,) = list(parse_records(io.StringIO(format_record(scan, all_headers=True))))

        assert parsed.headers == scan.headers
        assert parsed.peaks == scan.peaks


class TestWriteRecords:
    """Test writing to streams and files."""

    def test_stream(self, scan):
        out = io.StringIO()
        n = write_records([scan, scan], out)

        assert n == 2
        assert out.getvalue().count("BEGIN IONS") == 2

    def test_path(self, scan, tmp_path):
        path = tmp_path / "out.txt"
        write_records([scan], path)
        assert path.read_text().startswith("BEGIN IONS\nTITLE=Scan 2")

    def test_stdout(self, scan, capsys):
        write_records([scan])
        assert "END IONS" in capsys.readouterr().out
