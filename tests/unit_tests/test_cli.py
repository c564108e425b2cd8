"""Tests for the command line front end."""

import argparse

import pytest

from katikrunch.cli import build_parser, main, parse_mz_list


class TestParseMzList:

    def test_comma_separated(self):
        assert parse_mz_list("366.14,407.16") == [366.14, 407.16]

    def test_invalid(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_mz_list("366.14,abc")


class TestMain:
    """Test full command runs."""

    def test_writes_output_file(self, hcd_file, etd_file, tmp_path):
        out = tmp_path / "out.txt"
        code = main([
            "--hcd", str(hcd_file), "--etd", str(etd_file),
            "--mz", "366.14", "--mzTol", "0.1", "--out", str(out),
        ])

        assert code == 0
        text = out.read_text()
        assert text.count("BEGIN IONS") == 1
        assert "TITLE=Scan 2 " in text

    def test_stdout(self, hcd_file, etd_file, capsys):
        code = main([
            "--hcd", str(hcd_file), "--etd", str(etd_file),
            "--mz", "366.14,407.16", "--ppmTol", "300",
        ])

        assert code == 0
        assert capsys.readouterr().out.count("BEGIN IONS") == 1

    def test_tolerance_required(self, hcd_file, etd_file):
        with pytest.raises(SystemExit) as excinfo:
            main(["--hcd", str(hcd_file), "--etd", str(etd_file), "--mz", "366.14"])
        assert excinfo.value.code == 2

    def test_missing_input(self, tmp_path, etd_file):
        with pytest.raises(SystemExit):
            main([
                "--hcd", str(tmp_path / "nope.txt"), "--etd", str(etd_file),
                "--mz", "366.14", "--mzTol", "0.1",
            ])

    def test_pairing_error_exit_code(self, tmp_path, hcd_file, record_factory):
        etd = tmp_path / "etd.txt"
        etd.write_text(record_factory(9, 800.4, [(150.0, 1.0)], kind="ETD"))
        out = tmp_path / "out.txt"

        code = main([
            "--hcd", str(hcd_file), "--etd", str(etd),
            "--mz", "366.14", "--mzTol", "0.1", "--out", str(out),
        ])

        assert code == 1
        assert not out.exists()

    def test_parser_defaults(self):
        args = build_parser().parse_args(["--hcd", "a", "--etd", "b", "--mz", "1"])
        assert args.keep_most_abundant == 0
        assert args.out is None
