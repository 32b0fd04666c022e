"""
satip CLI Tests
===============

Tests for the show, validate and dump commands, run through click's
CliRunner against synthetic disc images.
"""

import pytest
from click.testing import CliRunner

from saturn_ip import __version__
from saturn_ip.cli.errors import ExitCode
from saturn_ip.cli.satip import main


@pytest.fixture
def runner(monkeypatch):
    """CliRunner with no SATIP_* environment leaking in."""
    for name in ("SATIP_PREAMBLE_SIZE", "SATIP_EXTENDED", "SATIP_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


@pytest.fixture
def bad_image(tmp_path, build_header, build_image):
    """Image whose release date is invalid."""
    path = tmp_path / "bad.bin"
    path.write_bytes(build_image(build_header(release_date=b"19XX0101")))
    return path


class TestSatipCLI:
    """Tests for the satip command group."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Sega Saturn System ID" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestShowCommand:
    """Tests for satip show."""

    def test_show_valid(self, runner, image_file):
        result = runner.invoke(main, ["show", str(image_file)])
        assert result.exit_code == ExitCode.SUCCESS
        assert "Hardware identifier: SEGA SEGASATURN" in result.output
        assert "Maker ID: SEGA ENTERPRISES" in result.output
        assert "Version: V1.000" in result.output
        assert "Release date: 1994/11/22" in result.output
        assert "CD: 1/1" in result.output
        assert "Regions: Japan, Asia, America, PAL" in result.output
        assert "IP Size" not in result.output

    def test_show_extended(self, runner, image_file):
        result = runner.invoke(main, ["show", "-x", str(image_file)])
        assert result.exit_code == 0
        assert "IP Size 2048 (800)" in result.output

    def test_show_extended_from_env(self, runner, image_file, monkeypatch):
        monkeypatch.setenv("SATIP_EXTENDED", "1")
        result = runner.invoke(main, ["show", str(image_file)])
        assert "IP Size 2048 (800)" in result.output

    def test_show_verbose(self, runner, image_file):
        result = runner.invoke(main, ["show", "-v", str(image_file)])
        assert result.exit_code == 0
        assert "Product number: GS-9001" in result.output
        assert "Title: VIRTUA FIGHTER" in result.output

    def test_show_invalid_field(self, runner, bad_image):
        """Lines before the failure are printed, then the diagnostic."""
        result = runner.invoke(main, ["show", str(bad_image)])
        assert result.exit_code == ExitCode.VALIDATION_ERROR
        assert "Version: V1.000" in result.output
        assert "Invalid release date format" in result.output
        assert "CD:" not in result.output

    def test_show_no_preamble(self, runner, tmp_path, valid_header):
        path = tmp_path / "game.iso"
        path.write_bytes(valid_header)
        result = runner.invoke(main, ["show", "-p", "0", str(path)])
        assert result.exit_code == 0
        assert "CD: 1/1" in result.output

    def test_show_too_small(self, runner, tmp_path):
        path = tmp_path / "tiny.bin"
        path.write_bytes(b"\x00" * 100)
        result = runner.invoke(main, ["show", str(path)])
        assert result.exit_code == ExitCode.VALIDATION_ERROR
        assert "minimum size" in result.output

    def test_show_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["show", str(tmp_path / "nope.bin")])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Failed to open file" in result.output

    def test_show_negative_preamble(self, runner, image_file):
        result = runner.invoke(main, ["show", "-p", "-1", str(image_file)])
        assert result.exit_code == 2


class TestValidateCommand:
    """Tests for satip validate."""

    def test_all_pass(self, runner, image_file):
        result = runner.invoke(main, ["validate", str(image_file)])
        assert result.exit_code == 0
        assert "PASSED" in result.output

    def test_mixed(self, runner, image_file, bad_image):
        result = runner.invoke(main, ["validate", str(image_file), str(bad_image)])
        assert result.exit_code == ExitCode.VALIDATION_ERROR
        assert f"{image_file}: PASSED" in result.output
        assert f"{bad_image}: FAILED (release_date: Invalid release date format)" in result.output
        assert "1 of 2 images failed" in result.output

    def test_missing_file_counts_as_failure(self, runner, image_file, tmp_path):
        missing = tmp_path / "nope.bin"
        result = runner.invoke(main, ["validate", str(image_file), str(missing)])
        assert result.exit_code == ExitCode.VALIDATION_ERROR
        assert f"{missing}: FAILED" in result.output

    def test_verbose_summary(self, runner, image_file):
        result = runner.invoke(main, ["validate", "-v", str(image_file)])
        assert "GS-9001 V1.000 VIRTUA FIGHTER" in result.output


class TestDumpCommand:
    """Tests for satip dump."""

    def test_dump(self, runner, image_file):
        result = runner.invoke(main, ["dump", str(image_file)])
        assert result.exit_code == 0
        assert "sync OK, MSF 00:02:00, mode 1" in result.output
        assert "hardware_identifier" in result.output
        assert "2048 (0x00000800)" in result.output

    def test_dump_does_not_validate(self, runner, bad_image):
        result = runner.invoke(main, ["dump", str(bad_image)])
        assert result.exit_code == 0
        assert "'19XX0101'" in result.output

    def test_dump_without_preamble(self, runner, tmp_path, valid_header):
        path = tmp_path / "game.iso"
        path.write_bytes(valid_header)
        result = runner.invoke(main, ["dump", "-p", "0", str(path)])
        assert result.exit_code == 0
        assert "Preamble" not in result.output
