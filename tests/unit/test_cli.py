"""
Unit tests for the command-line entry point.
"""

import pytest

from main import build_parser, main


class TestConversionCommand:
    """Test single and batch conversions from the command line."""

    def test_single(self, capsys):
        assert main(['1', 'mile', 'kilometer']) == 0
        assert capsys.readouterr().out.strip() == "1.609344 km"

    def test_negative_value(self, capsys):
        assert main(['-40', 'celsius', 'fahrenheit', '-c', 'temperature']) == 0
        assert capsys.readouterr().out.strip() == "-40 °F"

    def test_fuel_zero_is_infinite(self, capsys):
        assert main(['0', 'km_per_liter', 'liter_per_100km', '-c', 'fuel-consumption']) == 0
        assert capsys.readouterr().out.strip() == "∞ L/100km"

    def test_all_units(self, capsys):
        assert main(['7', 'us', '-c', 'ring-size', '--all']) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 5
        assert lines[0].split() == ['diameter_mm', '17.3', 'mm']
        assert lines[1].split() == ['us', '7', 'US']

    def test_out_of_range_size_hides_others(self, capsys):
        """A size outside the chart shows a dash instead of clamped values."""
        assert main(['40', 'us_mens', '-c', 'mens-shoe-size', '--all']) == 0
        lines = [line.split() for line in capsys.readouterr().out.splitlines()]
        assert lines[0] == ['us_mens', '14', 'US']
        assert [line[1] for line in lines[1:]] == ['—'] * 5

    def test_out_of_range_single(self, capsys):
        assert main(['40', 'us_mens', 'eu', '-c', 'mens-shoe-size']) == 0
        assert capsys.readouterr().out.strip() == "— EU"

    def test_in_range_size_shows_values(self, capsys):
        assert main(['9', 'us_mens', 'eu', '-c', 'mens-shoe-size']) == 0
        assert capsys.readouterr().out.strip() == "41 EU"

    def test_missing_target_means_all(self, capsys):
        assert main(['1', 'meter']) == 0
        assert len(capsys.readouterr().out.splitlines()) > 1

    def test_strict_flag_accepted(self, capsys):
        assert main(['1', 'liter', 'gallon_us', '-c', 'fuel-volume', '--strict']) == 0
        assert capsys.readouterr().out.strip() == "0.26417205 gal"

    def test_unknown_unit(self, capsys):
        assert main(['1', 'parsec', 'meter']) == 2
        assert "Unknown unit 'parsec'" in capsys.readouterr().err

    def test_unknown_target(self, capsys):
        assert main(['1', 'meter', 'parsec']) == 2
        assert "Unknown unit 'parsec'" in capsys.readouterr().err

    def test_unknown_category(self, capsys):
        assert main(['1', 'meter', 'parsec', '-c', 'distance']) == 2
        assert "Unknown category" in capsys.readouterr().err

    def test_missing_arguments(self, capsys):
        assert main([]) == 2
        assert "usage" in capsys.readouterr().err


class TestListCommand:
    """Test category and unit listing."""

    def test_categories(self, capsys):
        assert main(['--list']) == 0
        out = capsys.readouterr().out
        assert "ring-size" in out
        assert "size_lookup" in out
        assert "Men's Shoe Size" in out
        assert "Information Storage" in out
        assert len(out.splitlines()) == 30

    def test_units(self, capsys):
        assert main(['--list', 'temperature']) == 0
        out = capsys.readouterr().out
        assert [line.split()[0] for line in out.splitlines()] == [
            'celsius', 'fahrenheit', 'kelvin', 'rankine'
        ]

    def test_unknown_category(self, capsys):
        assert main(['--list', 'nope']) == 2


class TestSelfTest:
    """Test the --test quick validation."""

    def test_passes(self, capsys):
        assert main(['--test']) == 0
        out = capsys.readouterr().out
        assert "✓ Catalog valid" in out
        assert "✗" not in out


def test_version():
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(['--version'])
    assert exc_info.value.code == 0
