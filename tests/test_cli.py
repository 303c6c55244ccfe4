# tests/test_cli.py

from datetime import date

import pytest
from sunmoon import cli
from sunmoon.core.types import GeoPosition
from sunmoon.reference import solar


def test_jd_command(capsys):
    assert cli.main(["jd", "--date", "2000-01-01", "--time", "12:00"]) == 0
    out = capsys.readouterr().out
    assert "JD   = 2451545.000000" in out
    assert "T    = 0.000000000000" in out
    assert "GMST = 280.460618 deg" in out


def test_sun_command_polar_night(capsys):
    assert cli.main(["sun", "--lat", "80", "--lon", "0", "--date", "2025-12-21"]) == 0
    out = capsys.readouterr().out
    assert "Subsolar point" in out
    assert "Sun does not rise or set." in out


def test_sun_command_prints_rise_set(capsys):
    assert cli.main(["sun", "--lat", "51.5074", "--lon", "-0.1278", "--date", "2025-06-21"]) == 0
    out = capsys.readouterr().out
    rs = solar.get_rise_set(GeoPosition(51.5074, -0.1278), date(2025, 6, 21))
    assert f"Sunrise: {rs.rise:%Y-%m-%d %H:%M:%S} UTC" in out
    assert f"Sunset : {rs.set:%Y-%m-%d %H:%M:%S} UTC" in out


def test_sun_command_without_eot(capsys):
    cli.main(["sun", "--lat", "51.5074", "--lon", "-0.1278", "--date", "2025-11-03", "--no-eot"])
    out = capsys.readouterr().out
    rs = solar.get_rise_set(GeoPosition(51.5074, -0.1278), date(2025, 11, 3), equation_of_time=False)
    assert f"Sunrise: {rs.rise:%Y-%m-%d %H:%M:%S} UTC" in out


def test_moon_command(capsys):
    assert cli.main(["-v", "moon", "--date", "2025-01-15", "--time", "06:00", "--step", "10"]) == 0
    out = capsys.readouterr().out
    assert "Sublunar point" in out
    assert "Distance =" in out
    assert "Moonrise:" in out
    assert "Moonset :" in out


def test_invalid_observer_is_rejected():
    with pytest.raises(ValueError):
        cli.main(["sun", "--lat", "95", "--date", "2025-01-01"])


def test_unknown_command():
    with pytest.raises(SystemExit):
        cli.main(["venus"])
