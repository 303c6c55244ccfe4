from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from datetime import date, datetime, timezone
from typing import Optional


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_instant(day: Optional[str], hms: Optional[str]) -> Optional[datetime]:
    """--date/--time -> aware UTC datetime, or None for "now"."""
    if day is None and hms is None:
        return None
    d = _parse_ymd(day) if day is not None else datetime.now(timezone.utc).date()
    h, m, s = (list(map(int, hms.split(":"))) + [0, 0])[:3] if hms else (0, 0, 0)
    return datetime(d.year, d.month, d.day, h, m, s, tzinfo=timezone.utc)


def _fmt(t: Optional[datetime]) -> str:
    return f"{t:%Y-%m-%d %H:%M:%S} UTC" if t is not None else "--"


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _observer_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", type=float, default=55.712139, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, default=12.547889, help="Observer longitude in degrees (positive East)")
    p.add_argument("--date", default=None, help="YYYY-MM-DD (UTC, default: today)")
    p.add_argument("--time", default=None, help="HH:MM[:SS] UTC (default: now, or 00:00 with --date)")


def cmd_sun(argv: list[str]) -> int:
    from sunmoon.core.types import GeoPosition
    from sunmoon.reference import astro_args as aa
    from sunmoon.reference import solar

    p = argparse.ArgumentParser(prog="sunmoon sun", description="Subsolar point, azimuth/elevation and sunrise/sunset.")
    _observer_args(p)
    p.add_argument("--horizon", type=float, default=aa.DEFAULT_HORIZON_ELEVATION, help="Rise/set altitude in degrees")
    p.add_argument("--no-eot", action="store_true", help="Do not apply the equation of time to solar noon")
    args = p.parse_args(argv)

    observer = GeoPosition(args.lat, args.lon)
    t = _parse_instant(args.date, args.time)
    d = t.date() if t is not None else None

    pos = solar.get_position(t)
    az, el = solar.get_azimuth_elevation(observer, t)
    eq = solar.get_solar_coordinates(t)
    rs = solar.get_rise_set(observer, d, args.horizon, equation_of_time=not args.no_eot)

    print(f"Observer: {observer.latitude:.4f}, {observer.longitude:.4f}")
    print()
    print("Subsolar point (degrees):")
    print(f"  Latitude  = {pos.latitude:.4f}")
    print(f"  Longitude = {pos.longitude:.4f}")
    print()
    print("Equatorial coordinates (degrees):")
    print(f"  RA  = {eq.right_ascension_deg:.4f}")
    print(f"  Dec = {eq.declination_deg:.4f}")
    print(f"  Equation of time = {solar.equation_of_time_minutes(t):.2f} min")
    print()
    print("Seen from observer:")
    print(f"  Azimuth   = {az:.2f} (from North)")
    print(f"  Elevation = {el:.2f} (above horizon)")
    print()
    print(f"Sunrise & Sunset ({args.horizon:g} deg altitude):")
    if rs.rise is None and rs.set is None:
        print("  Sun does not rise or set.")
    else:
        print(f"  Sunrise: {_fmt(rs.rise)}")
        print(f"  Sunset : {_fmt(rs.set)}")
    return 0


def cmd_moon(argv: list[str]) -> int:
    from sunmoon.core.types import GeoPosition
    from sunmoon.reference import lunar, riseset

    p = argparse.ArgumentParser(prog="sunmoon moon", description="Sublunar point, azimuth/elevation and moonrise/moonset.")
    _observer_args(p)
    p.add_argument("--step", type=int, default=riseset.DEFAULT_STEP_MINUTES, help="Rise/set scan step in minutes")
    args = p.parse_args(argv)

    observer = GeoPosition(args.lat, args.lon)
    t = _parse_instant(args.date, args.time)
    d = t.date() if t is not None else None

    pos = lunar.get_position(t)
    az, el = lunar.get_azimuth_elevation(observer, t)
    eq = lunar.get_lunar_coordinates(t)
    rs = lunar.get_next_rise_set(observer, d, args.step)

    print(f"Observer: {observer.latitude:.4f}, {observer.longitude:.4f}")
    print()
    print("Sublunar point (degrees):")
    print(f"  Latitude  = {pos.latitude:.4f}")
    print(f"  Longitude = {pos.longitude:.4f}")
    print()
    print("Equatorial coordinates (degrees):")
    print(f"  RA  = {eq.right_ascension_deg:.4f}")
    print(f"  Dec = {eq.declination_deg:.4f}")
    print(f"  Distance = {lunar.get_distance_km(t):.0f} km")
    print()
    print("Seen from observer (geocentric):")
    print(f"  Azimuth   = {az:.2f} (from North)")
    print(f"  Elevation = {el:.2f} (above horizon)")
    print()
    print(f"Moonrise & Moonset (first of each, {args.step} min scan):")
    print(f"  Moonrise: {_fmt(rs.rise) if rs.rise else 'no moonrise in window'}")
    print(f"  Moonset : {_fmt(rs.set) if rs.set else 'no moonset in window'}")
    return 0


def cmd_jd(argv: list[str]) -> int:
    from sunmoon.reference import astro_args as aa
    from sunmoon.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="sunmoon jd", description="Julian Date and sidereal time of a UTC instant.")
    p.add_argument("--date", default=None, help="YYYY-MM-DD (UTC, default: today)")
    p.add_argument("--time", default=None, help="HH:MM[:SS] UTC")
    p.add_argument("--lon", type=float, default=0.0, help="Longitude for local sidereal time (positive East)")
    args = p.parse_args(argv)

    t = _parse_instant(args.date, args.time) or datetime.now(timezone.utc)
    jd = ts.julian_date(t)

    print(f"UTC  = {t:%Y-%m-%d %H:%M:%S}")
    print(f"JD   = {jd:.6f}")
    print(f"T    = {aa.T_centuries(jd):.12f} (Julian centuries from J2000.0)")
    print(f"GMST = {ts.gmst_from_jd(jd):.6f} deg")
    print(f"LST  = {ts.local_sidereal_time(t, args.lon):.6f} deg at {args.lon:g} E")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="sunmoon", description="Sun and Moon position toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("sun", help="Subsolar point, azimuth/elevation and sunrise/sunset.")
    sub.add_parser("moon", help="Sublunar point, azimuth/elevation and moonrise/moonset.")
    sub.add_parser("jd", help="Julian Date and sidereal time of a UTC instant.")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (numpy/matplotlib)")
    p_diag.add_argument("tool", choices=["day-curve"], help="Which diagnostic to run")

    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics (skyfield)")
    p_ephem.add_argument("tool", choices=["validate-ref"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "sun":
        return cmd_sun(rest)

    if args.cmd == "moon":
        return cmd_moon(rest)

    if args.cmd == "jd":
        return cmd_jd(rest)

    if args.cmd == "diag":
        tool_map = {
            "day-curve": "sunmoon.diagnostics.day_curve",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate-ref": "sunmoon.diagnostics.ephem.validate_reference",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
