#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sunmoon.core.types import GeoPosition
from sunmoon.ephemeris.skyfield_ref import SkyfieldReference, angular_separation_deg
from sunmoon.reference import astro_args as aa
from sunmoon.reference import lunar, solar


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "sunmoon[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "sunmoon[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate analytical solar/lunar models against a JPL kernel (skyfield).")
    p.add_argument("--year-start", type=int, default=2000)
    p.add_argument("--year-end", type=int, default=2030)
    p.add_argument("--step-days", type=float, default=7.3)
    p.add_argument("--lat", type=float, default=55.676)
    p.add_argument("--lon", type=float, default=12.568)
    p.add_argument("--out-png", default=None)
    args = p.parse_args(argv)

    np = _need_numpy()

    print("Loading ephemeris...")
    ref = SkyfieldReference.load()
    observer = GeoPosition(args.lat, args.lon)

    start = datetime(args.year_start, 1, 1, tzinfo=timezone.utc)
    end = datetime(args.year_end, 1, 1, tzinfo=timezone.utc)
    n = int((end - start).total_seconds() // (args.step_days * 86400.0))
    times = [start + timedelta(days=args.step_days * i) for i in range(n)]
    years = np.array([args.year_start + i * args.step_days / 365.25 for i in range(n)])

    print(f"Validating {n} points from {args.year_start} to {args.year_end}...")

    models = (
        ("sun", solar.get_solar_coordinates, solar.get_azimuth_elevation),
        ("moon", lunar.get_lunar_coordinates, lunar.get_azimuth_elevation),
    )
    err = {"sun_sep": [], "moon_sep": [], "sun_alt": [], "moon_alt": []}
    for t in times:
        for body, coords, horizontal in models:
            eq = coords(t)
            ra_ref, dec_ref = ref.radec_deg(body, t)
            err[f"{body}_sep"].append(
                angular_separation_deg(eq.right_ascension_deg, eq.declination_deg, ra_ref, dec_ref) * 60.0
            )
            _, el = horizontal(observer, t)
            _, alt_ref = ref.altaz_deg(body, observer, t)
            err[f"{body}_alt"].append(aa.wrap180(el - alt_ref))

    arr = {k: np.asarray(v) for k, v in err.items()}
    print("Residuals (model - ephemeris):")
    print(f"  Sun  RA/Dec separation : max {arr['sun_sep'].max():8.3f} arcmin, rms {np.sqrt((arr['sun_sep'] ** 2).mean()):8.3f}")
    print(f"  Moon RA/Dec separation : max {arr['moon_sep'].max():8.3f} arcmin, rms {np.sqrt((arr['moon_sep'] ** 2).mean()):8.3f}")
    print(f"  Sun  elevation         : max |d| {np.abs(arr['sun_alt']).max():8.4f} deg")
    # the lunar model is geocentric, so this includes up to ~1 deg of parallax
    print(f"  Moon elevation         : max |d| {np.abs(arr['moon_alt']).max():8.4f} deg")

    if args.out_png:
        plt = _need_matplotlib()
        fig, axs = plt.subplots(2, 1, figsize=(12, 7), sharex=True)
        axs[0].scatter(years, arr["sun_sep"], s=1, alpha=0.5, color="orange")
        axs[0].set_title("Sun position error (analytical - ephemeris)")
        axs[0].set_ylabel("Error (arcmin)")
        axs[0].grid(True, alpha=0.3)
        axs[1].scatter(years, arr["moon_sep"], s=1, alpha=0.5, color="blue")
        axs[1].set_title("Moon position error (analytical - ephemeris)")
        axs[1].set_ylabel("Error (arcmin)")
        axs[1].set_xlabel("Year")
        axs[1].grid(True, alpha=0.3)
        plt.tight_layout()
        plt.savefig(args.out_png, dpi=200)
        print(f"Validation complete. Plot saved to {args.out_png}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
