#!/usr/bin/env python3
"""
Elevation curve of a body over one UTC day, with every horizon crossing.

The library's lunar rise/set scan stops at the first rise and the first set.
This tool samples the whole window and lists all sign changes, so days with a
second crossing (high latitudes, Moon near the horizon) can be spotted.
"""
from __future__ import annotations

import argparse
from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple

from sunmoon import api
from sunmoon.core.time import day_start_utc
from sunmoon.core.types import GeoPosition


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


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def sample_elevations(body: str, observer: GeoPosition, d: date, step_minutes: int = 10):
    """Return (minutes since 00:00 UTC, elevation deg) as numpy arrays, both ends included."""
    np = _need_numpy()
    step = max(1, int(step_minutes))
    minutes = np.arange(0, 24 * 60 + 1, step, dtype=float)
    start = day_start_utc(d)
    elev = np.array([
        api.azimuth_elevation(body, observer, start + timedelta(minutes=float(m))).elevation
        for m in minutes
    ])
    return minutes, elev


def all_crossings(minutes, elev, horizon: float = 0.0) -> List[Tuple[str, float]]:
    """
    Every horizon crossing in a sampled curve as ("rise" | "set", minute),
    interpolated linearly. Uses the same edge rule as the library scan
    (below -> at/above is a rise, above -> at/below is a set).
    """
    np = _need_numpy()
    h = np.asarray(elev, dtype=float) - horizon
    m = np.asarray(minutes, dtype=float)
    e1, e2 = h[:-1], h[1:]

    up = np.nonzero((e1 < 0.0) & (e2 >= 0.0))[0]
    down = np.nonzero((e1 > 0.0) & (e2 <= 0.0))[0]

    out: List[Tuple[str, float]] = []
    for kind, idx in (("rise", up), ("set", down)):
        for i in idx:
            frac = e1[i] / (e1[i] - e2[i])
            out.append((kind, float(m[i] + frac * (m[i + 1] - m[i]))))
    out.sort(key=lambda kv: kv[1])
    return out


def _fmt_minute(d: date, minute: float) -> str:
    t: datetime = day_start_utc(d) + timedelta(minutes=minute)
    return t.strftime("%Y-%m-%d %H:%M:%S UTC")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Sample a body's elevation over one UTC day and list every horizon crossing.")
    p.add_argument("--body", choices=["sun", "moon"], default="moon")
    p.add_argument("--date", required=True, help="YYYY-MM-DD (UTC day)")
    p.add_argument("--lat", type=float, default=55.676, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, default=12.568, help="Observer longitude in degrees (positive East)")
    p.add_argument("--step", type=int, default=5, help="Sampling step in minutes")
    p.add_argument("--horizon", type=float, default=0.0, help="Horizon elevation in degrees")
    p.add_argument("--out-png", default=None, help="Optional plot file")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    observer = GeoPosition(args.lat, args.lon)

    minutes, elev = sample_elevations(args.body, observer, d, args.step)
    crossings = all_crossings(minutes, elev, args.horizon)

    print(f"{args.body} at ({observer.latitude:.4f}, {observer.longitude:.4f}) on {d}, step {args.step} min")
    print(f"  elevation min/max : {elev.min():8.3f} / {elev.max():8.3f} deg")
    if not crossings:
        print("  no horizon crossing in the window")
    for kind, minute in crossings:
        print(f"  {kind:4s}  {_fmt_minute(d, minute)}")

    first = api.rise_set(args.body, observer, d)
    print(f"  library rise/set  : {first.rise} / {first.set}")

    if args.out_png:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(10, 4))
        ax.plot(minutes / 60.0, elev, color="blue" if args.body == "moon" else "orange")
        ax.axhline(args.horizon, color="grey", lw=0.8)
        for kind, minute in crossings:
            ax.axvline(minute / 60.0, color="green" if kind == "rise" else "red", lw=0.8, ls="--")
        ax.set_xlabel("Hours (UTC)")
        ax.set_ylabel("Elevation (deg)")
        ax.set_title(f"{args.body} elevation on {d}")
        ax.grid(True, alpha=0.3)
        plt.tight_layout()
        plt.savefig(args.out_png, dpi=150)
        print(f"Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
