"""Diagnostics package.

- diagnostics: light-weight checks of the analytical models (numpy, matplotlib)
- diagnostics.ephem: optional (requires ephemeris extras + a JPL kernel)
"""

__all__ = ["day_curve"]
