class SunMoonError(Exception):
    """Base error."""

class InvalidArgumentError(SunMoonError, ValueError):
    """Raised when an angle, coordinate or instant cannot be used (NaN, inf, out of range)."""
