"""Utility constants and helpers for calduration.

Time unit constants represent durations in their base domain: seconds for
second-based units, months for month-based units.
"""

# Second-based unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Month-based unit constants (all values in months)
MONTH = 1
YEAR = 12
DECADE = 120
CENTURY = 1200
MILLENNIUM = 12000


def trunc_div(dividend: int, divisor: int) -> int:
    """Integer division that truncates toward zero (``//`` floors)."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient
