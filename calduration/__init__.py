import logging

from .arithmetic import after, ago, before, from_now
from .builders import (
    centuries,
    century,
    day,
    days,
    decade,
    decades,
    hour,
    hours,
    millennia,
    millennium,
    minute,
    minutes,
    month,
    months,
    second,
    seconds,
    week,
    weeks,
    year,
    years,
)
from .duration import Duration
from .errors import (
    CaldurationError,
    DuplicateUnitError,
    InvalidDomainError,
    InvalidOperandError,
    TimeOutOfBoundsError,
    UnknownProfileError,
    UnknownSyntaxError,
    UnknownUnitError,
)
from .formatting import SYNTAXES, Syntax, render
from .units import PROFILES, UNITS, Profile, Unit
from .wallclock import WallClock

# Library: leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Duration",
    "Unit",
    "UNITS",
    "Profile",
    "PROFILES",
    "Syntax",
    "SYNTAXES",
    "WallClock",
    "render",
    "before",
    "after",
    "ago",
    "from_now",
    "second",
    "seconds",
    "minute",
    "minutes",
    "hour",
    "hours",
    "day",
    "days",
    "week",
    "weeks",
    "month",
    "months",
    "year",
    "years",
    "decade",
    "decades",
    "century",
    "centuries",
    "millennium",
    "millennia",
    "CaldurationError",
    "UnknownUnitError",
    "DuplicateUnitError",
    "UnknownProfileError",
    "UnknownSyntaxError",
    "InvalidDomainError",
    "InvalidOperandError",
    "TimeOutOfBoundsError",
]
