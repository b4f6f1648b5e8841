"""Shorthand constructors, one per unit.

    >>> from calduration import days, hours
    >>> days(2) + hours(3)
    Duration(seconds=183600, months=0)
    >>> 5 * days == days(5)
    True
"""

from typing_extensions import override

from calduration.duration import Duration
from calduration.units import Unit, resolve_unit


class UnitBuilder:
    def __init__(self, unit: str):
        self.unit: Unit = resolve_unit(unit)

    def __call__(self, count: int) -> Duration:
        return Duration({self.unit: count})

    def __mul__(self, count: int) -> Duration:
        return self(count)

    def __rmul__(self, count: int) -> Duration:
        return self(count)

    @override
    def __repr__(self) -> str:
        return f"UnitBuilder({self.unit.name!r})"


second: UnitBuilder = UnitBuilder("second")
minute: UnitBuilder = UnitBuilder("minute")
hour: UnitBuilder = UnitBuilder("hour")
day: UnitBuilder = UnitBuilder("day")
week: UnitBuilder = UnitBuilder("week")
month: UnitBuilder = UnitBuilder("month")
year: UnitBuilder = UnitBuilder("year")
decade: UnitBuilder = UnitBuilder("decade")
century: UnitBuilder = UnitBuilder("century")
millennium: UnitBuilder = UnitBuilder("millennium")

seconds = second
minutes = minute
hours = hour
days = day
weeks = week
months = month
years = year
decades = decade
centuries = century
millennia = millennium
