"""Static unit table and normalization profiles.

Every unit belongs to exactly one of two base domains: ``seconds`` or
``months``. Units inside one domain convert exactly; crossing domains is only
possible through a normalization ``Profile``.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, TypeAlias

from calduration.errors import UnknownProfileError, UnknownUnitError
from calduration.util import (
    CENTURY,
    DAY,
    DECADE,
    HOUR,
    MILLENNIUM,
    MINUTE,
    MONTH,
    SECOND,
    WEEK,
    YEAR,
)

Domain: TypeAlias = Literal["seconds", "months"]


@dataclass(frozen=True, kw_only=True)
class Unit:
    name: str
    plural: str
    domain: Domain
    factor: int

    def __str__(self) -> str:
        return self.plural


# Canonical order, smallest first
UNITS: tuple[Unit, ...] = (
    Unit(name="second", plural="seconds", domain="seconds", factor=SECOND),
    Unit(name="minute", plural="minutes", domain="seconds", factor=MINUTE),
    Unit(name="hour", plural="hours", domain="seconds", factor=HOUR),
    Unit(name="day", plural="days", domain="seconds", factor=DAY),
    Unit(name="week", plural="weeks", domain="seconds", factor=WEEK),
    Unit(name="month", plural="months", domain="months", factor=MONTH),
    Unit(name="year", plural="years", domain="months", factor=YEAR),
    Unit(name="decade", plural="decades", domain="months", factor=DECADE),
    Unit(name="century", plural="centuries", domain="months", factor=CENTURY),
    Unit(name="millennium", plural="millennia", domain="months", factor=MILLENNIUM),
)

# Singular and plural spellings both resolve to the same descriptor
_ALIASES: MappingProxyType[str, Unit] = MappingProxyType(
    {alias: unit for unit in UNITS for alias in (unit.name, unit.plural)}
)

_RANK: MappingProxyType[Unit, int] = MappingProxyType(
    {unit: index for index, unit in enumerate(UNITS)}
)

SECOND_UNIT = _ALIASES["second"]
MONTH_UNIT = _ALIASES["month"]
YEAR_UNIT = _ALIASES["year"]


def resolve_unit(unit: "str | Unit") -> Unit:
    """Return the descriptor for a unit name (singular or plural) or descriptor."""
    if isinstance(unit, Unit):
        return unit
    if isinstance(unit, str):
        found = _ALIASES.get(unit.strip().lower())
        if found is not None:
            return found
    valid = ", ".join(u.plural for u in UNITS)
    raise UnknownUnitError(
        f"Unknown unit: {unit!r}\n"
        f"Valid units (singular or plural): {valid}\n"
        f"Example: Duration(hours=1, minutes=30)"
    )


def sort_units(units: Iterable["str | Unit"]) -> list["str | Unit"]:
    """Sort unit spellings by canonical order, smallest first.

    The caller's spellings are returned untouched so results can be keyed
    the way they were requested.
    """
    return sorted(units, key=lambda unit: _RANK[resolve_unit(unit)])


@dataclass(frozen=True, kw_only=True)
class Profile:
    """Approximate lengths used to cross between the two domains.

    Attributes:
        name: Profile identifier ("standard", "minimum", "maximum")
        month: Seconds counted for one month
        year: Seconds counted for one year
    """

    name: str
    month: int
    year: int

    def approximations(self) -> tuple[tuple[Unit, int], ...]:
        """Return (unit, seconds-per-unit) pairs, largest unit first.

        Decades, centuries and millennia are whole numbers of years, so the
        year step absorbs them.
        """
        return ((YEAR_UNIT, self.year), (MONTH_UNIT, self.month))


PROFILES: MappingProxyType[str, Profile] = MappingProxyType(
    {
        "standard": Profile(name="standard", month=30 * DAY, year=365 * DAY),
        "minimum": Profile(name="minimum", month=28 * DAY, year=365 * DAY),
        "maximum": Profile(name="maximum", month=31 * DAY, year=366 * DAY),
    }
)

DEFAULT_PROFILE = "standard"


def resolve_profile(profile: "str | Profile") -> Profile:
    """Return the profile for a name or pass a Profile instance through."""
    if isinstance(profile, Profile):
        return profile
    try:
        return PROFILES[profile]
    except (KeyError, TypeError):
        valid = ", ".join(PROFILES)
        raise UnknownProfileError(
            f"Unknown normalization profile: {profile!r}\n"
            f"Valid profiles: {valid}\n"
            f"Example: duration.normalize(profile='maximum')"
        ) from None
