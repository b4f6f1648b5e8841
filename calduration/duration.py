"""The Duration value type.

A Duration is a signed pair of integers: an exact count of seconds and an
exact count of months. Second-based units (second through week) accumulate
into the first, month-based units (month through millennium) into the second.
The two are never mixed until a caller asks for an approximation through
``normalize``, ``denormalize`` or ``to_unit``.
"""

from collections.abc import Mapping
from datetime import date, datetime, tzinfo
from typing import TYPE_CHECKING, Any, TypeVar, overload

from typing_extensions import override

from calduration.errors import (
    DuplicateUnitError,
    InvalidDomainError,
    InvalidOperandError,
)
from calduration.units import (
    DEFAULT_PROFILE,
    Domain,
    Profile,
    Unit,
    resolve_profile,
    resolve_unit,
    sort_units,
)
from calduration.util import trunc_div

if TYPE_CHECKING:
    from calduration.formatting import Syntax
    from calduration.wallclock import WallClock

UnitKey = TypeVar("UnitKey", str, Unit)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Duration:
    """An immutable, signed amount of time.

    Examples:
        >>> Duration(hours=1, minutes=30)
        Duration(seconds=5400, months=0)
        >>> Duration({"year": 1}, days=2).to_units("months", "days")
        {'months': 12, 'days': 2}
    """

    __slots__ = ("_seconds", "_months")

    def __init__(
        self, units: "Mapping[str | Unit, int] | None" = None, /, **counts: int
    ) -> None:
        seconds = 0
        months = 0
        entries = list((units or {}).items()) + list(counts.items())
        for name, count in entries:
            unit = resolve_unit(name)
            if not _is_int(count):
                raise TypeError(
                    f"Duration counts must be integers.\n"
                    f"Got {type(count).__name__!r} for {name!r}: {count!r}\n"
                    f"Hint: split fractional amounts into a smaller unit, "
                    f"e.g. Duration(hours=1, minutes=30) instead of hours=1.5"
                )
            if unit.domain == "seconds":
                seconds += count * unit.factor
            else:
                months += count * unit.factor

        object.__setattr__(self, "_seconds", seconds)
        object.__setattr__(self, "_months", months)

    @override
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @override
    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @override
    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), ({"seconds": self._seconds, "months": self._months},))

    @property
    def seconds(self) -> int:
        """Exact count of seconds contributed by second-based units."""
        return self._seconds

    @property
    def months(self) -> int:
        """Exact count of months contributed by month-based units."""
        return self._months

    def get(self, domain: Domain) -> int:
        """Return the raw count for a base domain ("seconds" or "months")."""
        if domain == "seconds":
            return self._seconds
        if domain == "months":
            return self._months
        raise InvalidDomainError(
            f"Duration.get() expects 'seconds' or 'months', got {domain!r}.\n"
            f"Hint: use to_unit({domain!r}) to convert into another unit"
        )

    # Comparison

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return False
        return self._seconds == other._seconds and self._months == other._months

    @override
    def __ne__(self, other: object) -> bool:
        return not self == other

    @override
    def __hash__(self) -> int:
        return hash((self._seconds, self._months))

    def _sort_key(self) -> int:
        return self.normalize(DEFAULT_PROFILE)._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def compare(self, other: "Duration") -> int:
        """Return -1, 0 or 1 ordering self against other by normalized length.

        Unlike ``==``, this treats ``Duration(months=1)`` and
        ``Duration(days=30)`` as the same length.
        """
        if not isinstance(other, Duration):
            raise InvalidOperandError(
                f"Cannot compare a Duration with {type(other).__name__!r}: {other!r}"
            )
        mine, theirs = self._sort_key(), other._sort_key()
        return (mine > theirs) - (mine < theirs)

    def __bool__(self) -> bool:
        return bool(self._seconds or self._months)

    # Arithmetic

    @classmethod
    def _of(cls, seconds: int, months: int) -> "Duration":
        return cls(seconds=seconds, months=months)

    def _operand(self, other: Any, symbol: str) -> "Duration":
        if isinstance(other, Duration):
            return other
        if _is_int(other) and other == 0:
            return Duration()
        raise InvalidOperandError(
            f"Unsupported operand for {symbol}: Duration {symbol} "
            f"{type(other).__name__}\n"
            f"Got: {other!r}\n"
            f"Hint: combine Durations with Durations (days(1) {symbol} hours(2)),\n"
            f"      or shift a timestamp with datetime {symbol} Duration"
        )

    @overload
    def __add__(self, other: "Duration | int") -> "Duration": ...

    @overload
    def __add__(self, other: datetime) -> datetime: ...

    @overload
    def __add__(self, other: date) -> datetime: ...

    def __add__(self, other: Any) -> Any:
        if isinstance(other, date):
            return self.after(other)
        other = self._operand(other, "+")
        return self._of(self._seconds + other._seconds, self._months + other._months)

    def __radd__(self, other: Any) -> Any:
        # Makes sum() and datetime + Duration work
        return self + other

    def __sub__(self, other: "Duration | int") -> "Duration":
        other = self._operand(other, "-")
        return self._of(self._seconds - other._seconds, self._months - other._months)

    def __rsub__(self, other: Any) -> datetime:
        if isinstance(other, date):
            return self.before(other)
        raise InvalidOperandError(
            f"Cannot subtract a Duration from {type(other).__name__!r}: {other!r}\n"
            f"Hint: timestamp - Duration and Duration - Duration are supported"
        )

    def __neg__(self) -> "Duration":
        return self._of(-self._seconds, -self._months)

    def __pos__(self) -> "Duration":
        return self

    def __abs__(self) -> "Duration":
        return self._of(abs(self._seconds), abs(self._months))

    def _scalar(self, factor: Any, symbol: str) -> int:
        if not _is_int(factor):
            raise InvalidOperandError(
                f"Duration {symbol} expects an integer scalar, "
                f"got {type(factor).__name__!r}: {factor!r}"
            )
        return factor

    def scale(self, factor: int) -> "Duration":
        """Multiply both domains by an integer."""
        factor = self._scalar(factor, "*")
        return self._of(self._seconds * factor, self._months * factor)

    def divide(self, factor: int) -> "Duration":
        """Divide both domains by an integer, truncating each toward zero."""
        factor = self._scalar(factor, "/")
        if factor == 0:
            raise ZeroDivisionError("Duration division by zero")
        return self._of(
            trunc_div(self._seconds, factor), trunc_div(self._months, factor)
        )

    def __mul__(self, factor: int) -> "Duration":
        return self.scale(factor)

    def __rmul__(self, factor: int) -> "Duration":
        return self.scale(factor)

    def __truediv__(self, factor: int) -> "Duration":
        return self.divide(factor)

    def __floordiv__(self, factor: int) -> "Duration":
        return self.divide(factor)

    # Conversion

    def _to_unit_part(self, unit: "str | Unit") -> int:
        """Count of ``unit`` held exactly in its own domain, no approximation.

        ``Duration(years=1, months=1, days=365)._to_unit_part("month")`` is 13:
        the days cannot be expressed as months exactly, so they are ignored.
        """
        descriptor = resolve_unit(unit)
        return trunc_div(self.get(descriptor.domain), descriptor.factor)

    def normalize(self, profile: "str | Profile" = DEFAULT_PROFILE) -> "Duration":
        """Approximate the months domain as seconds. The result has no months."""
        normalized = 0
        remainder = self
        for unit, seconds_per_unit in resolve_profile(profile).approximations():
            part = remainder._to_unit_part(unit)
            normalized += part * seconds_per_unit
            remainder -= Duration({unit: part})

        return Duration(seconds=normalized + remainder._seconds)

    def denormalize(self, profile: "str | Profile" = DEFAULT_PROFILE) -> "Duration":
        """Approximate the seconds domain as months.

        Seconds too short to make up a whole month are kept as seconds.
        """
        denormalized = Duration()
        remainder = self
        for unit, seconds_per_unit in resolve_profile(profile).approximations():
            count = trunc_div(remainder._seconds, seconds_per_unit)
            denormalized += Duration({unit: count})
            remainder -= Duration(seconds=count * seconds_per_unit)

        return denormalized + remainder

    def to_unit(
        self, unit: "str | Unit", profile: "str | Profile" = DEFAULT_PROFILE
    ) -> int:
        """Return the whole number of ``unit`` in this duration, truncated.

        Crosses domains when needed using ``profile``, so
        ``Duration(days=30).to_unit("month") == 1``.
        """
        descriptor = resolve_unit(unit)
        if descriptor.domain == "seconds":
            return trunc_div(self.normalize(profile)._seconds, descriptor.factor)
        return trunc_div(self.denormalize(profile)._months, descriptor.factor)

    def to_units(
        self, *units: UnitKey, profile: "str | Profile" = DEFAULT_PROFILE
    ) -> dict[UnitKey, int]:
        """Break the duration down into the given units, largest first.

        Each unit takes as many whole units as fit in what the larger units
        left over. Keys keep the caller's spelling, so one unit may not be
        requested under two spellings.

        Example:
            >>> Duration(days=180).to_units("weeks", "days")
            {'weeks': 25, 'days': 5}
        """
        spellings: dict[Unit, UnitKey] = {}
        for unit in units:
            first = spellings.setdefault(resolve_unit(unit), unit)
            if first != unit:
                raise DuplicateUnitError(
                    f"Unit requested twice: {first!r} and {unit!r}\n"
                    f"Hint: pass each unit once, e.g. to_units({first!r})"
                )

        parts: dict[UnitKey, int] = {}
        remainder = self
        for unit in reversed(sort_units(spellings.values())):
            part = remainder.to_unit(unit, profile)
            parts[unit] = part
            remainder -= Duration({unit: part})
        return parts

    def to_wall(self) -> "WallClock":
        """Convert a sub-day, month-free duration into a time of day."""
        from calduration.wallclock import WallClock

        return WallClock.from_duration(self)

    # Calendar arithmetic (imported at runtime to avoid circular dependency)

    def before(self, timestamp: datetime | date | int) -> datetime | int:
        """Return the timestamp this duration earlier than ``timestamp``."""
        from calduration import arithmetic

        return arithmetic.before(self, timestamp)

    def after(self, timestamp: datetime | date | int) -> datetime | int:
        """Return the timestamp this duration later than ``timestamp``."""
        from calduration import arithmetic

        return arithmetic.after(self, timestamp)

    def ago(self, tz: tzinfo | None = None) -> datetime:
        """Return the current time minus this duration."""
        from calduration import arithmetic

        return arithmetic.ago(self, tz)

    def from_now(self, tz: tzinfo | None = None) -> datetime:
        """Return the current time plus this duration."""
        from calduration import arithmetic

        return arithmetic.from_now(self, tz)

    # Formatting

    def format(
        self,
        syntax: "str | Syntax | Mapping[str, Any]" = "long",
        *,
        rounded: bool = False,
        **overrides: Any,
    ) -> str:
        """Render as text. See ``calduration.formatting.render``."""
        from calduration.formatting import render

        return render(self, syntax, rounded=rounded, **overrides)

    @override
    def __str__(self) -> str:
        return self.format()

    @override
    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, months={self._months})"
