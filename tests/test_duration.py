"""Tests for Duration construction, comparison and arithmetic."""

import copy
import pickle
from datetime import date, datetime

import pytest

from calduration import (
    Duration,
    InvalidDomainError,
    InvalidOperandError,
    UnknownUnitError,
    day,
    days,
    hour,
    hours,
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
from calduration.util import DAY, HOUR, MINUTE


def test_empty_duration_is_zero():
    """A Duration built from nothing has no seconds and no months."""
    duration = Duration()
    assert duration.get("seconds") == 0
    assert duration.get("months") == 0
    assert not duration


def test_construct_from_mapping_and_keywords():
    """Counts are multiplied by unit factors and summed per domain."""
    assert Duration(seconds=10).get("seconds") == 10

    duration = Duration(second=10, minute=20, hours=30)
    assert duration.get("seconds") == 10 + 20 * MINUTE + 30 * HOUR
    assert duration.get("months") == 0

    duration = Duration(seconds=10, months=20)
    assert duration.get("seconds") == 10
    assert duration.get("months") == 20

    duration = Duration({"hours": 1, "days": 2}, year=10)
    assert duration.get("seconds") == HOUR + 2 * DAY
    assert duration.get("months") == 10 * 12


def test_construct_accepts_any_spelling():
    """Singular, plural and differently-cased spellings resolve the same."""
    assert Duration(millennium=1) == Duration(millennia=1) == Duration({"Years": 1000})
    assert Duration(century=1).months == 1200
    assert Duration(decades=2).months == 240


def test_construct_rejects_unknown_unit():
    """Unknown unit names fail immediately."""
    with pytest.raises(UnknownUnitError, match="Unknown unit: 'fortnights'"):
        Duration(fortnights=1)

    # Still a ValueError for callers that catch the built-in type
    with pytest.raises(ValueError):
        Duration({"lightyear": 1})


def test_construct_rejects_non_integer_counts():
    """Fractional and boolean counts are rejected."""
    with pytest.raises(TypeError, match="must be integers"):
        Duration(hours=1.5)

    with pytest.raises(TypeError, match="must be integers"):
        Duration(days=True)


def test_get_rejects_other_domains():
    """Only the two base domains can be read with get()."""
    with pytest.raises(InvalidDomainError, match="'seconds' or 'months'"):
        Duration(days=1).get("days")


def test_duration_is_immutable():
    """Attributes cannot be reassigned after construction."""
    duration = days(1)
    with pytest.raises(AttributeError):
        duration._seconds = 5  # type: ignore[misc]
    with pytest.raises(AttributeError):
        duration.seconds = 5  # type: ignore[misc]


def test_copy_and_pickle_preserve_value():
    """Copies and pickles round-trip to an equal Duration."""
    duration = Duration(months=3, seconds=7)
    assert copy.copy(duration) == duration
    assert copy.deepcopy(duration) == duration
    assert pickle.loads(pickle.dumps(duration)) == duration


def test_builders_construct_durations():
    """Unit builders are shorthand for the constructor."""
    assert minutes(5) == Duration(minutes=5)
    assert 5 * days == days(5) == days * 5
    assert year(1) == years(1) == months(12)
    assert week(1) == days(7)


def test_equality_is_exact_per_domain():
    """Equality compares both domains exactly."""
    assert second(1) != 1
    assert second(1) == second(1)
    assert minute(1) == seconds(60)
    assert week(1) == days(7)
    assert months(12) == year(1)

    # Different domains never compare equal even when normalized lengths match
    assert month(1) != days(30)


def test_hash_follows_equality():
    """Equal Durations hash alike and deduplicate in sets."""
    assert len({minute(1), seconds(60), hours(1)}) == 2


def test_ordering_uses_standard_normalization():
    """Ordering compares normalized lengths, so domains can be mixed."""
    assert minute(1) < hour(1)
    assert months(13) > year(1)
    assert days(366) > year(1)
    assert month(1) <= days(30)
    assert month(1) >= days(30)
    assert days(29) < month(1)
    assert sorted([year(1), day(1), month(1)]) == [day(1), month(1), year(1)]


def test_compare_returns_sign():
    """compare() reports -1, 0 or 1 by normalized length."""
    assert hour(1).compare(minutes(60)) == 0
    assert days(365).compare(year(1)) == 0
    assert days(366).compare(year(1)) == 1
    assert days(1).compare(week(1)) == -1

    with pytest.raises(InvalidOperandError):
        days(1).compare(86400)  # type: ignore[arg-type]


def test_ordering_against_non_duration_raises():
    """Ordering against a plain number is a TypeError."""
    with pytest.raises(TypeError):
        assert days(1) < 5  # type: ignore[operator]


def test_add_and_subtract():
    """Addition and subtraction work per domain."""
    assert day(1) + weeks(2) == days(15)
    assert (day(1) + month(1)).to_units("days", "months") == {"days": 1, "months": 1}
    assert weeks(2) - day(1) == days(13)
    assert (month(1) - day(1)).to_units("days", "months") == {"days": -1, "months": 1}


def test_add_and_subtract_zero():
    """A bare zero behaves like the empty Duration."""
    assert day(1) + 0 == day(1)
    assert month(1) + 0 == month(1)
    assert 0 + day(1) == day(1)
    assert day(1) - 0 == day(1)
    assert day(1) + month(1) - 0 == Duration(day=1, month=1)
    assert sum([days(1), hours(2), months(3)]) == Duration(day=1, hours=2, months=3)


def test_add_rejects_other_operands():
    """Non-zero numbers and other objects cannot be added."""
    with pytest.raises(InvalidOperandError, match="Unsupported operand for \\+"):
        day(1) + 5  # type: ignore[operator]

    with pytest.raises(InvalidOperandError, match="Unsupported operand for -"):
        day(1) - "1 day"  # type: ignore[operator]

    with pytest.raises(InvalidOperandError):
        5 - day(1)  # type: ignore[operator]

    with pytest.raises(InvalidOperandError):
        day(1) - datetime(2000, 1, 1)  # type: ignore[operator]


def test_add_to_timestamps():
    """Adding to or subtracting from a timestamp shifts it on the calendar."""
    assert day(1) + datetime(2000, 1, 1) == datetime(2000, 1, 2)
    assert datetime(2000, 1, 1) + day(1) == datetime(2000, 1, 2)
    assert day(1) + month(1) + datetime(2000, 1, 1) == datetime(2000, 2, 2)
    assert datetime(2000, 3, 31) - month(1) == datetime(2000, 2, 29)
    assert date(2000, 1, 31) + month(1) == datetime(2000, 2, 29)


@pytest.mark.parametrize(
    "a, b",
    [
        (days(3), hours(5)),
        (Duration(years=2, seconds=-7), Duration(months=-30, weeks=4)),
        (Duration(), months(1)),
    ],
)
def test_add_and_subtract_are_inverse(a, b):
    """(a + b) - b == a."""
    assert (a + b) - b == a
    assert (a - b) + b == a


def test_negation():
    """Unary minus negates both domains and is an involution."""
    assert -seconds(10) == seconds(-10)
    assert -years(10) == years(-10)
    assert -Duration(years=10, seconds=10) == seconds(-10) - years(10)

    duration = Duration(months=5, seconds=-3)
    assert -(-duration) == duration
    assert +duration == duration
    assert abs(-duration) == Duration(months=5, seconds=3)


def test_scale():
    """Multiplying by an integer scales both domains."""
    assert day(1) * 4 == days(4)
    assert 4 * day(1) == days(4)
    assert Duration(day=1, month=1) * 4 == Duration(days=4, months=4)
    assert Duration(day=1, month=1) * 0 == seconds(0)
    assert day(1).scale(-2) == days(-2)


def test_divide_truncates_toward_zero():
    """Division truncates each domain toward zero."""
    assert days(4) / 2 == days(2)
    assert Duration(days=8, months=8) / 2 == Duration(days=4, months=4)
    assert second(1) / 2 == seconds(0)
    assert seconds(-3) // 2 == seconds(-1)
    assert months(-7).divide(2) == months(-3)


def test_scale_and_divide_reject_non_integers():
    """Scalars must be integers."""
    with pytest.raises(InvalidOperandError, match="integer scalar"):
        day(1) * 1.5  # type: ignore[operator]

    with pytest.raises(InvalidOperandError):
        day(1) * day(1)  # type: ignore[operator]

    with pytest.raises(ZeroDivisionError):
        day(1) / 0


def test_repr_shows_base_domains():
    """repr() exposes the two stored integers."""
    assert repr(Duration(year=1, second=5)) == "Duration(seconds=5, months=12)"
