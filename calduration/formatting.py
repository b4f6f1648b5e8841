"""Human-readable rendering of Durations.

A ``Syntax`` says which units to show and how to label them. Three presets
are built in: ``micro`` ("1h"), ``short`` ("1hr 3min") and ``long``
("1 hour, 3 minutes, 4 seconds"). Any field of a preset can be overridden
per call without redefining the whole preset.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import Any, Literal, TypeAlias

from calduration.duration import Duration
from calduration.errors import UnknownSyntaxError
from calduration.units import resolve_unit, sort_units

Label: TypeAlias = str | tuple[str, str]


@dataclass(frozen=True, kw_only=True)
class Syntax:
    """How to render a Duration.

    Attributes:
        units: Unit name -> label, or (singular, plural) label pair
        separator: Glues a count to its label
        delimiter: Glues successive unit segments together
        count: How many of the largest non-zero units to show, or "all"
    """

    units: Mapping[str, Label]
    separator: str = " "
    delimiter: str = ", "
    count: int | Literal["all"] = "all"

    def __post_init__(self) -> None:
        if not self.units:
            raise ValueError(
                "Syntax requires at least one unit.\n"
                "Example: Syntax(units={'hours': 'h', 'minutes': 'm'})"
            )
        for unit in self.units:
            resolve_unit(unit)
        object.__setattr__(self, "units", MappingProxyType(dict(self.units)))
        if self.count != "all" and (
            not isinstance(self.count, int)
            or isinstance(self.count, bool)
            or self.count < 1
        ):
            raise ValueError(
                f"Syntax count must be a positive integer or 'all', "
                f"got {self.count!r}"
            )

    def label(self, unit: str, n: int) -> str:
        """Return the label for ``n`` of ``unit``, plural unless abs(n) is 1."""
        label = self.units[unit]
        if isinstance(label, str):
            return label
        singular, plural = label
        return singular if abs(n) == 1 else plural or singular


SYNTAXES: MappingProxyType[str, Syntax] = MappingProxyType(
    {
        "micro": Syntax(
            units={
                "seconds": "s",
                "minutes": "m",
                "hours": "h",
                "days": "d",
                "weeks": "w",
                "months": "mo",
                "years": "y",
            },
            separator="",
            delimiter=" ",
            count=1,
        ),
        "short": Syntax(
            units={
                "seconds": "sec",
                "minutes": "min",
                "hours": "hr",
                "days": "d",
                "weeks": "wk",
                "months": "mo",
                "years": "yr",
            },
            separator="",
            delimiter=" ",
            count=2,
        ),
        "long": Syntax(
            units={
                "seconds": ("second", "seconds"),
                "minutes": ("minute", "minutes"),
                "hours": ("hour", "hours"),
                "days": ("day", "days"),
                "weeks": ("week", "weeks"),
                "months": ("month", "months"),
                "years": ("year", "years"),
            },
        ),
    }
)

DEFAULT_SYNTAX = "long"

_FIELDS = frozenset(f.name for f in fields(Syntax))


def resolve_syntax(
    syntax: "str | Syntax | Mapping[str, Any]" = DEFAULT_SYNTAX, **overrides: Any
) -> Syntax:
    """Return a Syntax from a preset name, Syntax, or plain mapping, with overrides."""
    if isinstance(syntax, Syntax):
        base = syntax
    elif isinstance(syntax, str):
        if syntax not in SYNTAXES:
            valid = ", ".join(SYNTAXES)
            raise UnknownSyntaxError(
                f"Unknown syntax preset: {syntax!r}\n"
                f"Valid presets: {valid}\n"
                f"Hint: pass a Syntax or a mapping with a 'units' key "
                f"for a custom format"
            )
        base = SYNTAXES[syntax]
    elif isinstance(syntax, Mapping):
        return resolve_syntax(Syntax(**_checked(syntax)), **overrides)
    else:
        raise TypeError(
            f"Syntax must be a preset name, Syntax, or mapping, "
            f"got {type(syntax).__name__!r}: {syntax!r}"
        )

    if not overrides:
        return base
    return replace(base, **_checked(overrides))


def _checked(options: Mapping[str, Any]) -> dict[str, Any]:
    unknown = set(options) - _FIELDS
    if unknown:
        raise TypeError(
            f"Unknown syntax option(s): {', '.join(sorted(unknown))}\n"
            f"Valid options: {', '.join(sorted(_FIELDS))}"
        )
    return dict(options)


def _visible(duration: Duration, syntax: Syntax) -> dict[str, int]:
    parts = duration.to_units(*syntax.units)
    shown = [(unit, n) for unit, n in parts.items() if n != 0]
    if syntax.count != "all":
        shown = shown[: syntax.count]
    return dict(shown)


def _round(duration: Duration, syntax: Syntax) -> Duration:
    """Round the smallest visible unit to the nearest whole, ties away from zero.

    The dropped remainder keeps its sign, so ``1 month - 20 days`` rounds down
    toward the roughly ten days it really is.
    """
    shown = _visible(duration, syntax)
    if not shown:
        return duration

    kept = sum((Duration({unit: n}) for unit, n in shown.items()), Duration())
    smallest = list(shown)[-1]
    direction = 1 if shown[smallest] > 0 else -1
    step = Duration({smallest: direction})

    # Remainder and half a unit compared in normalized seconds
    toward = 2 * direction * (duration - kept).normalize().seconds
    half = abs(step.normalize().seconds)
    if toward >= half:
        return kept + step
    if toward <= -half:
        return kept - step
    return kept


def render(
    duration: Duration,
    syntax: "str | Syntax | Mapping[str, Any]" = DEFAULT_SYNTAX,
    *,
    rounded: bool = False,
    **overrides: Any,
) -> str:
    """Render ``duration`` as text.

    Args:
        duration: The Duration to render
        syntax: Preset name ("micro", "short", "long"), Syntax, or mapping
        rounded: Round the smallest shown unit instead of truncating. When the
            syntax shows "all" units, only the two largest are kept.
        **overrides: Syntax fields to override (units, separator, delimiter, count)

    Returns:
        The rendered string; a zero Duration renders as zero of the smallest
        configured unit (e.g. "0 seconds")

    Example:
        >>> render(Duration(hours=1, minutes=3, seconds=4), "short")
        '1hr 3min'
        >>> render(Duration(days=8), separator="_")
        '1_week, 1_day'
    """
    resolved = resolve_syntax(syntax, **overrides)

    if rounded:
        if resolved.count == "all":
            resolved = replace(resolved, count=2)
        duration = _round(duration, resolved)

    shown = _visible(duration, resolved)
    if not shown:
        smallest = sort_units(resolved.units)[0]
        shown = {smallest: 0}

    return resolved.delimiter.join(
        f"{n}{resolved.separator}{resolved.label(unit, n)}"
        for unit, n in shown.items()
    )
