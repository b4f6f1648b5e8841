from dataclasses import dataclass

from calduration.duration import Duration
from calduration.errors import TimeOutOfBoundsError
from calduration.util import DAY, HOUR, MINUTE


@dataclass(frozen=True)
class WallClock:
    """A time of day on a 24-hour cycle, with no date attached."""

    hour: int
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        if not (
            0 <= self.hour < 24 and 0 <= self.minute < 60 and 0 <= self.second < 60
        ):
            raise TimeOutOfBoundsError(
                f"WallClock fields out of range: hour={self.hour}, "
                f"minute={self.minute}, second={self.second}\n"
                f"Valid ranges: hour 0-23, minute 0-59, second 0-59"
            )

    @classmethod
    def from_seconds(cls, seconds: int) -> "WallClock":
        """Build from seconds since midnight, which must be in [0, 86400)."""
        if not (0 <= seconds < DAY):
            raise TimeOutOfBoundsError(
                f"Seconds since midnight must be in range [0, {DAY}), "
                f"got {seconds}"
            )
        hour, remaining = divmod(seconds, HOUR)
        minute, second = divmod(remaining, MINUTE)
        return cls(hour, minute, second)

    @classmethod
    def from_duration(cls, duration: Duration) -> "WallClock":
        """Build from a Duration with no months and less than one day of seconds."""
        if duration.months != 0:
            raise TimeOutOfBoundsError(
                f"Cannot represent {duration!r} as a time of day: "
                f"month-based units have no fixed length.\n"
                f"Hint: only second-based units (second through hour) "
                f"adding up to less than a day convert to a WallClock"
            )
        return cls.from_seconds(duration.seconds)

    def to_seconds(self) -> int:
        return self.hour * HOUR + self.minute * MINUTE + self.second

    def to_duration(self) -> Duration:
        return Duration(seconds=self.to_seconds())

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
