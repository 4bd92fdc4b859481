"""Unit-appropriate format patterns for rounded instants."""

from dataclasses import dataclass
from datetime import datetime

from timerounding.unit import Unit


class FormatSetError(ValueError):
    """Raised when a FormatSet has no pattern to fall back on."""


@dataclass(frozen=True, kw_only=True)
class FormatSet:
    """strftime patterns for formatting instants at various time units.

    Any pattern may be left unset (``None`` or ``""``); ``format`` falls back
    to the nearest pattern that is set.
    """

    seconds: str | None = None
    minutes: str | None = None
    hours: str | None = None
    days: str | None = None

    def pattern_for(self, unit: Unit) -> str:
        """Return the pattern used to format an instant rounded to ``unit``.

        The pattern for the unit itself wins, then any finer pattern down to
        minutes. Otherwise the finest pattern that is set is used: seconds,
        minutes, hours and days, in that order.

        Raises:
            FormatSetError: If no pattern is set at all
        """
        if unit >= Unit.DAYS and self.days:
            return self.days
        if unit >= Unit.HOURS and self.hours:
            return self.hours
        if unit >= Unit.MINUTES and self.minutes:
            return self.minutes
        for pattern in (self.seconds, self.minutes, self.hours, self.days):
            if pattern:
                return pattern
        raise FormatSetError(f"FormatSet has no patterns set: {self!r}")

    def format(self, t: datetime, unit: Unit) -> str:
        """Format ``t`` with the pattern appropriate for ``unit``.

        Example:
            >>> CONCISE.format(datetime(2017, 1, 7, 9, 37, 12), Unit.HOURS)
            '20170107-09'
        """
        return t.strftime(self.pattern_for(unit))


# Reasonably concise for storage purposes, but still readable at a glance:
# 20170107-093712, 20170107-0937, 20170107-09, 20170107
CONCISE = FormatSet(
    seconds="%Y%m%d-%H%M%S",
    minutes="%Y%m%d-%H%M",
    hours="%Y%m%d-%H",
    days="%Y%m%d",
)
