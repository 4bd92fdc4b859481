"""Time units used by intervals.

Time unit constants represent durations in seconds, the same way plain-int
durations are accepted throughout the API.
"""

from datetime import timedelta
from enum import IntEnum

from typing_extensions import assert_never

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400


class Unit(IntEnum):
    """Granularity of an interval, ordered from finest to coarsest.

    ``NONE`` sorts below every real unit and means "no rounding".
    """

    NONE = 0
    SECONDS = 1
    MINUTES = 2
    HOURS = 3
    DAYS = 4

    @property
    def seconds(self) -> int:
        """Length of one unit in seconds (0 for NONE)."""
        match self:
            case Unit.NONE:
                return 0
            case Unit.SECONDS:
                return SECOND
            case Unit.MINUTES:
                return MINUTE
            case Unit.HOURS:
                return HOUR
            case Unit.DAYS:
                return DAY
            case _:
                assert_never(self)

    @property
    def duration(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    @property
    def label(self) -> str:
        match self:
            case Unit.NONE:
                return "none"
            case Unit.SECONDS:
                return "s"
            case Unit.MINUTES:
                return "m"
            case Unit.HOURS:
                return "h"
            case Unit.DAYS:
                return "d"
            case _:
                assert_never(self)

    def __str__(self) -> str:
        return self.label


# Coarsest first; unit inference picks the first one that fits.
INFERENCE_ORDER: tuple[Unit, ...] = (Unit.DAYS, Unit.HOURS, Unit.MINUTES, Unit.SECONDS)
