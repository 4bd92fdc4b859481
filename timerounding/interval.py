import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TypeAlias

from dateutil.relativedelta import relativedelta
from typing_extensions import assert_never

from timerounding.formatset import CONCISE, FormatSet
from timerounding.unit import INFERENCE_ORDER, Unit

logger = logging.getLogger(__name__)

# A timedelta, or a plain int number of seconds
Duration: TypeAlias = timedelta | int


class IntervalError(ValueError):
    """A duration that cannot be expressed as an interval."""

    def __init__(self, message: str, duration: timedelta):
        super().__init__(f"{message}: {duration!r}")
        self.duration: timedelta = duration


class NegativeDurationError(IntervalError):
    def __init__(self, duration: timedelta):
        super().__init__("negative duration", duration)


class DurationTooSmallError(IntervalError):
    def __init__(self, duration: timedelta):
        super().__init__("duration too small", duration)


class DurationMixesUnitsError(IntervalError):
    """The duration is not a whole multiple of a single unit.

    ``interval`` holds the truncated interval, which callers may still use.
    """

    def __init__(self, duration: timedelta, interval: "Interval"):
        super().__init__("duration is a mix of multiple units", duration)
        self.interval: Interval = interval


def _coerce_duration(d: Duration) -> timedelta:
    if isinstance(d, timedelta):
        return d
    if isinstance(d, int) and not isinstance(d, bool):
        return timedelta(seconds=d)
    raise TypeError(
        f"Duration must be a timedelta or int seconds.\n"
        f"Got {type(d).__name__!r}: {d!r}"
    )


@dataclass(frozen=True)
class InferenceResult:
    """Outcome of inferring an interval from a duration.

    Attributes:
        interval: The inferred interval. INTERVAL_NONE for negative and
            too-small durations, the truncated interval for mixed units
        error: The reason the duration was rejected, None if it was exact
    """

    interval: "Interval"
    error: IntervalError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Interval:
    """A whole number of time units, e.g. 5 minutes, 1 hour or 2 days.

    An interval whose unit is ``Unit.NONE`` is unspecified and generally
    means the caller asks to disable rounding. Construction from an explicit
    count and unit is not validated.
    """

    count: int
    unit: Unit

    @classmethod
    def none(cls) -> "Interval":
        return INTERVAL_NONE

    @classmethod
    def try_from_duration(cls, d: Duration) -> InferenceResult:
        """Infer the coarsest unit that fits ``d``, reporting any problem.

        A zero duration gives INTERVAL_NONE with no error. Negative durations
        and durations under one second give INTERVAL_NONE with an error. A
        duration such as 2h5m gives the truncated 2h interval together with
        DurationMixesUnitsError.

        Example:
            >>> result = Interval.try_from_duration(timedelta(minutes=15, seconds=5))
            >>> str(result.interval), result.ok
            ('15m', False)
        """
        d = _coerce_duration(d)
        if not d:
            return InferenceResult(INTERVAL_NONE)
        if d < timedelta(0):
            return InferenceResult(INTERVAL_NONE, NegativeDurationError(d))

        for unit in INFERENCE_ORDER:
            step = unit.duration
            if d >= step:
                interval = cls(d // step, unit)
                if interval.to_duration() != d:
                    logger.debug("Truncated mixed-unit duration %s to %s", d, interval)
                    return InferenceResult(interval, DurationMixesUnitsError(d, interval))
                return InferenceResult(interval)

        return InferenceResult(INTERVAL_NONE, DurationTooSmallError(d))

    @classmethod
    def from_duration(cls, d: Duration) -> "Interval":
        """Return the interval for ``d``.

        Raises:
            IntervalError: If ``d`` cannot be expressed exactly as an interval
        """
        result = cls.try_from_duration(d)
        if result.error is not None:
            raise result.error
        return result.interval

    @property
    def is_none(self) -> bool:
        return self.unit == Unit.NONE

    def __str__(self) -> str:
        if self.is_none:
            return "none"
        return f"{self.count}{self.unit.label}"

    def to_duration(self) -> timedelta:
        return self.unit.duration * self.count

    def _floor(self, value: int) -> int:
        if self.count == 0:
            raise ValueError(f"Cannot round to a zero-length interval: {self!r}")
        return value // self.count * self.count

    def round(self, t: datetime) -> datetime:
        """Round ``t`` down to the start of the interval it falls into.

        Rounding happens in ``t``'s own timezone. 9:37 rounded to a 5-minute
        interval is 9:35; rounded to a 2-hour interval it is 8:00. Day
        intervals are anchored at the first of the month, and a day floored
        to zero lands on the last day of the previous month.
        """
        match self.unit:
            case Unit.NONE:
                return t
            case Unit.SECONDS:
                return t.replace(second=self._floor(t.second), microsecond=0)
            case Unit.MINUTES:
                return t.replace(minute=self._floor(t.minute), second=0, microsecond=0)
            case Unit.HOURS:
                return t.replace(
                    hour=self._floor(t.hour), minute=0, second=0, microsecond=0
                )
            case Unit.DAYS:
                day = self._floor(t.day)
                month_start = t.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
                return month_start + relativedelta(days=day - 1)
            case _:
                assert_never(self.unit)

    def add_to(self, t: datetime, n: int) -> datetime:
        """Advance ``t`` by ``n`` intervals (backwards if negative), without rounding.

        Second, minute and hour intervals add elapsed time, so a zone-aware
        instant moves by the same amount across a DST change. Day intervals
        add calendar days and keep the wall-clock time.
        """
        match self.unit:
            case Unit.NONE:
                return t
            case Unit.SECONDS | Unit.MINUTES | Unit.HOURS:
                step = self.to_duration() * n
                if t.tzinfo is None:
                    return t + step
                return (t.astimezone(timezone.utc) + step).astimezone(t.tzinfo)
            case Unit.DAYS:
                return t + relativedelta(days=self.count * n)
            case _:
                assert_never(self.unit)

    def next(self, t: datetime, n: int = 1) -> datetime:
        """Start of the nth interval after the one ``t`` falls into.

        The next 5-minute interval after 9:37 starts at 9:40.
        """
        return self.add_to(self.round(t), n)

    def prev(self, t: datetime, n: int = 1) -> datetime:
        return self.next(t, -n)

    def format_rounded(self, t: datetime, format_set: FormatSet = CONCISE) -> str:
        """Round ``t`` to this interval and format it for this interval's unit."""
        return format_set.format(self.round(t), self.unit)


INTERVAL_NONE = Interval(0, Unit.NONE)
INTERVAL_1M = Interval(1, Unit.MINUTES)
INTERVAL_5M = Interval(5, Unit.MINUTES)
INTERVAL_15M = Interval(15, Unit.MINUTES)
INTERVAL_1H = Interval(1, Unit.HOURS)
INTERVAL_1D = Interval(1, Unit.DAYS)


def round_time(t: datetime, d: Duration) -> datetime:
    """Round ``t`` to the interval given by duration ``d``.

    Raises:
        IntervalError: If ``d`` cannot be expressed exactly as an interval
    """
    return Interval.from_duration(d).round(t)


def format_rounded(t: datetime, d: Duration, format_set: FormatSet = CONCISE) -> str:
    """Round ``t`` to the interval given by ``d`` and format it with ``format_set``."""
    return Interval.from_duration(d).format_rounded(t, format_set)
