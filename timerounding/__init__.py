from .formatset import CONCISE, FormatSet, FormatSetError
from .interval import (
    INTERVAL_1D,
    INTERVAL_1H,
    INTERVAL_1M,
    INTERVAL_5M,
    INTERVAL_15M,
    INTERVAL_NONE,
    DurationMixesUnitsError,
    DurationTooSmallError,
    InferenceResult,
    Interval,
    IntervalError,
    NegativeDurationError,
    format_rounded,
    round_time,
)
from .unit import DAY, HOUR, MINUTE, SECOND, Unit

__all__ = [
    "Unit",
    "Interval",
    "InferenceResult",
    "FormatSet",
    "CONCISE",
    "round_time",
    "format_rounded",
    "IntervalError",
    "NegativeDurationError",
    "DurationTooSmallError",
    "DurationMixesUnitsError",
    "FormatSetError",
    "INTERVAL_NONE",
    "INTERVAL_1M",
    "INTERVAL_5M",
    "INTERVAL_15M",
    "INTERVAL_1H",
    "INTERVAL_1D",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
]
