"""Units of measure, gauge operations and value conversion."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Union


class Unit(enum.Enum):
    """Unit of measure a metric can be described with."""

    COUNT = "count"
    PERCENT = "percent"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"
    TEBIBYTES = "tebibytes"
    GIGIBYTES = "gigibytes"
    MEBIBYTES = "mebibytes"
    KIBIBYTES = "kibibytes"
    BYTES = "bytes"
    TERABITS_PER_SECOND = "terabits_per_second"
    GIGABITS_PER_SECOND = "gigabits_per_second"
    MEGABITS_PER_SECOND = "megabits_per_second"
    KILOBITS_PER_SECOND = "kilobits_per_second"
    BITS_PER_SECOND = "bits_per_second"
    COUNT_PER_SECOND = "count_per_second"

    def as_str(self) -> str:
        """Return the string form of this unit."""
        return self.value

    def as_canonical_label(self) -> str:
        """Return the short display label, which may be empty."""
        return _CANONICAL_LABELS[self]

    @classmethod
    def from_string(cls, s: str) -> Optional["Unit"]:
        """Parse the output of :meth:`as_str` back into a unit, or return None."""
        try:
            return cls(s)
        except ValueError:
            return None

    def is_time_based(self) -> bool:
        """Whether this unit measures time."""
        return self in _TIME_UNITS

    def is_data_based(self) -> bool:
        """Whether this unit measures data."""
        return self in _DATA_UNITS or self in _DATA_RATE_UNITS

    def is_data_rate_based(self) -> bool:
        """Whether this unit measures a data rate."""
        return self in _DATA_RATE_UNITS

    def __str__(self) -> str:
        return self.value


_CANONICAL_LABELS = {
    Unit.COUNT: "",
    Unit.PERCENT: "%",
    Unit.SECONDS: "s",
    Unit.MILLISECONDS: "ms",
    Unit.MICROSECONDS: "μs",
    Unit.NANOSECONDS: "ns",
    Unit.TEBIBYTES: "TiB",
    Unit.GIGIBYTES: "GiB",
    Unit.MEBIBYTES: "MiB",
    Unit.KIBIBYTES: "KiB",
    Unit.BYTES: "B",
    Unit.TERABITS_PER_SECOND: "Tbps",
    Unit.GIGABITS_PER_SECOND: "Gbps",
    Unit.MEGABITS_PER_SECOND: "Mbps",
    Unit.KILOBITS_PER_SECOND: "kbps",
    Unit.BITS_PER_SECOND: "bps",
    Unit.COUNT_PER_SECOND: "/s",
}

_TIME_UNITS = frozenset(
    {Unit.SECONDS, Unit.MILLISECONDS, Unit.MICROSECONDS, Unit.NANOSECONDS}
)

_DATA_UNITS = frozenset(
    {Unit.TEBIBYTES, Unit.GIGIBYTES, Unit.MEBIBYTES, Unit.KIBIBYTES, Unit.BYTES}
)

_DATA_RATE_UNITS = frozenset(
    {
        Unit.TERABITS_PER_SECOND,
        Unit.GIGABITS_PER_SECOND,
        Unit.MEGABITS_PER_SECOND,
        Unit.KILOBITS_PER_SECOND,
        Unit.BITS_PER_SECOND,
    }
)


class GaugeOp(enum.Enum):
    """Kind of update applied to a gauge."""

    ABSOLUTE = "absolute"
    INCREMENT = "increment"
    DECREMENT = "decrement"


@dataclass(frozen=True)
class GaugeValue:
    """A gauge operation together with its operand."""

    op: GaugeOp
    amount: float

    def update_value(self, value: float) -> float:
        """Apply this operation to ``value`` and return the result."""
        if self.op is GaugeOp.ABSOLUTE:
            return self.amount
        if self.op is GaugeOp.INCREMENT:
            return value + self.amount
        return value - self.amount


def into_f64(value: Union[float, int, timedelta]) -> float:
    """Convert a number or a duration (as seconds) into a float."""
    if isinstance(value, bool):
        raise TypeError("booleans cannot be used as metric values")
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, (int, float)):
        return float(value)
    raise TypeError(f"cannot convert {type(value).__name__} to a float metric value")