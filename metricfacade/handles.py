"""Metric handles and the handler interfaces they delegate to."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional, Union

from metricfacade.units import into_f64

_U64_MASK = (1 << 64) - 1

Number = Union[float, int, timedelta]


def _check_u64(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("counter values must be integers")
    if value < 0 or value > _U64_MASK:
        raise ValueError("counter values must fit in an unsigned 64-bit integer")
    return value


class CounterFn(ABC):
    """Handler that stores counter updates."""

    @abstractmethod
    def increment(self, value: int) -> None:
        """Increment the counter by ``value``."""

    @abstractmethod
    def absolute(self, value: int) -> None:
        """Raise the counter to at least ``value``."""


class GaugeFn(ABC):
    """Handler that stores gauge updates."""

    @abstractmethod
    def increment(self, value: float) -> None:
        """Increment the gauge by ``value``."""

    @abstractmethod
    def decrement(self, value: float) -> None:
        """Decrement the gauge by ``value``."""

    @abstractmethod
    def set(self, value: float) -> None:
        """Set the gauge to ``value``."""


class HistogramFn(ABC):
    """Handler that stores histogram observations."""

    @abstractmethod
    def record(self, value: float) -> None:
        """Record an observation."""


class Counter:
    """A counter handle; does nothing when it has no handler."""

    __slots__ = ("handler",)

    def __init__(self, handler: Optional[CounterFn] = None) -> None:
        self.handler = handler

    @classmethod
    def noop(cls) -> "Counter":
        """Return a counter that discards every update."""
        return cls()

    def increment(self, value: int) -> None:
        """Increment the counter."""
        value = _check_u64(value)
        if self.handler is not None:
            self.handler.increment(value)

    def absolute(self, value: int) -> None:
        """Set the counter to an absolute value."""
        value = _check_u64(value)
        if self.handler is not None:
            self.handler.absolute(value)


class Gauge:
    """A gauge handle; does nothing when it has no handler."""

    __slots__ = ("handler",)

    def __init__(self, handler: Optional[GaugeFn] = None) -> None:
        self.handler = handler

    @classmethod
    def noop(cls) -> "Gauge":
        """Return a gauge that discards every update."""
        return cls()

    def increment(self, value: Number) -> None:
        """Increment the gauge."""
        amount = into_f64(value)
        if self.handler is not None:
            self.handler.increment(amount)

    def decrement(self, value: Number) -> None:
        """Decrement the gauge."""
        amount = into_f64(value)
        if self.handler is not None:
            self.handler.decrement(amount)

    def set(self, value: Number) -> None:
        """Set the gauge."""
        amount = into_f64(value)
        if self.handler is not None:
            self.handler.set(amount)


class Histogram:
    """A histogram handle; does nothing when it has no handler."""

    __slots__ = ("handler",)

    def __init__(self, handler: Optional[HistogramFn] = None) -> None:
        self.handler = handler

    @classmethod
    def noop(cls) -> "Histogram":
        """Return a histogram that discards every observation."""
        return cls()

    def record(self, value: Number) -> None:
        """Record a value in the histogram."""
        amount = into_f64(value)
        if self.handler is not None:
            self.handler.record(amount)


class AtomicCounter(CounterFn):
    """Thread-safe unsigned 64-bit counter storage."""

    def __init__(self, initial: int = 0) -> None:
        self._value = _check_u64(initial)
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """Current counter value."""
        with self._lock:
            return self._value

    def increment(self, value: int) -> None:
        """Add ``value``, wrapping on 64-bit overflow."""
        with self._lock:
            self._value = (self._value + value) & _U64_MASK

    def absolute(self, value: int) -> None:
        """Raise the stored value to ``value`` if it is larger."""
        with self._lock:
            self._value = max(self._value, value)


class AtomicGauge(GaugeFn):
    """Thread-safe floating-point gauge storage."""

    def __init__(self, initial: float = 0.0) -> None:
        self._value = float(initial)
        self._lock = threading.Lock()

    @property
    def value(self) -> float:
        """Current gauge value."""
        with self._lock:
            return self._value

    def increment(self, value: float) -> None:
        """Add ``value`` to the gauge."""
        with self._lock:
            self._value += value

    def decrement(self, value: float) -> None:
        """Subtract ``value`` from the gauge."""
        with self._lock:
            self._value -= value

    def set(self, value: float) -> None:
        """Replace the gauge value."""
        with self._lock:
            self._value = float(value)