"""The recorder interface and the process-wide recorder slot."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Optional

from metricfacade.handles import Counter, Gauge, Histogram
from metricfacade.keys import Key, KeyName
from metricfacade.units import Unit

_SET_RECORDER_ERROR = (
    "attempted to set a recorder after the metrics system was already initialized"
)


class Recorder(ABC):
    """Registers, describes and hands out handles for metrics."""

    @abstractmethod
    def describe_counter(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        """Describe a counter."""

    @abstractmethod
    def describe_gauge(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        """Describe a gauge."""

    @abstractmethod
    def describe_histogram(
        self, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        """Describe a histogram."""

    @abstractmethod
    def register_counter(self, key: Key) -> Counter:
        """Register a counter and return its handle."""

    @abstractmethod
    def register_gauge(self, key: Key) -> Gauge:
        """Register a gauge and return its handle."""

    @abstractmethod
    def register_histogram(self, key: Key) -> Histogram:
        """Register a histogram and return its handle."""


class NoopRecorder(Recorder):
    """A recorder that discards everything."""

    def describe_counter(self, key, unit, description) -> None:
        pass

    def describe_gauge(self, key, unit, description) -> None:
        pass

    def describe_histogram(self, key, unit, description) -> None:
        pass

    def register_counter(self, key) -> Counter:
        return Counter.noop()

    def register_gauge(self, key) -> Gauge:
        return Gauge.noop()

    def register_histogram(self, key) -> Histogram:
        return Histogram.noop()


class SetRecorderError(RuntimeError):
    """Raised when a recorder is installed while another one already is."""

    def __init__(self) -> None:
        super().__init__(_SET_RECORDER_ERROR)


class _RecorderSlot:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.installed: Optional[Recorder] = None


_SLOT = _RecorderSlot()
_NOOP = NoopRecorder()


def set_recorder(recorder: Recorder) -> None:
    """Install the global recorder; raise :class:`SetRecorderError` if one is set."""
    if not isinstance(recorder, Recorder):
        raise TypeError("recorder must implement Recorder")
    with _SLOT.lock:
        if _SLOT.installed is not None:
            raise SetRecorderError()
        _SLOT.installed = recorder


def clear_recorder() -> None:
    """Remove the installed recorder, if any."""
    with _SLOT.lock:
        _SLOT.installed = None


def try_recorder() -> Optional[Recorder]:
    """Return the installed recorder, or None when none is installed."""
    return _SLOT.installed


def recorder() -> Recorder:
    """Return the installed recorder, or a no-op recorder when none is installed."""
    installed = _SLOT.installed
    return installed if installed is not None else _NOOP