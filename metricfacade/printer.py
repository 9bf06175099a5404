"""A recorder that prints every description, registration and update."""

from __future__ import annotations

import argparse
import json
import math
import sys
from typing import Optional, TextIO

from metricfacade.emit import (
    absolute_counter,
    counter,
    decrement_gauge,
    gauge,
    histogram,
    increment_counter,
    increment_gauge,
)
from metricfacade.handles import (
    Counter,
    CounterFn,
    Gauge,
    GaugeFn,
    Histogram,
    HistogramFn,
)
from metricfacade.keys import Key, KeyName
from metricfacade.recorder import Recorder, set_recorder
from metricfacade.register import (
    describe_counter,
    describe_gauge,
    describe_histogram,
    register_counter,
    register_gauge,
    register_histogram,
)
from metricfacade.units import Unit

_KINDS = frozenset({"counter", "gauge", "histogram"})


def _format_number(value: float) -> str:
    """Render a number the way a plain display of a float would."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _format_unit(unit: Optional[Unit]) -> str:
    if unit is None:
        return "None"
    variant = "".join(part.capitalize() for part in unit.name.split("_"))
    return f"Some({variant})"


def _format_description(description: str) -> str:
    return json.dumps(description, ensure_ascii=False)


class _Printer:
    """Writes lines to a stream, falling back to the current stdout."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def emit(self, line: str) -> None:
        print(line, file=self.out)


class PrintHandle(_Printer, CounterFn, GaugeFn, HistogramFn):
    """A metric handler that prints each update for one key."""

    def __init__(self, key: Key, kind: str, out: Optional[TextIO] = None) -> None:
        if kind not in _KINDS:
            raise ValueError(f"unknown metric kind: {kind!r}")
        super().__init__(out)
        self.key = key
        self.kind = kind

    def _line(self, operation: str, value: float) -> None:
        self.emit(f"{self.kind} {operation} for '{self.key}': {_format_number(value)}")

    def increment(self, value) -> None:
        """Print a counter or gauge increment."""
        self._line("increment", value)

    def absolute(self, value) -> None:
        """Print a counter absolute update."""
        self._line("absolute", value)

    def decrement(self, value) -> None:
        """Print a gauge decrement."""
        self._line("decrement", value)

    def set(self, value) -> None:
        """Print a gauge set."""
        self._line("set", value)

    def record(self, value) -> None:
        """Print a histogram observation."""
        self._line("record", value)


class PrintRecorder(_Printer, Recorder):
    """A recorder whose handles print every update."""

    def _describe(
        self, kind: str, key: KeyName, unit: Optional[Unit], description: str
    ) -> None:
        self.emit(
            f"({kind}) registered key {key.as_str()} with unit {_format_unit(unit)}"
            f" and description {_format_description(description)}"
        )

    def describe_counter(self, key, unit, description) -> None:
        """Print a counter description."""
        self._describe("counter", key, unit, description)

    def describe_gauge(self, key, unit, description) -> None:
        """Print a gauge description."""
        self._describe("gauge", key, unit, description)

    def describe_histogram(self, key, unit, description) -> None:
        """Print a histogram description."""
        self._describe("histogram", key, unit, description)

    def register_counter(self, key) -> Counter:
        """Return a counter that prints its updates."""
        return Counter(PrintHandle(key, "counter", self._out))

    def register_gauge(self, key) -> Gauge:
        """Return a gauge that prints its updates."""
        return Gauge(PrintHandle(key, "gauge", self._out))

    def register_histogram(self, key) -> Histogram:
        """Return a histogram that prints its observations."""
        return Histogram(PrintHandle(key, "histogram", self._out))


def main(argv=None) -> int:
    """Install a printing recorder and exercise every kind of metric call."""
    parser = argparse.ArgumentParser(
        description="Print every metric description, registration and update."
    )
    parser.parse_args(argv)

    server_name = "web03"
    set_recorder(PrintRecorder())

    common_labels = [("listener", "frontend")]

    describe_counter("requests_processed", "number of requests processed")
    describe_counter("bytes_sent", "total number of bytes sent", Unit.BYTES)
    describe_gauge("connection_count", "current number of client connections")
    describe_histogram(
        "svc.execution_time", "execution time of request handler", Unit.MILLISECONDS
    )
    describe_gauge("unused_gauge", "some gauge we'll never use in this program")
    describe_histogram(
        "unused_histogram",
        "some histogram we'll also never use in this program",
        Unit.SECONDS,
    )

    register_counter("test_counter").increment(1)
    register_counter("test_counter", [("type", "absolute")]).absolute(42)

    register_gauge("test_gauge").increment(1.0)
    register_gauge("test_gauge", [("type", "decrement")]).decrement(1.0)
    register_gauge("test_gauge", [("type", "set")]).set(3.1459)

    register_histogram("test_histogram").record(0.57721)

    frontend = [("listener", "frontend")]
    frontend_server = [("listener", "frontend"), ("server", server_name)]
    admin = [("request_type", "admin")]
    admin_server = [("request_type", "admin"), ("server", server_name)]

    for labels in (None, frontend, frontend_server, common_labels):
        counter("bytes_sent", 64, labels)
    for labels in (None, admin, admin_server, common_labels):
        increment_counter("requests_processed", labels)
    for labels in (None, frontend, frontend_server, common_labels):
        absolute_counter("bytes_sent", 64, labels)

    for update in (gauge, increment_gauge, decrement_gauge):
        for labels in (None, frontend, frontend_server, common_labels):
            update("connection_count", 300.0, labels)

    users = [("type", "users")]
    users_server = [("type", "users"), ("server", server_name)]
    for labels in (None, users, users_server, common_labels):
        histogram("svc.execution_time", 70.0, labels)

    return 0


if __name__ == "__main__":
    sys.exit(main())