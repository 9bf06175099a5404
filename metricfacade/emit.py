"""Emitting metric updates through the installed recorder."""

from __future__ import annotations

from datetime import timedelta
from typing import Optional, Union

from metricfacade.keys import Key, KeyName
from metricfacade.labels import LabelsLike
from metricfacade.recorder import recorder

NameLike = Union[str, KeyName]
Number = Union[float, int, timedelta]


def counter(name: NameLike, value: int, labels: Optional[LabelsLike] = None) -> None:
    """Increment the counter ``name`` by ``value``."""
    recorder().register_counter(Key(name, labels)).increment(value)


def increment_counter(name: NameLike, labels: Optional[LabelsLike] = None) -> None:
    """Increment the counter ``name`` by one."""
    recorder().register_counter(Key(name, labels)).increment(1)


def absolute_counter(
    name: NameLike, value: int, labels: Optional[LabelsLike] = None
) -> None:
    """Set the counter ``name`` to at least ``value``."""
    recorder().register_counter(Key(name, labels)).absolute(value)


def gauge(name: NameLike, value: Number, labels: Optional[LabelsLike] = None) -> None:
    """Set the gauge ``name`` to ``value``."""
    recorder().register_gauge(Key(name, labels)).set(value)


def increment_gauge(
    name: NameLike, value: Number, labels: Optional[LabelsLike] = None
) -> None:
    """Increment the gauge ``name`` by ``value``."""
    recorder().register_gauge(Key(name, labels)).increment(value)


def decrement_gauge(
    name: NameLike, value: Number, labels: Optional[LabelsLike] = None
) -> None:
    """Decrement the gauge ``name`` by ``value``."""
    recorder().register_gauge(Key(name, labels)).decrement(value)


def histogram(
    name: NameLike, value: Number, labels: Optional[LabelsLike] = None
) -> None:
    """Record ``value`` in the histogram ``name``; durations are taken as seconds."""
    recorder().register_histogram(Key(name, labels)).record(value)